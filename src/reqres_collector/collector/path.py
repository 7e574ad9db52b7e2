"""Path symbolization.

Replaces concrete argument values in a request path with named placeholders
so that requests hitting the same route can be grouped:

    /api/users/123  with  {"id": "123"}  ->  /api/users/:id
"""

from collections.abc import Mapping
from typing import Any

ROUTING_KEYS = ("controller", "action")


def symbolize_path(path: str, parameters: Mapping[str, Any] | None) -> str:
    """Replace the first occurrence of each parameter value with ':<name>'.

    Parameters are applied in insertion order against the partially
    rewritten path. Non-string and empty values are skipped, as are the
    controller/action routing keys.
    """
    if not parameters:
        return path

    for key, value in parameters.items():
        if key in ROUTING_KEYS:
            continue
        if not isinstance(value, str) or not value:
            continue
        if value in path:
            path = path.replace(value, f":{key}", 1)
    return path
