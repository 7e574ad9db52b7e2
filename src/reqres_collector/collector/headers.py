"""Header cleanup for collected requests and responses.

Frameworks inject plenty of headers (and WSGI environ keys) that carry no
documentation value. Both filters drop every entry whose name starts with
one of the configured patterns. Matching is a literal, case-sensitive prefix
test against the raw key.
"""

from collections.abc import Iterable, Mapping
from typing import Any


def filter_response_headers(headers: Any, patterns: Iterable[str]) -> dict:
    """Return a copy of the response headers without the denied ones.

    Headers given as (name, value) pairs are folded into a dict, so a
    repeated name such as Set-Cookie keeps only its last value.
    """
    return _reject_prefixed(_as_pairs(headers), tuple(patterns))


def filter_request_headers(environ: Mapping[str, Any] | None, patterns: Iterable[str]) -> dict:
    """Return the environ entries that are not framework or server internals."""
    if not environ:
        return {}
    return _reject_prefixed(environ.items(), tuple(patterns))


def _as_pairs(headers: Any) -> Iterable[tuple[Any, Any]]:
    if headers is None:
        return []
    if isinstance(headers, Mapping) or hasattr(headers, "items"):
        return headers.items()
    return headers


def _reject_prefixed(pairs: Iterable[tuple[Any, Any]], patterns: tuple[str, ...]) -> dict:
    result = {}
    for key, value in pairs:
        if isinstance(key, str) and key.startswith(patterns):
            continue
        result[key] = value
    return result
