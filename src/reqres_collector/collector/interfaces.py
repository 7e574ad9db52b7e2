"""Capability interfaces the Collector depends on.

Any web framework's request/response objects and any test runner's context
can be passed to the Collector as long as they expose these attributes.
"""

from collections.abc import Mapping
from typing import Any, Protocol


class Request(Protocol):
    host: str | None
    url: str | None
    path: str
    method: str | None
    body: Any  # str, bytes, or a file-like object with read()
    content_length: int | None
    content_type: str | None
    accept: str | None
    environ: Mapping[str, Any] | None


class Response(Protocol):
    status_code: int
    body: str | bytes
    headers: Any  # mapping or iterable of (name, value) pairs


class GroupNode(Protocol):
    """One level of nested test grouping; the root has no parent."""

    description: str
    parent: "GroupNode | None"


class TestContext(Protocol):
    """The currently executing test case."""

    full_description: str
    group: GroupNode | None
