"""Request/Response objects built from plain WSGI data.

Useful when the application under test is driven through a WSGI test client
that exposes the environ and the raw response but no framework objects.
"""

import io
from dataclasses import dataclass, field
from typing import Any
from wsgiref.util import request_uri


@dataclass
class EnvironRequest:
    """A Request derived entirely from a WSGI environ."""

    host: str | None
    url: str | None
    path: str
    method: str | None
    body: Any
    content_length: int | None
    content_type: str | None
    accept: str | None
    environ: dict

    @classmethod
    def from_environ(cls, environ: dict) -> "EnvironRequest":
        body = environ.get("wsgi.input")
        if body is None:
            body = io.BytesIO(b"")

        return cls(
            host=_host(environ),
            url=_url(environ),
            path=environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "") or "/",
            method=environ.get("REQUEST_METHOD"),
            body=body,
            content_length=_content_length(environ.get("CONTENT_LENGTH")),
            content_type=environ.get("CONTENT_TYPE") or None,
            accept=environ.get("HTTP_ACCEPT"),
            environ=environ,
        )


@dataclass
class SimpleResponse:
    """A Response holding an already materialized status, body and headers."""

    status_code: int
    body: str | bytes = ""
    headers: dict = field(default_factory=dict)

    @classmethod
    def from_wsgi(cls, status: str, headers: list[tuple[str, str]], chunks) -> "SimpleResponse":
        """Build from start_response's status line/header list and the app iterable."""
        return cls(
            status_code=int(status.split(" ", 1)[0]),
            body=b"".join(chunks),
            headers=dict(headers),
        )


def _host(environ: dict) -> str | None:
    host = environ.get("HTTP_HOST")
    if host:
        return host.split(":", 1)[0]
    return environ.get("SERVER_NAME")


def _content_length(raw: Any) -> int | None:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _url(environ: dict) -> str | None:
    try:
        return request_uri(environ, include_query=True)
    except KeyError:
        # Scheme or server name/port missing
        return None
