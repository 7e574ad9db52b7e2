"""Collector — gathers request/response/documentation data per test case."""

import logging
from collections.abc import Mapping
from typing import Any

from reqres_collector.collector.base import Record, RequestRecord, ResponseRecord
from reqres_collector.collector.headers import filter_request_headers, filter_response_headers
from reqres_collector.collector.interfaces import Request, Response, TestContext
from reqres_collector.collector.path import ROUTING_KEYS, symbolize_path
from reqres_collector.config import CollectorConfig
from reqres_collector.parser.annotations import get_action_docs

logger = logging.getLogger(__name__)


class Collector:
    """Accumulates one Record per observed test case.

    The test runner calls collect() after each endpoint test and sort() once
    at the end of the run; the records are then handed to a renderer.
    """

    def __init__(self, config: CollectorConfig | None = None):
        self.config = config or CollectorConfig()
        self.records: list[Record] = []

    def __len__(self) -> int:
        return len(self.records)

    def collect(self, test_context: TestContext, request: Request | None, response: Response | None) -> None:
        """Record the given request/response pair for the running test.

        Nothing is recorded when the request or response is missing, or when
        the request carries no environ.
        """
        if request is None or response is None:
            logger.debug("Skipping %r: no request or response", _title(test_context))
            return
        environ = getattr(request, "environ", None)
        if environ is None:
            logger.debug("Skipping %r: request has no environ", _title(test_context))
            return

        routing = self._routing_parameters(environ)
        description = query_parameters = backend_parameters = None
        params = []

        if routing.get("controller") and routing.get("action"):
            docs = get_action_docs(str(routing["controller"]), str(routing["action"]), self.config)
            description = docs.description
            params = docs.params
            query_parameters = {k: v for k, v in routing.items() if k not in ROUTING_KEYS}
            backend_parameters = {k: v for k, v in routing.items() if k in ROUTING_KEYS}

        record = Record(
            group=_root_group(test_context),
            title=_title(test_context),
            description=description,
            params=params,
            request_path=symbolize_path(request.path, routing),
            request=RequestRecord(
                host=request.host,
                url=request.url,
                path=request.path,
                method=request.method,
                query_parameters=query_parameters,
                backend_parameters=backend_parameters,
                body=_read_body(request.body),
                content_length=request.content_length,
                content_type=request.content_type,
                headers=filter_request_headers(environ, self.config.excluded_request_headers),
                accept=request.accept,
            ),
            response=ResponseRecord(
                code=int(response.status_code),
                body=_read_body(response.body),
                headers=filter_response_headers(response.headers, self.config.excluded_response_headers),
            ),
        )
        self.records.append(record)

    def sort(self) -> None:
        """Order records by their symbolized request path."""
        self.records.sort(key=lambda record: record.request_path)

    def to_list(self) -> list[dict]:
        """Serialized records, with sentinels, for an external renderer."""
        return [record.model_dump() for record in self.records]

    def _routing_parameters(self, environ: Mapping[str, Any]) -> dict:
        routing = environ.get(self.config.routing_key)
        # wsgiorg.routing_args is a (positional_args, named_args) pair
        if isinstance(routing, (tuple, list)) and len(routing) == 2:
            routing = routing[1]
        if not isinstance(routing, Mapping):
            return {}
        return dict(routing)


def _root_group(test_context: TestContext) -> str | None:
    node = getattr(test_context, "group", None)
    description = None
    while node is not None:
        description = node.description
        node = node.parent
    return description


def _title(test_context: TestContext) -> str:
    return getattr(test_context, "full_description", "") or ""


def _read_body(body: Any) -> str:
    if body is None:
        return ""
    if hasattr(body, "read"):
        seekable = hasattr(body, "seekable") and body.seekable()
        if seekable:
            body.seek(0)
        content = body.read()
        if seekable:
            body.seek(0)
        body = content
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return str(body)
