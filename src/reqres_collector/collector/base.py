"""Data models for collected test observations.

One Record is produced per executed test case. Missing routing data is kept
as None on the model and rendered as the "not available" sentinel when
serialized, so downstream renderers see the same shape either way.
"""

from pydantic import BaseModel, ConfigDict, field_serializer

NOT_AVAILABLE = "not available"
NOT_FOUND = "not found"


class ParamDoc(BaseModel):
    """A single @param annotation parsed from a handler's comments."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    required: str | None = None  # required / optional
    type: str | None = None  # Integer / String / DateTime / ...
    description: str = ""

    def to_dict(self) -> dict:
        # Unparsed blocks only ever set description
        return self.model_dump(exclude_unset=True)


class RequestRecord(BaseModel):
    """Request side of a Record."""

    model_config = ConfigDict(frozen=True)

    host: str | None
    url: str | None
    path: str
    method: str | None
    query_parameters: dict | None
    backend_parameters: dict | None
    body: str
    content_length: int | None
    content_type: str | None
    headers: dict
    accept: str | None

    @field_serializer("query_parameters", "backend_parameters")
    def serialize_sentinel(self, value: dict | None):
        return NOT_AVAILABLE if value is None else value


class ResponseRecord(BaseModel):
    """Response side of a Record."""

    model_config = ConfigDict(frozen=True)

    code: int
    body: str
    headers: dict


class Record(BaseModel):
    """Everything observed for one test case."""

    model_config = ConfigDict(frozen=True)

    group: str | None
    title: str
    description: str | None
    params: list[ParamDoc] = []
    request_path: str
    request: RequestRecord
    response: ResponseRecord

    @field_serializer("description")
    def serialize_sentinel(self, value: str | None):
        return NOT_AVAILABLE if value is None else value

    @field_serializer("params")
    def serialize_params(self, value: list[ParamDoc]):
        return [p.to_dict() for p in value]
