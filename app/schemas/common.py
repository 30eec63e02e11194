"""Shared schema base and response envelopes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads snake_case attributes and speaks camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class DeletedResponse(CamelModel):
    """Id of the row removed by a delete request."""

    deleted: int


class ErrorBody(BaseModel):
    message: str
    status: int


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    error: ErrorBody
