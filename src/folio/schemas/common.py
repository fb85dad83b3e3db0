"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase keys on the wire.

    Attributes stay snake_case in Python; both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement payload."""

    message: str


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body rendered by the exception handlers."""

    detail: str
    errors: list[FieldErrorOut] = Field(default_factory=list)


def has_more(returned: int, limit: int) -> bool:
    """Page-size heuristic for "more results exist".

    A full page is assumed to have a successor. When the remaining rows exactly
    fill the last page, one extra empty request is needed to find out.
    """
    return returned == limit
