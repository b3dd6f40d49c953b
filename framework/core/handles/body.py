__all__ = ("RawBody", "JSONBody", "RequestBody", "as_request_body", "encode_body", "JSON_MEDIA_TYPE")

from dataclasses import dataclass
from typing import Any, TypeAlias

from pydantic_core import PydanticSerializationError, to_json

from .errors import RequestSerializationError

JSON_MEDIA_TYPE: str = "application/json"


@dataclass(slots=True, frozen=True)
class RawBody:
    """A body sent exactly as given. An empty string means no body at all."""

    text: str


@dataclass(slots=True, frozen=True)
class JSONBody:
    """A structured body serialized to JSON. Pydantic models are dumped by alias with unset (None) fields left out."""

    value: Any


RequestBody: TypeAlias = RawBody | JSONBody


def as_request_body(value: Any) -> RequestBody | None:
    """Tag a plain payload as JSON; values which are already tagged (or None) pass through."""
    if value is None or isinstance(value, RawBody | JSONBody):
        return value
    return JSONBody(value)


def encode_body(body: RequestBody | None) -> tuple[bytes | None, list[tuple[str, str]]]:
    """Return the content to send and the headers the body requires."""
    match body:
        case None:
            return None, []
        case RawBody(text=text):
            return (text.encode() if text else None), []
        case JSONBody(value=value):
            try:
                content = to_json(value, by_alias=True, exclude_none=True)
            except (PydanticSerializationError, TypeError, ValueError) as e:
                raise RequestSerializationError(f"Unable to serialize request body: {e}") from e
            return content, [("Content-Type", JSON_MEDIA_TYPE)]
        case _:
            raise RequestSerializationError(f"Unsupported request body type: {type(body).__name__}")
