__all__ = ("decode", "release")

import logging
from functools import cache
from typing import Any, TypeVar

from httpx import Response
from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@cache
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


async def release(response: Response) -> None:
    """Close a response whose body is not needed."""
    await response.aclose()


async def decode(response: Response, shape: type[T]) -> T:
    """
    Decode the JSON body of a successful response into `shape`.

    The response is always closed, whether decoding succeeds or not. An empty body is read as an empty JSON object.
    """
    try:
        content = await response.aread()
    finally:
        await response.aclose()
    try:
        return _adapter(shape).validate_json(content if content.strip() else b"{}")
    except ValidationError as e:
        LOGGER.debug("Unable to decode response as %s", shape)
        raise DecodeError(f"Unable to decode response body as {getattr(shape, '__name__', shape)}: {e}") from e
