from .body import JSONBody, RawBody, RequestBody
from .client import get_client
from .decoding import decode, release
from .errors import (
    DecodeError,
    HTTPError,
    InvalidOptionsError,
    InvalidRequestPathError,
    LocalRequestError,
    MalformedHeadersError,
    PowerBIClientError,
    RequestSerializationError,
)
from .http_request_handle import HTTPAPIRequestHandle, RequestPipeline
from .options import QueryOptions, build_query

__all__ = (
    "DecodeError",
    "HTTPAPIRequestHandle",
    "HTTPError",
    "InvalidOptionsError",
    "InvalidRequestPathError",
    "JSONBody",
    "LocalRequestError",
    "MalformedHeadersError",
    "PowerBIClientError",
    "QueryOptions",
    "RawBody",
    "RequestBody",
    "RequestPipeline",
    "RequestSerializationError",
    "build_query",
    "decode",
    "get_client",
    "release",
)
