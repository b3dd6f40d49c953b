__all__ = (
    "PowerBIClientError",
    "LocalRequestError",
    "InvalidRequestPathError",
    "MalformedHeadersError",
    "RequestSerializationError",
    "InvalidOptionsError",
    "HTTPError",
    "DecodeError",
)

from http import HTTPStatus


class PowerBIClientError(Exception):
    """Base class for every error raised by the request pipeline itself."""


class LocalRequestError(PowerBIClientError):
    """The request could not be built. Raised before any network I/O."""


class InvalidRequestPathError(LocalRequestError):
    pass


class MalformedHeadersError(LocalRequestError):
    def __init__(self, msg: str = "length of header key/value pairs must be even", *args: object) -> None:
        super().__init__(msg, *args)


class RequestSerializationError(LocalRequestError):
    pass


class InvalidOptionsError(LocalRequestError):
    pass


class HTTPError(PowerBIClientError):
    """
    The server answered with a status code of 400 or above.

    `message` holds the raw response text, or the reason phrase of the status when the response had no body.
    """

    def __init__(self, status_code: int, message: str) -> None:
        if status_code < HTTPStatus.BAD_REQUEST:
            raise ValueError(f"HTTPError requires a status code of 400 or above, got {status_code}")
        super().__init__(status_code, message)
        self._status_code = status_code
        self._message = message

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return f"HTTP {self._status_code}: {self._message}"


class DecodeError(PowerBIClientError):
    """The response body did not match the expected JSON shape."""
