__all__ = ("TokenTransport", "with_bearer_token")

from httpx import AsyncBaseTransport, AsyncHTTPTransport, Request, Response


def with_bearer_token(request: Request, token: str, *, header_name: str = "Authorization") -> Request:
    """
    Return a copy of the request carrying the bearer token.

    The URL and body stream are shared with the original; its headers are copied so the original is left untouched.
    """
    headers = request.headers.copy()
    headers[header_name] = f"Bearer {token}"
    return Request(
        method=request.method,
        url=request.url,
        headers=headers,
        stream=request.stream,
        extensions=dict(request.extensions),
    )


class TokenTransport(AsyncBaseTransport):
    """Authenticates every request sent through the wrapped transport with a bearer token."""

    def __init__(self, token: str, *, transport: AsyncBaseTransport | None = None) -> None:
        self._token = token.strip()
        # The fallback transport belongs to this instance; nothing is shared between clients.
        self.transport = transport if transport is not None else AsyncHTTPTransport()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(transport={self.transport!r})"

    async def handle_async_request(self, request: Request) -> Response:
        return await self.transport.handle_async_request(with_bearer_token(request, self._token))

    async def aclose(self) -> None:
        await self.transport.aclose()
