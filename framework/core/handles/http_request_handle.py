import logging
from collections.abc import Mapping, Sequence
from http import HTTPMethod, HTTPStatus
from typing import Any

from httpx import URL, AsyncClient, Response, codes

from .body import RequestBody, as_request_body, encode_body
from .errors import HTTPError
from .lib import ensure_trailing_slash, format_path, pair_headers, resolve_url
from .options import QueryOptions, build_query

LOGGER = logging.getLogger(__name__)


class RequestPipeline:
    """
    Builds, sends and classifies every request made against the API.

    A successful call returns the open response; the caller is responsible for releasing it, usually through
    `decode()` or `release()`. A status code of 400 or above is turned into an `HTTPError` and the response is closed.
    """

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        self.client = client
        self.base_url = ensure_trailing_slash(base_url)

    async def execute(
        self,
        method: HTTPMethod | str,
        path: str,
        body: RequestBody | None = None,
        *header_kv: str,
    ) -> Response:
        method = method.value if isinstance(method, HTTPMethod) else method.upper()
        # Everything that can fail locally happens before the request is sent.
        url = resolve_url(self.base_url, path)
        content, headers = encode_body(body)
        headers = [*pair_headers(header_kv), *headers]

        request = self.client.build_request(method, url, content=content, headers=headers)
        LOGGER.debug("%s %s", method, url)
        response = await self.client.send(request, stream=True)

        if response.status_code >= HTTPStatus.BAD_REQUEST:
            try:
                await response.aread()
            finally:
                await response.aclose()
            message = response.text
            if not message:
                message = response.reason_phrase or codes.get_reason_phrase(response.status_code)
            LOGGER.debug("%s %s failed with status %s", method, url, response.status_code)
            raise HTTPError(response.status_code, message)
        return response

    async def get(self, path: str, *header_kv: str) -> Response:
        return await self.execute(HTTPMethod.GET, path, None, *header_kv)

    async def delete(self, path: str, *header_kv: str) -> Response:
        return await self.execute(HTTPMethod.DELETE, path, None, *header_kv)

    async def post(self, path: str, value: Any, *header_kv: str) -> Response:
        return await self.execute(HTTPMethod.POST, path, as_request_body(value), *header_kv)

    async def put(self, path: str, value: Any, *header_kv: str) -> Response:
        return await self.execute(HTTPMethod.PUT, path, as_request_body(value), *header_kv)

    async def patch(self, path: str, value: Any, *header_kv: str) -> Response:
        return await self.execute(HTTPMethod.PATCH, path, as_request_body(value), *header_kv)


class HTTPAPIRequestHandle:
    """A single API endpoint: a path template and the HTTP method used to call it."""

    path: str
    method: HTTPMethod

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        self.pipeline = RequestPipeline(base_url, client)

    async def handle(
        self,
        path_args: Mapping[str, str] | None = None,
        options: QueryOptions | None = None,
        body: Any = None,
        headers: Sequence[str] = (),
    ) -> Response:
        path = build_query(format_path(self.path, path_args), options)
        return await self.pipeline.execute(self.method, path, as_request_body(body), *headers)
