from typing import TypeVar

from httpx import URL, AsyncClient

from framework.core.handles import HTTPAPIRequestHandle

H = TypeVar("H", bound=HTTPAPIRequestHandle)


class Service:
    """A group of endpoints sharing one base address and one HTTP client."""

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        self.base_url = URL(str(base_url))
        self.client = client

    def _endpoint(self, handle_class: type[H]) -> H:
        return handle_class(base_url=self.base_url, client=self.client)
