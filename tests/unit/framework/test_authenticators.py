import pytest
import trio
from httpx import AsyncBaseTransport, AsyncClient, Request, Response

from framework.authenticators import TokenTransport, with_bearer_token
from powerbi import PowerBIClient


class RecordingTransport(AsyncBaseTransport):
    def __init__(self) -> None:
        self.requests: list[Request] = []
        self.closed = False

    async def handle_async_request(self, request: Request) -> Response:
        self.requests.append(request)
        await trio.sleep(0)
        return Response(200, json={"path": request.url.path, "id": request.url.path.rsplit("/", 1)[-1]})

    async def aclose(self) -> None:
        self.closed = True


@pytest.mark.unit()
def test_with_bearer_token_copies_request():
    original = Request("GET", "https://example.com/groups", headers={"X-Keep": "1"})
    authenticated = with_bearer_token(original, "tok")
    assert authenticated is not original
    assert authenticated.headers["Authorization"] == "Bearer tok"
    assert authenticated.headers["X-Keep"] == "1"
    assert authenticated.url == original.url
    assert "Authorization" not in original.headers


@pytest.mark.unit()
def test_with_bearer_token_replaces_existing_header():
    original = Request("GET", "https://example.com/", headers={"Authorization": "Bearer old"})
    assert with_bearer_token(original, "new").headers.get_list("Authorization") == ["Bearer new"]
    assert original.headers["Authorization"] == "Bearer old"


@pytest.mark.unit()
def test_token_is_stripped_and_hidden():
    transport = TokenTransport("  secret-token\n", transport=RecordingTransport())
    assert "secret-token" not in repr(transport)


@pytest.mark.unit()
async def test_token_transport_authenticates():
    inner = RecordingTransport()
    async with AsyncClient(transport=TokenTransport(" tok ", transport=inner)) as client:
        response = await client.get("https://example.com/groups")
    assert response.status_code == 200
    assert inner.requests[0].headers["Authorization"] == "Bearer tok"
    assert inner.closed


@pytest.mark.unit()
async def test_concurrent_requests_all_authenticated():
    inner = RecordingTransport()
    originals: list[Request] = []
    transport = TokenTransport("tok", transport=inner)

    async def send(index: int) -> None:
        request = Request("GET", f"https://example.com/groups/{index}")
        originals.append(request)
        response = await transport.handle_async_request(request)
        assert response.json()["path"] == f"/groups/{index}"

    async with trio.open_nursery() as nursery:
        for i in range(20):
            nursery.start_soon(send, i)

    assert len(inner.requests) == 20
    assert all(r.headers["Authorization"] == "Bearer tok" for r in inner.requests)
    assert all("Authorization" not in r.headers for r in originals)


@pytest.mark.unit()
async def test_concurrent_calls_through_one_client():
    inner = RecordingTransport()
    results: dict[str, str | None] = {}

    async def get_group(group_id: str) -> None:
        group = await powerbi.groups.get(group_id)
        results[group_id] = group.id

    async with PowerBIClient.from_token("tok", transport=inner, base_url="https://example.com/v1.0/myorg") as powerbi:
        async with trio.open_nursery() as nursery:
            for i in range(20):
                nursery.start_soon(get_group, f"g{i}")

    assert results == {f"g{i}": f"g{i}" for i in range(20)}
    assert sorted(r.url.path for r in inner.requests) == sorted(f"/v1.0/myorg/groups/g{i}" for i in range(20))
    assert all(r.headers.get_list("Authorization") == ["Bearer tok"] for r in inner.requests)
    assert inner.closed
