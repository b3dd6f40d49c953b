import pytest
from pytest_httpx import HTTPXMock

from powerbi import PowerBIClient

BASE_URL = "https://api.powerbi.com/v1.0/myorg/"


@pytest.fixture()
def base_url():
    return BASE_URL


@pytest.fixture()
def access_token():
    return "DUMMY-ACCESS-TOKEN"


@pytest.fixture()
async def client(base_url, access_token):
    async with PowerBIClient.from_token(access_token, base_url=base_url) as powerbi_client:
        yield powerbi_client


@pytest.fixture()
def group_data():
    return {"id": "g1", "name": "group1", "isReadOnly": False, "isOnDedicatedCapacity": True, "capacityId": "c1"}


@pytest.fixture()
def groups_data():
    return [{"id": f"g{i}", "name": f"group{i}"} for i in range(5)]


@pytest.fixture()
def group_user_data():
    return {
        "identifier": "john@contoso.com",
        "principalType": "User",
        "groupUserAccessRight": "Admin",
        "displayName": "John",
        "emailAddress": "john@contoso.com",
    }


@pytest.fixture()
def dataset_data():
    return {
        "id": "d1",
        "name": "dataset1",
        "isRefreshable": True,
        "addRowsAPIEnabled": False,
        "webUrl": "https://app.powerbi.com/groups/g1/datasets/d1",
        "someFutureField": {"nested": True},
    }


@pytest.fixture()
def refresh_data():
    return {
        "id": 1,
        "requestId": "r1",
        "refreshType": "ViaApi",
        "status": "Failed",
        "startTime": "2017-06-13T09:25:43.153Z",
        "endTime": "2017-06-13T09:31:43.153Z",
        "serviceExceptionJson": '{"errorCode":"ModelRefreshFailed_CredentialsNotSpecified"}',
    }


@pytest.fixture()
def report_data():
    return {
        "id": "r1",
        "name": "report1",
        "reportType": "PowerBIReport",
        "datasetId": "d1",
        "webUrl": "https://app.powerbi.com/reports/r1",
        "users": [],
        "subscriptions": [],
    }


@pytest.fixture()
def dashboard_data():
    return {"id": "db1", "displayName": "dashboard1", "isReadOnly": False, "embedUrl": "https://embed/db1"}


@pytest.fixture()
def tile_data():
    return {"id": "t1", "title": "tile1", "rowSpan": 1, "colSpan": 2, "reportId": "r1", "datasetId": "d1"}


@pytest.fixture()
def embed_token_data():
    return {"token": "H4sI....", "tokenId": "49ae3742-54c0-4c29-af52-619ff93b5c80", "expiration": "2018-07-29T17:58:19Z"}


@pytest.fixture()
def mock_empty_response(httpx_mock: HTTPXMock):
    httpx_mock.add_response(status_code=200, json={"value": []})
    return httpx_mock


@pytest.fixture()
def mock_accepted_response(httpx_mock: HTTPXMock):
    httpx_mock.add_response(status_code=202)
    return httpx_mock


@pytest.fixture()
def mock_not_found_response(httpx_mock: HTTPXMock):
    httpx_mock.add_response(
        status_code=404,
        json={"error": {"code": "ItemNotFound", "message": "Couldn't find the item"}},
    )
    return httpx_mock
