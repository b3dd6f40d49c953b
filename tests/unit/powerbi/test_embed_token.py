import json

import pytest
from pytest_httpx import HTTPXMock

from powerbi.types import (
    EffectiveIdentity,
    GenerateTokenRequest,
    GenerateTokenRequestV2,
    GenerateTokenRequestV2Dataset,
    GenerateTokenRequestV2Report,
    GenerateTokenRequestV2TargetWorkspace,
    TokenAccessLevel,
    XmlaPermissions,
)


@pytest.mark.unit()
async def test_generate_token_v2(client, embed_token_data, httpx_mock: HTTPXMock):
    httpx_mock.add_response(json=embed_token_data)
    request_body = GenerateTokenRequestV2(
        datasets=[GenerateTokenRequestV2Dataset(id="d1", xmla_permissions=XmlaPermissions.READ_ONLY)],
        reports=[GenerateTokenRequestV2Report(id="r1", allow_edit=True)],
        target_workspaces=[GenerateTokenRequestV2TargetWorkspace(id="g1")],
        lifetime_in_minutes=30,
    )
    token = await client.embed_token.generate_token(request_body)
    assert token.token == embed_token_data["token"]
    assert token.token_id == embed_token_data["tokenId"]

    request = httpx_mock.get_request()
    assert request is not None
    assert json.loads(request.content) == {
        "datasets": [{"id": "d1", "xmlaPermissions": "ReadOnly"}],
        "reports": [{"id": "r1", "allowEdit": True}],
        "targetWorkspaces": [{"id": "g1"}],
        "lifetimeInMinutes": 30,
    }


@pytest.mark.unit()
async def test_generate_token_for_report_with_identity(client, embed_token_data, httpx_mock: HTTPXMock):
    httpx_mock.add_response(json=embed_token_data)
    request_body = GenerateTokenRequest(
        access_level=TokenAccessLevel.VIEW,
        identities=[EffectiveIdentity(username="john@contoso.com", roles=["sales"], datasets=["d1"])],
    )
    await client.embed_token.generate_token_for_report_in_group("g1", "r1", request_body)
    request = httpx_mock.get_request()
    assert request is not None
    assert json.loads(request.content) == {
        "accessLevel": "View",
        "identities": [{"username": "john@contoso.com", "roles": ["sales"], "datasets": ["d1"]}],
    }


@pytest.mark.unit()
async def test_generate_token_for_report_creation(client, embed_token_data, httpx_mock: HTTPXMock):
    httpx_mock.add_response(json=embed_token_data)
    request_body = GenerateTokenRequest(access_level=TokenAccessLevel.CREATE, dataset_id="d1")
    token = await client.embed_token.generate_token_for_report_creation_in_group("g1", request_body)
    assert token.expiration == embed_token_data["expiration"]
    request = httpx_mock.get_request()
    assert request is not None
    assert json.loads(request.content) == {"accessLevel": "Create", "datasetId": "d1"}
