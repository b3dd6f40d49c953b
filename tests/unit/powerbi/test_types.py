import pytest
from pydantic import ValidationError

from powerbi.types import (
    AdminGroup,
    CreateGroupRequest,
    Dataset,
    DatasetUser,
    DatasetUserAccessRight,
    GatewayDatasourceCredentialDetails,
    Group,
    GroupsOptions,
    GroupType,
    PrincipalType,
    Refresh,
    UnusedArtifactEntity,
    UpdateGroupRequest,
    ValueList,
)


@pytest.mark.unit()
def test_camel_case_aliases(dataset_data):
    dataset = Dataset.model_validate(dataset_data)
    assert dataset.web_url == dataset_data["webUrl"]
    assert dataset.model_dump(by_alias=True, exclude_none=True) == {
        "id": "d1",
        "name": "dataset1",
        "isRefreshable": True,
        "addRowsAPIEnabled": False,
        "webUrl": "https://app.powerbi.com/groups/g1/datasets/d1",
    }


@pytest.mark.unit()
def test_populate_by_name():
    assert Group(id="g1", name="n", is_read_only=True) == Group.model_validate(
        {"id": "g1", "name": "n", "isReadOnly": True},
    )


@pytest.mark.unit()
def test_explicit_aliases():
    assert UnusedArtifactEntity.model_validate({"artifactSizeInMB": 12}).artifact_size_in_mb == 12
    details = GatewayDatasourceCredentialDetails.model_validate({"useEndUserOAuth2Credentials": True})
    assert details.use_end_user_oauth2_credentials is True
    assert GatewayDatasourceCredentialDetails().use_end_user_oauth2_credentials is False


@pytest.mark.unit()
def test_required_fields():
    with pytest.raises(ValidationError):
        CreateGroupRequest.model_validate({})
    with pytest.raises(ValidationError):
        DatasetUser.model_validate({"identifier": "john@contoso.com", "principalType": "User"})


@pytest.mark.unit()
def test_server_filled_fields_optional():
    assert Group.model_validate({"name": "no id"}).id is None
    assert Dataset.model_validate({}).id is None


@pytest.mark.unit()
def test_enums_from_wire():
    user = DatasetUser.model_validate(
        {"identifier": "app-id", "principalType": "App", "datasetUserAccessRight": "ReadWriteReshareExplore"},
    )
    assert user.principal_type is PrincipalType.APP
    assert user.dataset_user_access_right is DatasetUserAccessRight.READ_WRITE_RESHARE_EXPLORE


@pytest.mark.unit()
def test_unknown_enum_values_kept():
    user = DatasetUser.model_validate({"identifier": "x", "principalType": "Robot", "datasetUserAccessRight": "Read"})
    assert user.principal_type == "Robot"
    assert not isinstance(user.principal_type, PrincipalType)
    assert user.dataset_user_access_right is DatasetUserAccessRight.READ


@pytest.mark.unit()
def test_unknown_enum_value_in_list():
    payload = b"""{"value": [
        {"id": "g1", "name": "A", "type": "Workspace"},
        {"id": "g2", "name": "B", "type": "AdminInsights"}
    ]}"""
    groups = ValueList[AdminGroup].model_validate_json(payload).value
    assert [g.type for g in groups] == [GroupType.WORKSPACE, "AdminInsights"]
    assert groups[0].type is GroupType.WORKSPACE


@pytest.mark.unit()
def test_request_enums_stay_closed():
    with pytest.raises(ValidationError):
        UpdateGroupRequest(name="n", default_dataset_storage_format="Huge")


@pytest.mark.unit()
def test_value_list():
    assert ValueList[Refresh].model_validate({}).value == []
    refreshes = ValueList[Refresh].model_validate_json(b'{"value": [{"requestId": "r1", "status": "Unknown"}]}')
    assert refreshes.value[0].request_id == "r1"


@pytest.mark.unit()
def test_admin_group_is_a_group(group_data):
    group = AdminGroup.model_validate({**group_data, "type": "PersonalGroup", "pipelineId": "p1"})
    assert isinstance(group, Group)
    assert group.pipeline_id == "p1"


@pytest.mark.unit()
def test_groups_options_defaults():
    assert GroupsOptions().to_query() == []
    assert GroupsOptions(top=5000).to_query() == [("$top", "5000")]
