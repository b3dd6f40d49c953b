__all__ = (
    "BindToGatewayRequest",
    "Dataset",
    "DatasetExecuteQueriesQuery",
    "DatasetExecuteQueriesRequest",
    "DatasetExecuteQueriesResponse",
    "DatasetExecuteQueriesResult",
    "DatasetExecuteQueriesTable",
    "DatasetUser",
    "DatasetUserAccessRight",
    "Datasource",
    "DirectQueryRefreshSchedule",
    "MashupParameter",
    "Refresh",
    "RefreshHistoryOptions",
    "RefreshRequest",
)

from enum import StrEnum

from pydantic import Field

from framework.core.handles import QueryOptions
from toolkit.more_typing import JSON_DICT

from .common import DatasourceConnectionDetails, OpenEnum, PowerBIModel, User
from .dataflow import DependentDataflow


class DatasetUserAccessRight(StrEnum):
    NONE = "None"
    READ = "Read"
    READ_WRITE = "ReadWrite"
    READ_RESHARE = "ReadReshare"
    READ_WRITE_RESHARE = "ReadWriteReshare"
    READ_EXPLORE = "ReadExplore"
    READ_RESHARE_EXPLORE = "ReadReshareExplore"
    READ_WRITE_EXPLORE = "ReadWriteExplore"
    READ_WRITE_RESHARE_EXPLORE = "ReadWriteReshareExplore"


class DatasetUser(User):
    dataset_user_access_right: OpenEnum[DatasetUserAccessRight]


class Dataset(PowerBIModel):
    id: str | None = None
    name: str | None = None
    add_rows_api_enabled: bool | None = Field(default=None, alias="addRowsAPIEnabled")
    configured_by: str | None = None
    created_date: str | None = None
    create_report_embed_url: str | None = None
    description: str | None = None
    is_effective_identity_required: bool | None = None
    is_effective_identity_roles_required: bool | None = None
    is_on_prem_gateway_required: bool | None = None
    is_refreshable: bool | None = None
    qna_embed_url: str | None = None
    target_storage_mode: str | None = None
    upstream_dataflows: list[DependentDataflow] | None = None
    web_url: str | None = None


class Datasource(PowerBIModel):
    datasource_id: str | None = None
    datasource_type: str | None = None
    connection_details: DatasourceConnectionDetails | None = None
    connection_string: str | None = None
    gateway_id: str | None = None
    name: str | None = None


class BindToGatewayRequest(PowerBIModel):
    gateway_object_id: str
    datasource_object_ids: list[str] | None = None
    """When not set, the dataset is bound to the first matching data source of the gateway."""


class DatasetExecuteQueriesQuery(PowerBIModel):
    query: str
    """A DAX query."""


class DatasetExecuteQueriesRequest(PowerBIModel):
    queries: list[DatasetExecuteQueriesQuery]
    impersonated_user_name: str | None = None
    serializer_settings: JSON_DICT | None = None


class DatasetExecuteQueriesTable(PowerBIModel):
    rows: list[JSON_DICT] = Field(default_factory=list)


class DatasetExecuteQueriesResult(PowerBIModel):
    tables: list[DatasetExecuteQueriesTable] = Field(default_factory=list)
    error: JSON_DICT | None = None


class DatasetExecuteQueriesResponse(PowerBIModel):
    results: list[DatasetExecuteQueriesResult] = Field(default_factory=list)
    error: JSON_DICT | None = None


class DirectQueryRefreshSchedule(PowerBIModel):
    frequency: int | None = None
    """Refresh interval in minutes."""
    days: list[str] | None = None
    times: list[str] | None = None
    local_time_zone_id: str | None = None


class MashupParameter(PowerBIModel):
    name: str | None = None
    type: str | None = None
    current_value: str | None = None
    is_required: bool | None = None
    suggested_values: list[str] | None = None


class Refresh(PowerBIModel):
    """An entry of the refresh history of a dataset."""

    request_id: str | None = None
    id: int | None = None
    refresh_type: str | None = None
    status: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    service_exception_json: str | None = None


class RefreshRequest(PowerBIModel):
    notify_option: str | None = None
    """One of MailOnFailure, MailOnCompletion or NoNotification."""


class RefreshHistoryOptions(QueryOptions):
    top: int = Field(default=0, alias="$top")
