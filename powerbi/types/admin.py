__all__ = (
    "AdminDashboard",
    "AdminDataflow",
    "AdminDataset",
    "AdminGroup",
    "AdminReport",
    "AdminTile",
    "DeleteUserOptions",
    "Encryption",
    "EncryptionStatus",
    "GroupOptions",
    "GroupRestoreRequest",
    "GroupType",
    "GroupsOptions",
    "UnusedArtifactEntity",
    "UnusedArtifactsOptions",
    "UnusedArtifactsResponse",
    "Workbook",
)

from enum import StrEnum

from pydantic import Field

from framework.core.handles import QueryOptions

from .common import OpenEnum, PowerBIModel
from .dashboard import DashboardUser
from .dataflow import DataflowUser, DependentDataflow
from .dataset import DatasetUser
from .group import Group
from .group_user import GroupUser
from .report import Report, Subscription


class GroupType(StrEnum):
    ADMIN_WORKSPACE = "AdminWorkspace"
    PERSONAL_GROUP = "PersonalGroup"
    PERSONAL = "Personal"
    GROUP = "Group"
    WORKSPACE = "Workspace"


class EncryptionStatus(StrEnum):
    UNKNOWN = "Unknown"
    NOT_SUPPORTED = "NotSupported"
    IN_SYNC_WITH_WORKSPACE = "InSyncWithWorkspace"
    NOT_IN_SYNC_WITH_WORKSPACE = "NotInSyncWithWorkspace"


class Encryption(PowerBIModel):
    encryption_status: OpenEnum[EncryptionStatus] | None = None


class AdminTile(PowerBIModel):
    id: str | None = None
    title: str | None = None
    col_span: int | None = None
    row_span: int | None = None
    dataset_id: str | None = None
    embed_data: str | None = None
    embed_url: str | None = None
    report_id: str | None = None


class AdminDashboard(PowerBIModel):
    id: str | None = None
    display_name: str | None = None
    app_id: str | None = None
    embed_url: str | None = None
    is_read_only: bool | None = None
    subscriptions: list[Subscription] | None = None
    tiles: list[AdminTile] | None = None
    users: list[DashboardUser] | None = None
    web_url: str | None = None
    workspace_id: str | None = None


class AdminDataflow(PowerBIModel):
    object_id: str | None = None
    name: str | None = None
    configured_by: str | None = None
    description: str | None = None
    model_url: str | None = None
    users: list[DataflowUser] | None = None
    workspace_id: str | None = None


class AdminDataset(PowerBIModel):
    id: str | None = None
    name: str | None = None
    add_rows_api_enabled: bool | None = Field(default=None, alias="addRowsAPIEnabled")
    configured_by: str | None = None
    content_provider_type: str | None = None
    created_date: str | None = None
    create_report_embed_url: str | None = None
    description: str | None = None
    encryption: Encryption | None = None
    is_effective_identity_required: bool | None = None
    is_effective_identity_roles_required: bool | None = None
    is_in_place_sharing_enabled: bool | None = None
    is_on_prem_gateway_required: bool | None = None
    is_refreshable: bool | None = None
    qna_embed_url: str | None = None
    query_scale_out_settings: str | None = None
    target_storage_mode: str | None = None
    upstream_dataflows: list[DependentDataflow] | None = None
    users: list[DatasetUser] | None = None
    web_url: str | None = None
    workspace_id: str | None = None


class AdminReport(Report):
    created_by: str | None = None
    created_date_time: str | None = None
    modified_by: str | None = None
    modified_date_time: str | None = None
    workspace_id: str | None = None


class Workbook(PowerBIModel):
    dataset_id: str | None = None
    name: str | None = None


class AdminGroup(Group):
    """A workspace as seen by a tenant administrator, optionally with its expanded artifacts."""

    dashboards: list[AdminDashboard] | None = None
    dataflows: list[AdminDataflow] | None = None
    datasets: list[AdminDataset] | None = None
    description: str | None = None
    has_workspace_level_settings: bool | None = None
    pipeline_id: str | None = None
    reports: list[AdminReport] | None = None
    state: str | None = None
    type: OpenEnum[GroupType] | None = None
    users: list[GroupUser] | None = None
    workbooks: list[Workbook] | None = None


class UnusedArtifactEntity(PowerBIModel):
    artifact_id: str | None = None
    artifact_size_in_mb: int | None = Field(default=None, alias="artifactSizeInMB")
    artifact_type: str | None = None
    created_date_time: str | None = None
    display_name: str | None = None
    last_accessed_date_time: str | None = None


class UnusedArtifactsResponse(PowerBIModel):
    continuation_token: str | None = None
    """Pass back through `UnusedArtifactsOptions` to fetch the next page."""
    continuation_uri: str | None = None
    unused_artifact_entities: list[UnusedArtifactEntity] = Field(default_factory=list)


class GroupRestoreRequest(PowerBIModel):
    email_address: str
    """The new owner of the restored workspace."""
    name: str | None = None


class DeleteUserOptions(QueryOptions):
    is_group: bool = Field(default=False, alias="isGroup")
    profile_id: str = Field(default="", alias="profileId")


class GroupOptions(QueryOptions):
    expand: str = Field(default="", alias="$expand")
    """Comma separated artifacts to expand, e.g. "users,reports"."""


class GroupsOptions(QueryOptions):
    group: GroupOptions = Field(default_factory=GroupOptions)
    skip: int = Field(default=0, alias="$skip")
    top: int = Field(default=0, alias="$top")
    filter: str = Field(default="", alias="$filter")
    """OData filter expression, passed through unvalidated."""


class UnusedArtifactsOptions(QueryOptions):
    continuation_token: str = Field(default="", alias="continuationToken")
