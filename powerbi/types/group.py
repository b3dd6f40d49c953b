__all__ = (
    "AzureResource",
    "CreateGroupOptions",
    "CreateGroupRequest",
    "DefaultDatasetStorageFormat",
    "Group",
    "ListGroupsOptions",
    "UpdateGroupRequest",
)

from enum import StrEnum

from pydantic import Field

from framework.core.handles import QueryOptions

from .common import OpenEnum, PowerBIModel


class DefaultDatasetStorageFormat(StrEnum):
    SMALL = "Small"
    LARGE = "Large"


class AzureResource(PowerBIModel):
    id: str | None = None
    resource_group: str | None = None
    resource_name: str | None = None
    subscription_id: str | None = None


class Group(PowerBIModel):
    """A Power BI workspace."""

    id: str | None = None
    name: str | None = None
    capacity_id: str | None = None
    dataflow_storage_id: str | None = None
    default_dataset_storage_format: OpenEnum[DefaultDatasetStorageFormat] | None = None
    is_on_dedicated_capacity: bool | None = None
    is_read_only: bool | None = None
    log_analytics_workspace: AzureResource | None = None


class CreateGroupRequest(PowerBIModel):
    name: str


class UpdateGroupRequest(PowerBIModel):
    name: str
    default_dataset_storage_format: DefaultDatasetStorageFormat | None = None


class CreateGroupOptions(QueryOptions):
    workspace_v2: bool = Field(default=False, alias="workspaceV2")
    """Create a new workspace experience workspace. Sent only when set."""


class ListGroupsOptions(QueryOptions):
    filter: str = Field(default="", alias="$filter")
    """OData filter expression, passed through unvalidated."""
    skip: int = Field(default=0, alias="$skip")
    top: int = Field(default=0, alias="$top")
