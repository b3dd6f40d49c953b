__all__ = ("DataflowUser", "DataflowUserAccessRight", "DatasetToDataflowLink", "DependentDataflow")

from enum import StrEnum

from .common import OpenEnum, PowerBIModel, User


class DataflowUserAccessRight(StrEnum):
    NONE = "None"
    READ = "Read"
    READ_WRITE = "ReadWrite"
    READ_RESHARE = "ReadReshare"
    OWNER = "Owner"


class DataflowUser(User):
    dataflow_user_access_right: OpenEnum[DataflowUserAccessRight]


class DependentDataflow(PowerBIModel):
    group_id: str | None = None
    target_dataflow_id: str | None = None


class DatasetToDataflowLink(PowerBIModel):
    dataflow_object_id: str | None = None
    dataset_object_id: str | None = None
    workspace_object_id: str | None = None
