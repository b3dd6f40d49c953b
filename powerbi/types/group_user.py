__all__ = (
    "DeleteGroupUserOptions",
    "GroupUser",
    "GroupUserAccessRight",
    "ListGroupUsersOptions",
)

from enum import StrEnum

from pydantic import Field

from framework.core.handles import QueryOptions

from .common import OpenEnum, PowerBIModel, PrincipalType, ServicePrincipalProfile


class GroupUserAccessRight(StrEnum):
    NONE = "None"
    ADMIN = "Admin"
    MEMBER = "Member"
    CONTRIBUTOR = "Contributor"
    VIEWER = "Viewer"


class GroupUser(PowerBIModel):
    """
    A user or principal with access to a workspace.

    Adding or updating a user needs `identifier`, `group_user_access_right` and `principal_type`; the remaining fields
    are only filled in by the service.
    """

    group_user_access_right: OpenEnum[GroupUserAccessRight]
    identifier: str
    principal_type: OpenEnum[PrincipalType]
    display_name: str | None = None
    email_address: str | None = None
    graph_id: str | None = None
    profile: ServicePrincipalProfile | None = None
    user_type: str | None = None


class DeleteGroupUserOptions(QueryOptions):
    profile_id: str = Field(default="", alias="profileId")


class ListGroupUsersOptions(QueryOptions):
    skip: int = Field(default=0, alias="$skip")
    top: int = Field(default=0, alias="$top")
