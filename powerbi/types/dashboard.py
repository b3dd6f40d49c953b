__all__ = (
    "AddDashboardRequest",
    "Dashboard",
    "DashboardUser",
    "DashboardUserAccessRight",
)

from enum import StrEnum

from .common import OpenEnum, PowerBIModel, User
from .report import Subscription


class DashboardUserAccessRight(StrEnum):
    NONE = "None"
    READ = "Read"
    READ_WRITE = "ReadWrite"
    READ_RESHARE = "ReadReshare"
    READ_COPY = "ReadCopy"
    OWNER = "Owner"


class DashboardUser(User):
    dashboard_user_access_right: OpenEnum[DashboardUserAccessRight]


class AddDashboardRequest(PowerBIModel):
    name: str


class Dashboard(PowerBIModel):
    id: str | None = None
    display_name: str | None = None
    embed_url: str | None = None
    is_read_only: bool | None = None
    app_id: str | None = None
    subscriptions: list[Subscription] | None = None
    users: list[DashboardUser] | None = None
    web_url: str | None = None
