__all__ = (
    "CloneReportRequest",
    "Page",
    "RdlBindDetail",
    "RdlBindToGatewayRequest",
    "RebindReportRequest",
    "Report",
    "ReportType",
    "ReportUser",
    "ReportUserAccessRight",
    "Subscription",
    "SubscriptionUser",
)

from enum import StrEnum

from .common import OpenEnum, PowerBIModel, UserMetadata


class ReportType(StrEnum):
    POWER_BI = "PowerBIReport"
    PAGINATED = "PaginatedReport"


class ReportUserAccessRight(StrEnum):
    NONE = "None"
    READ = "Read"
    READ_WRITE = "ReadWrite"
    READ_RESHARE = "ReadReshare"
    READ_COPY = "ReadCopy"
    OWNER = "Owner"


class SubscriptionUser(UserMetadata):
    pass


class ReportUser(UserMetadata):
    report_user_access_right: OpenEnum[ReportUserAccessRight]


class Subscription(PowerBIModel):
    """An email subscription to a report or a dashboard."""

    id: str | None = None
    artifact_display_name: str | None = None
    artifact_id: str | None = None
    artifact_type: str | None = None
    attachment_format: str | None = None
    end_date: str | None = None
    frequency: str | None = None
    is_enabled: bool | None = None
    link_to_content: bool | None = None
    preview_image: bool | None = None
    start_date: str | None = None
    sub_artifact_display_name: str | None = None
    title: str | None = None
    users: list[SubscriptionUser] | None = None


class Report(PowerBIModel):
    id: str | None = None
    name: str | None = None
    report_type: OpenEnum[ReportType] | None = None
    app_id: str | None = None
    dataset_id: str | None = None
    description: str | None = None
    embed_url: str | None = None
    is_owned_by_me: bool | None = None
    original_report_id: str | None = None
    subscriptions: list[Subscription] | None = None
    users: list[ReportUser] | None = None
    web_url: str | None = None


class CloneReportRequest(PowerBIModel):
    name: str
    target_model_id: str | None = None
    target_workspace_id: str | None = None


class RebindReportRequest(PowerBIModel):
    dataset_id: str


class RdlBindDetail(PowerBIModel):
    data_source_name: str
    data_source_object_id: str


class RdlBindToGatewayRequest(PowerBIModel):
    """Binds the data sources of a paginated report to a gateway."""

    gateway_object_id: str
    bind_details: list[RdlBindDetail] | None = None


class Page(PowerBIModel):
    name: str | None = None
    display_name: str | None = None
    order: int | None = None
