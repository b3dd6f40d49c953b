__all__ = (
    "DatasourceIdentity",
    "DatasourceSelector",
    "EffectiveIdentity",
    "EmbedToken",
    "GenerateTokenRequest",
    "GenerateTokenRequestV2",
    "GenerateTokenRequestV2Dataset",
    "GenerateTokenRequestV2Report",
    "GenerateTokenRequestV2TargetWorkspace",
    "IdentityBlob",
    "TokenAccessLevel",
    "XmlaPermissions",
)

from enum import StrEnum

from .common import DatasourceConnectionDetails, PowerBIModel


class TokenAccessLevel(StrEnum):
    VIEW = "View"
    EDIT = "Edit"
    CREATE = "Create"


class XmlaPermissions(StrEnum):
    OFF = "Off"
    READ_ONLY = "ReadOnly"


class IdentityBlob(PowerBIModel):
    """Only supported for datasets with a DirectQuery connection to Azure SQL."""

    value: str | None = None


class EffectiveIdentity(PowerBIModel):
    username: str | None = None
    roles: list[str] | None = None
    datasets: list[str] | None = None
    custom_data: str | None = None
    identity_blob: IdentityBlob | None = None
    auditable_context: str | None = None
    reports: list[str] | None = None


class DatasourceSelector(PowerBIModel):
    datasource_type: str | None = None
    connection_details: DatasourceConnectionDetails | None = None


class DatasourceIdentity(PowerBIModel):
    """Identity used for DirectQuery data sources with single sign-on enabled."""

    identity_blob: str | None = None
    datasources: list[DatasourceSelector] | None = None


class EmbedToken(PowerBIModel):
    token: str
    token_id: str | None = None
    expiration: str | None = None


class GenerateTokenRequest(PowerBIModel):
    access_level: TokenAccessLevel | None = None
    allow_save_as: bool | None = None
    dataset_id: str | None = None
    identities: list[EffectiveIdentity] | None = None
    lifetime_in_minutes: int | None = None


class GenerateTokenRequestV2Dataset(PowerBIModel):
    id: str | None = None
    xmla_permissions: XmlaPermissions | None = None


class GenerateTokenRequestV2Report(PowerBIModel):
    id: str | None = None
    allow_edit: bool | None = None


class GenerateTokenRequestV2TargetWorkspace(PowerBIModel):
    id: str | None = None


class GenerateTokenRequestV2(PowerBIModel):
    datasets: list[GenerateTokenRequestV2Dataset] | None = None
    datasource_identities: list[DatasourceIdentity] | None = None
    identities: list[EffectiveIdentity] | None = None
    lifetime_in_minutes: int | None = None
    reports: list[GenerateTokenRequestV2Report] | None = None
    target_workspaces: list[GenerateTokenRequestV2TargetWorkspace] | None = None
