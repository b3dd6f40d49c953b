__all__ = (
    "CredentialType",
    "Gateway",
    "GatewayDatasource",
    "GatewayDatasourceCredentialDetails",
    "GatewayPublicKey",
)

from enum import StrEnum

from pydantic import Field

from .common import OpenEnum, PowerBIModel


class GatewayPublicKey(PowerBIModel):
    exponent: str | None = None
    modulus: str | None = None


class Gateway(PowerBIModel):
    """An on-premises data gateway."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    gateway_annotation: str | None = None
    gateway_status: str | None = None
    public_key: GatewayPublicKey | None = None


class CredentialType(StrEnum):
    BASIC = "Basic"
    WINDOWS = "Windows"
    ANONYMOUS = "Anonymous"
    OAUTH2 = "OAuth2"
    KEY = "Key"
    SAS = "SAS"


class GatewayDatasourceCredentialDetails(PowerBIModel):
    use_end_user_oauth2_credentials: bool = Field(default=False, alias="useEndUserOAuth2Credentials")


class GatewayDatasource(PowerBIModel):
    id: str | None = None
    gateway_id: str | None = None
    connection_details: str | None = None
    credential_details: GatewayDatasourceCredentialDetails | None = None
    credential_type: OpenEnum[CredentialType] | None = None
    datasource_name: str | None = None
    datasource_type: str | None = None
