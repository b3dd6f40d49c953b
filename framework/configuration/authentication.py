__all__ = [
    "ApiTokenConfiguration",
    "AzureServicePrincipalConfiguration",
    "AzureBasicOauthConfiguration",
]


from typing import Annotated

from pydantic import Field, HttpUrl, SecretStr
from pydantic_core import Url
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
NonEmptySecret = Annotated[SecretStr, Field(min_length=1)]


class ApiTokenConfiguration(BaseSettings):
    """Section `auth_api_token`: an access token obtained elsewhere, sent as it is (POWERBI_ACCESS_TOKEN)."""

    model_config = SettingsConfigDict(env_prefix="POWERBI_", extra="ignore")

    access_token: NonEmptySecret


class AzureServicePrincipalConfiguration(BaseSettings):
    """Section `auth_azure_spn`: an Entra ID application signing in with its client secret."""

    model_config = SettingsConfigDict(env_prefix="POWERBI_AZURE_", extra="ignore")

    tenant_id: NonEmptyStr
    client_id: NonEmptyStr
    client_secret: NonEmptySecret
    scope: str = ""
    """Replaces the Power BI scope when set."""


class AzureBasicOauthConfiguration(BaseSettings):
    """Section `auth_azure_basic_oauth`: a user signing in through a public client application."""

    model_config = SettingsConfigDict(env_prefix="POWERBI_AZURE_", extra="ignore")

    tenant_id: NonEmptyStr
    client_id: NonEmptyStr
    username: NonEmptyStr
    password: NonEmptySecret
    scope: str = ""
    authority: HttpUrl = Url("https://login.microsoftonline.com")
