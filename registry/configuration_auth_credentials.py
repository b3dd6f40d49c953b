from logging import getLogger
from typing import cast

from azure.core.credentials import TokenCredential
from azure.identity import ClientSecretCredential, UsernamePasswordCredential

from framework.configuration.authentication import (
    ApiTokenConfiguration,
    AzureBasicOauthConfiguration,
    AzureServicePrincipalConfiguration,
)
from registry.configuration_registry import CONFIGURATION_ID, ConfigurationRegistry

LOGGER = getLogger(__name__)

CREDENTIAL_CONFIG_TYPES = ApiTokenConfiguration | AzureServicePrincipalConfiguration | AzureBasicOauthConfiguration

CREDENTIAL_PRIORITY: tuple[CONFIGURATION_ID, ...] = ("auth_api_token", "auth_azure_spn", "auth_azure_basic_oauth")
"""Sections tried in order; the first one that validates is used."""


class CredentialsNotFoundError(Exception):
    def __init__(
        self,
        msg: str = "No Power BI credentials found in powerbi.toml or the environment",
        *args: object,
    ) -> None:
        super().__init__(msg, *args)


def load_credentials() -> CREDENTIAL_CONFIG_TYPES:
    registry = ConfigurationRegistry()
    for section in CREDENTIAL_PRIORITY:
        if registry.available(section):
            LOGGER.debug("Using credentials from '%s'", section)
            return cast(CREDENTIAL_CONFIG_TYPES, registry.lookup(section, ApiTokenConfiguration))
    raise CredentialsNotFoundError


def _azure_credential(auth_config: AzureServicePrincipalConfiguration | AzureBasicOauthConfiguration) -> TokenCredential:
    if isinstance(auth_config, AzureServicePrincipalConfiguration):
        return ClientSecretCredential(
            tenant_id=auth_config.tenant_id,
            client_id=auth_config.client_id,
            client_secret=auth_config.client_secret.get_secret_value(),
        )
    return UsernamePasswordCredential(
        client_id=auth_config.client_id,
        username=auth_config.username,
        password=auth_config.password.get_secret_value(),
        tenant_id=auth_config.tenant_id,
        authority=str(auth_config.authority),
    )


def load_access_token(default_scope: str) -> str:
    """
    Return an access token from the configured credentials.

    A configured access token is used as it is. Azure credentials are exchanged for a token once; the token is not
    refreshed, so a long-lived process has to build a new client when it expires.
    """
    match load_credentials():
        case ApiTokenConfiguration() as auth_config:
            return auth_config.access_token.get_secret_value()
        case AzureServicePrincipalConfiguration() | AzureBasicOauthConfiguration() as auth_config:
            scope = auth_config.scope or default_scope
            LOGGER.info("Requesting Azure token for %s using %s", scope, type(auth_config).__name__)
            token = _azure_credential(auth_config).get_token(scope)
            LOGGER.info("Azure token acquired")
            return token.token
        case other:
            raise ValueError(f"Unsupported credentials configuration {type(other).__name__}")
