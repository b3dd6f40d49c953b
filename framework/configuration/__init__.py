from .core import DEFAULT_BASE_API_URL, DEFAULT_CONFIGURATION_FILE_PATHS, CoreConfiguration
from .authentication import ApiTokenConfiguration, AzureBasicOauthConfiguration, AzureServicePrincipalConfiguration
from .http import HTTPClientConfig

__all__ = (
    "CoreConfiguration",
    "DEFAULT_BASE_API_URL",
    "DEFAULT_CONFIGURATION_FILE_PATHS",
    "ApiTokenConfiguration",
    "AzureBasicOauthConfiguration",
    "AzureServicePrincipalConfiguration",
    "HTTPClientConfig",
)
