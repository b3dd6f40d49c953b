from .configuration_auth_credentials import CredentialsNotFoundError, load_access_token, load_credentials
from .configuration_registry import CONFIGURATION_ID, ConfigurationRegistry

__all__ = (
    "CONFIGURATION_ID",
    "ConfigurationRegistry",
    "CredentialsNotFoundError",
    "load_access_token",
    "load_credentials",
)
