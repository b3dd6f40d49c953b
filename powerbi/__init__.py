__version__ = "1.0.0"

from framework.core.handles import DecodeError, HTTPError, LocalRequestError, PowerBIClientError

from .client import PowerBIClient
from .constants import BASE_URL, POWERBI_DEFAULT_SCOPE

__all__ = (
    "BASE_URL",
    "DecodeError",
    "HTTPError",
    "LocalRequestError",
    "POWERBI_DEFAULT_SCOPE",
    "PowerBIClient",
    "PowerBIClientError",
    "__version__",
)
