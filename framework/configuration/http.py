from pathlib import Path

from pydantic import NonNegativeFloat, NonNegativeInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class HTTPClientConfig(BaseSettings):
    """
    Settings of the shared httpx client, section `http` of powerbi.toml.

    Each key can also be set as POWERBI_HTTP_<KEY>, e.g. POWERBI_HTTP_READ_TIMEOUT=120. Requests are never retried.
    """

    model_config = SettingsConfigDict(env_prefix="POWERBI_HTTP_", extra="allow")

    # Timeouts, in seconds
    connection_timeout: NonNegativeFloat = 10.0
    read_timeout: NonNegativeFloat = 60.0
    write_timeout: NonNegativeFloat = 30.0
    pool_timeout: NonNegativeFloat = 10.0
    """Wait for a free connection of the pool."""

    # Connection pool
    max_total_connections: NonNegativeInt = 10
    max_keepalive_connections: NonNegativeInt = 5
    keepalive_expiration: NonNegativeInt = 10
    """Seconds an idle keep-alive connection is kept open."""

    follow_redirects: bool = True
    params: dict[str, str] | list[tuple[str, str]] | tuple[tuple[str, str], ...] | None = None
    """Query parameters added to every request."""

    # TLS
    ssl_verify: bool = True
    ssl_cert_file: None | str | Path = None
    """CA bundle used to verify the server when ssl_verify is on; the system bundle when unset."""
