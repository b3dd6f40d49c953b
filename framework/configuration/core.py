__all__ = ["CoreConfiguration", "DEFAULT_BASE_API_URL", "DEFAULT_CONFIGURATION_FILE_PATHS"]


from pathlib import Path

from pydantic import HttpUrl, field_validator
from pydantic_core import Url
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIGURATION_FILE_PATHS: tuple[Path, ...] = (Path("powerbi.toml"), Path("/etc/powerbi/powerbi.toml"))

DEFAULT_BASE_API_URL: str = "https://api.powerbi.com/v1.0/myorg/"


class CoreConfiguration(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="POWERBI_", extra="ignore")
    """Ensures all environment variables are read from POWERBI_<key-name>. Environment variables are case insensitive."""

    base_api_url: HttpUrl = Url(DEFAULT_BASE_API_URL)
    """Root of the REST API; every endpoint path is resolved relative to it."""

    @field_validator("base_api_url", mode="before")
    @classmethod
    def url_append_slash(cls, base_url: str) -> str:
        if base_url:
            return base_url if str(base_url).endswith("/") else f"{base_url}/"
        return base_url
