import logging
from types import TracebackType
from typing import Self

from httpx import URL, AsyncBaseTransport, AsyncClient
from pydantic import ValidationError

from framework.configuration import CoreConfiguration, HTTPClientConfig
from framework.core.handles import RequestPipeline, get_client
from framework.core.handles.lib import ensure_trailing_slash
from registry import ConfigurationRegistry, load_access_token
from toolkit.logging_tools import parse_validation_error

from .constants import BASE_URL, POWERBI_DEFAULT_SCOPE
from .services import (
    AdminService,
    DashboardsService,
    DatasetsService,
    EmbedTokenService,
    GroupsService,
    PushDatasetsService,
    ReportsService,
)

LOGGER = logging.getLogger(__name__)


class PowerBIClient:
    """
    Entry point to the Power BI REST API.

    Every service shares the same `AsyncClient`, so authentication, timeouts and connection limits are configured once
    on it. The client holds no other state and may be used by concurrent tasks.
    """

    def __init__(self, http_client: AsyncClient | None = None, *, base_url: URL | str = BASE_URL) -> None:
        self.http_client = http_client if http_client is not None else get_client()
        self.base_url = ensure_trailing_slash(base_url)
        # Raw access to endpoints without a dedicated method
        self.pipeline = RequestPipeline(self.base_url, self.http_client)

        self.groups = GroupsService(self.base_url, self.http_client)
        self.admin = AdminService(self.base_url, self.http_client)
        self.datasets = DatasetsService(self.base_url, self.http_client)
        self.dashboards = DashboardsService(self.base_url, self.http_client)
        self.embed_token = EmbedTokenService(self.base_url, self.http_client)
        self.push_datasets = PushDatasetsService(self.base_url, self.http_client)
        self.reports = ReportsService(self.base_url, self.http_client)

    @classmethod
    def from_token(
        cls,
        token: str,
        *,
        config: HTTPClientConfig | None = None,
        transport: AsyncBaseTransport | None = None,
        base_url: URL | str = BASE_URL,
    ) -> Self:
        """Build a client sending `token` as a bearer token on every request."""
        return cls(get_client(config, token=token, transport=transport), base_url=base_url)

    @classmethod
    def from_configuration(cls) -> Self:
        """
        Build a client from the configuration file and the environment.

        The access token comes from the first credentials found; Azure credentials are exchanged for a token once.
        """
        try:
            registry = ConfigurationRegistry()
            core_config = registry.lookup("core", CoreConfiguration)
            http_config = registry.lookup("http", HTTPClientConfig)
        except ValidationError as e:
            LOGGER.error(parse_validation_error(e))
            raise
        token = load_access_token(POWERBI_DEFAULT_SCOPE)
        LOGGER.info("Power BI client configured for %s", core_config.base_api_url)
        return cls.from_token(token, config=http_config, base_url=str(core_config.base_api_url))

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> Self:
        await self.http_client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.http_client.__aexit__(exc_type, exc_val, exc_tb)
