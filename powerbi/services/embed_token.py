from httpx import URL, AsyncClient

from framework.core.handles import decode
from powerbi.handles import (
    PowerBIGenerateDashboardTokenEndpoint,
    PowerBIGenerateDatasetTokenEndpoint,
    PowerBIGenerateReportCreationTokenEndpoint,
    PowerBIGenerateReportTokenEndpoint,
    PowerBIGenerateTileTokenEndpoint,
    PowerBIGenerateTokenEndpoint,
)
from powerbi.types import EmbedToken, GenerateTokenRequest, GenerateTokenRequestV2

from .base import Service


class EmbedTokenService(Service):
    """Embed tokens for Power BI Embedded."""

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        super().__init__(base_url, client)
        self.generate_endpoint = self._endpoint(PowerBIGenerateTokenEndpoint)
        self.dashboard_endpoint = self._endpoint(PowerBIGenerateDashboardTokenEndpoint)
        self.dataset_endpoint = self._endpoint(PowerBIGenerateDatasetTokenEndpoint)
        self.report_creation_endpoint = self._endpoint(PowerBIGenerateReportCreationTokenEndpoint)
        self.report_endpoint = self._endpoint(PowerBIGenerateReportTokenEndpoint)
        self.tile_endpoint = self._endpoint(PowerBIGenerateTileTokenEndpoint)

    async def generate_token(self, request: GenerateTokenRequestV2) -> EmbedToken:
        """A token covering several reports, datasets and target workspaces at once."""
        response = await self.generate_endpoint.handle(body=request)
        return await decode(response, EmbedToken)

    async def generate_token_for_dashboard_in_group(
        self,
        group_id: str,
        dashboard_id: str,
        request: GenerateTokenRequest,
    ) -> EmbedToken:
        response = await self.dashboard_endpoint.handle(
            path_args={"groupId": group_id, "dashboardId": dashboard_id},
            body=request,
        )
        return await decode(response, EmbedToken)

    async def generate_token_for_dataset_in_group(
        self,
        group_id: str,
        dataset_id: str,
        request: GenerateTokenRequest,
    ) -> EmbedToken:
        response = await self.dataset_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
            body=request,
        )
        return await decode(response, EmbedToken)

    async def generate_token_for_report_creation_in_group(
        self,
        group_id: str,
        request: GenerateTokenRequest,
    ) -> EmbedToken:
        response = await self.report_creation_endpoint.handle(path_args={"groupId": group_id}, body=request)
        return await decode(response, EmbedToken)

    async def generate_token_for_report_in_group(
        self,
        group_id: str,
        report_id: str,
        request: GenerateTokenRequest,
    ) -> EmbedToken:
        response = await self.report_endpoint.handle(
            path_args={"groupId": group_id, "reportId": report_id},
            body=request,
        )
        return await decode(response, EmbedToken)

    async def generate_token_for_tile_in_group(
        self,
        group_id: str,
        dashboard_id: str,
        tile_id: str,
        request: GenerateTokenRequest,
    ) -> EmbedToken:
        response = await self.tile_endpoint.handle(
            path_args={"groupId": group_id, "dashboardId": dashboard_id, "tileId": tile_id},
            body=request,
        )
        return await decode(response, EmbedToken)
