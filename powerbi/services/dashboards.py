from httpx import URL, AsyncClient

from framework.core.handles import decode, release
from powerbi.handles import (
    PowerBIAddDashboardEndpoint,
    PowerBICloneTileEndpoint,
    PowerBIDeleteDashboardEndpoint,
    PowerBIGetDashboardEndpoint,
    PowerBIGetTileEndpoint,
    PowerBIListDashboardsEndpoint,
    PowerBIListTilesEndpoint,
)
from powerbi.types import AddDashboardRequest, CloneTileRequest, Dashboard, Tile, ValueList

from .base import Service


class DashboardsService(Service):
    """Dashboards and tiles of My workspace."""

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        super().__init__(base_url, client)
        self.add_endpoint = self._endpoint(PowerBIAddDashboardEndpoint)
        self.clone_tile_endpoint = self._endpoint(PowerBICloneTileEndpoint)
        self.delete_endpoint = self._endpoint(PowerBIDeleteDashboardEndpoint)
        self.get_endpoint = self._endpoint(PowerBIGetDashboardEndpoint)
        self.list_endpoint = self._endpoint(PowerBIListDashboardsEndpoint)
        self.get_tile_endpoint = self._endpoint(PowerBIGetTileEndpoint)
        self.list_tiles_endpoint = self._endpoint(PowerBIListTilesEndpoint)

    async def add(self, request: AddDashboardRequest) -> Dashboard:
        response = await self.add_endpoint.handle(body=request)
        return await decode(response, Dashboard)

    async def clone_tile(self, dashboard_id: str, tile_id: str, request: CloneTileRequest) -> Tile:
        response = await self.clone_tile_endpoint.handle(
            path_args={"dashboardId": dashboard_id, "tileId": tile_id},
            body=request,
        )
        return await decode(response, Tile)

    async def delete(self, dashboard_id: str) -> None:
        response = await self.delete_endpoint.handle(path_args={"dashboardId": dashboard_id})
        await release(response)

    async def get(self, dashboard_id: str) -> Dashboard:
        response = await self.get_endpoint.handle(path_args={"dashboardId": dashboard_id})
        return await decode(response, Dashboard)

    async def get_tile(self, dashboard_id: str, tile_id: str) -> Tile:
        response = await self.get_tile_endpoint.handle(path_args={"dashboardId": dashboard_id, "tileId": tile_id})
        return await decode(response, Tile)

    async def list_tiles(self, dashboard_id: str) -> list[Tile]:
        response = await self.list_tiles_endpoint.handle(path_args={"dashboardId": dashboard_id})
        return (await decode(response, ValueList[Tile])).value

    async def list(self) -> list[Dashboard]:
        response = await self.list_endpoint.handle()
        return (await decode(response, ValueList[Dashboard])).value
