from httpx import URL, AsyncClient

from framework.core.handles import decode, release
from powerbi.handles import (
    PowerBIBindReportToGatewayEndpoint,
    PowerBIBindReportToGatewayInGroupEndpoint,
    PowerBICloneReportEndpoint,
    PowerBICloneReportInGroupEndpoint,
    PowerBIDeleteReportEndpoint,
    PowerBIDeleteReportInGroupEndpoint,
    PowerBIGetPageEndpoint,
    PowerBIGetPageInGroupEndpoint,
    PowerBIGetReportEndpoint,
    PowerBIGetReportInGroupEndpoint,
    PowerBIListMyReportsEndpoint,
    PowerBIListPagesEndpoint,
    PowerBIListPagesInGroupEndpoint,
    PowerBIListReportsEndpoint,
    PowerBIRebindReportEndpoint,
    PowerBIRebindReportInGroupEndpoint,
)
from powerbi.types import CloneReportRequest, Page, RdlBindToGatewayRequest, RebindReportRequest, Report, ValueList

from .base import Service


class ReportsService(Service):
    """
    Reports and their pages.

    Every operation addresses My workspace; its `_in_group` counterpart addresses the given workspace.
    """

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        super().__init__(base_url, client)
        self.bind_to_gateway_endpoint = self._endpoint(PowerBIBindReportToGatewayEndpoint)
        self.bind_to_gateway_in_group_endpoint = self._endpoint(PowerBIBindReportToGatewayInGroupEndpoint)
        self.clone_endpoint = self._endpoint(PowerBICloneReportEndpoint)
        self.clone_in_group_endpoint = self._endpoint(PowerBICloneReportInGroupEndpoint)
        self.delete_endpoint = self._endpoint(PowerBIDeleteReportEndpoint)
        self.delete_in_group_endpoint = self._endpoint(PowerBIDeleteReportInGroupEndpoint)
        self.get_page_endpoint = self._endpoint(PowerBIGetPageEndpoint)
        self.get_page_in_group_endpoint = self._endpoint(PowerBIGetPageInGroupEndpoint)
        self.list_pages_endpoint = self._endpoint(PowerBIListPagesEndpoint)
        self.list_pages_in_group_endpoint = self._endpoint(PowerBIListPagesInGroupEndpoint)
        self.get_endpoint = self._endpoint(PowerBIGetReportEndpoint)
        self.get_in_group_endpoint = self._endpoint(PowerBIGetReportInGroupEndpoint)
        self.list_endpoint = self._endpoint(PowerBIListMyReportsEndpoint)
        self.list_in_group_endpoint = self._endpoint(PowerBIListReportsEndpoint)
        self.rebind_endpoint = self._endpoint(PowerBIRebindReportEndpoint)
        self.rebind_in_group_endpoint = self._endpoint(PowerBIRebindReportInGroupEndpoint)

    async def bind_to_gateway(self, report_id: str, request: RdlBindToGatewayRequest) -> None:
        """Bind a paginated report to a gateway."""
        response = await self.bind_to_gateway_endpoint.handle(path_args={"reportId": report_id}, body=request)
        await release(response)

    async def bind_to_gateway_in_group(self, group_id: str, report_id: str, request: RdlBindToGatewayRequest) -> None:
        response = await self.bind_to_gateway_in_group_endpoint.handle(
            path_args={"groupId": group_id, "reportId": report_id},
            body=request,
        )
        await release(response)

    async def clone(self, report_id: str, request: CloneReportRequest) -> Report:
        response = await self.clone_endpoint.handle(path_args={"reportId": report_id}, body=request)
        return await decode(response, Report)

    async def clone_in_group(self, group_id: str, report_id: str, request: CloneReportRequest) -> Report:
        response = await self.clone_in_group_endpoint.handle(
            path_args={"groupId": group_id, "reportId": report_id},
            body=request,
        )
        return await decode(response, Report)

    async def delete(self, report_id: str) -> None:
        response = await self.delete_endpoint.handle(path_args={"reportId": report_id})
        await release(response)

    async def delete_in_group(self, group_id: str, report_id: str) -> None:
        response = await self.delete_in_group_endpoint.handle(path_args={"groupId": group_id, "reportId": report_id})
        await release(response)

    async def get_page(self, report_id: str, page_name: str) -> Page:
        response = await self.get_page_endpoint.handle(path_args={"reportId": report_id, "pageName": page_name})
        return await decode(response, Page)

    async def get_page_in_group(self, group_id: str, report_id: str, page_name: str) -> Page:
        response = await self.get_page_in_group_endpoint.handle(
            path_args={"groupId": group_id, "reportId": report_id, "pageName": page_name},
        )
        return await decode(response, Page)

    async def list_pages(self, report_id: str) -> list[Page]:
        response = await self.list_pages_endpoint.handle(path_args={"reportId": report_id})
        return (await decode(response, ValueList[Page])).value

    async def list_pages_in_group(self, group_id: str, report_id: str) -> list[Page]:
        response = await self.list_pages_in_group_endpoint.handle(
            path_args={"groupId": group_id, "reportId": report_id},
        )
        return (await decode(response, ValueList[Page])).value

    async def get(self, report_id: str) -> Report:
        response = await self.get_endpoint.handle(path_args={"reportId": report_id})
        return await decode(response, Report)

    async def get_in_group(self, group_id: str, report_id: str) -> Report:
        response = await self.get_in_group_endpoint.handle(path_args={"groupId": group_id, "reportId": report_id})
        return await decode(response, Report)

    async def list_in_group(self, group_id: str) -> list[Report]:
        response = await self.list_in_group_endpoint.handle(path_args={"groupId": group_id})
        return (await decode(response, ValueList[Report])).value

    async def rebind(self, report_id: str, request: RebindReportRequest) -> None:
        """Point the report at another dataset."""
        response = await self.rebind_endpoint.handle(path_args={"reportId": report_id}, body=request)
        await release(response)

    async def rebind_in_group(self, group_id: str, report_id: str, request: RebindReportRequest) -> None:
        response = await self.rebind_in_group_endpoint.handle(
            path_args={"groupId": group_id, "reportId": report_id},
            body=request,
        )
        await release(response)

    async def list(self) -> list[Report]:
        response = await self.list_endpoint.handle()
        return (await decode(response, ValueList[Report])).value
