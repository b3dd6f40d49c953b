from httpx import URL, AsyncClient

from framework.core.handles import decode, release
from powerbi.handles import (
    PowerBIBindDatasetToGatewayEndpoint,
    PowerBICancelDatasetRefreshEndpoint,
    PowerBIDeleteDatasetEndpoint,
    PowerBIDiscoverDatasetGatewaysEndpoint,
    PowerBIExecuteDatasetQueriesEndpoint,
    PowerBIGetDatasetEndpoint,
    PowerBIGetDirectQueryRefreshScheduleEndpoint,
    PowerBIListDatasetParametersEndpoint,
    PowerBIListDatasetRefreshEndpoint,
    PowerBIListDatasetsEndpoint,
    PowerBIListDatasetUsersEndpoint,
    PowerBIListDatasourcesEndpoint,
    PowerBIListGatewayDatasourcesEndpoint,
    PowerBIListUpstreamDataflowsEndpoint,
    PowerBIRefreshDatasetEndpoint,
)
from powerbi.types import (
    BindToGatewayRequest,
    Dataset,
    DatasetExecuteQueriesRequest,
    DatasetExecuteQueriesResponse,
    DatasetToDataflowLink,
    DatasetUser,
    Datasource,
    DirectQueryRefreshSchedule,
    Gateway,
    GatewayDatasource,
    MashupParameter,
    Refresh,
    RefreshHistoryOptions,
    RefreshRequest,
    ValueList,
)

from .base import Service


class DatasetGroupService(Service):
    """Datasets of a given workspace."""

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        super().__init__(base_url, client)
        self.bind_to_gateway_endpoint = self._endpoint(PowerBIBindDatasetToGatewayEndpoint)
        self.cancel_refresh_endpoint = self._endpoint(PowerBICancelDatasetRefreshEndpoint)
        self.delete_endpoint = self._endpoint(PowerBIDeleteDatasetEndpoint)
        self.discover_gateways_endpoint = self._endpoint(PowerBIDiscoverDatasetGatewaysEndpoint)
        self.execute_queries_endpoint = self._endpoint(PowerBIExecuteDatasetQueriesEndpoint)
        self.get_endpoint = self._endpoint(PowerBIGetDatasetEndpoint)
        self.upstream_dataflows_endpoint = self._endpoint(PowerBIListUpstreamDataflowsEndpoint)
        self.list_users_endpoint = self._endpoint(PowerBIListDatasetUsersEndpoint)
        self.list_endpoint = self._endpoint(PowerBIListDatasetsEndpoint)
        self.datasources_endpoint = self._endpoint(PowerBIListDatasourcesEndpoint)
        self.refresh_schedule_endpoint = self._endpoint(PowerBIGetDirectQueryRefreshScheduleEndpoint)
        self.gateway_datasources_endpoint = self._endpoint(PowerBIListGatewayDatasourcesEndpoint)
        self.parameters_endpoint = self._endpoint(PowerBIListDatasetParametersEndpoint)
        self.list_refreshes_endpoint = self._endpoint(PowerBIListDatasetRefreshEndpoint)
        self.refresh_endpoint = self._endpoint(PowerBIRefreshDatasetEndpoint)

    async def bind_to_gateway(self, group_id: str, dataset_id: str, request: BindToGatewayRequest) -> None:
        response = await self.bind_to_gateway_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
            body=request,
        )
        await release(response)

    async def cancel_refresh(self, group_id: str, dataset_id: str, refresh_id: str) -> None:
        response = await self.cancel_refresh_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id, "refreshId": refresh_id},
        )
        await release(response)

    async def delete(self, group_id: str, dataset_id: str) -> None:
        response = await self.delete_endpoint.handle(path_args={"groupId": group_id, "datasetId": dataset_id})
        await release(response)

    async def discover_gateways(self, group_id: str, dataset_id: str) -> list[Gateway]:
        """Gateways the dataset can be bound to."""
        response = await self.discover_gateways_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
        )
        return (await decode(response, ValueList[Gateway])).value

    async def execute_queries(
        self,
        group_id: str,
        dataset_id: str,
        request: DatasetExecuteQueriesRequest,
    ) -> DatasetExecuteQueriesResponse:
        """Run DAX queries against the dataset."""
        response = await self.execute_queries_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
            body=request,
        )
        return await decode(response, DatasetExecuteQueriesResponse)

    async def get(self, group_id: str, dataset_id: str) -> Dataset:
        response = await self.get_endpoint.handle(path_args={"groupId": group_id, "datasetId": dataset_id})
        return await decode(response, Dataset)

    async def list_upstream_dataflows(self, group_id: str) -> list[DatasetToDataflowLink]:
        response = await self.upstream_dataflows_endpoint.handle(path_args={"groupId": group_id})
        return (await decode(response, ValueList[DatasetToDataflowLink])).value

    async def list_users(self, group_id: str, dataset_id: str) -> list[DatasetUser]:
        response = await self.list_users_endpoint.handle(path_args={"groupId": group_id, "datasetId": dataset_id})
        return (await decode(response, ValueList[DatasetUser])).value

    async def list_datasources(self, group_id: str, dataset_id: str) -> list[Datasource]:
        response = await self.datasources_endpoint.handle(path_args={"groupId": group_id, "datasetId": dataset_id})
        return (await decode(response, ValueList[Datasource])).value

    async def get_direct_query_refresh_schedule(self, group_id: str, dataset_id: str) -> DirectQueryRefreshSchedule:
        response = await self.refresh_schedule_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
        )
        return await decode(response, DirectQueryRefreshSchedule)

    async def list_gateway_datasources(self, group_id: str, dataset_id: str) -> list[GatewayDatasource]:
        response = await self.gateway_datasources_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
        )
        return (await decode(response, ValueList[GatewayDatasource])).value

    async def list_parameters(self, group_id: str, dataset_id: str) -> list[MashupParameter]:
        response = await self.parameters_endpoint.handle(path_args={"groupId": group_id, "datasetId": dataset_id})
        return (await decode(response, ValueList[MashupParameter])).value

    async def list_refreshes(
        self,
        group_id: str,
        dataset_id: str,
        options: RefreshHistoryOptions | None = None,
    ) -> list[Refresh]:
        """Refresh history of the dataset, most recent first."""
        response = await self.list_refreshes_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
            options=options,
        )
        return (await decode(response, ValueList[Refresh])).value

    async def refresh(self, group_id: str, dataset_id: str, request: RefreshRequest | None = None) -> None:
        """Trigger a refresh. The service accepts it asynchronously; poll `list_refreshes` for the outcome."""
        response = await self.refresh_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
            body=request if request is not None else RefreshRequest(),
        )
        await release(response)

    # Must stay last: it shadows the builtin `list` for the rest of the class body.
    async def list(self, group_id: str) -> list[Dataset]:
        response = await self.list_endpoint.handle(path_args={"groupId": group_id})
        return (await decode(response, ValueList[Dataset])).value


class DatasetsService:
    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        self.group = DatasetGroupService(base_url, client)
