from httpx import URL, AsyncClient

from framework.core.handles import decode, release
from powerbi.handles import (
    PowerBIDeleteRowsEndpoint,
    PowerBIDeleteRowsInGroupEndpoint,
    PowerBIListTablesEndpoint,
    PowerBIListTablesInGroupEndpoint,
    PowerBIPostDatasetEndpoint,
    PowerBIPostDatasetInGroupEndpoint,
    PowerBIPostRowsEndpoint,
    PowerBIPostRowsInGroupEndpoint,
    PowerBIPutTableEndpoint,
    PowerBIPutTableInGroupEndpoint,
)
from powerbi.types import CreateDatasetRequest, Dataset, DatasetOptions, PostRowsRequest, Table, ValueList

from .base import Service


class PushDatasetsService(Service):
    """
    Datasets whose rows are pushed through the API instead of refreshed from a source.

    Every operation addresses My workspace; its `_in_group` counterpart addresses the given workspace.
    """

    def __init__(self, base_url: URL | str, client: AsyncClient) -> None:
        super().__init__(base_url, client)
        self.delete_rows_endpoint = self._endpoint(PowerBIDeleteRowsEndpoint)
        self.delete_rows_in_group_endpoint = self._endpoint(PowerBIDeleteRowsInGroupEndpoint)
        self.list_tables_endpoint = self._endpoint(PowerBIListTablesEndpoint)
        self.list_tables_in_group_endpoint = self._endpoint(PowerBIListTablesInGroupEndpoint)
        self.post_dataset_endpoint = self._endpoint(PowerBIPostDatasetEndpoint)
        self.post_dataset_in_group_endpoint = self._endpoint(PowerBIPostDatasetInGroupEndpoint)
        self.post_rows_endpoint = self._endpoint(PowerBIPostRowsEndpoint)
        self.post_rows_in_group_endpoint = self._endpoint(PowerBIPostRowsInGroupEndpoint)
        self.put_table_endpoint = self._endpoint(PowerBIPutTableEndpoint)
        self.put_table_in_group_endpoint = self._endpoint(PowerBIPutTableInGroupEndpoint)

    async def delete_rows(self, dataset_id: str, table_name: str) -> None:
        """Delete every row of the table."""
        response = await self.delete_rows_endpoint.handle(path_args={"datasetId": dataset_id, "tableName": table_name})
        await release(response)

    async def delete_rows_in_group(self, group_id: str, dataset_id: str, table_name: str) -> None:
        response = await self.delete_rows_in_group_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id, "tableName": table_name},
        )
        await release(response)

    async def list_tables(self, dataset_id: str) -> list[Table]:
        response = await self.list_tables_endpoint.handle(path_args={"datasetId": dataset_id})
        return (await decode(response, ValueList[Table])).value

    async def list_tables_in_group(self, group_id: str, dataset_id: str) -> list[Table]:
        response = await self.list_tables_in_group_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id},
        )
        return (await decode(response, ValueList[Table])).value

    async def post_dataset(self, request: CreateDatasetRequest, options: DatasetOptions | None = None) -> Dataset:
        response = await self.post_dataset_endpoint.handle(options=options, body=request)
        return await decode(response, Dataset)

    async def post_dataset_in_group(
        self,
        group_id: str,
        request: CreateDatasetRequest,
        options: DatasetOptions | None = None,
    ) -> Dataset:
        response = await self.post_dataset_in_group_endpoint.handle(
            path_args={"groupId": group_id},
            options=options,
            body=request,
        )
        return await decode(response, Dataset)

    async def post_rows(self, dataset_id: str, table_name: str, request: PostRowsRequest) -> None:
        response = await self.post_rows_endpoint.handle(
            path_args={"datasetId": dataset_id, "tableName": table_name},
            body=request,
        )
        await release(response)

    async def post_rows_in_group(
        self,
        group_id: str,
        dataset_id: str,
        table_name: str,
        request: PostRowsRequest,
    ) -> None:
        response = await self.post_rows_in_group_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id, "tableName": table_name},
            body=request,
        )
        await release(response)

    async def put_table(self, dataset_id: str, table_name: str, table: Table) -> Table:
        """Update the metadata and schema of a table."""
        response = await self.put_table_endpoint.handle(
            path_args={"datasetId": dataset_id, "tableName": table_name},
            body=table,
        )
        return await decode(response, Table)

    async def put_table_in_group(self, group_id: str, dataset_id: str, table_name: str, table: Table) -> Table:
        response = await self.put_table_in_group_endpoint.handle(
            path_args={"groupId": group_id, "datasetId": dataset_id, "tableName": table_name},
            body=table,
        )
        return await decode(response, Table)
