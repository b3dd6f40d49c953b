import json

import pytest
from pytest_httpx import HTTPXMock

from powerbi.types import (
    Column,
    CreateDatasetRequest,
    DatasetMode,
    DatasetOptions,
    DefaultRetentionPolicy,
    Measure,
    PostRowsRequest,
    Table,
)


@pytest.fixture()
def product_table():
    return Table(
        name="Product",
        columns=[
            Column(name="ProductID", data_type="Int64"),
            Column(name="Name", data_type="string"),
            Column(name="ManufacturedOn", data_type="DateTime", format_string="yyyy-MM-dd"),
        ],
        measures=[Measure(name="Count", expression="COUNTROWS(Product)")],
    )


@pytest.mark.unit()
async def test_post_dataset_with_retention_policy(client, product_table, httpx_mock: HTTPXMock):
    httpx_mock.add_response(json={"id": "d1", "name": "SalesMarketing", "defaultRetentionPolicy": "basicFIFO"})
    request_body = CreateDatasetRequest(name="SalesMarketing", default_mode=DatasetMode.PUSH, tables=[product_table])
    dataset = await client.push_datasets.post_dataset(
        request_body,
        DatasetOptions(default_retention_policy=DefaultRetentionPolicy.BASIC_FIFO),
    )
    assert dataset.id == "d1"

    request = httpx_mock.get_request()
    assert request is not None
    assert str(request.url) == "https://api.powerbi.com/v1.0/myorg/datasets?defaultRetentionPolicy=basicFIFO"
    assert json.loads(request.content) == {
        "name": "SalesMarketing",
        "defaultMode": "Push",
        "tables": [
            {
                "name": "Product",
                "columns": [
                    {"name": "ProductID", "dataType": "Int64"},
                    {"name": "Name", "dataType": "string"},
                    {"name": "ManufacturedOn", "dataType": "DateTime", "formatString": "yyyy-MM-dd"},
                ],
                "measures": [{"name": "Count", "expression": "COUNTROWS(Product)"}],
            },
        ],
    }


@pytest.mark.unit()
async def test_post_dataset_in_group_without_options(client, product_table, httpx_mock: HTTPXMock):
    httpx_mock.add_response(json={"id": "d1"})
    await client.push_datasets.post_dataset_in_group("g1", CreateDatasetRequest(name="ds", tables=[product_table]))
    request = httpx_mock.get_request()
    assert request is not None
    assert str(request.url) == "https://api.powerbi.com/v1.0/myorg/groups/g1/datasets"


@pytest.mark.unit()
async def test_post_rows(client, httpx_mock: HTTPXMock):
    httpx_mock.add_response(status_code=200)
    rows = [{"ProductID": 1, "Name": "Adjustable Race", "ManufacturedOn": "2014-07-30T00:00:00Z"}]
    await client.push_datasets.post_rows_in_group("g1", "d1", "Product", PostRowsRequest(rows=rows))
    request = httpx_mock.get_request()
    assert request is not None
    assert request.url.path == "/v1.0/myorg/groups/g1/datasets/d1/tables/Product/rows"
    assert json.loads(request.content) == {"rows": rows}


@pytest.mark.unit()
async def test_delete_rows_escapes_table_name(client, httpx_mock: HTTPXMock):
    httpx_mock.add_response(status_code=200)
    await client.push_datasets.delete_rows("d1", "Sales Orders")
    request = httpx_mock.get_request()
    assert request is not None
    assert request.url.raw_path == b"/v1.0/myorg/datasets/d1/tables/Sales%20Orders/rows"


@pytest.mark.unit()
async def test_list_and_put_table(client, product_table, httpx_mock: HTTPXMock):
    table_data = product_table.model_dump(by_alias=True, exclude_none=True)
    httpx_mock.add_response(json={"value": [table_data]})
    httpx_mock.add_response(json=table_data)

    tables = await client.push_datasets.list_tables("d1")
    updated = await client.push_datasets.put_table("d1", "Product", tables[0])
    assert updated == product_table

    put_request = httpx_mock.get_requests()[1]
    assert put_request.method == "PUT"
    assert json.loads(put_request.content) == table_data
