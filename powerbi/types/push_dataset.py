__all__ = (
    "Column",
    "CreateDatasetRequest",
    "DatasetMode",
    "DatasetOptions",
    "DefaultRetentionPolicy",
    "Measure",
    "PostRowsRequest",
    "Relationship",
    "Table",
)

from enum import StrEnum

from pydantic import Field

from framework.core.handles import QueryOptions
from toolkit.more_typing import JSON_DICT

from .common import PowerBIModel


class DatasetMode(StrEnum):
    AS_AZURE = "AsAzure"
    AS_ON_PREM = "AsOnPrem"
    PUSH = "Push"
    PUSH_STREAMING = "PushStreaming"
    STREAMING = "Streaming"


class DefaultRetentionPolicy(StrEnum):
    NONE = "None"
    BASIC_FIFO = "basicFIFO"


class Column(PowerBIModel):
    name: str
    data_type: str
    """Int64, Double, Boolean, Datetime, String or Decimal."""
    format_string: str | None = None
    data_category: str | None = None
    is_hidden: bool | None = None
    sort_by_column: str | None = None
    summarize_by: str | None = None


class Measure(PowerBIModel):
    name: str
    expression: str
    format_string: str | None = None
    description: str | None = None
    is_hidden: bool | None = None


class Table(PowerBIModel):
    name: str
    columns: list[Column] | None = None
    measures: list[Measure] | None = None
    rows: list[JSON_DICT] | None = None
    description: str | None = None
    is_hidden: bool | None = None


class Relationship(PowerBIModel):
    name: str
    from_table: str
    from_column: str
    to_table: str
    to_column: str
    cross_filtering_behavior: str | None = None


class CreateDatasetRequest(PowerBIModel):
    name: str
    tables: list[Table]
    default_mode: DatasetMode | None = None
    relationships: list[Relationship] | None = None


class PostRowsRequest(PowerBIModel):
    rows: list[JSON_DICT]


class DatasetOptions(QueryOptions):
    default_retention_policy: DefaultRetentionPolicy | None = Field(default=None, alias="defaultRetentionPolicy")
