__all__ = (
    "OpenEnum",
    "PowerBIModel",
    "ValueList",
    "PrincipalType",
    "ServicePrincipalProfile",
    "User",
    "UserMetadata",
    "DatasourceConnectionDetails",
)

from enum import StrEnum
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")
E = TypeVar("E", bound=StrEnum)

OpenEnum = Annotated[E | str, Field(union_mode="left_to_right")]
"""
An enumerated value in a response. Known values decode to the enum member, values added to the service later are
kept as plain strings.
"""


class PowerBIModel(BaseModel):
    """
    Base of every request and response payload.

    Attributes are snake_case and travel as their camelCase alias. Unknown response fields are ignored and fields left
    as None are not sent.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ValueList(PowerBIModel, Generic[T]):
    """The `{"value": [...]}` envelope of every list response. A missing value is an empty list."""

    value: list[T] = Field(default_factory=list)


class PrincipalType(StrEnum):
    NONE = "None"
    USER = "User"
    GROUP = "Group"
    APP = "App"


class ServicePrincipalProfile(PowerBIModel):
    """Only relevant for Power BI Embedded multi-tenancy solutions."""

    display_name: str | None = None
    id: str | None = None


class User(PowerBIModel):
    identifier: str
    principal_type: OpenEnum[PrincipalType]
    display_name: str | None = None
    email_address: str | None = None
    graph_id: str | None = None
    profile: ServicePrincipalProfile | None = None
    user_type: str | None = None


class UserMetadata(PowerBIModel):
    display_name: str | None = None
    email_address: str | None = None
    graph_id: str | None = None
    identifier: str | None = None
    principal_type: OpenEnum[PrincipalType] | None = None
    profile: ServicePrincipalProfile | None = None
    user_type: str | None = None


class DatasourceConnectionDetails(PowerBIModel):
    account: str | None = None
    class_info: str | None = None
    database: str | None = None
    domain: str | None = None
    email_address: str | None = None
    kind: str | None = None
    login_server: str | None = None
    path: str | None = None
    server: str | None = None
    url: str | None = None
