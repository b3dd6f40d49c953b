from enum import StrEnum

import pytest
from pydantic import Field

from framework.core.handles import InvalidOptionsError, QueryOptions, build_query


class Retention(StrEnum):
    NONE = "None"
    FIFO = "basicFIFO"


class ExpandOptions(QueryOptions):
    expand: str = Field(default="", alias="$expand")


class ListOptions(QueryOptions):
    expand: ExpandOptions = Field(default_factory=ExpandOptions)
    skip: int = Field(default=0, alias="$skip")
    top: int = Field(default=0, alias="$top")
    filter: str = Field(default="", alias="$filter")


class FlagOptions(QueryOptions):
    is_group: bool = Field(default=False, alias="isGroup")
    workspace_v2: bool = Field(default=False, alias="workspaceV2")
    retention: Retention | None = Field(default=None, alias="defaultRetentionPolicy")


class DefaultedOptions(QueryOptions):
    page_size: int = Field(default=100, alias="pageSize")


@pytest.mark.unit()
def test_no_options_leaves_path_untouched():
    assert build_query("groups", None) == "groups"
    assert build_query("groups?keep=1", None) == "groups?keep=1"


@pytest.mark.unit()
def test_all_defaults_yields_no_query():
    assert build_query("groups", ListOptions()) == "groups"


@pytest.mark.unit()
def test_only_set_fields_are_sent():
    assert build_query("groups", ListOptions(top=10, skip=0)) == "groups?$top=10"


@pytest.mark.unit()
def test_declaration_order_and_inline_flattening():
    options = ListOptions(expand=ExpandOptions(expand="users,reports"), skip=5, top=10, filter="name eq 'A'")
    assert options.to_query() == [
        ("$expand", "users,reports"),
        ("$skip", "5"),
        ("$top", "10"),
        ("$filter", "name eq 'A'"),
    ]
    assert build_query("admin/groups", options) == (
        "admin/groups?$expand=users%2Creports&$skip=5&$top=10&$filter=name+eq+%27A%27"
    )


@pytest.mark.unit()
def test_populate_by_alias():
    assert build_query("groups", ListOptions(**{"$top": 3})) == "groups?$top=3"


@pytest.mark.unit()
def test_booleans_and_enums():
    options = FlagOptions(is_group=True, retention=Retention.FIFO)
    assert build_query("datasets", options) == "datasets?isGroup=true&defaultRetentionPolicy=basicFIFO"


@pytest.mark.unit()
def test_false_boolean_is_omitted():
    assert build_query("groups", FlagOptions(workspace_v2=False)) == "groups"


@pytest.mark.unit()
def test_value_equal_to_default_is_omitted():
    assert build_query("items", DefaultedOptions()) == "items"
    assert build_query("items", DefaultedOptions(page_size=100)) == "items"
    assert build_query("items", DefaultedOptions(page_size=5)) == "items?pageSize=5"


@pytest.mark.unit()
def test_existing_query_is_replaced():
    assert build_query("groups?stale=1", ListOptions(top=1)) == "groups?$top=1"


@pytest.mark.unit()
def test_options_are_immutable():
    options = ListOptions(top=1)
    with pytest.raises(ValueError, match="frozen"):
        options.top = 2


@pytest.mark.unit()
@pytest.mark.parametrize("options", [{"$top": 1}, [("$top", "1")], "$top=1"])
def test_invalid_options(options):
    with pytest.raises(InvalidOptionsError):
        build_query("groups", options)
