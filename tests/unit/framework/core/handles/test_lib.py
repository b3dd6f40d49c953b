import pytest
from httpx import URL

from framework.core.handles import MalformedHeadersError
from framework.core.handles.lib import ensure_trailing_slash, format_path, pair_headers, resolve_url


@pytest.mark.unit()
@pytest.mark.parametrize(
    ("base_url", "expected"),
    [
        ("https://api.powerbi.com/v1.0/myorg", "https://api.powerbi.com/v1.0/myorg/"),
        ("https://api.powerbi.com/v1.0/myorg/", "https://api.powerbi.com/v1.0/myorg/"),
        (URL("https://api.powerbi.com"), "https://api.powerbi.com/"),
    ],
)
def test_ensure_trailing_slash(base_url, expected):
    assert ensure_trailing_slash(base_url) == URL(expected)


@pytest.mark.unit()
def test_resolve_url_keeps_base_path():
    base = URL("https://api.powerbi.com/v1.0/myorg/")
    assert resolve_url(base, "groups/1") == URL("https://api.powerbi.com/v1.0/myorg/groups/1")
    assert resolve_url(base, "//groups") == URL("https://api.powerbi.com/v1.0/myorg/groups")


@pytest.mark.unit()
def test_pair_headers():
    assert pair_headers(()) == []
    assert pair_headers(("A", "1", "B", "2", "A", "3")) == [("A", "1"), ("B", "2"), ("A", "3")]
    with pytest.raises(MalformedHeadersError):
        pair_headers(("A", "1", "B"))


@pytest.mark.unit()
def test_format_path():
    assert format_path("groups") == "groups"
    assert format_path("groups/{groupId}/users/{user}", {"groupId": "g1", "user": "a@b.com"}) == (
        "groups/g1/users/a@b.com"
    )
    assert format_path("reports/{reportId}/pages/{pageName}", {"reportId": "r1", "pageName": "Page 1/2"}) == (
        "reports/r1/pages/Page%201%2F2"
    )
