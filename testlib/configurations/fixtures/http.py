import pytest

from testlib.configurations.helpers import settings_environment


@pytest.fixture()
def http_config_data():
    return {
        "connection_timeout": 1.0,
        "read_timeout": 10.0,
        "write_timeout": 40.0,
        "pool_timeout": 1.0,
        "max_total_connections": 13,
        "max_keepalive_connections": 6,
        "keepalive_expiration": 11,
        "follow_redirects": True,
        "ssl_verify": False,
    }


@pytest.fixture()
def mock_http_env_vars(http_config_data):
    with settings_environment("POWERBI_HTTP_", http_config_data) as environment:
        yield environment
