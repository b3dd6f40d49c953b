import pytest

from framework.configuration import CoreConfiguration
from registry import ConfigurationRegistry
from testlib.configurations.helpers import settings_environment


@pytest.fixture(autouse=True)
def _clear_config_registry() -> None:
    # Loaded sections are shared by every registry instance
    ConfigurationRegistry.reset()


@pytest.fixture()
def core_config_data():
    return {"base_api_url": "https://api.example.com/v1.0/myorg"}


@pytest.fixture()
def mock_core_env_vars(core_config_data):
    with settings_environment("POWERBI_", core_config_data) as environment:
        yield environment


@pytest.fixture()
def core_config(core_config_data):
    return CoreConfiguration(**core_config_data)
