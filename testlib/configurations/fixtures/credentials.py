import pytest

from testlib.configurations.helpers import settings_environment


@pytest.fixture()
def mock_credentials_api_token_env_vars():
    with settings_environment("POWERBI_", {"access_token": "xxxxx"}) as environment:
        yield environment


@pytest.fixture()
def mock_credentials_azure_service_principal_env_vars():
    values = {"client_id": "xxxx", "client_secret": "yyyy", "tenant_id": "123"}
    with settings_environment("POWERBI_AZURE_", values) as environment:
        yield environment


@pytest.fixture()
def mock_credentials_azure_basic_oauth_env_vars():
    values = {
        "client_id": "xxxx",
        "username": "xxx",
        "password": "yyy",
        "tenant_id": "123",
        "authority": "https://azure.login/",
    }
    with settings_environment("POWERBI_AZURE_", values) as environment:
        yield environment
