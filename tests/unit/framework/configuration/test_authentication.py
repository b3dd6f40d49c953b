from io import StringIO

import pytest
from pydantic import ValidationError

from framework.configuration import (
    ApiTokenConfiguration,
    AzureBasicOauthConfiguration,
    AzureServicePrincipalConfiguration,
)


@pytest.mark.unit()
def test_api_token_is_secret(mock_credentials_api_token_env_vars):
    config = ApiTokenConfiguration()
    with StringIO() as f:
        print(config.access_token, file=f)  # noqa: T201
        contents = f.getvalue()
    assert all(c == "*" for c in contents.strip())
    assert config.access_token.get_secret_value() == "xxxxx"


@pytest.mark.unit()
def test_api_token_empty_is_invalid():
    with pytest.raises(ValidationError):
        ApiTokenConfiguration(access_token="")


@pytest.mark.unit()
def test_service_principal_from_environment(mock_credentials_azure_service_principal_env_vars):
    config = AzureServicePrincipalConfiguration()
    assert config.client_id == "xxxx"
    assert config.client_secret.get_secret_value() == "yyyy"
    assert config.tenant_id == "123"
    assert config.scope == ""


@pytest.mark.unit()
def test_basic_oauth_from_environment(mock_credentials_azure_basic_oauth_env_vars):
    config = AzureBasicOauthConfiguration()
    assert config.username == "xxx"
    assert config.password.get_secret_value() == "yyy"
    assert str(config.authority) == "https://azure.login/"


@pytest.mark.unit()
def test_basic_oauth_default_authority():
    config = AzureBasicOauthConfiguration(client_id="c", username="u", password="p", tenant_id="t")
    assert str(config.authority) == "https://login.microsoftonline.com/"
