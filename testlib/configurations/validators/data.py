from framework.configuration import CoreConfiguration, HTTPClientConfig


def check_all_core_config(data: dict, actual: CoreConfiguration) -> None:
    expected = data["base_api_url"]
    assert (expected if expected.endswith("/") else expected + "/") == str(actual.base_api_url)


def check_all_http_config(data: dict, actual: HTTPClientConfig) -> None:
    for key, value in data.items():
        assert getattr(actual, key) == value, key
