import logging
from typing import Any, ClassVar, Literal, TypeVar, cast

from pydantic import ValidationError
from pydantic_settings import BaseSettings

from framework.configuration.authentication import (
    ApiTokenConfiguration,
    AzureBasicOauthConfiguration,
    AzureServicePrincipalConfiguration,
)
from framework.configuration.core import DEFAULT_CONFIGURATION_FILE_PATHS, CoreConfiguration
from framework.configuration.http import HTTPClientConfig
from toolkit.configuration.sources import read_configuration_file

LOGGER = logging.getLogger(__name__)

CONFIGURATION_ID = Literal[
    "auth_api_token",
    "auth_azure_basic_oauth",
    "auth_azure_spn",
    "core",
    "http",
]
"""Section names of powerbi.toml."""

SECTIONS: dict[CONFIGURATION_ID, type[BaseSettings]] = {
    "auth_api_token": ApiTokenConfiguration,
    "auth_azure_basic_oauth": AzureBasicOauthConfiguration,
    "auth_azure_spn": AzureServicePrincipalConfiguration,
    "core": CoreConfiguration,
    "http": HTTPClientConfig,
}

ALWAYS_LOADED: tuple[CONFIGURATION_ID, ...] = ("core", "http")

CONF_T = TypeVar("CONF_T", bound=BaseSettings)


class ConfigurationRegistry:
    """
    Configurations shared by every part of the client.

    All instances see the same loaded sections. A section is built once from powerbi.toml, the environment filling
    in the keys the file does not set, and then served from memory. The `core` and `http` sections are loaded by the
    first instance created.
    """

    _loaded: ClassVar[dict[CONFIGURATION_ID, BaseSettings]] = {}

    def __init__(self) -> None:
        for section in ALWAYS_LOADED:
            if section not in self._loaded:
                self._load(section, SECTIONS[section])

    @classmethod
    def reset(cls) -> None:
        """Forget every loaded section, so the next load reads powerbi.toml again."""
        cls._loaded.clear()
        read_configuration_file.cache_clear()

    @classmethod
    def loaded(cls) -> tuple[CONFIGURATION_ID, ...]:
        return tuple(cls._loaded)

    def _load(self, configuration_id: CONFIGURATION_ID, configuration_class: type[CONF_T]) -> CONF_T:
        file_values = read_configuration_file(
            *DEFAULT_CONFIGURATION_FILE_PATHS,
            section=configuration_id,
            missing_ok=True,
        )
        configuration = configuration_class(**file_values)
        self._loaded[configuration_id] = configuration
        return configuration

    def register(self, configuration_id: CONFIGURATION_ID, configuration_class: type[CONF_T] | None = None) -> None:
        """Load a section. Loading one that is already present raises a KeyError; use add() to replace it."""
        if configuration_id in self._loaded:
            raise KeyError(f"Configuration '{configuration_id}' already registered")
        self._load(configuration_id, configuration_class or SECTIONS[configuration_id])

    def add(self, configuration_id: CONFIGURATION_ID, configuration: BaseSettings) -> None:
        self._loaded[configuration_id] = configuration

    def mutate(self, configuration_id: CONFIGURATION_ID, configuration_class: type[CONF_T], **kwargs: Any) -> CONF_T:
        """Return a copy of a loaded section with some keys replaced. The loaded section is unchanged."""
        current = self.lookup(configuration_id, configuration_class)
        return configuration_class(**current.model_dump(exclude=set(kwargs)), **kwargs)

    def lookup(self, configuration_id: CONFIGURATION_ID, configuration_class: type[CONF_T]) -> CONF_T:
        LOGGER.debug("Looking up %s as %s", configuration_id, configuration_class.__name__)
        if configuration_id not in self._loaded:
            raise KeyError(f"Unknown configuration {configuration_id}, register() configuration.")
        return cast(CONF_T, self._loaded[configuration_id])

    def available(self, configuration_id: CONFIGURATION_ID, configuration_class: type[CONF_T] | None = None) -> bool:
        """Load a section if it can be built from the file and environment; report whether it is loaded."""
        if configuration_id not in self._loaded:
            try:
                self._load(configuration_id, configuration_class or SECTIONS[configuration_id])
            except ValidationError:
                LOGGER.debug("Configuration %s not available", configuration_id, exc_info=True)
                return False
        return True
