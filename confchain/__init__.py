"""confchain - layered, typed configuration lookups.

Public API:
    ConfigProvider: protocol implemented by every provider.
    FileConfigProvider, EnvironmentConfigProvider, MappingConfigProvider,
    SecretsDirConfigProvider: leaf providers.
    ChainConfigProvider: first-match-wins composite.
"""

from confchain.adapters.env.environment_provider import EnvironmentConfigProvider
from confchain.adapters.file.file_config_provider import FileConfigProvider
from confchain.adapters.memory.mapping_provider import MappingConfigProvider
from confchain.adapters.secrets.secrets_dir_provider import SecretsDirConfigProvider
from confchain.core.chain import ChainConfigProvider
from confchain.domain.exceptions import (
    ConfigError,
    ConfigUnresolvableError,
    KeyNotFoundError,
    NoProvidersConfiguredError,
    ParsingError,
    TypeConversionError,
    UnknownConfigError,
)
from confchain.entrypoints.boundary import exit_on_unresolvable
from confchain.ports.config import ConfigProvider

__all__ = [
    "ChainConfigProvider",
    "ConfigError",
    "ConfigProvider",
    "ConfigUnresolvableError",
    "EnvironmentConfigProvider",
    "FileConfigProvider",
    "KeyNotFoundError",
    "MappingConfigProvider",
    "NoProvidersConfiguredError",
    "ParsingError",
    "SecretsDirConfigProvider",
    "TypeConversionError",
    "UnknownConfigError",
    "exit_on_unresolvable",
]
