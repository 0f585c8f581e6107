"""Configuration provider port.

Defines the interface for typed configuration lookups by key.
"""

from typing import Protocol


class ConfigProvider(Protocol):
    """Protocol for a source of typed configuration values.

    Implemented by leaf providers (files, environment, secrets, defaults)
    and by ChainConfigProvider, so chains can be nested.
    """

    def get_string(self, key: str) -> str:
        """Look up the raw string value for a key.

        Args:
            key: Configuration key.

        Returns:
            The value as stored.

        Raises:
            ConfigError: If the key cannot be resolved by this provider.
        """
        ...

    def get_float(self, key: str) -> float:
        """Look up a value and parse it as a 64-bit float.

        Raises:
            ConfigError: TypeConversionError if the value is not a float.
        """
        ...

    def get_bool(self, key: str) -> bool:
        """Look up a value and parse it as a boolean.

        Raises:
            ConfigError: TypeConversionError if the value is not a boolean.
        """
        ...
