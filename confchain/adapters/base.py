"""Shared typed accessors for leaf providers.

Leaf providers only need to implement get_string; float and bool lookups
are derived here so every leaf reports conversion failures identically.
"""

from confchain.domain.exceptions import TypeConversionError
from confchain.shared.parsing import (
    BOOL_TYPE_NAME,
    FLOAT_TYPE_NAME,
    parse_bool,
    parse_float,
)


class TypedLookupMixin:
    """Derives get_float and get_bool from a provider's get_string."""

    def get_string(self, key: str) -> str:
        raise NotImplementedError

    def get_float(self, key: str) -> float:
        """Look up a key and parse its value as a float.

        Raises:
            KeyNotFoundError: If the key is absent.
            TypeConversionError: If the value is not a float literal.
        """
        value = self.get_string(key)
        try:
            return parse_float(value)
        except ValueError:
            raise TypeConversionError(key, value, FLOAT_TYPE_NAME) from None

    def get_bool(self, key: str) -> bool:
        """Look up a key and parse its value as a boolean.

        Raises:
            KeyNotFoundError: If the key is absent.
            TypeConversionError: If the value is not a boolean literal.
        """
        value = self.get_string(key)
        try:
            return parse_bool(value)
        except ValueError:
            raise TypeConversionError(key, value, BOOL_TYPE_NAME) from None
