"""In-memory configuration provider, typically the built-in defaults layer."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from confchain.adapters.base import TypedLookupMixin
from confchain.domain.exceptions import KeyNotFoundError


class MappingConfigProvider(TypedLookupMixin):
    """Serves values from a fixed mapping.

    Values are converted with str() at construction, so defaults can be
    declared with native types (e.g., {"PORT": 8080, "DEBUG": False}).
    Booleans become "true"/"false" so they parse back as booleans.
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = MappingProxyType(
            {key: _to_raw(value) for key, value in values.items()}
        )

    def __repr__(self) -> str:
        return f"MappingConfigProvider({len(self._values)} keys)"

    def get_string(self, key: str) -> str:
        try:
            return self._values[key]
        except KeyError:
            raise KeyNotFoundError(key) from None


def _to_raw(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
