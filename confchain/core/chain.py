"""Chain-of-providers resolution.

A chain consults its members in order and returns the first successful
result. Member failures are recovered locally; if every member fails the
chain raises ConfigUnresolvableError, which hosts treat as fatal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from confchain.domain.exceptions import (
    ConfigError,
    ConfigUnresolvableError,
    LookupAttempt,
    NoProvidersConfiguredError,
)
from confchain.ports.config import ConfigProvider
from confchain.shared.parsing import BOOL_TYPE_NAME, FLOAT_TYPE_NAME, STRING_TYPE_NAME

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChainConfigProvider:
    """Resolves keys against an ordered list of providers.

    The first provider listed has the highest precedence. The chain keeps
    no state between lookups; each call rescans the full list. Chains
    satisfy ConfigProvider themselves and can be nested: an unresolved
    inner chain counts as a failed member of the outer one.

    Example:
        chain = ChainConfigProvider([
            SecretsDirConfigProvider("/run/secrets"),
            EnvironmentConfigProvider(prefix="APP_"),
            FileConfigProvider("defaults.env", base_dir=here),
        ])
        host = chain.get_string("HOST")
    """

    def __init__(self, chain: Iterable[ConfigProvider]) -> None:
        self._chain: tuple[ConfigProvider, ...] = tuple(chain)

    def __repr__(self) -> str:
        return f"ChainConfigProvider({len(self._chain)} providers)"

    def __len__(self) -> int:
        return len(self._chain)

    @property
    def providers(self) -> tuple[ConfigProvider, ...]:
        """Member providers in precedence order."""
        return self._chain

    def get_string(self, key: str) -> str:
        """Resolve a string value.

        Raises:
            ConfigUnresolvableError: If no member resolves the key.
        """
        return self._lookup(key, STRING_TYPE_NAME, lambda p: p.get_string(key))

    def get_float(self, key: str) -> float:
        """Resolve a float value.

        A member whose value does not parse as a float is skipped, so a
        later member may still supply a valid value.

        Raises:
            ConfigUnresolvableError: If no member resolves the key as a float.
        """
        return self._lookup(key, FLOAT_TYPE_NAME, lambda p: p.get_float(key))

    def get_bool(self, key: str) -> bool:
        """Resolve a boolean value.

        Raises:
            ConfigUnresolvableError: If no member resolves the key as a bool.
        """
        return self._lookup(key, BOOL_TYPE_NAME, lambda p: p.get_bool(key))

    def _lookup(
        self,
        key: str,
        type_name: str,
        accessor: Callable[[ConfigProvider], T],
    ) -> T:
        if not self._chain:
            raise NoProvidersConfiguredError(key, type_name)

        attempts: list[LookupAttempt] = []
        for position, provider in enumerate(self._chain):
            try:
                return accessor(provider)
            except ConfigError as e:
                logger.debug(
                    "Provider #%d (%r) could not resolve %s: %s",
                    position,
                    provider,
                    key,
                    e.message,
                )
                attempts.append(LookupAttempt(position, repr(provider), e))

        raise ConfigUnresolvableError(key, type_name, attempts) from attempts[-1].error
