"""Environment-variable configuration provider."""

import logging
import os
from collections.abc import Mapping

from confchain.adapters.base import TypedLookupMixin
from confchain.domain.exceptions import KeyNotFoundError

logger = logging.getLogger(__name__)


class EnvironmentConfigProvider(TypedLookupMixin):
    """Resolves keys from environment variables.

    The variable name is prefix + key. The environment is read on every
    lookup, so this provider holds no cache.

    Args:
        prefix: Prepended to every key (e.g., "APP_").
        environ: Mapping to read instead of os.environ (for tests).
    """

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None) -> None:
        self.prefix = prefix
        self._environ = environ if environ is not None else os.environ

    def __repr__(self) -> str:
        return f"EnvironmentConfigProvider(prefix='{self.prefix}')"

    def get_string(self, key: str) -> str:
        name = self.prefix + key
        try:
            return self._environ[name]
        except KeyError:
            logger.debug("Environment variable %s not set", name)
            raise KeyNotFoundError(key) from None
