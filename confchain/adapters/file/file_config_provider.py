"""File-backed configuration provider.

Reads a flat KEY=VALUE text file into memory on first lookup and serves
every later lookup from that cache. A missing or unopenable file is an
empty store; a malformed file fails the load and is retried on the next
lookup.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from confchain.adapters.base import TypedLookupMixin
from confchain.domain.exceptions import (
    ConfigError,
    KeyNotFoundError,
    UnknownConfigError,
)
from confchain.shared.parsing import parse_lines

logger = logging.getLogger(__name__)


class LoadState(Enum):
    """Lifecycle of a file provider's store."""

    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    FAILED = "failed"


def resolve_config_path(path: str | Path, base_dir: str | Path | None = None) -> Path:
    """Resolve a config path to a normalized absolute path.

    Args:
        path: Absolute path, or path relative to base_dir.
        base_dir: Directory relative paths are joined to. Defaults to the
            current working directory.

    Returns:
        Absolute, normalized path. Symlinks are not followed.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        root = Path(base_dir) if base_dir is not None else Path.cwd()
        candidate = root / candidate
    return Path(os.path.abspath(candidate))


def load_store(path: Path) -> dict[str, str]:
    """Read and parse a KEY=VALUE file.

    Args:
        path: File to read.

    Returns:
        Parsed mapping, or an empty mapping if the file cannot be opened.

    Raises:
        ParsingError: If any non-empty line is malformed.
        UnknownConfigError: If reading fails after the file was opened.
    """
    try:
        f = path.open("r", encoding="utf-8", newline="\n")
    except OSError as e:
        logger.debug("Config file %s not available (%s), using empty store", path, e)
        return {}

    with f:
        try:
            store = parse_lines(f, source=str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise UnknownConfigError(
                f"could not read from file with path '{path}'", e
            ) from e

    logger.debug("Loaded %d config keys from %s", len(store), path)
    return store


class FileConfigProvider(TypedLookupMixin):
    """Configuration provider backed by a flat KEY=VALUE file.

    The store is populated at most once. Loading is guarded by a lock with
    double-checked state so concurrent first lookups parse the file once.
    Once loaded the store is read-only for the provider's lifetime.

    Thread Safety:
        Safe to share between threads. Lookups after a successful load do
        not take the lock.

    Example:
        provider = FileConfigProvider("conf/app.env", base_dir=Path(__file__).parent)
        port = provider.get_float("PORT")
    """

    def __init__(self, path: str | Path, base_dir: str | Path | None = None) -> None:
        """Initialize the provider.

        Args:
            path: Backing file, absolute or relative to base_dir.
            base_dir: Directory relative paths resolve against. Defaults
                to the current working directory at construction time.
        """
        self.path = resolve_config_path(path, base_dir)
        self._store: Mapping[str, str] | None = None
        self._state = LoadState.UNINITIALIZED
        self._last_error: ConfigError | None = None
        self._load_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"FileConfigProvider('{self.path}')"

    @property
    def state(self) -> LoadState:
        """Current load state of the store."""
        return self._state

    @property
    def last_error(self) -> ConfigError | None:
        """Error from the most recent failed load, if the last load failed."""
        return self._last_error

    def get_string(self, key: str) -> str:
        """Look up the raw value for a key, loading the file if needed.

        Raises:
            KeyNotFoundError: If the key is absent from the store.
            ParsingError: If the file is malformed.
            UnknownConfigError: If the file could not be read.
        """
        store = self._get_store()
        try:
            return store[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def _get_store(self) -> Mapping[str, str]:
        store = self._store
        if store is not None:
            return store

        with self._load_lock:
            # Another thread may have loaded while we waited
            if self._store is None:
                try:
                    loaded = load_store(self.path)
                except ConfigError as e:
                    self._state = LoadState.FAILED
                    self._last_error = e
                    logger.warning("Failed to load config file %s: %s", self.path, e)
                    raise
                self._store = MappingProxyType(loaded)
                self._state = LoadState.LOADED
                self._last_error = None
            return self._store
