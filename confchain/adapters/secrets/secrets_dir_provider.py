"""Secrets-directory configuration provider.

Reads one file per key from a directory, the layout used by container
secret mounts (e.g., /run/secrets/postgres-password).
"""

from __future__ import annotations

import logging
from pathlib import Path

from confchain.adapters.base import TypedLookupMixin
from confchain.domain.exceptions import KeyNotFoundError, UnknownConfigError

logger = logging.getLogger(__name__)


class SecretsDirConfigProvider(TypedLookupMixin):
    """Resolves each key to the contents of a same-named file.

    A single trailing newline is stripped from the file contents. Files are
    read on every lookup. Keys that are not plain file names (path
    separators, "." or "..") never match.

    Args:
        directory: Directory holding one file per secret.
        suffix: Optional file name suffix (e.g., ".txt").
    """

    def __init__(self, directory: str | Path, suffix: str = "") -> None:
        self.directory = Path(directory)
        self.suffix = suffix

    def __repr__(self) -> str:
        return f"SecretsDirConfigProvider('{self.directory}')"

    def get_string(self, key: str) -> str:
        """Read the secret file for a key.

        Raises:
            KeyNotFoundError: If the key is not a plain name or no file exists.
            UnknownConfigError: If the file exists but cannot be read.
        """
        if not _is_plain_name(key):
            raise KeyNotFoundError(key)

        path = self.directory / f"{key}{self.suffix}"
        if not path.is_file():
            raise KeyNotFoundError(key)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise UnknownConfigError(
                f"could not read secret file with path '{path}'", e
            ) from e

        logger.debug("Read secret %s from %s", key, self.directory)
        if content.endswith("\r\n"):
            return content[:-2]
        if content.endswith("\n"):
            return content[:-1]
        return content


def _is_plain_name(key: str) -> bool:
    if not key or key in (".", ".."):
        return False
    return not any(ch in key for ch in ("/", "\\", "\x00"))
