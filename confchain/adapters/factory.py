"""Factory for assembling provider chains.

Keeps the CLI and host entry points free from direct adapter imports.
Layers are ordered by precedence: secrets, environment, files (in the
order given), then built-in defaults.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from confchain.core.chain import ChainConfigProvider
from confchain.ports.config import ConfigProvider


class ProviderFactory:
    """Factory for creating configuration providers.

    Args:
        base_dir: Directory relative file paths resolve against. Defaults to
            the current working directory.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base_dir = base_dir

    def create_file_provider(self, path: str | Path) -> ConfigProvider:
        """Create a file-backed provider for a KEY=VALUE file."""
        from confchain.adapters.file.file_config_provider import FileConfigProvider

        return FileConfigProvider(path, base_dir=self._base_dir)

    def create_chain(
        self,
        files: Sequence[str | Path] = (),
        *,
        env_prefix: str | None = None,
        secrets_dir: str | Path | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> ChainConfigProvider:
        """Assemble a chain from the requested layers.

        Args:
            files: KEY=VALUE files, highest precedence first.
            env_prefix: Include an environment layer with this prefix.
                None leaves the environment out.
            secrets_dir: Include a secrets-directory layer.
            defaults: Include an in-memory defaults layer, lowest precedence.

        Returns:
            ChainConfigProvider over the requested layers.
        """
        chain: list[ConfigProvider] = []

        if secrets_dir is not None:
            from confchain.adapters.secrets.secrets_dir_provider import (
                SecretsDirConfigProvider,
            )

            directory = Path(secrets_dir)
            if not directory.is_absolute() and self._base_dir is not None:
                directory = Path(self._base_dir) / directory
            chain.append(SecretsDirConfigProvider(directory))

        if env_prefix is not None:
            from confchain.adapters.env.environment_provider import (
                EnvironmentConfigProvider,
            )

            chain.append(EnvironmentConfigProvider(prefix=env_prefix))

        chain.extend(self.create_file_provider(path) for path in files)

        if defaults:
            from confchain.adapters.memory.mapping_provider import MappingConfigProvider

            chain.append(MappingConfigProvider(defaults))

        return ChainConfigProvider(chain)
