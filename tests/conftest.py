"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

# ============================================================================
# Config File Helpers
# ============================================================================


def write_config_file(path: Path, lines: list[str]) -> Path:
    """Write KEY=VALUE lines to a file, creating parent directories.

    Args:
        path: Destination file.
        lines: Records to write, one per line.

    Returns:
        The written path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def config_file_factory(tmp_path: Path) -> Callable[[str, list[str]], Path]:
    """Factory fixture that writes config files under tmp_path.

    Example:
        path = config_file_factory("app.env", ["HOST=localhost"])
    """

    def _create(name: str, lines: list[str]) -> Path:
        return write_config_file(tmp_path / name, lines)

    return _create


@pytest.fixture
def sample_config_file(tmp_path: Path) -> Path:
    """A well-formed config file with string, float and bool values."""
    return write_config_file(
        tmp_path / "app.env",
        ["HOST=localhost", "PORT=8080", "DEBUG=true"],
    )


@pytest.fixture
def secrets_dir(tmp_path: Path) -> Path:
    """A secrets directory in container secret-mount layout."""
    directory = tmp_path / "secrets"
    directory.mkdir()
    (directory / "postgres-user").write_text("solvent\n", encoding="utf-8")
    (directory / "postgres-password").write_text("s3cr3t=x\n", encoding="utf-8")
    return directory
