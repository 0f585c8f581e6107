"""File-backed configuration adapters."""

from .file_config_provider import FileConfigProvider, LoadState, load_store

__all__ = ["FileConfigProvider", "LoadState", "load_store"]
