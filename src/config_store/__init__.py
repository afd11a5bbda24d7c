"""Config Store: YAML configuration with dot-path access and timestamped backups."""

from importlib.metadata import version as _version

from .backup import BackupManager
from .defaults import build_default_document
from .paths import Document, Value, get_path, has_path, set_path
from .settings import StoreSettings
from .store import ConfigStore

__all__ = [
    "BackupManager",
    "ConfigStore",
    "Document",
    "StoreSettings",
    "Value",
    "build_default_document",
    "get_path",
    "get_version",
    "has_path",
    "set_path",
]


def get_version() -> str:
    """Return the installed package version."""
    try:
        return _version("config-store")
    except Exception:  # pragma: no cover - fallback for editable installs
        return "0.0.0"
