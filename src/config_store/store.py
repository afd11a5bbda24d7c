"""YAML-backed configuration store addressed by dot-separated keys.

Every call reloads the file, so nothing is cached between calls. Writes back
up the existing file and then rewrite the whole document. There is no locking:
two writers that interleave their read and write steps lose one update, and
callers that need several writers must serialize access themselves.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

import yaml

from .backup import BackupManager
from .defaults import DEFAULT_CREATED_BY, build_default_document
from .paths import Document, Value, get_path, set_path
from .settings import StoreSettings

logger = logging.getLogger(__name__)


def _ensure_parent(path: Path) -> None:
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Created config directory: %s", path.parent)


def dump_document(document: Document) -> str:
    return yaml.safe_dump(
        document,
        default_flow_style=False,
        sort_keys=False,
        indent=2,
        allow_unicode=True,
    )


class ConfigStore:
    def __init__(
        self,
        path: Path | str,
        created_by: str = DEFAULT_CREATED_BY,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.path = Path(path)
        self.created_by = created_by
        self.clock = clock
        self.backup_manager = BackupManager(self.path, clock=clock)

    @classmethod
    def from_settings(cls, settings: StoreSettings | None = None) -> "ConfigStore":
        settings = settings or StoreSettings.from_env()
        return cls(settings.path, created_by=settings.created_by)

    def read_all(self) -> Document:
        """Load the document, writing the default skeleton first when the file is missing."""
        if not self.path.exists():
            logger.info("Config file not found, creating default configuration at: %s", self.path)
            document = build_default_document(self.created_by, now=self.clock())
            self.write_all(document)
            return document
        with self.path.open("r", encoding="utf-8") as handle:
            try:
                data = yaml.safe_load(handle)
            except (yaml.YAMLError, UnicodeDecodeError) as exc:
                logger.warning("Unparseable config at %s, treating as empty: %s", self.path, exc)
                return {}
        if data is None:
            data = {}
        elif not isinstance(data, dict):
            logger.warning("Config at %s is not a mapping, treating as empty", self.path)
            data = {}
        logger.debug("Loaded configuration from: %s", self.path)
        return data

    def write_all(self, document: Document) -> None:
        """Back up the current file (if any) and overwrite it with ``document``."""
        text = dump_document(document)
        _ensure_parent(self.path)
        if self.path.exists():
            self.backup_manager.backup()
        with self.path.open("w", encoding="utf-8") as handle:
            handle.write(text)
        logger.info("Configuration written to: %s", self.path)

    def get(self, path: str) -> Optional[Value]:
        return get_path(self.read_all(), path)

    def set(self, path: str, value: Value) -> None:
        document = set_path(self.read_all(), path, value)
        self.write_all(document)

    def backups(self) -> List[Path]:
        return self.backup_manager.list_backups()
