"""Timestamped snapshots taken before a configuration file is overwritten."""

from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, List

logger = logging.getLogger(__name__)

BACKUP_SEPARATOR = ".backup_"
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


class BackupManager:
    """Copy the current file next to itself as ``<path>.backup_<yyyyMMdd_HHmmss>``.

    Names have second resolution, so two backups taken within the same second
    share a name and the later copy replaces the earlier one. Old snapshots are
    never removed here.
    """

    def __init__(self, path: Path, clock: Callable[[], datetime] = datetime.now):
        self.path = Path(path)
        self.clock = clock

    def backup_path(self, moment: datetime | None = None) -> Path:
        stamp = (moment or self.clock()).strftime(BACKUP_TIMESTAMP_FORMAT)
        return self.path.with_name(f"{self.path.name}{BACKUP_SEPARATOR}{stamp}")

    def backup(self) -> Path:
        destination = self.backup_path()
        shutil.copyfile(self.path, destination)
        logger.debug("Created backup: %s", destination)
        return destination

    def list_backups(self) -> List[Path]:
        if not self.path.parent.exists():
            return []
        pattern = f"{self.path.name}{BACKUP_SEPARATOR}*"
        return sorted(self.path.parent.glob(pattern), key=lambda p: p.name)
