"""Environment-driven settings for the config store."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .defaults import DEFAULT_CREATED_BY

DEFAULT_CONFIG_PATH = Path("config") / "application.yml"


class StoreSettings(BaseModel):
    path: Path = Field(DEFAULT_CONFIG_PATH, description="YAML file backing the store")
    created_by: str = Field(DEFAULT_CREATED_BY, description="Creator tag stamped on bootstrap")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "StoreSettings":
        load_dotenv()
        return cls(
            path=Path(os.getenv("CONFIG_STORE_PATH", str(DEFAULT_CONFIG_PATH))),
            created_by=os.getenv("CONFIG_STORE_CREATED_BY", DEFAULT_CREATED_BY),
            log_level=os.getenv("CONFIG_STORE_LOG_LEVEL", "INFO").upper(),
        )
