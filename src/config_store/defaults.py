"""Skeleton document written the first time a store is opened."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CREATED_BY = "config-store-init"


class ApplicationDefaults(BaseModel):
    name: str = "Inventory & Orders Service"
    version: str = "1.0.0"
    environment: str = "development"


class DatabaseDefaults(BaseModel):
    host: str = "localhost"
    port: int = 27017
    name: str = "inventory"


class KafkaDefaults(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bootstrap_servers: str = Field("localhost:9092", alias="bootstrap.servers")
    schema_registry_url: str = Field("http://localhost:8081", alias="schema.registry.url")


def build_default_document(
    created_by: str = DEFAULT_CREATED_BY,
    now: datetime | None = None,
) -> Dict[str, Any]:
    created_at = (now or datetime.now()).isoformat()
    return {
        "application": ApplicationDefaults().model_dump(),
        "database": DatabaseDefaults().model_dump(),
        "kafka": KafkaDefaults().model_dump(by_alias=True),
        "features": {},
        "metadata": {"createdAt": created_at, "createdBy": created_by},
    }
