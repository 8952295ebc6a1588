"""Storage domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PgSearchHelper.config.common import expect_str, get_required_value, get_section


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Storage configuration."""

    db_path: str


def load_storage(raw: Mapping[str, Any]) -> StorageConfig:
    section = get_section(raw, "storage", required=True)
    return StorageConfig(
        db_path=expect_str(get_required_value(section, "db_path", "storage.db_path"), "storage.db_path"),
    )


def check_storage(config: StorageConfig) -> None:
    if not config.db_path.strip():
        raise ValueError("storage.db_path must not be empty")
