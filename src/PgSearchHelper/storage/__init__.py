"""Storage layer: SQLite connections that can execute compiled clauses."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PgSearchHelper.similarity.registry import build_scorer
from PgSearchHelper.storage.db import DatabaseManager, register_contains, register_similarity
from PgSearchHelper.storage.search import FuzzySearchStore
from PgSearchHelper.utils.log import log

if TYPE_CHECKING:
    from PgSearchHelper.config import AppConfig


def create_storage(config: AppConfig) -> tuple[DatabaseManager, FuzzySearchStore]:
    """Open the configured database and build a search store over it.

    Args:
        config: Application configuration containing storage and matching settings.

    Returns:
        Tuple of (db_manager, search_store).
    """
    db_path = Path(config.storage.db_path)
    db_manager = DatabaseManager(db_path, build_scorer(config.matching.scorer))
    log.info("Using database: %s", db_path)
    return db_manager, FuzzySearchStore(db_manager)


__all__ = [
    "DatabaseManager",
    "FuzzySearchStore",
    "create_storage",
    "register_contains",
    "register_similarity",
]
