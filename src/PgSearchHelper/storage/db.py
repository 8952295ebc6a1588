"""SQLite database utilities."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from PgSearchHelper.similarity.base import SimilarityScorer, contains_ignore_case
from PgSearchHelper.utils.log import log

SIMILARITY_FUNCTION = "word_similarity"
CONTAINS_FUNCTION = "contains_ci"


class DatabaseManager:
    """SQLite connection with the matching functions registered.

    SQLite has no trigram extension, so the configured scorer is exposed to
    SQL as `word_similarity(pattern, target)`. Its LIKE only folds ASCII case,
    so containment is exposed as `contains_ci(target, pattern)`. That lets
    clauses compiled with the sqlite dialect run unchanged.

    Supports context manager protocol for automatic connection cleanup.
    """

    def __init__(
        self,
        db_path: Path | str,
        scorer: SimilarityScorer,
        *,
        function_name: str = SIMILARITY_FUNCTION,
    ) -> None:
        """Open the database and register the similarity function.

        Args:
            db_path: Database file path, or ":memory:".
            scorer: Similarity engine backing the SQL function.
            function_name: SQL name to register the scorer under.
        """
        self.db_path = db_path
        self.scorer = scorer
        self.conn = ensure_db(db_path)
        self.conn.row_factory = sqlite3.Row
        register_similarity(self.conn, scorer, function_name)
        register_contains(self.conn)

    def get_connection(self) -> sqlite3.Connection:
        return self.conn

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def ensure_db(db_path: Path | str) -> sqlite3.Connection:
    """Ensure the database directory exists and return a connection.

    Raises:
        OSError: If directory creation fails.
        sqlite3.Error: If database connection fails.
    """
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    log.debug("Opening SQLite database: %s", db_path)
    return sqlite3.connect(str(db_path))


def register_similarity(
    conn: sqlite3.Connection,
    scorer: SimilarityScorer,
    function_name: str = SIMILARITY_FUNCTION,
) -> None:
    """Register `scorer` as a deterministic two-argument SQL function.

    NULL arguments yield NULL, as in PostgreSQL.
    """

    def _similarity(pattern: str | None, target: str | None) -> float | None:
        if pattern is None or target is None:
            return None
        return scorer.similarity(str(pattern), str(target))

    conn.create_function(function_name, 2, _similarity, deterministic=True)


def register_contains(conn: sqlite3.Connection, function_name: str = CONTAINS_FUNCTION) -> None:
    """Register `contains_ignore_case` as a deterministic SQL function.

    Case folding uses Python's `str.lower`, the same as the evaluation path.
    NULL arguments yield NULL.
    """

    def _contains(target: str | None, pattern: str | None) -> int | None:
        if target is None or pattern is None:
            return None
        return int(contains_ignore_case(str(target), str(pattern)))

    conn.create_function(function_name, 2, _contains, deterministic=True)
