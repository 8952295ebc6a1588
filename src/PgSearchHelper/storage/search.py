"""Fuzzy record search over SQLite tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from PgSearchHelper.compiler.clause import build_multi_match_query_clause
from PgSearchHelper.compiler.dialect import SQLITE
from PgSearchHelper.core.query import MatchLogic
from PgSearchHelper.utils.log import log

if TYPE_CHECKING:
    from PgSearchHelper.storage.db import DatabaseManager


class FuzzySearchStore:
    """Run compiled fuzzy clauses against tables of a SQLite database.

    Table and column names are checked against the live schema before they
    are quoted into SQL, so only existing names can reach the statement.
    """

    def __init__(self, db_manager: DatabaseManager):
        self.conn = db_manager.get_connection()

    def table_columns(self, table: str) -> tuple[str, ...]:
        """Return column names of `table` in declaration order.

        Raises:
            ValueError: If the table does not exist.
        """
        row = self.conn.execute(
            "SELECT name FROM sqlite_master WHERE type IN ('table', 'view') AND name = ?",
            (table,),
        ).fetchone()
        if row is None:
            raise ValueError(f"Unknown table: {table}")
        cursor = self.conn.execute(f"PRAGMA table_info({SQLITE.quote_identifier(table)})")
        return tuple(r[1] for r in cursor)

    def search(
        self,
        table: str,
        columns: Sequence[str],
        query: str,
        *,
        max_typos: int = 1,
        term_logic: MatchLogic | str = MatchLogic.OR,
        column_logic: MatchLogic | str = MatchLogic.AND,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return rows of `table` whose `columns` match `query`.

        Args:
            table: Table or view name.
            columns: Columns to search; all must exist in `table`.
            query: Raw query text.
            max_typos: Typo budget per term.
            term_logic: Logic between terms within a column.
            column_logic: Logic across columns.
            limit: Optional maximum number of rows.

        Returns:
            Matching rows as dicts, in table order.

        Raises:
            ValueError: For unknown table/column names or a non-positive limit.
        """
        known = self.table_columns(table)
        unknown = [c for c in columns if c not in known]
        if unknown:
            raise ValueError(f"Unknown column(s) for {table}: {unknown}")
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive")

        clause = build_multi_match_query_clause(
            columns, query, max_typos, term_logic, column_logic, dialect=SQLITE
        )
        sql = f"SELECT * FROM {SQLITE.quote_identifier(table)} WHERE {clause}"
        params: list[Any] = []
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)

        log.debug("Search SQL: %s", sql)
        rows = [dict(row) for row in self.conn.execute(sql, params)]
        log.info("Matched %d row(s) in %s", len(rows), table)
        return rows
