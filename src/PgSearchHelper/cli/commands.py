"""Command implementations for the PgSearchHelper CLI.

Each command holds fully resolved arguments and returns the text to print,
separated from click parameter handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from PgSearchHelper.compiler.clause import build_match_query_clause, build_multi_match_query_clause
from PgSearchHelper.core.query import MatchLogic
from PgSearchHelper.core.threshold import calculate_optimal_similarity_threshold
from PgSearchHelper.renderers import render_rows
from PgSearchHelper.utils.log import log

if TYPE_CHECKING:
    from PgSearchHelper.compiler.dialect import SqlDialect
    from PgSearchHelper.services.matcher import FuzzyMatcher
    from PgSearchHelper.storage.search import FuzzySearchStore


@dataclass(slots=True)
class ThresholdCommand:
    length: int
    max_typos: int

    def execute(self) -> str:
        return repr(calculate_optimal_similarity_threshold(self.length, self.max_typos))


@dataclass(slots=True)
class MatchCommand:
    """Evaluate a query against one or more values.

    A single value uses the single-column matcher; several values use the
    multi-column matcher with `column_logic`.
    """

    matcher: FuzzyMatcher
    query: str
    values: Sequence[str]
    max_typos: int
    term_logic: MatchLogic
    column_logic: MatchLogic

    def execute(self) -> str:
        if len(self.values) == 1:
            matched = self.matcher.match_query(
                self.values[0], self.query, self.max_typos, self.term_logic
            )
        else:
            matched = self.matcher.multi_match_query(
                self.query, self.max_typos, self.term_logic, self.column_logic, *self.values
            )
        log.debug("match query=%r values=%d matched=%s", self.query, len(self.values), matched)
        return "true" if matched else "false"


@dataclass(slots=True)
class ClauseCommand:
    """Compile a query into a SQL predicate for one or more columns."""

    dialect: SqlDialect
    query: str
    columns: Sequence[str]
    max_typos: int
    term_logic: MatchLogic
    column_logic: MatchLogic

    def execute(self) -> str:
        if len(self.columns) == 1:
            return build_match_query_clause(
                self.columns[0], self.query, self.max_typos, self.term_logic, dialect=self.dialect
            )
        return build_multi_match_query_clause(
            self.columns,
            self.query,
            self.max_typos,
            self.term_logic,
            self.column_logic,
            dialect=self.dialect,
        )


@dataclass(slots=True)
class SearchCommand:
    """Search a SQLite table and render matching rows."""

    store: FuzzySearchStore
    table: str
    columns: Sequence[str]
    query: str
    max_typos: int
    term_logic: MatchLogic
    column_logic: MatchLogic
    output_format: str
    limit: int | None = None

    def execute(self) -> str:
        log.info("table=%s columns=%s query=%r", self.table, list(self.columns), self.query)
        rows = self.store.search(
            self.table,
            self.columns,
            self.query,
            max_typos=self.max_typos,
            term_logic=self.term_logic,
            column_logic=self.column_logic,
            limit=self.limit,
        )
        return render_rows(rows, self.output_format, query=self.query)
