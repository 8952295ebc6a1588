"""Clause domain configuration: compiler dialect and defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PgSearchHelper.compiler.dialect import SqlDialect, get_dialect, supported_dialect_names
from PgSearchHelper.config.common import (
    expect_int,
    expect_logic,
    expect_str,
    get_required_value,
    get_section,
)
from PgSearchHelper.core.query import MatchLogic


@dataclass(frozen=True, slots=True)
class ClauseConfig:
    """Defaults for the clause compiler.

    Attributes:
        dialect: Built-in dialect name (postgres/sqlite).
        similarity_function: SQL similarity function to call.
        max_typos: Typo budget per term.
        term_logic: Logic between terms within one column.
        column_logic: Logic across columns.
    """

    dialect: str
    similarity_function: str
    max_typos: int
    term_logic: MatchLogic
    column_logic: MatchLogic

    def resolve_dialect(self, name: str | None = None) -> SqlDialect:
        """Return the dialect to compile with, honoring `similarity_function`."""
        return get_dialect(name or self.dialect).with_similarity_function(self.similarity_function)


def load_clause(raw: Mapping[str, Any]) -> ClauseConfig:
    """Load the `clause` section."""
    section = get_section(raw, "clause", required=True)
    return ClauseConfig(
        dialect=expect_str(get_required_value(section, "dialect", "clause.dialect"), "clause.dialect"),
        similarity_function=expect_str(
            get_required_value(section, "similarity_function", "clause.similarity_function"),
            "clause.similarity_function",
        ),
        max_typos=expect_int(
            get_required_value(section, "max_typos", "clause.max_typos"), "clause.max_typos"
        ),
        term_logic=expect_logic(
            get_required_value(section, "term_logic", "clause.term_logic"), "clause.term_logic"
        ),
        column_logic=expect_logic(
            get_required_value(section, "column_logic", "clause.column_logic"), "clause.column_logic"
        ),
    )


def check_clause(config: ClauseConfig) -> None:
    if config.dialect not in supported_dialect_names():
        raise ValueError(f"clause.dialect must be one of {list(supported_dialect_names())}")
    if config.max_typos < 0:
        raise ValueError("clause.max_typos must be >= 0")
    # Raises ValueError for names that are not plain SQL identifiers.
    config.resolve_dialect()
