"""Clause compiler and SQL dialects."""

from __future__ import annotations

from PgSearchHelper.compiler.clause import (
    build_match_clause,
    build_match_query_clause,
    build_match_words_clause,
    build_multi_match_clause,
    build_multi_match_query_clause,
    render_column_set,
    render_term,
    render_term_set,
)
from PgSearchHelper.compiler.dialect import (
    POSTGRES,
    SQLITE,
    SqlDialect,
    get_dialect,
    supported_dialect_names,
)

__all__ = [
    "POSTGRES",
    "SQLITE",
    "SqlDialect",
    "build_match_clause",
    "build_match_query_clause",
    "build_match_words_clause",
    "build_multi_match_clause",
    "build_multi_match_query_clause",
    "get_dialect",
    "render_column_set",
    "render_term",
    "render_term_set",
    "supported_dialect_names",
]
