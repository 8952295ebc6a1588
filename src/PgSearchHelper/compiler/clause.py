"""Clause compiler.

Renders the planned decision tree into a SQL predicate instead of
evaluating it, so the predicate can be embedded in a dynamically built query
and executed by the database later.

Rules
- Contains regime  -> <ident> ILIKE '%<escaped term>%', or
                      contains_ci(<ident>, '<term>') where the dialect has a
                      contains function
- Similarity       -> word_similarity('<term>', <ident>) >= <cutoff>
- Terms of one column are joined with the term logic and parenthesized.
- Columns are joined with the column logic and parenthesized.
- An empty term or column set renders TRUE for AND and FALSE for OR.
  TRUE also selects NULL values, which evaluation never matches.

Only identifiers and literals are escaped. Column names are quoted, not
validated: callers must take them from a trusted list.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Sequence

from PgSearchHelper.compiler.dialect import POSTGRES, SqlDialect
from PgSearchHelper.core.plan import (
    ColumnSetPlan,
    Regime,
    TermCheck,
    TermSetPlan,
    plan_column_set,
    plan_term,
    plan_term_set,
)
from PgSearchHelper.core.query import MatchLogic, split_terms
from PgSearchHelper.utils.log import log

_LIKE_ESCAPE = "\\"
_RE_LIKE_SPECIAL = re.compile(r"([\\%_])")


def format_number(value: float) -> str:
    """Render a float as a plain decimal, never in scientific notation."""
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _like_pattern(pattern: str) -> tuple[str, bool]:
    escaped = _RE_LIKE_SPECIAL.sub(r"\\\1", pattern)
    return f"%{escaped}%", escaped != pattern


def _check_column_name(column_name: str) -> str:
    if not isinstance(column_name, str) or not column_name:
        raise ValueError(f"Column name must be a non-empty string, got {column_name!r}")
    return column_name


def render_term(check: TermCheck, column_name: str, dialect: SqlDialect = POSTGRES) -> str:
    ident = dialect.quote_identifier(_check_column_name(column_name))
    if check.regime is Regime.CONTAINS:
        if dialect.contains_function:
            return f"{dialect.contains_function}({ident}, {dialect.quote_literal(check.pattern)})"
        like, escaped = _like_pattern(check.pattern)
        clause = f"{ident} {dialect.contains_operator} {dialect.quote_literal(like)}"
        if escaped:
            clause += f" ESCAPE {dialect.quote_literal(_LIKE_ESCAPE)}"
        return clause
    return (
        f"{dialect.similarity_function}({dialect.quote_literal(check.pattern)}, {ident})"
        f" >= {format_number(check.cutoff)}"
    )


def render_term_set(plan: TermSetPlan, column_name: str, dialect: SqlDialect = POSTGRES) -> str:
    if not plan.checks:
        return dialect.true_literal if plan.empty_result else dialect.false_literal
    parts = [render_term(check, column_name, dialect) for check in plan.checks]
    return "(" + f" {plan.logic.value} ".join(parts) + ")"


def render_column_set(
    plan: ColumnSetPlan,
    column_names: Sequence[str],
    dialect: SqlDialect = POSTGRES,
) -> str:
    if not column_names:
        return dialect.true_literal if plan.empty_result else dialect.false_literal
    parts = [render_term_set(plan.term_set, name, dialect) for name in column_names]
    return "(" + f" {plan.logic.value} ".join(parts) + ")"


def build_match_clause(
    column_name: str,
    search_pattern: str,
    max_typos: int = 1,
    *,
    dialect: SqlDialect = POSTGRES,
) -> str:
    """Build the predicate for a single term against one column."""
    return render_term(plan_term(search_pattern, max_typos), column_name, dialect)


def build_match_words_clause(
    column_name: str,
    search_terms: Sequence[str],
    max_typos: int = 1,
    match_logic: MatchLogic | str = MatchLogic.AND,
    *,
    dialect: SqlDialect = POSTGRES,
) -> str:
    """Build the predicate for several terms against one column.

    Args:
        column_name: Trusted column name; quoted, not validated.
        search_terms: Ordered terms.
        max_typos: Typo budget per term.
        match_logic: AND/OR between terms.
        dialect: Target SQL dialect.

    Returns:
        Parenthesized predicate, or the dialect's TRUE/FALSE for no terms.
        With no terms and AND logic the predicate is TRUE, so unlike
        `FuzzyMatcher.match_words` it also selects rows where the column is
        NULL. Add `<column> IS NOT NULL` where that matters.
    """
    plan = plan_term_set(search_terms, max_typos, match_logic)
    return render_term_set(plan, column_name, dialect)


def build_match_query_clause(
    column_name: str,
    query: str,
    max_typos: int = 1,
    match_logic: MatchLogic | str = MatchLogic.AND,
    *,
    dialect: SqlDialect = POSTGRES,
) -> str:
    """Split `query` on whitespace and build its single-column predicate."""
    return build_match_words_clause(
        column_name, split_terms(query), max_typos, match_logic, dialect=dialect
    )


def build_multi_match_clause(
    column_names: Sequence[str],
    search_terms: Sequence[str],
    max_typos: int,
    term_logic: MatchLogic | str,
    column_logic: MatchLogic | str,
    *,
    dialect: SqlDialect = POSTGRES,
) -> str:
    """Build the predicate for several terms across several columns.

    Returns:
        Per-column term predicates joined by `column_logic`, parenthesized.
    """
    plan = plan_column_set(search_terms, max_typos, term_logic, column_logic)
    names = tuple(column_names)
    clause = render_column_set(plan, names, dialect)
    log.debug("Compiled %d term(s) over %d column(s): %s", len(plan.term_set.checks), len(names), clause)
    return clause


def build_multi_match_query_clause(
    column_names: Sequence[str],
    query: str,
    max_typos: int = 1,
    term_logic: MatchLogic | str = MatchLogic.OR,
    column_logic: MatchLogic | str = MatchLogic.AND,
    *,
    dialect: SqlDialect = POSTGRES,
) -> str:
    """Split `query` on whitespace and build its multi-column predicate."""
    return build_multi_match_clause(
        column_names, split_terms(query), max_typos, term_logic, column_logic, dialect=dialect
    )
