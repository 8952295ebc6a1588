"""PgSearchHelper: typo-tolerant matching and SQL clause compilation.

The evaluation functions here use a RapidFuzz `partial_ratio` scorer. Build a
`FuzzyMatcher` directly to plug in another similarity engine.
"""

from __future__ import annotations

from PgSearchHelper.compiler.clause import (
    build_match_clause,
    build_match_query_clause,
    build_match_words_clause,
    build_multi_match_clause,
    build_multi_match_query_clause,
)
from PgSearchHelper.core.errors import InvalidLogicValue, InvalidTypoBudget, PgSearchHelperError
from PgSearchHelper.core.query import MatchLogic, SearchQuery, split_terms
from PgSearchHelper.core.threshold import calculate_optimal_similarity_threshold
from PgSearchHelper.services.matcher import FuzzyMatcher
from PgSearchHelper.similarity.fuzz_scorer import RapidFuzzScorer

_default_matcher = FuzzyMatcher(scorer=RapidFuzzScorer())


def match(target: str | None, pattern: str, max_typos: int = 1) -> bool:
    return _default_matcher.match(target, pattern, max_typos)


def match_words(
    content: str | None,
    terms: list[str] | tuple[str, ...],
    max_typos: int = 1,
    term_logic: MatchLogic | str = MatchLogic.AND,
) -> bool:
    return _default_matcher.match_words(content, terms, max_typos, term_logic)


def match_query(
    content: str | None,
    query: str,
    max_typos: int = 1,
    term_logic: MatchLogic | str = MatchLogic.AND,
) -> bool:
    """Return True if `content` matches the whitespace-separated `query`."""
    return _default_matcher.match_query(content, query, max_typos, term_logic)


def multi_match(
    terms: list[str] | tuple[str, ...],
    max_typos: int,
    term_logic: MatchLogic | str,
    column_logic: MatchLogic | str,
    *columns: str | None,
) -> bool:
    return _default_matcher.multi_match(terms, max_typos, term_logic, column_logic, *columns)


def multi_match_query(
    query: str,
    max_typos: int,
    term_logic: MatchLogic | str,
    column_logic: MatchLogic | str,
    *columns: str | None,
) -> bool:
    """Return True if the values in `columns` match `query` under both logics."""
    return _default_matcher.multi_match_query(query, max_typos, term_logic, column_logic, *columns)


__all__ = [
    "FuzzyMatcher",
    "InvalidLogicValue",
    "InvalidTypoBudget",
    "MatchLogic",
    "PgSearchHelperError",
    "RapidFuzzScorer",
    "SearchQuery",
    "build_match_clause",
    "build_match_query_clause",
    "build_match_words_clause",
    "build_multi_match_clause",
    "build_multi_match_query_clause",
    "calculate_optimal_similarity_threshold",
    "match",
    "match_query",
    "match_words",
    "multi_match",
    "multi_match_query",
    "split_terms",
]
