"""Decision tree shared by the evaluation path and the clause compiler.

A query is planned once into `TermCheck` leaves grouped by `TermSetPlan`
(terms within one value) and `ColumnSetPlan` (values across columns). The
matcher evaluates the tree against text; the compiler renders the same tree
into a SQL fragment. Both therefore pick the same regime and cutoff for every
term.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from PgSearchHelper.core.query import MatchLogic, check_max_typos, parse_logic
from PgSearchHelper.core.threshold import (
    MIN_TRIGRAM_LENGTH,
    adjusted_typos,
    calculate_optimal_similarity_threshold,
)


class Regime(str, Enum):
    """How a single term is compared with a value."""

    CONTAINS = "contains"
    SIMILARITY = "similarity"


@dataclass(frozen=True, slots=True)
class TermCheck:
    """Comparison of one term against one value.

    Attributes:
        pattern: The search term.
        regime: Substring containment or similarity comparison.
        cutoff: Minimum similarity score; only set for `Regime.SIMILARITY`.
    """

    pattern: str
    regime: Regime
    cutoff: float | None = None


@dataclass(frozen=True, slots=True)
class TermSetPlan:
    """All term checks for one value, joined by `logic`."""

    logic: MatchLogic
    checks: tuple[TermCheck, ...]

    @property
    def empty_result(self) -> bool:
        """Vacuous result when there are no checks: True for AND, False for OR."""
        return self.logic is MatchLogic.AND


@dataclass(frozen=True, slots=True)
class ColumnSetPlan:
    """The same term set applied to every column, joined by `logic`."""

    logic: MatchLogic
    term_set: TermSetPlan

    @property
    def empty_result(self) -> bool:
        return self.logic is MatchLogic.AND


def plan_term(pattern: str, max_typos: int) -> TermCheck:
    """Choose the comparison regime for one term.

    Terms shorter than three characters and zero-typo requests use
    case-insensitive containment; everything else uses similarity with a
    length-derived cutoff.
    """
    check_max_typos(max_typos)
    length = len(pattern)
    if length < MIN_TRIGRAM_LENGTH or max_typos == 0:
        return TermCheck(pattern=pattern, regime=Regime.CONTAINS)
    cutoff = calculate_optimal_similarity_threshold(length, adjusted_typos(length, max_typos))
    return TermCheck(pattern=pattern, regime=Regime.SIMILARITY, cutoff=cutoff)


def plan_term_set(
    terms: Iterable[str],
    max_typos: int,
    logic: MatchLogic | str = MatchLogic.AND,
) -> TermSetPlan:
    """Plan every term of one value.

    Raises:
        InvalidLogicValue: If `logic` is not AND/OR.
        InvalidTypoBudget: If `max_typos` is invalid.
    """
    resolved = parse_logic(logic, "match_logic")
    check_max_typos(max_typos)
    return TermSetPlan(logic=resolved, checks=tuple(plan_term(t, max_typos) for t in terms))


def plan_column_set(
    terms: Iterable[str],
    max_typos: int,
    term_logic: MatchLogic | str,
    column_logic: MatchLogic | str,
) -> ColumnSetPlan:
    """Plan a multi-column match.

    Term logic and column logic are validated independently.
    """
    resolved_columns = parse_logic(column_logic, "column_logic")
    term_set = plan_term_set(terms, max_typos, parse_logic(term_logic, "term_logic"))
    return ColumnSetPlan(logic=resolved_columns, term_set=term_set)
