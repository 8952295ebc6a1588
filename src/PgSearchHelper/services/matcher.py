"""Evaluation path: decide whether text values match a fuzzy query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

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
from PgSearchHelper.similarity.base import SimilarityScorer, contains_ignore_case
from PgSearchHelper.utils.log import log


@dataclass(frozen=True, slots=True)
class FuzzyMatcher:
    """Evaluate fuzzy queries against in-memory text values.

    Every public method validates its logic and typo arguments before looking
    at any value, so a bad argument fails even for a null value.

    Attributes:
        scorer: External similarity engine used for the similarity regime.
    """

    scorer: SimilarityScorer

    def match(self, target: str | None, pattern: str, max_typos: int = 1) -> bool:
        """Match a single term against one value."""
        return self.evaluate_term(plan_term(pattern, max_typos), target)

    def match_words(
        self,
        target: str | None,
        terms: Sequence[str],
        max_typos: int = 1,
        logic: MatchLogic | str = MatchLogic.AND,
    ) -> bool:
        """Match ordered terms against one value with AND/OR logic."""
        return self.evaluate_term_set(plan_term_set(terms, max_typos, logic), target)

    def match_query(
        self,
        content: str | None,
        query: str,
        max_typos: int = 1,
        term_logic: MatchLogic | str = MatchLogic.AND,
    ) -> bool:
        """Split `query` on whitespace and match its terms against `content`."""
        return self.match_words(content, split_terms(query), max_typos, term_logic)

    def multi_match_columns(
        self,
        terms: Sequence[str],
        max_typos: int,
        term_logic: MatchLogic | str,
        column_logic: MatchLogic | str,
        columns: Iterable[str | None],
    ) -> bool:
        """Match terms against several values.

        Args:
            terms: Ordered search terms.
            max_typos: Typo budget per term.
            term_logic: Logic for terms within one value.
            column_logic: Logic across values.
            columns: Values to search, in order; None values never match.

        Returns:
            True if the values satisfy `column_logic` over the per-value results.
        """
        plan = plan_column_set(terms, max_typos, term_logic, column_logic)
        return self.evaluate_column_set(plan, columns)

    def multi_match(
        self,
        terms: Sequence[str],
        max_typos: int,
        term_logic: MatchLogic | str,
        column_logic: MatchLogic | str,
        *columns: str | None,
    ) -> bool:
        return self.multi_match_columns(terms, max_typos, term_logic, column_logic, columns)

    def multi_match_query(
        self,
        query: str,
        max_typos: int,
        term_logic: MatchLogic | str,
        column_logic: MatchLogic | str,
        *columns: str | None,
    ) -> bool:
        return self.multi_match_columns(
            split_terms(query), max_typos, term_logic, column_logic, columns
        )

    def evaluate_term(self, check: TermCheck, target: str | None) -> bool:
        if target is None:
            return False
        if check.regime is Regime.CONTAINS:
            matched = contains_ignore_case(target, check.pattern)
            log.debug("contains term=%r matched=%s", check.pattern, matched)
            return matched
        score = self.scorer.similarity(check.pattern, target)
        matched = score >= check.cutoff
        log.debug(
            "similarity term=%r score=%.4f cutoff=%.4f matched=%s",
            check.pattern,
            score,
            check.cutoff,
            matched,
        )
        return matched

    def evaluate_term_set(self, plan: TermSetPlan, target: str | None) -> bool:
        if target is None:
            return False
        if plan.logic is MatchLogic.AND:
            return all(self.evaluate_term(check, target) for check in plan.checks)
        return any(self.evaluate_term(check, target) for check in plan.checks)

    def evaluate_column_set(self, plan: ColumnSetPlan, columns: Iterable[str | None]) -> bool:
        results = (self.evaluate_term_set(plan.term_set, value) for value in columns)
        if plan.logic is MatchLogic.AND:
            return all(results)
        return any(results)
