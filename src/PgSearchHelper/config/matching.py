"""Matching domain configuration: evaluation defaults and scorer choice."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PgSearchHelper.config.common import (
    expect_int,
    expect_logic,
    expect_str,
    get_required_value,
    get_section,
)
from PgSearchHelper.core.query import MatchLogic
from PgSearchHelper.similarity.registry import supported_scorer_names


@dataclass(frozen=True, slots=True)
class MatchingConfig:
    """Defaults for the evaluation path.

    Attributes:
        max_typos: Typo budget per term.
        term_logic: Logic between terms within one value.
        column_logic: Logic across values.
        scorer: Registered similarity scorer name.
    """

    max_typos: int
    term_logic: MatchLogic
    column_logic: MatchLogic
    scorer: str


def load_matching(raw: Mapping[str, Any]) -> MatchingConfig:
    """Load the `matching` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or logic values are invalid.
    """
    section = get_section(raw, "matching", required=True)
    return MatchingConfig(
        max_typos=expect_int(
            get_required_value(section, "max_typos", "matching.max_typos"), "matching.max_typos"
        ),
        term_logic=expect_logic(
            get_required_value(section, "term_logic", "matching.term_logic"), "matching.term_logic"
        ),
        column_logic=expect_logic(
            get_required_value(section, "column_logic", "matching.column_logic"),
            "matching.column_logic",
        ),
        scorer=expect_str(get_required_value(section, "scorer", "matching.scorer"), "matching.scorer"),
    )


def check_matching(config: MatchingConfig) -> None:
    if config.max_typos < 0:
        raise ValueError("matching.max_typos must be >= 0")
    if config.scorer not in supported_scorer_names():
        raise ValueError(f"matching.scorer must be one of {list(supported_scorer_names())}")
