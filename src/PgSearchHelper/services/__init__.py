"""Matching service layer.

Provides the evaluation path and a factory that wires it to the configured
similarity engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PgSearchHelper.services.matcher import FuzzyMatcher
from PgSearchHelper.similarity.registry import build_scorer

if TYPE_CHECKING:
    from PgSearchHelper.config import AppConfig


def create_matcher(config: AppConfig) -> FuzzyMatcher:
    """Create a matcher backed by `config.matching.scorer`."""
    return FuzzyMatcher(scorer=build_scorer(config.matching.scorer))


__all__ = [
    "FuzzyMatcher",
    "create_matcher",
]
