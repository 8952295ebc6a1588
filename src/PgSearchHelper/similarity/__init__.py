"""Similarity engines used by the evaluation path."""

from __future__ import annotations

from PgSearchHelper.similarity.base import SimilarityScorer, contains_ignore_case
from PgSearchHelper.similarity.fuzz_scorer import RapidFuzzScorer
from PgSearchHelper.similarity.registry import build_scorer, supported_scorer_names

__all__ = [
    "SimilarityScorer",
    "RapidFuzzScorer",
    "build_scorer",
    "contains_ignore_case",
    "supported_scorer_names",
]
