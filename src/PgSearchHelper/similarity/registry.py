"""Scorer registry keyed by the names accepted in `matching.scorer`."""

from __future__ import annotations

from collections.abc import Callable

from PgSearchHelper.similarity.base import SimilarityScorer
from PgSearchHelper.similarity.fuzz_scorer import RapidFuzzScorer

ScorerBuilder = Callable[[], SimilarityScorer]


def build_scorer(name: str) -> SimilarityScorer:
    """Build a similarity scorer by registered name.

    Args:
        name: Scorer identifier from config.

    Returns:
        SimilarityScorer: Initialized scorer.

    Raises:
        ValueError: If `name` is not registered.
    """
    builder = _scorer_builders().get(name)
    if builder is None:
        raise ValueError(f"Unsupported scorer in config.matching.scorer: {name}")
    return builder()


def supported_scorer_names() -> tuple[str, ...]:
    """Return scorer names in registry order."""
    return tuple(_scorer_builders().keys())


def _scorer_builders() -> dict[str, ScorerBuilder]:
    return {
        "partial_ratio": lambda: _build_rapidfuzz("partial_ratio"),
        "ratio": lambda: _build_rapidfuzz("ratio"),
        "token_set_ratio": lambda: _build_rapidfuzz("token_set_ratio"),
    }


def _build_rapidfuzz(method: str) -> SimilarityScorer:
    return RapidFuzzScorer(method=method)
