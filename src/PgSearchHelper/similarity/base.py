"""Similarity capability consumed by the evaluation path."""

from __future__ import annotations

from typing import Protocol


class SimilarityScorer(Protocol):
    """Protocol for an external text-similarity engine.

    Implementations return the best similarity between `pattern` and any
    comparably sized window of `target`, in [0.0, 1.0], ignoring case.
    """

    name: str

    def similarity(self, pattern: str, target: str) -> float:
        """Score `pattern` against `target`."""
        raise NotImplementedError


def contains_ignore_case(target: str | None, pattern: str) -> bool:
    """Return True if `pattern` occurs in `target`, ignoring case.

    A null target never matches.
    """
    if target is None:
        return False
    return pattern.lower() in target.lower()
