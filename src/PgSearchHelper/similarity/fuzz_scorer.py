"""RapidFuzz-backed similarity scorer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from rapidfuzz import fuzz

_METHODS: dict[str, Callable[..., float]] = {
    "partial_ratio": fuzz.partial_ratio,
    "ratio": fuzz.ratio,
    "token_set_ratio": fuzz.token_set_ratio,
}


def supported_methods() -> tuple[str, ...]:
    return tuple(_METHODS.keys())


@dataclass(frozen=True, slots=True)
class RapidFuzzScorer:
    """Score strings with a RapidFuzz ratio, scaled to [0.0, 1.0].

    `partial_ratio` compares the pattern with its best-aligned window of the
    target, which is the closest RapidFuzz analogue of word similarity.

    Attributes:
        method: Name of the `rapidfuzz.fuzz` scorer.
    """

    method: str = "partial_ratio"
    name: str = field(init=False, default="rapidfuzz")

    def __post_init__(self) -> None:
        if self.method not in _METHODS:
            raise ValueError(
                f"Unsupported rapidfuzz method: {self.method}. Use one of {sorted(_METHODS)}"
            )

    def similarity(self, pattern: str, target: str) -> float:
        if not pattern or not target:
            return 0.0
        score = _METHODS[self.method](pattern.lower(), target.lower())
        return score / 100.0
