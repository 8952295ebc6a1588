"""Similarity cutoff derived from a pattern length and a typo budget.

Trigram similarity of a padded string of length L is computed over roughly
L + 2 trigrams, and a single typo can disturb up to three of them. The cutoff
is therefore the share of trigrams that must survive `max_typos` edits.
"""

from __future__ import annotations

from typing import Final

from PgSearchHelper.core.query import check_max_typos

MIN_TRIGRAM_LENGTH: Final[int] = 3
LONG_PATTERN_LENGTH: Final[int] = 5
TRIGRAMS_PER_TYPO: Final[float] = 3.0


def calculate_optimal_similarity_threshold(length: int, max_typos: int) -> float:
    """Return the similarity cutoff for a string of `length` characters.

    Args:
        length: Length of the search pattern.
        max_typos: Number of typos the match may tolerate.

    Returns:
        A float in [0.0, 1.0].

    Raises:
        ValueError: If `length` is negative or not an int.
        InvalidTypoBudget: If `max_typos` is invalid.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ValueError(f"length must be a non-negative integer, got {length!r}")
    check_max_typos(max_typos)

    if length < MIN_TRIGRAM_LENGTH:
        # Too short for trigrams: any typo makes the strings unrelated.
        return 0.0 if max_typos >= 1 else 1.0

    num_trigrams = length + 2.0
    threshold = (num_trigrams - TRIGRAMS_PER_TYPO * max_typos) / num_trigrams
    return max(0.0, threshold)


def adjusted_typos(pattern_length: int, max_typos: int) -> int:
    """Return the typo budget used for similarity on a pattern.

    Patterns longer than five characters get one extra typo, since the
    trailing boundary trigram of the pattern rarely matches inside a longer
    target word.
    """
    if pattern_length > LONG_PATTERN_LENGTH:
        return max_typos + 1
    return max_typos
