"""Search query primitives shared by the matcher and the clause compiler."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from PgSearchHelper.core.errors import InvalidLogicValue, InvalidTypoBudget

_RE_WS = re.compile(r"\s+")


class MatchLogic(str, Enum):
    """Aggregation logic for terms within a value or across values."""

    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:
        return self.value


def parse_logic(value: MatchLogic | str, name: str = "match_logic") -> MatchLogic:
    """Return `value` as a `MatchLogic`.

    Args:
        value: A `MatchLogic` member or the exact string "AND" / "OR".
        name: Parameter name used in the error message.

    Returns:
        The matching enum member.

    Raises:
        InvalidLogicValue: If `value` is anything else.
    """
    if isinstance(value, MatchLogic):
        return value
    if isinstance(value, str):
        try:
            return MatchLogic(value)
        except ValueError:
            pass
    raise InvalidLogicValue(name, value)


def check_max_typos(value: int) -> int:
    """Validate a typo budget.

    Raises:
        InvalidTypoBudget: If `value` is not an int (bool excluded) or is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidTypoBudget(value)
    return value


def split_terms(query: str | None) -> tuple[str, ...]:
    """Split a raw query on runs of whitespace.

    Leading/trailing whitespace never produces empty terms. Order and
    duplicates are preserved.
    """
    if not query:
        return ()
    return tuple(t for t in _RE_WS.split(query) if t)


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """A raw query string and its ordered terms.

    Attributes:
        raw: Query text as supplied by the caller.
        terms: Non-empty whitespace-separated terms, in order.
    """

    raw: str
    terms: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str | None) -> SearchQuery:
        return cls(raw=raw or "", terms=split_terms(raw))

    def __bool__(self) -> bool:
        return bool(self.terms)
