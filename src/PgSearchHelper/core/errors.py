"""Error taxonomy for matching and clause compilation."""

from __future__ import annotations


class PgSearchHelperError(ValueError):
    """Base class for invalid arguments passed to a public operation."""


class InvalidLogicValue(PgSearchHelperError):
    """Raised when a term or column logic is not one of AND/OR."""

    def __init__(self, name: str, value: object) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}: {value!r}. Use 'AND' or 'OR'.")


class InvalidTypoBudget(PgSearchHelperError):
    """Raised when the typo budget is not a non-negative integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"max_typos must be a non-negative integer, got {value!r}")
