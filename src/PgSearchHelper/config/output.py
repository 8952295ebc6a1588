"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PgSearchHelper.config.common import expect_int, expect_str, get_required_value, get_section

_ALLOWED_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        format: Result format for the search command (text/json).
        max_rows: Maximum number of rows to return; -1 means unlimited.
    """

    format: str
    max_rows: int


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    section = get_section(raw, "output", required=True)
    return OutputConfig(
        format=expect_str(get_required_value(section, "format", "output.format"), "output.format").lower(),
        max_rows=expect_int(get_required_value(section, "max_rows", "output.max_rows"), "output.max_rows"),
    )


def check_output(config: OutputConfig) -> None:
    if config.format not in _ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {list(_ALLOWED_FORMATS)}")
    if config.max_rows == 0 or config.max_rows < -1:
        raise ValueError("output.max_rows must be -1 or positive")
