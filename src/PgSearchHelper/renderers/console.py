"""Console text output for search results."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def _fmt_value(value: Any) -> str:
    if value is None:
        return "-"
    return str(value)


def render_text(rows: Iterable[Mapping[str, Any]]) -> str:
    """Render rows into a human-readable text block.

    Args:
        rows: Result rows keyed by column name.

    Returns:
        A formatted string ready to be printed; empty when there are no rows.
    """
    lines: list[str] = []
    for idx, row in enumerate(rows, start=1):
        items = list(row.items())
        if not items:
            continue
        width = max(len(str(key)) for key, _ in items)
        lines.append(f"{idx}.")
        for key, value in items:
            lines.append(f"   {str(key).ljust(width)}: {_fmt_value(value)}")
    return "\n".join(lines)
