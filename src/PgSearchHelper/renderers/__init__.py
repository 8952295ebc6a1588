"""Output renderers for search results."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Iterable, Mapping

from PgSearchHelper.renderers.console import render_text
from PgSearchHelper.renderers.json import render_json


def render_rows(rows: Iterable[Mapping[str, Any]], fmt: str, *, query: str | None = None) -> str:
    """Render rows in the configured output format.

    Raises:
        ValueError: If `fmt` is not text/json.
    """
    renderers: dict[str, Callable[[], str]] = {
        "text": lambda: render_text(rows),
        "json": lambda: render_json(rows, query=query),
    }
    renderer = renderers.get(fmt)
    if renderer is None:
        raise ValueError(f"Unsupported output format: {fmt}")
    return renderer()


__all__ = ["render_json", "render_rows", "render_text"]
