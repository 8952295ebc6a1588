"""JSON output for search results."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping


def render_json(rows: Iterable[Mapping[str, Any]], *, query: str | None = None) -> str:
    """Render rows as a JSON document.

    Args:
        rows: Result rows keyed by column name.
        query: Optional raw query echoed in the document.

    Returns:
        Pretty-printed JSON text.
    """
    items = [dict(row) for row in rows]
    payload: dict[str, Any] = {"count": len(items), "rows": items}
    if query is not None:
        payload = {"query": query, **payload}
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)
