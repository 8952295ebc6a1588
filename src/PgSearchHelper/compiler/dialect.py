"""SQL dialects: identifier/literal quoting and operator names.

The clause compiler only ever inserts text through `quote_identifier` and
`quote_literal`. Identifier quoting cannot make an arbitrary string a
legitimate column, so column names must come from a trusted list.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Final

_RE_PG_BARE_IDENT = re.compile(r"^[a-z_][a-z0-9_]*$")
_RE_FUNCTION_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")

# Keywords PostgreSQL's quote_ident() always quotes (reserved, column-name and
# type/function-name categories).
_PG_QUOTED_KEYWORDS: Final[frozenset[str]] = frozenset(
    """
    all analyse analyze and any array as asc asymmetric authorization between
    bigint binary bit boolean both case cast char character check coalesce
    collate collation column concurrently constraint create cross current_catalog
    current_date current_role current_schema current_time current_timestamp
    current_user dec decimal default deferrable desc distinct do else end except
    exists extract false fetch float for foreign freeze from full grant greatest
    group grouping having ilike in initially inner inout int integer intersect
    interval into is isnull join json lateral leading least left like limit
    localtime localtimestamp national natural nchar none normalize not notnull
    null nullif numeric offset on only or order out outer overlaps overlay placing
    position precision primary real references returning right row select
    session_user setof similar smallint some substring symmetric system_user table
    tablesample then time timestamp to trailing treat trim true union unique user
    using values varchar variadic verbose when where window with xmlattributes
    xmlconcat xmlelement xmlexists xmlforest xmlnamespaces xmlparse xmlpi xmlroot
    xmlserialize xmltable
    """.split()
)


def pg_quote_ident(name: str) -> str:
    """Quote an identifier the way PostgreSQL's `quote_ident` / `%I` does."""
    if _RE_PG_BARE_IDENT.match(name) and name not in _PG_QUOTED_KEYWORDS:
        return name
    return '"' + name.replace('"', '""') + '"'


def pg_quote_literal(value: str) -> str:
    """Quote a literal the way PostgreSQL's `quote_literal` / `%L` does."""
    escaped = value.replace("'", "''")
    if "\\" in value:
        return "E'" + escaped.replace("\\", "\\\\") + "'"
    return "'" + escaped + "'"


def sqlite_quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def sqlite_quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


@dataclass(frozen=True, slots=True)
class SqlDialect:
    """Target-engine specifics for rendering clause fragments.

    Attributes:
        name: Dialect identifier.
        contains_operator: Case-insensitive LIKE operator, used when no
            `contains_function` is set.
        similarity_function: SQL function taking (pattern, target) and
            returning a similarity score.
        quote_identifier: Identifier quoting function.
        quote_literal: String literal quoting function.
        true_literal: Text of a constant true predicate.
        false_literal: Text of a constant false predicate.
        contains_function: SQL function taking (target, pattern) and returning
            case-insensitive containment. Replaces the LIKE operator.
    """

    name: str
    contains_operator: str
    similarity_function: str
    quote_identifier: Callable[[str], str]
    quote_literal: Callable[[str], str]
    true_literal: str = "TRUE"
    false_literal: str = "FALSE"
    contains_function: str | None = None

    def with_similarity_function(self, function_name: str) -> SqlDialect:
        """Return a copy that calls `function_name` for similarity.

        Raises:
            ValueError: If `function_name` is not a plain (optionally
                schema-qualified) SQL name.
        """
        if not _RE_FUNCTION_NAME.match(function_name):
            raise ValueError(f"Invalid similarity function name: {function_name!r}")
        return replace(self, similarity_function=function_name)


POSTGRES = SqlDialect(
    name="postgres",
    contains_operator="ILIKE",
    similarity_function="word_similarity",
    quote_identifier=pg_quote_ident,
    quote_literal=pg_quote_literal,
)

# SQLite LIKE folds ASCII case only, so containment goes through contains_ci.
# Both contains_ci and word_similarity are registered on the connection
# (see storage.db).
SQLITE = SqlDialect(
    name="sqlite",
    contains_operator="LIKE",
    similarity_function="word_similarity",
    quote_identifier=sqlite_quote_ident,
    quote_literal=sqlite_quote_literal,
    contains_function="contains_ci",
)

_DIALECTS: Final[dict[str, SqlDialect]] = {d.name: d for d in (POSTGRES, SQLITE)}


def get_dialect(name: str) -> SqlDialect:
    """Return a built-in dialect by name.

    Raises:
        ValueError: If the dialect is unknown.
    """
    dialect = _DIALECTS.get(name)
    if dialect is None:
        raise ValueError(f"Unsupported dialect: {name}. Use one of {sorted(_DIALECTS)}")
    return dialect


def supported_dialect_names() -> tuple[str, ...]:
    return tuple(_DIALECTS.keys())
