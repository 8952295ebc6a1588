"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to the
runner. Options left unset fall back to the loaded config.
"""

from __future__ import annotations

import os
from pathlib import Path

import click
from dotenv import load_dotenv

from PgSearchHelper.cli.runner import CommandRunner
from PgSearchHelper.compiler.dialect import supported_dialect_names
from PgSearchHelper.config import load_config
from PgSearchHelper.core.query import MatchLogic

_LOGIC = click.Choice([m.value for m in MatchLogic], case_sensitive=False)


def _logic(value: str | None) -> MatchLogic | None:
    return MatchLogic(value.upper()) if value else None


def _logic_options(func):
    func = click.option("--column-logic", type=_LOGIC, default=None, help="AND/OR across columns.")(func)
    func = click.option("--term-logic", type=_LOGIC, default=None, help="AND/OR between terms.")(func)
    func = click.option(
        "--typos", "max_typos", type=click.IntRange(min=0), default=None, help="Typo budget per term."
    )(func)
    return func


@click.group(help="PgSearchHelper: typo-tolerant matching and SQL clause compilation.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    envvar="PG_SEARCH_HELPER_CONFIG",
    help="YAML file merged over the packaged defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before resolving config,
    so PG_SEARCH_HELPER_CONFIG may be set there.
    """
    load_dotenv()
    if config_path is None:
        env_path = os.environ.get("PG_SEARCH_HELPER_CONFIG")
        config_path = Path(env_path) if env_path else None
    ctx.obj = CommandRunner(load_config(config_path))


@cli.command("threshold")
@click.argument("length", type=click.IntRange(min=0))
@click.argument("max_typos", type=click.IntRange(min=0))
@click.pass_context
def threshold_cmd(ctx: click.Context, length: int, max_typos: int) -> None:
    """Print the similarity cutoff for LENGTH characters and MAX_TYPOS typos."""
    click.echo(ctx.obj.run_threshold(ctx.command.name, length, max_typos))


@cli.command("match")
@click.argument("query")
@click.option("-v", "--value", "values", multiple=True, required=True, help="Text value; repeatable.")
@_logic_options
@click.pass_context
def match_cmd(
    ctx: click.Context,
    query: str,
    values: tuple[str, ...],
    max_typos: int | None,
    term_logic: str | None,
    column_logic: str | None,
) -> None:
    """Print whether the values match QUERY (true/false)."""
    click.echo(
        ctx.obj.run_match(
            ctx.command.name,
            query,
            values,
            max_typos=max_typos,
            term_logic=_logic(term_logic),
            column_logic=_logic(column_logic),
        )
    )


@cli.command("clause")
@click.argument("query")
@click.option("-c", "--column", "columns", multiple=True, required=True, help="Column name; repeatable.")
@click.option("--dialect", type=click.Choice(supported_dialect_names()), default=None)
@_logic_options
@click.pass_context
def clause_cmd(
    ctx: click.Context,
    query: str,
    columns: tuple[str, ...],
    dialect: str | None,
    max_typos: int | None,
    term_logic: str | None,
    column_logic: str | None,
) -> None:
    """Print the SQL predicate matching QUERY against the columns."""
    click.echo(
        ctx.obj.run_clause(
            ctx.command.name,
            query,
            columns,
            dialect=dialect,
            max_typos=max_typos,
            term_logic=_logic(term_logic),
            column_logic=_logic(column_logic),
        )
    )


@cli.command("search")
@click.argument("query")
@click.option("--table", required=True, help="Table or view to search.")
@click.option("-c", "--column", "columns", multiple=True, required=True, help="Column name; repeatable.")
@_logic_options
@click.pass_context
def search_cmd(
    ctx: click.Context,
    query: str,
    table: str,
    columns: tuple[str, ...],
    max_typos: int | None,
    term_logic: str | None,
    column_logic: str | None,
) -> None:
    """Search a table of the configured SQLite database for QUERY."""
    output = ctx.obj.run_search(
        ctx.command.name,
        query,
        table,
        columns,
        max_typos=max_typos,
        term_logic=_logic(term_logic),
        column_logic=_logic(column_logic),
    )
    if output:
        click.echo(output)
