"""Command runner for coordinating CLI execution.

Manages logging configuration, resource cleanup, and error handling for
command execution.
"""

from __future__ import annotations

from typing import Callable, Sequence

import click

from PgSearchHelper.cli.commands import ClauseCommand, MatchCommand, SearchCommand, ThresholdCommand
from PgSearchHelper.config import AppConfig
from PgSearchHelper.core.query import MatchLogic
from PgSearchHelper.services import create_matcher
from PgSearchHelper.storage import create_storage
from PgSearchHelper.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def _run(self, action: str, execute: Callable[[], str]) -> str:
        """Configure logging, then build and execute a command via `execute`.

        Raises:
            click.Abort: When the command fails.
        """
        self._configure_logging(action)
        try:
            return execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e

    def run_threshold(self, action: str, length: int, max_typos: int) -> str:
        return self._run(action, lambda: ThresholdCommand(length=length, max_typos=max_typos).execute())

    def run_match(
        self,
        action: str,
        query: str,
        values: Sequence[str],
        *,
        max_typos: int | None = None,
        term_logic: MatchLogic | None = None,
        column_logic: MatchLogic | None = None,
    ) -> str:
        """Evaluate a query, falling back to `matching.*` config defaults."""
        matching = self.config.matching
        return self._run(
            action,
            lambda: MatchCommand(
                matcher=create_matcher(self.config),
                query=query,
                values=values,
                max_typos=matching.max_typos if max_typos is None else max_typos,
                term_logic=term_logic or matching.term_logic,
                column_logic=column_logic or matching.column_logic,
            ).execute(),
        )

    def run_clause(
        self,
        action: str,
        query: str,
        columns: Sequence[str],
        *,
        dialect: str | None = None,
        max_typos: int | None = None,
        term_logic: MatchLogic | None = None,
        column_logic: MatchLogic | None = None,
    ) -> str:
        """Compile a query, falling back to `clause.*` config defaults."""
        clause = self.config.clause
        return self._run(
            action,
            lambda: ClauseCommand(
                dialect=clause.resolve_dialect(dialect),
                query=query,
                columns=columns,
                max_typos=clause.max_typos if max_typos is None else max_typos,
                term_logic=term_logic or clause.term_logic,
                column_logic=column_logic or clause.column_logic,
            ).execute(),
        )

    def run_search(
        self,
        action: str,
        query: str,
        table: str,
        columns: Sequence[str],
        *,
        max_typos: int | None = None,
        term_logic: MatchLogic | None = None,
        column_logic: MatchLogic | None = None,
    ) -> str:
        """Search the configured database, falling back to `clause.*` defaults."""
        clause = self.config.clause
        output = self.config.output

        def execute() -> str:
            db_manager, store = create_storage(self.config)
            with db_manager:
                return SearchCommand(
                    store=store,
                    table=table,
                    columns=columns,
                    query=query,
                    max_typos=clause.max_typos if max_typos is None else max_typos,
                    term_logic=term_logic or clause.term_logic,
                    column_logic=column_logic or clause.column_logic,
                    output_format=output.format,
                    limit=None if output.max_rows == -1 else output.max_rows,
                ).execute()

        return self._run(action, execute)
