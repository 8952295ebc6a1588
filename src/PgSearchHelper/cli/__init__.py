"""CLI package for PgSearchHelper command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from PgSearchHelper.cli.runner import CommandRunner
from PgSearchHelper.cli.ui import cli


def main() -> None:
    """Run the PgSearchHelper CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
