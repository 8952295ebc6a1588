"""CLI tests through click's CliRunner."""

from __future__ import annotations

import json
import sqlite3
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import click
from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PgSearchHelper.cli import CommandRunner, cli
from PgSearchHelper.config import load_config
from PgSearchHelper.storage import create_storage


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_threshold(self) -> None:
        result = self.runner.invoke(cli, ["threshold", "6", "2"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "0.25")

    def test_threshold_rejects_negative(self) -> None:
        result = self.runner.invoke(cli, ["threshold", "6", "-1"])
        self.assertNotEqual(result.exit_code, 0)

    def test_match_single_value(self) -> None:
        result = self.runner.invoke(cli, ["match", "Georgi Facello", "-v", "Georgi Facello", "--typos", "0"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "true")

    def test_match_multiple_values(self) -> None:
        result = self.runner.invoke(
            cli,
            ["match", "Chriss Gid", "-v", "Chriss", "-v", "Gid", "--term-logic", "or", "--column-logic", "AND"],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "true")

    def test_match_no_hit(self) -> None:
        result = self.runner.invoke(cli, ["match", "zzzz", "-v", "Tom"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "false")

    def test_clause_uses_config_defaults(self) -> None:
        result = self.runner.invoke(cli, ["clause", "Chriss Gid", "-c", "first_name", "-c", "last_name"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            result.output.strip(),
            "((word_similarity('Chriss', first_name) >= 0.25 OR word_similarity('Gid', first_name) >= 0.4)"
            " AND (word_similarity('Chriss', last_name) >= 0.25 OR word_similarity('Gid', last_name) >= 0.4))",
        )

    def test_clause_single_column_sqlite(self) -> None:
        result = self.runner.invoke(
            cli, ["clause", "ab", "-c", "title", "--dialect", "sqlite", "--term-logic", "AND"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "(contains_ci(\"title\", 'ab'))")

    def test_search(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = Path(tmp) / "search.db"
            conn = sqlite3.connect(db_path)
            conn.execute("CREATE TABLE employees (id INTEGER PRIMARY KEY, first_name TEXT, last_name TEXT)")
            conn.executemany(
                "INSERT INTO employees VALUES (?, ?, ?)",
                [(1, "Tom", "Baker"), (2, "Chriss", "Gid"), (3, "Anna", "Payne")],
            )
            conn.commit()
            conn.close()

            config_path = Path(tmp) / "override.yml"
            config_path.write_text(
                f"log:\n  level: WARNING\nstorage:\n  db_path: {db_path.as_posix()}\noutput:\n  format: json\n",
                encoding="utf-8",
            )
            result = self.runner.invoke(
                cli,
                [
                    "--config",
                    str(config_path),
                    "search",
                    "Chriss Gid",
                    "--table",
                    "employees",
                    "-c",
                    "first_name",
                    "-c",
                    "last_name",
                ],
            )

        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload["query"], "Chriss Gid")
        self.assertEqual([row["id"] for row in payload["rows"]], [2])

    def test_search_unknown_table_aborts(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "override.yml"
            config_path.write_text(
                f"log:\n  level: CRITICAL\nstorage:\n  db_path: {(Path(tmp) / 'empty.db').as_posix()}\n",
                encoding="utf-8",
            )
            result = self.runner.invoke(
                cli, ["--config", str(config_path), "search", "x", "--table", "nope", "-c", "a"]
            )
        self.assertNotEqual(result.exit_code, 0)


class TestCommandRunner(unittest.TestCase):
    def test_failed_search_aborts_and_closes_database(self) -> None:
        opened = []

        def _create_storage(config):
            db_manager, store = create_storage(config)
            opened.append(db_manager)
            return db_manager, store

        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "override.yml"
            config_path.write_text(
                f"log:\n  level: CRITICAL\nstorage:\n  db_path: {(Path(tmp) / 'empty.db').as_posix()}\n",
                encoding="utf-8",
            )
            runner = CommandRunner(load_config(config_path))
            with patch("PgSearchHelper.cli.runner.create_storage", side_effect=_create_storage):
                with self.assertRaises(click.Abort):
                    runner.run_search("search", "x", "nope", ["a"])

        self.assertEqual(len(opened), 1)
        self.assertIsNone(opened[0].conn)


if __name__ == "__main__":
    unittest.main()
