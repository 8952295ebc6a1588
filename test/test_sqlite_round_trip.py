"""Evaluation and compilation must select the same rows.

Clauses compiled with the sqlite dialect are executed against an in-memory
database whose `word_similarity` and `contains_ci` are backed by the same
scorer and containment check the matcher uses, and compared row by row with
the evaluation path.
"""

from __future__ import annotations

import itertools
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PgSearchHelper.compiler.clause import (
    build_match_query_clause,
    build_multi_match_query_clause,
    format_number,
)
from PgSearchHelper.compiler.dialect import SQLITE
from PgSearchHelper.core.threshold import adjusted_typos, calculate_optimal_similarity_threshold
from PgSearchHelper.services.matcher import FuzzyMatcher
from PgSearchHelper.similarity.fuzz_scorer import RapidFuzzScorer
from PgSearchHelper.storage.db import DatabaseManager

_ROWS = [
    (1, "Georgi", "Facello", "Senior Engineer"),
    (2, "Chriss", "Gid", "Sales Manager"),
    (3, "Bezalel", "Simmel", "Staff"),
    (4, "Parto", "Bamford", None),
    (5, None, "O'Brien", "50% Sales Rep"),
    (6, "Axb", "A_b", "Technique Leader"),
    (7, "Kyoichi", "Maliniak", "Senior Staff"),
    (8, "Örjan", "José", "Ingeniør"),
    (9, "ÉMILE", "Åström", None),
]

_QUERIES = [
    "Chriss Gid",
    "Georgi Facello",
    "Sales Manager",
    "Engneer",
    "Senior Staf",
    "o'brien",
    "50%",
    "a_b",
    "zz",
    "Smith Jones",
    "ör",
    "JOSÉ",
    "émile",
    "åström",
    "INGENIØR",
]

_INDEX = {"first_name": 1, "last_name": 2, "title": 3}

_COLUMN_SETS = [
    ("first_name", "last_name"),
    ("title",),
    ("first_name", "last_name", "title"),
]


class TestSqliteRoundTrip(unittest.TestCase):
    def setUp(self) -> None:
        self.scorer = RapidFuzzScorer()
        self.matcher = FuzzyMatcher(self.scorer)
        self.db = DatabaseManager(":memory:", self.scorer)
        conn = self.db.get_connection()
        conn.execute(
            "CREATE TABLE employees (id INTEGER PRIMARY KEY, first_name TEXT, last_name TEXT, title TEXT)"
        )
        conn.executemany("INSERT INTO employees VALUES (?, ?, ?, ?)", _ROWS)
        self.conn = conn

    def tearDown(self) -> None:
        self.db.close()

    def _selected_ids(self, clause: str) -> set[int]:
        return {row[0] for row in self.conn.execute(f"SELECT id FROM employees WHERE {clause}")}

    def test_cutoff_text_parses_to_same_float(self) -> None:
        # A score equal to a cutoff compares the same way in both paths only
        # if SQLite reads the rendered cutoff back as the identical double.
        for length, typos in itertools.product(range(3, 40), range(1, 6)):
            cutoff = calculate_optimal_similarity_threshold(length, adjusted_typos(length, typos))
            with self.subTest(length=length, typos=typos):
                parsed = self.conn.execute(f"SELECT {format_number(cutoff)}").fetchone()[0]
                self.assertEqual(parsed, cutoff)

    def test_single_column_agreement(self) -> None:
        for query, typos, logic, column in itertools.product(
            _QUERIES, (0, 1, 2), ("AND", "OR"), _INDEX
        ):
            with self.subTest(query=query, typos=typos, logic=logic, column=column):
                clause = build_match_query_clause(column, query, typos, logic, dialect=SQLITE)
                expected = {
                    row[0]
                    for row in _ROWS
                    if self.matcher.match_query(row[_INDEX[column]], query, typos, logic)
                }
                self.assertEqual(self._selected_ids(clause), expected)

    def test_multi_column_agreement(self) -> None:
        for query, typos, term_logic, column_logic, columns in itertools.product(
            _QUERIES, (0, 1, 2), ("AND", "OR"), ("AND", "OR"), _COLUMN_SETS
        ):
            with self.subTest(
                query=query, typos=typos, term_logic=term_logic, column_logic=column_logic, columns=columns
            ):
                clause = build_multi_match_query_clause(
                    columns, query, typos, term_logic, column_logic, dialect=SQLITE
                )
                expected = {
                    row[0]
                    for row in _ROWS
                    if self.matcher.multi_match_query(
                        query, typos, term_logic, column_logic, *(row[_INDEX[c]] for c in columns)
                    )
                }
                self.assertEqual(self._selected_ids(clause), expected)

    def test_non_ascii_contains_ignores_case(self) -> None:
        clause = build_match_query_clause("first_name", "ör", 0, dialect=SQLITE)
        self.assertEqual(self._selected_ids(clause), {8})
        clause = build_match_query_clause("last_name", "JOSÉ", 0, dialect=SQLITE)
        self.assertEqual(self._selected_ids(clause), {8})

    def test_empty_query_keeps_vacuous_truth(self) -> None:
        all_ids = {row[0] for row in _ROWS}
        for query, column in itertools.product(("", "  "), _INDEX):
            with self.subTest(query=query, column=column):
                non_null = {row[0] for row in _ROWS if row[_INDEX[column]] is not None}
                evaluated_and = {
                    row[0] for row in _ROWS if self.matcher.match_query(row[_INDEX[column]], query, 1, "AND")
                }
                evaluated_or = {
                    row[0] for row in _ROWS if self.matcher.match_query(row[_INDEX[column]], query, 1, "OR")
                }

                # TRUE also selects NULL values; evaluation never matches them.
                self.assertEqual(
                    self._selected_ids(build_match_query_clause(column, query, 1, "AND", dialect=SQLITE)),
                    all_ids,
                )
                self.assertEqual(evaluated_and, non_null)

                self.assertEqual(
                    self._selected_ids(build_match_query_clause(column, query, 1, "OR", dialect=SQLITE)),
                    set(),
                )
                self.assertEqual(evaluated_or, set())

    def test_chriss_gid_selects_only_matching_row(self) -> None:
        clause = build_multi_match_query_clause(
            ["first_name", "last_name"], "Chriss Gid", 1, "OR", "AND", dialect=SQLITE
        )
        self.assertIn(2, self._selected_ids(clause))

    def test_wildcards_are_literal(self) -> None:
        clause = build_match_query_clause("last_name", "a_b", 0, dialect=SQLITE)
        self.assertEqual(self._selected_ids(clause), {6})
        clause = build_match_query_clause("title", "50%", 0, dialect=SQLITE)
        self.assertEqual(self._selected_ids(clause), {5})


if __name__ == "__main__":
    unittest.main()
