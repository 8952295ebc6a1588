"""Tests for layered config parsing and validation."""

import sys
import tempfile
import unittest
from copy import deepcopy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PgSearchHelper.compiler.dialect import SQLITE
from PgSearchHelper.config import load_config, load_config_with_defaults, parse_config_dict
from PgSearchHelper.core.errors import InvalidLogicValue
from PgSearchHelper.core.query import MatchLogic


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "matching": {"max_typos": 1, "term_logic": "AND", "column_logic": "AND", "scorer": "partial_ratio"},
        "clause": {
            "dialect": "postgres",
            "similarity_function": "word_similarity",
            "max_typos": 1,
            "term_logic": "OR",
            "column_logic": "AND",
        },
        "storage": {"db_path": "database/search.db"},
        "output": {"format": "text", "max_rows": 50},
    }


class TestPackagedDefaults(unittest.TestCase):
    def test_defaults_load(self) -> None:
        cfg = load_config()
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.matching.max_typos, 1)
        self.assertIs(cfg.matching.term_logic, MatchLogic.AND)
        self.assertEqual(cfg.matching.scorer, "partial_ratio")
        self.assertEqual(cfg.clause.dialect, "postgres")
        self.assertIs(cfg.clause.term_logic, MatchLogic.OR)
        self.assertIs(cfg.clause.column_logic, MatchLogic.AND)
        self.assertEqual(cfg.output.format, "text")


class TestConfigOverride(unittest.TestCase):
    def test_override_merges_with_defaults(self) -> None:
        override_yaml = """
log:
  level: debug

clause:
  dialect: sqlite
  term_logic: and
"""
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")
            cfg = load_config(override_path)

        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.clause.dialect, "sqlite")
        self.assertIs(cfg.clause.term_logic, MatchLogic.AND)
        self.assertIs(cfg.clause.column_logic, MatchLogic.AND)
        self.assertEqual(cfg.clause.max_typos, 1)
        self.assertEqual(cfg.clause.resolve_dialect().name, SQLITE.name)

    def test_empty_override_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text("{}", encoding="utf-8")
            cfg = load_config_with_defaults(override_path)
        self.assertEqual(cfg.storage.db_path, "database/search.db")

    def test_defaults_text(self) -> None:
        cfg = load_config_with_defaults(
            None,
            _defaults_text="""
log: {level: WARNING, to_file: false, dir: log}
matching: {max_typos: 2, term_logic: OR, column_logic: OR, scorer: ratio}
clause: {dialect: postgres, similarity_function: similarity, max_typos: 0, term_logic: OR, column_logic: AND}
storage: {db_path: x.db}
output: {format: json, max_rows: -1}
""",
        )
        self.assertEqual(cfg.matching.max_typos, 2)
        self.assertEqual(cfg.clause.resolve_dialect().similarity_function, "similarity")
        self.assertEqual(cfg.output.max_rows, -1)


class TestConfigValidation(unittest.TestCase):
    def test_base_config_is_valid(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.storage.db_path, "database/search.db")

    def test_missing_section(self) -> None:
        raw = _base_raw_config()
        del raw["matching"]
        with self.assertRaises(ValueError):
            parse_config_dict(raw)

    def test_invalid_logic(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["matching"]["column_logic"] = "XOR"
        with self.assertRaises(InvalidLogicValue):
            parse_config_dict(raw)

    def test_negative_typos(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["clause"]["max_typos"] = -1
        with self.assertRaises(ValueError):
            parse_config_dict(raw)

    def test_wrong_type(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["matching"]["max_typos"] = "1"
        with self.assertRaises(TypeError):
            parse_config_dict(raw)

    def test_unknown_scorer(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["matching"]["scorer"] = "trigram"
        with self.assertRaises(ValueError):
            parse_config_dict(raw)

    def test_unknown_dialect(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["clause"]["dialect"] = "oracle"
        with self.assertRaises(ValueError):
            parse_config_dict(raw)

    def test_unsafe_similarity_function(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["clause"]["similarity_function"] = "f(); drop table t"
        with self.assertRaises(ValueError):
            parse_config_dict(raw)

    def test_invalid_output(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["output"]["max_rows"] = 0
        with self.assertRaises(ValueError):
            parse_config_dict(raw)
        raw["output"] = {"format": "xml", "max_rows": 5}
        with self.assertRaises(ValueError):
            parse_config_dict(raw)

    def test_invalid_log_level(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["log"]["level"] = "VERBOSE"
        with self.assertRaises(ValueError):
            parse_config_dict(raw)


if __name__ == "__main__":
    unittest.main()
