"""Application config orchestration and YAML loading entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from PgSearchHelper.config.clause import ClauseConfig, check_clause, load_clause
from PgSearchHelper.config.matching import MatchingConfig, check_matching, load_matching
from PgSearchHelper.config.output import OutputConfig, check_output, load_output
from PgSearchHelper.config.runtime import RuntimeConfig, check_runtime, load_runtime
from PgSearchHelper.config.storage import StorageConfig, check_storage, load_storage

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "default.yml"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    matching: MatchingConfig
    clause: ClauseConfig
    storage: StorageConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    matching = load_matching(raw)
    clause = load_clause(raw)
    storage = load_storage(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_matching(matching)
    check_clause(clause)
    check_storage(storage)
    check_output(output)

    return AppConfig(
        runtime=runtime,
        matching=matching,
        clause=clause,
        storage=storage,
        output=output,
    )


def load_config(path: Path | None = None) -> AppConfig:
    """Load packaged defaults, deep-merged with an optional override file."""
    return load_config_with_defaults(path, default_path=DEFAULT_CONFIG_PATH)


def load_config_with_defaults(
    config_path: Path | None,
    default_path: Path = DEFAULT_CONFIG_PATH,
    *,
    _defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override file, or None to use defaults only.
        default_path: Defaults file.
        _defaults_text: Defaults YAML text used instead of `default_path`.

    Returns:
        Parsed and validated configuration.
    """
    if _defaults_text is None:
        _defaults_text = default_path.read_text(encoding="utf-8")
    base = parse_yaml(_defaults_text)
    if config_path is None or config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
