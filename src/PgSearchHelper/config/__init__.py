"""Public configuration API for PgSearchHelper."""

from __future__ import annotations

from PgSearchHelper.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from PgSearchHelper.config.clause import ClauseConfig
from PgSearchHelper.config.matching import MatchingConfig
from PgSearchHelper.config.output import OutputConfig
from PgSearchHelper.config.runtime import RuntimeConfig
from PgSearchHelper.config.storage import StorageConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "ClauseConfig",
    "MatchingConfig",
    "OutputConfig",
    "RuntimeConfig",
    "StorageConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
