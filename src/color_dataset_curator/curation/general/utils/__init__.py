# src/color_dataset_curator/curation/general/utils/__init__.py
"""

Does: Provide data-table loading, env tunables and topic-gated tracing for the curation stack.
Returns: Public API via load_config/data_dir, env_* readers and debug/reload_topics.
Used by: Semantic analyzer, pruner, pipelines, tests.
"""

from __future__ import annotations

from .env import env_bool, env_float, env_int
from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    DataDirNotFound,
    data_dir,
    load_config,
)
from .log import (
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Data tables
    "load_config",
    "data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    # Env tunables
    "env_float",
    "env_int",
    "env_bool",
    # Tracing
    "debug",
    "reload_topics",
    "topic_enabled",
]
