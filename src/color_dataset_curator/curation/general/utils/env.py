"""
env.py.

Does: Read numeric/boolean tunables from environment variables with safe defaults.
Used by: Pruner (neighbour radius, gap-fill ratio, overshoot) and the semantic analyzer.
"""

from __future__ import annotations

import os

__all__ = ["env_float", "env_int", "env_bool"]


def env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip() not in {"0", "false", "False", ""}
