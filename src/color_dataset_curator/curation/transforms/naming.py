"""
naming.py
=========

Does: Title-case color names word by word ("dark  OLIVE green" → "Dark Olive Green").
Used By: The `capitalize` CLI command.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["capitalize", "capitalize_names"]


def capitalize(name: str) -> str:
    return " ".join(w[:1].upper() + w[1:].lower() for w in str(name or "").split())


def capitalize_names(records: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
    data = [{**rec, "name": capitalize(rec.get("name", ""))} for rec in records]
    return {"original": len(records), "capitalized": len(data), "data": data}
