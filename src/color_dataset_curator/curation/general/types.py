# color_dataset_curator/curation/general/types.py
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypedDict

"""
types.py.

Does: Define lightweight structural Protocols and callables used for type hints
across the dedupe / prune stages: the name-semantics oracle and the progress sink.
"""


class Semantics(TypedDict):
    kernels: list[str]


class SemanticOracle(Protocol):
    def score_semantic_match(self, color: Mapping[str, Any]) -> float: ...

    def extract_semantics(self, name: str) -> Semantics: ...


ProgressSink = Callable[[float], None]


def no_progress(_pct: float) -> None:
    """Does: Default progress sink; drops every tick."""


__all__ = ["Semantics", "SemanticOracle", "ProgressSink", "no_progress"]

__docformat__ = "google"
