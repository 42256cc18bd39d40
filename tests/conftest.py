# tests/conftest.py
"""Shared fixtures: src/ on sys.path, a deterministic semantic oracle, record builders."""

from __future__ import annotations

import colorsys
import sys
from pathlib import Path

import pytest


# ---------- Add src/ to sys.path for src-layout projects ----------
def _ensure_src_on_path() -> None:
    """Prepend 'src' to sys.path if present on disk."""
    src = (Path(__file__).resolve().parent.parent / "src")
    if src.is_dir():
        p = str(src)
        if p not in sys.path:
            sys.path.insert(0, p)


_ensure_src_on_path()


class StubOracle:
    """Deterministic SemanticOracle: fixed score per lower-case name, first word as kernel."""

    def __init__(self, scores: dict[str, float] | None = None, default: float = 50.0) -> None:
        self.scores = {k.lower(): v for k, v in (scores or {}).items()}
        self.default = default
        self.calls = 0

    def score_semantic_match(self, color):
        self.calls += 1
        return self.scores.get(str(color.get("name") or "").lower(), self.default)

    def extract_semantics(self, name):
        words = str(name or "").lower().split()
        return {"kernels": words[:1]}


@pytest.fixture
def oracle() -> StubOracle:
    return StubOracle()


def hsl_record(h: float, s: float, l: float, name: str = "", family: str | None = None) -> dict:
    """Build a canonical record from HSL (h degrees, s/l fractions)."""
    from color_dataset_curator.curation.color.metrics import rgb_to_hex
    from color_dataset_curator.curation.color.records import build_record

    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l, s)
    return build_record(rgb_to_hex((r, g, b)), name, family=family)


@pytest.fixture
def make_hsl_record():
    return hsl_record


@pytest.fixture
def oracle_factory():
    return StubOracle
