# tests/test_general_semantics.py
"""Kernel-lexicon semantic oracle: kernel extraction and name/family scoring."""

from __future__ import annotations

import importlib

import pytest

an = importlib.import_module("color_dataset_curator.curation.general.semantics.analyzer")

LEXICON = {
    "red": ["crimson", "red"],
    "pink": ["blush"],
    "blue": ["navy", "ocean"],
    "nature": ["ocean"],
}


@pytest.fixture
def analyzer(monkeypatch):
    monkeypatch.setattr(an, "is_standard_name", lambda name, hx: False)
    return an.LexiconSemanticAnalyzer(LEXICON)


# ──────────────────────────────────────────────────────────────────────────────
# Kernels
# ──────────────────────────────────────────────────────────────────────────────
def test_kernel_index_and_multi_family_words(analyzer):
    assert "crimson" in analyzer.kernels
    assert analyzer.kernel_families("OCEAN") == ["blue", "nature"]
    assert analyzer.kernel_families("unknown") == []


def test_extract_semantics_keeps_name_order(analyzer):
    assert analyzer.extract_semantics("Navy Crimson Dream") == {"kernels": ["navy", "crimson"]}
    assert analyzer.extract_semantics("") == {"kernels": []}


# ──────────────────────────────────────────────────────────────────────────────
# Scoring
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "color,score",
    [
        ({"hex": "#dc143c", "name": "Crimson Dream", "family": "red"}, 100.0),
        ({"hex": "#dc143c", "name": "Crimson", "family": "rose"}, 70.0),
        ({"hex": "#dc143c", "name": "crimson", "family": "blue"}, 25.0),
        ({"hex": "#dc143c", "name": "Mystery", "family": "red"}, 50.0),
        ({"hex": "#dc143c", "name": "", "family": "red"}, 50.0),
    ],
)
def test_score_semantic_match(analyzer, color, score):
    assert analyzer.score_semantic_match(color) == score


def test_score_derives_family_from_hex_when_missing(analyzer):
    assert analyzer.score_semantic_match({"hex": "#000080", "name": "Navy Night"}) == 100.0


def test_standard_name_scores_exact():
    real = an.LexiconSemanticAnalyzer({"red": ["red"]})
    assert real.score_semantic_match({"hex": "#000080", "name": "navy", "family": "red"}) == 100.0


def test_packaged_lexicon_loads_and_validates(monkeypatch):
    monkeypatch.delenv("CURATOR_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    lexicon = an.load_kernel_lexicon()
    assert "crimson" in lexicon["red"]
    assert set(lexicon) <= set(importlib.import_module(
        "color_dataset_curator.curation.color.constants").FAMILIES)


def test_default_analyzer_is_shared():
    assert an.get_default_analyzer() is an.get_default_analyzer()
    assert "sage" in an.get_default_analyzer().kernels
