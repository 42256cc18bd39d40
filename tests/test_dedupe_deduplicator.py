# tests/test_dedupe_deduplicator.py
"""Two-pass semantic deduplication: HEX groups, NAME groups, winner scoring, report."""

from __future__ import annotations

import importlib

import pytest

dd = importlib.import_module("color_dataset_curator.curation.dedupe.deduplicator")


def _c(hex_value: str, name: str, **extra):
    return {"hex": hex_value, "name": name, **extra}


# ──────────────────────────────────────────────────────────────────────────────
# Pass-through
# ──────────────────────────────────────────────────────────────────────────────
def test_no_duplicates_is_identity(oracle):
    colors = [_c("#ff0000", "Red"), _c("#00ff00", "Green"), _c("#0000ff", "Blue")]
    res = dd.deduplicate(colors, analyzer=oracle)
    assert res["colors"] == colors
    assert res["stats"] == []


def test_empty_input(oracle):
    assert dd.deduplicate([], analyzer=oracle) == {"colors": [], "stats": []}


# ──────────────────────────────────────────────────────────────────────────────
# HEX phase
# ──────────────────────────────────────────────────────────────────────────────
def test_same_hex_collapses_to_one(oracle):
    colors = [_c("#FF0000", "Red"), _c("#ff0000", "Red")]
    res = dd.deduplicate(colors, analyzer=oracle)
    assert len(res["colors"]) == 1
    assert res["colors"][0] is colors[0]
    group = res["stats"][0]
    assert group["hex"] == "#ff0000"
    assert group["names"] == ["Red", "Red"]
    assert group["selected"] == "Red"
    assert group["reason"].endswith("| HEX")


def test_priority_membership_decides_the_winner(oracle):
    colors = [_c("#ff0000", "Bright Red"), _c("#ff0000", "Red")]
    without = dd.deduplicate(colors, analyzer=oracle)
    assert without["stats"][0]["selected"] == "Bright Red"

    res = dd.deduplicate(colors, [{"hex": "#FF0000", "name": "red"}], analyzer=oracle)
    assert res["colors"][0]["name"] == "Red"
    assert "Priority dataset" in res["stats"][0]["reason"]


def test_semantic_score_drives_selection_and_reason(oracle_factory):
    oracle = oracle_factory({"scarlet": 100.0, "blob": 10.0})
    colors = [_c("#ff2400", "Blob"), _c("#ff2400", "Scarlet")]
    res = dd.deduplicate(colors, analyzer=oracle)
    assert res["colors"][0]["name"] == "Scarlet"
    assert res["stats"][0]["reason"] == "Semantic: 100 | HEX"


def test_gray_grey_reason(oracle):
    res = dd.deduplicate([_c("#808080", "gray"), _c("#808080", "grey")], analyzer=oracle)
    assert "CSS standard" in res["stats"][0]["reason"]


# ──────────────────────────────────────────────────────────────────────────────
# NAME phase
# ──────────────────────────────────────────────────────────────────────────────
def test_same_name_collapses_and_unnamed_stay_in_place(oracle):
    colors = [
        _c("#ff0000", "Red"),
        _c("#000000", ""),
        _c("#fe0000", "red"),
        _c("#010101", ""),
    ]
    res = dd.deduplicate(colors, analyzer=oracle)
    assert [c["hex"] for c in res["colors"]] == ["#ff0000", "#000000", "#010101"]
    assert len(res["stats"]) == 1
    group = res["stats"][0]
    assert group["hex"] == "#ff0000, #fe0000"
    assert group["names"] == ["Red", "red"]
    assert group["reason"].endswith("| NAME")


def test_output_has_unique_hexes_and_unique_names(oracle):
    colors = [
        _c("#ff0000", "Red"),
        _c("#ff0000", "Scarlet"),
        _c("#ee0000", "Red"),
        _c("#00ff00", "Green"),
        _c("#00ff00", "Green"),
    ]
    res = dd.deduplicate(colors, analyzer=oracle)
    hexes = [c["hex"].lower() for c in res["colors"]]
    names = [c["name"].lower() for c in res["colors"] if c["name"]]
    assert len(hexes) == len(set(hexes))
    assert len(names) == len(set(names))
    assert all(any(c is o for o in colors) for c in res["colors"])


def test_progress_ticks_reach_100(oracle):
    seen: list[float] = []
    dd.deduplicate([_c("#ff0000", "Red"), _c("#ff0000", "Red")], analyzer=oracle, progress=seen.append)
    assert seen == sorted(seen)
    assert seen[-1] == 100.0


# ──────────────────────────────────────────────────────────────────────────────
# Scoring & report
# ──────────────────────────────────────────────────────────────────────────────
def test_score_candidate_components(oracle):
    d = dd.SemanticDeduplicator(oracle)
    group = [_c("#ff0000", "Bright Red"), _c("#ff0000", "Red")]
    # 50*0.3 + min(7*10,100)*0.15 + 10*0.1 + 2*5*0.05
    assert d.score_candidate(group, 0) == pytest.approx(15 + 10.5 + 1.0 + 0.5)


def test_ties_resolve_to_first_member(oracle):
    d = dd.SemanticDeduplicator(oracle)
    group = [_c("#ff0000", "Red"), _c("#ff0000", "Red")]
    assert d.select_best_name(group) is group[0]


def test_generate_report(oracle):
    colors = [_c("#ff0000", "Red"), _c("#ff0000", "Red"), _c("#0000ff", "Blue Sky"), _c("#80ff00", "")]
    report = dd.generate_report(colors, analyzer=oracle)
    assert report["summary"] == {
        "original": 4,
        "deduplicated": 3,
        "removed": 1,
        "removal_rate": "25.0%",
    }
    assert len(report["duplicates"]) == 1
    assert report["analysis"]["by_category"] == {"warm": 1, "cool": 1, "neutral": 1}
    assert report["analysis"]["semantic_distribution"] == {"red": 1, "blue": 1, "unclassified": 1}
