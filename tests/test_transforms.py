# tests/test_transforms.py
"""Dataset transforms: recalc from hex, (de)normalization, sorting, names, merges, profile."""

from __future__ import annotations

import importlib

import pytest

tf = importlib.import_module("color_dataset_curator.curation.transforms")


def _rec(hex_value, name="", family=None, h=0, s=0.5, l=0.5):
    rec = {"hex": hex_value, "name": name, "hsl": {"h": h, "s": s, "l": l}}
    if family:
        rec["family"] = family
    return rec


# ──────────────────────────────────────────────────────────────────────────────
# recalc
# ──────────────────────────────────────────────────────────────────────────────
def test_recalc_rederives_fields_and_family():
    src = [{"hex": "#FF0000", "name": "Red", "family": "blue", "rgb": [0, 0, 0]}]
    res = tf.recalculate_from_hex(src)
    out = res["data"][0]
    assert out["hex"] == "#ff0000"
    assert out["rgb"] == (1.0, 0.0, 0.0)
    assert out["hsl"] == {"h": 0, "s": 1.0, "l": 0.5}
    assert out["hue_range"] == (0, 1.0)
    assert out["family"] == "red"
    assert res["stats"]["recalculated"] == {"rgb": 1, "hsl": 1, "hue_range": 1, "family": 1}
    assert src[0]["family"] == "blue"


def test_recalc_keep_family_and_invalid_hex():
    src = [{"hex": "#ff0000", "family": "blue"}, {"hex": "bogus", "name": "x"}]
    res = tf.recalculate_from_hex(src, keep_family=True)
    assert res["data"][0]["family"] == "blue"
    assert res["data"][1] == {"hex": "bogus", "name": "x"}
    assert res["stats"]["errors"] == 1
    assert res["stats"]["recalculated"]["family"] == 0


# ──────────────────────────────────────────────────────────────────────────────
# normalize / denormalize
# ──────────────────────────────────────────────────────────────────────────────
def test_normalize_full_ranges():
    res = tf.process_normalization([{"rgb": [255, 0, 128], "hsl": {"h": 180, "s": 50, "l": 25}}])
    out = res["data"][0]
    assert out["rgb"] == [1.0, 0.0, 0.502]
    assert out["hsl"] == {"h": 0.5, "s": 0.5, "l": 0.25}
    assert res["stats"]["rgb_processed"] == 1
    assert res["stats"]["hsl_processed"] == 1


def test_denormalize_back_to_full_ranges():
    res = tf.process_normalization(
        [{"rgb": [1.0, 0.0, 0.502], "hsl": {"h": 0.5, "s": 0.5, "l": 0.25}}], "denormalize"
    )
    out = res["data"][0]
    assert out["rgb"] == [255, 0, 128]
    assert out["hsl"] == {"h": 180, "s": 50, "l": 25}


def test_normalize_target_and_skips():
    res = tf.process_normalization(
        [{"rgb": "bad", "hsl": {"h": 180, "s": 50, "l": 25}}, {"rgb": {"r": 255, "g": 255, "b": 0}}],
        target="rgb",
    )
    assert res["data"][0]["hsl"] == {"h": 180, "s": 50, "l": 25}
    assert res["data"][1]["rgb"] == [1.0, 1.0, 0.0]
    assert res["stats"]["rgb_skipped"] == 1
    assert res["stats"]["hsl_processed"] == 0


@pytest.mark.parametrize("bad", [None, "1", True, float("nan")])
def test_process_value_rejects_non_numbers(bad):
    with pytest.raises(ValueError):
        tf.process_value(bad, "normalize", 255)


def test_recalc_then_denormalize_keeps_small_hue_in_degrees():
    recalced = tf.recalculate_from_hex([{"hex": "#ff0400"}])["data"]
    assert recalced[0]["hsl"]["h"] == 1

    full = tf.process_normalization(recalced, "denormalize", "all")["data"][0]
    assert full["hsl"] == {"h": 1, "s": 100, "l": 50}

    unit = tf.process_normalization(recalced, "normalize", "all")["data"][0]
    assert unit["hsl"] == {"h": 0.003, "s": 1.0, "l": 0.5}
    back = tf.process_normalization([unit], "denormalize", "hsl")["data"][0]
    assert back["hsl"]["h"] == 1


@pytest.mark.parametrize(
    "value, mode, expected",
    [
        (1, "normalize", 0.003),
        (0, "normalize", 0.0),
        (359, "normalize", 0.997),
        (0.5, "normalize", 0.5),
        (1, "denormalize", 1),
        (0.25, "denormalize", 90),
        (1.0, "denormalize", 0),
        (200.4, "denormalize", 200),
    ],
)
def test_process_hue_units(value, mode, expected):
    assert tf.process_hue(value, mode) == expected


# ──────────────────────────────────────────────────────────────────────────────
# sort
# ──────────────────────────────────────────────────────────────────────────────
def test_sort_by_family_orders_families_by_mean_hue():
    a = _rec("#a", "A", "red", h=0, l=0.5)
    b = _rec("#b", "B", "blue", h=240, l=0.3)
    c = _rec("#c", "C", "red", h=10, l=0.2)
    d = _rec("#d", "D", "blue", h=230, l=0.6)
    res = tf.sort_records([a, b, c, d], "family")
    assert [r["name"] for r in res["data"]] == ["C", "A", "B", "D"]
    assert res["stats"]["unique_values"] == 2


def test_sort_by_hue_blocks():
    e = _rec("#e", "E", h=100, l=0.5)
    f = _rec("#f", "F", h=10, l=0.9)
    g = _rec("#0", "G", h=20, l=0.1)
    assert [r["name"] for r in tf.sort_records([e, f, g], "hue")["data"]] == ["G", "F", "E"]


def test_sort_by_name_reverse_and_hex():
    recs = [_rec("#bbb", "beta"), _rec("#AAA", "Alpha"), _rec("#ccc", "gamma")]
    assert [r["name"] for r in tf.sort_records(recs, "name", reverse=True)["data"]] == ["gamma", "beta", "Alpha"]
    assert [r["hex"] for r in tf.sort_records(recs, "hex")["data"]] == ["#AAA", "#bbb", "#ccc"]


def test_sort_unknown_field_raises():
    with pytest.raises(ValueError):
        tf.sort_records([], "weight")


# ──────────────────────────────────────────────────────────────────────────────
# names
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "raw,expected",
    [("dark  OLIVE green", "Dark Olive Green"), ("", ""), (None, ""), ("sky-blue", "Sky-blue")],
)
def test_capitalize(raw, expected):
    assert tf.capitalize(raw) == expected


def test_capitalize_names_copies_records():
    src = [{"hex": "#fff", "name": "snow white"}]
    res = tf.capitalize_names(src)
    assert res["data"][0]["name"] == "Snow White"
    assert src[0]["name"] == "snow white"
    assert (res["original"], res["capitalized"]) == (1, 1)


# ──────────────────────────────────────────────────────────────────────────────
# merges
# ──────────────────────────────────────────────────────────────────────────────
def test_merge_datasets_dedupes_union(oracle):
    first = [{"hex": "#ff0000", "name": "Red"}]
    second = [{"hex": "#ff0000", "name": "Red"}, {"hex": "#0000ff", "name": "Blue"}]
    res = tf.merge_datasets([first, second], analyzer=oracle)
    assert res["stats"]["merged"] == 2
    assert res["stats"]["removed"] == 1
    assert res["stats"]["input_count"] == 2
    assert len(res["stats"]["duplicates"]) == 1

    raw = tf.merge_datasets([first, second], dedupe=False)
    assert raw["stats"]["merged"] == 3


def test_priority_merge_skips_exact_and_near_colors():
    primary = [{"hex": "#ff0000", "name": "Red", "rgb": [255, 0, 0]}]
    secondary = [
        {"hex": "#FF0000", "name": "Red 2"},
        {"hex": "#fe0000", "name": "Almost Red"},
        {"hex": "#0000ff", "name": "Blue"},
    ]
    res = tf.priority_merge(primary, secondary)
    assert [c["hex"] for c in res["data"]] == ["#0000ff", "#ff0000"]
    assert res["stats"]["skipped_from_secondary"] == 2
    assert res["stats"]["skip_rate"] == 66.7
    assert res["stats"]["delta_e_threshold"] == 2.3


def test_priority_merge_threshold_zero_keeps_near_colors():
    res = tf.priority_merge([{"hex": "#ff0000"}], [{"hex": "#fe0000"}], threshold=0)
    assert res["stats"]["total_unique"] == 2
    assert res["stats"]["skip_rate"] == 0.0


# ──────────────────────────────────────────────────────────────────────────────
# analyze
# ──────────────────────────────────────────────────────────────────────────────
def test_analyze_dataset_profile():
    recs = [
        {"hex": "#ff0000", "name": "Red", "family": "red"},
        {"hex": "#FF0000", "name": "red"},
        {"hex": "#abc", "name": "Sky Blue 2"},
        {"hex": "nothex", "name": "LOUD"},
    ]
    rep = tf.analyze_dataset(recs)
    assert (rep["total"], rep["valid"], rep["invalid"], rep["families"]) == (4, 3, 1, 1)
    assert rep["duplicates"]["hex_duplicates"] == 1
    assert rep["duplicates"]["name_duplicates"] == 1
    assert rep["duplicates"]["exact_duplicates"] == 1
    assert rep["stats"]["hex_usage"] == {"3-digit": 1, "6-digit": 2}
    assert rep["top"]["most_common_words"][0] == "red"
    assert rep["top"]["longest_names"][0] == "Sky Blue 2"
    assert rep["patterns"]["has_numbers"] == 1
    assert rep["patterns"]["all_lower"] == 1
    assert rep["patterns"]["all_upper"] == 1


def test_analyze_empty_dataset():
    rep = tf.analyze_dataset([])
    assert rep["total"] == 0
    assert rep["stats"]["name_length"] == {"avg": 0.0, "min": 0, "max": 0}
