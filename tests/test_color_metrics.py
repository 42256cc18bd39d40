# tests/test_color_metrics.py
"""ColorMath: hex parsing, hex→RGB/HSL, hue ranges, family decision tree, coarse classes."""

from __future__ import annotations

import importlib

import pytest

m = importlib.import_module("color_dataset_curator.curation.color.metrics")


# ──────────────────────────────────────────────────────────────────────────────
# Hex parsing
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("#FF0000", "#ff0000"),
        ("abc", "#aabbcc"),
        ("#ff00ff80", "#ff00ff"),
        ("  #00Ff00 ", "#00ff00"),
        ("12345", None),
        ("#ggg", None),
        (None, None),
        (123, None),
    ],
)
def test_normalize_hex(raw, expected):
    assert m.normalize_hex(raw) == expected


def test_is_valid_hex_accepts_3_6_8_digits_only():
    assert m.is_valid_hex("#abc")
    assert m.is_valid_hex("aabbcc")
    assert m.is_valid_hex("#aabbccdd")
    assert not m.is_valid_hex("#aabbc")
    assert not m.is_valid_hex("")


def test_round_half_up_ties_go_up():
    assert m.round_half_up(2.5) == 3
    assert m.round_half_up(0.5) == 1
    assert m.round_half_up(1.25, 1) == pytest.approx(1.3)


# ──────────────────────────────────────────────────────────────────────────────
# Hex → RGB
# ──────────────────────────────────────────────────────────────────────────────
def test_hex_to_rgb_basic_and_shorthand():
    assert m.hex_to_rgb("#ff0000") == (1.0, 0.0, 0.0)
    assert m.hex_to_rgb("#abc") == (0.667, 0.733, 0.8)
    assert m.hex_to_rgb("#ff000080") == (1.0, 0.0, 0.0)


@pytest.mark.parametrize("bad", ["zzz", "#12", "", None, 42])
def test_hex_to_rgb_invalid_degrades_to_black(bad):
    assert m.hex_to_rgb(bad) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("hx", ["#000000", "#ffffff", "#808080", "#123456", "#fe01a7", "#7f7f80"])
def test_rgb_roundtrip_recovers_hex(hx):
    assert m.rgb_to_hex(m.hex_to_rgb(hx)) == hx


def test_rgb_to_hex_full_range_and_clamp():
    assert m.rgb_to_hex((255, 128, 0), normalized=False) == "#ff8000"
    assert m.rgb_to_hex((2.0, -1.0, 0.5)) == "#ff0080"


# ──────────────────────────────────────────────────────────────────────────────
# Hex → HSL
# ──────────────────────────────────────────────────────────────────────────────
def test_hex_to_hsl_primary_hues():
    red = m.hex_to_hsl("#ff0000")
    assert (red["h"], red["s"], red["l"]) == (0, 100, 50)
    assert m.hex_to_hsl("#00ff00")["h"] == 120
    assert m.hex_to_hsl("#0000ff")["h"] == 240


def test_hex_to_hsl_hue_just_below_360_wraps_to_zero():
    res = m.hex_to_hsl("#ff0001")
    assert 0 <= res["h"] < 360
    assert res["h"] == 0


def test_hex_to_hsl_normalized_mode_uses_fractions():
    red = m.hex_to_hsl("#ff0000", normalized=True)
    assert red["s"] == 1.0
    assert red["l"] == 0.5


def test_hex_to_hsl_gray_is_achromatic():
    gray = m.hex_to_hsl("#808080")
    assert gray["h"] == 0
    assert gray["s"] == 0
    assert gray["l"] == 50
    assert gray["hue_range"] == (0, 360)


def test_hex_to_hsl_invalid_is_black():
    res = m.hex_to_hsl("not-a-color")
    assert (res["h"], res["s"], res["l"]) == (0, 0, 0)


# ──────────────────────────────────────────────────────────────────────────────
# Hue ranges
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("h", [0, 90, 200, 359])
def test_hue_range_zero_saturation_is_full_circle(h):
    assert m.hue_range_for(h, 0) == (0, 360)


def test_hue_range_full_saturation_is_narrowest_band():
    assert m.hue_range_for(100, 1) == (99.0, 101.0)
    assert m.hue_range_for(0.5, 1) == (0, 1.5)
    assert m.hue_range_for(359.5, 1) == (358.5, 360)


def test_hue_range_scales_with_saturation():
    assert m.hue_range_for(100, 0.5) == (90.0, 110.0)


# ──────────────────────────────────────────────────────────────────────────────
# Family decision tree
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "hsl,family",
    [
        ((0, 1.0, 0.10), "black"),
        ((0, 0.05, 0.95), "white"),
        ((0, 0.05, 0.50), "gray"),
        ((0, 0.20, 0.70), "pastel"),
        ((120, 0.90, 0.85), "neon"),
        ((0, 1.0, 0.5), "red"),
        ((120, 1.0, 0.5), "green"),
        ((240, 1.0, 0.5), "blue"),
        ((90, 1.0, 0.5), "lime"),
        ((180, 1.0, 0.5), "teal"),
        ((270, 1.0, 0.5), "purple"),
        ((30, 0.40, 0.40), "brown"),
        ((350, 0.50, 0.80), "pink"),
    ],
)
def test_family_of_rules(hsl, family):
    assert m.family_of(*hsl) == family


def test_family_of_is_deterministic():
    samples = [(h, s / 10, l / 10) for h in range(0, 360, 37) for s in range(0, 11, 3) for l in range(0, 11, 3)]
    first = [m.family_of(*x) for x in samples]
    second = [m.family_of(*x) for x in samples]
    assert first == second


def test_family_of_wraps_negative_and_large_hues():
    assert m.family_of(-360, 1.0, 0.5) == m.family_of(0, 1.0, 0.5)
    assert m.family_of(480, 1.0, 0.5) == m.family_of(120, 1.0, 0.5)


# ──────────────────────────────────────────────────────────────────────────────
# Coarse classes
# ──────────────────────────────────────────────────────────────────────────────
def test_temperature_classes():
    assert m.temperature_of(30) == "warm"
    assert m.temperature_of(330) == "warm"
    assert m.temperature_of(180) == "cool"
    assert m.temperature_of(90) == "neutral"


def test_lightness_and_saturation_classes():
    assert m.lightness_class(0.1) == "very-dark"
    assert m.lightness_class(0.5) == "medium"
    assert m.lightness_class(0.95) == "very-light"
    assert m.saturation_class(0.0) == "achromatic"
    assert m.saturation_class(0.9) == "saturated"


def test_hue_distance_wraps():
    assert m.hue_distance(350, 10) == 20
    assert m.hue_distance(10, 350) == 20
    assert m.hue_distance(0, 180) == 180
