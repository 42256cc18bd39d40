"""
metrics.py
==========

Does: Color math used throughout curation: hex parsing/normalization, hex→RGB→HSL
      conversion, perceptual hue spread, the deterministic family decision tree and
      coarse temperature / lightness / saturation classes.
Used By: Record building, format extraction, deduplication reports, spectrum
         analysis, quality scoring and every dataset transform.
Returns: Plain tuples/dicts; malformed input degrades to neutral values, never raises.

Notes:
- All rounding is half-up (x.5 → away from zero for positives) so that labels and
  hue ranges match datasets produced by other tooling.
- RGB channels are floats in [0,1]; HSL hue is in degrees; HSL s/l are integer
  percent by default, fractions when `normalized=True`.
"""

from __future__ import annotations

import math
from typing import TypedDict

from color_dataset_curator.curation.color.constants import (
    EARTHY_BASES,
    FAMILY_REMAPS,
    FOOD_BASES,
    HEX_VALID_RE,
    HUE_SECTORS,
    JEWEL_BASES,
    METALLIC_BASES,
    NATURE_BASES,
    PINK_BASES,
    SKIN_BASES,
)

__all__ = [
    "RGB",
    "HueRange",
    "HslMetrics",
    "round_half_up",
    "clean_hex",
    "is_valid_hex",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "hue_range_for",
    "family_of",
    "temperature_of",
    "lightness_class",
    "saturation_class",
    "hue_distance",
]
__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = tuple[float, float, float]
HueRange = tuple[float, float]


class HslMetrics(TypedDict):
    h: float
    s: float
    l: float
    hue_range: HueRange


# ── Tunables ─────────────────────────────────────────────────────────────────
ACHROMATIC_SATURATION = 0.05   # below → hue is meaningless, full circle
MAX_HUE_SPREAD = 20.0          # degrees either side for s → 0
MIN_HUE_SPREAD = 1.0           # degrees either side for s = 1
FULL_CIRCLE_SPAN = 180.0       # spans wider than this collapse to [0,360]

_ZERO_RGB: RGB = (0.0, 0.0, 0.0)


# =============================================================================
# 1) ROUNDING & HEX PARSING
# =============================================================================

def round_half_up(value: float, ndigits: int = 0) -> float:
    """Does: Round like JavaScript's Math.round (ties toward +inf)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def clean_hex(value: object) -> str:
    """Does: Lowercase, trim and drop a leading '#'. Non-strings become ''."""
    if not isinstance(value, str):
        return ""
    v = value.strip().lower()
    return v[1:] if v.startswith("#") else v


def is_valid_hex(value: object) -> bool:
    """Does: True for 3, 6 or 8 hex digits, with or without '#'."""
    return bool(HEX_VALID_RE.match(clean_hex(value)))


def _expand_hex(value: object) -> str | None:
    """Return the 6-digit lower-case body of a valid hex, else None (alpha dropped)."""
    body = clean_hex(value)
    if not HEX_VALID_RE.match(body):
        return None
    if len(body) == 3:
        body = "".join(ch + ch for ch in body)
    return body[:6]


def normalize_hex(value: object) -> str | None:
    """
    Does: Canonicalize a hex color to '#rrggbb'.
    Returns: None when the value is not a 3/6/8-digit hex string.
    """
    body = _expand_hex(value)
    return f"#{body}" if body is not None else None


# =============================================================================
# 2) HEX ⇄ RGB
# =============================================================================

def hex_to_rgb(hex_value: object) -> RGB:
    """
    Does: Parse '#rgb', '#rrggbb' or '#rrggbbaa' into channels in [0,1] (3 decimals).
    Returns: (0.0, 0.0, 0.0) for anything that is not a valid hex color.
    """
    body = _expand_hex(hex_value)
    if body is None:
        return _ZERO_RGB
    r, g, b = (int(body[i:i + 2], 16) for i in (0, 2, 4))
    return (
        round_half_up(r / 255, 3),
        round_half_up(g / 255, 3),
        round_half_up(b / 255, 3),
    )


def rgb_to_hex(rgb: tuple[float, float, float], *, normalized: bool = True) -> str:
    """
    Does: Format channels as '#rrggbb'. `normalized` channels are in [0,1], else 0–255.
    Out-of-range channels are clamped.
    """
    scale = 255 if normalized else 1
    parts = []
    for c in rgb:
        v = int(round_half_up(float(c) * scale))
        parts.append(min(255, max(0, v)))
    return "#" + "".join(f"{v:02x}" for v in parts)


# =============================================================================
# 3) HEX → HSL
# =============================================================================

def hex_to_hsl(hex_value: object, *, normalized: bool = False) -> HslMetrics:
    """
    Does: Convert hex to HSL with the max/min channel method.
    Returns: {h (int degrees), s, l, hue_range}. s/l are integer percent by default,
             fractions in [0,1] (3 decimals) with `normalized=True`. The hue range is
             computed from the unrounded hue and saturation.
    """
    r, g, b = hex_to_rgb(hex_value)
    mx = max(r, g, b)
    mn = min(r, g, b)
    lightness = (mx + mn) / 2
    delta = mx - mn

    hue = 0.0
    if mx == mn:
        sat = 0.0
    else:
        sat = delta / (2 - mx - mn) if lightness > 0.5 else delta / (mx + mn)
        if mx == r:
            hue = (g - b) / delta * 60
            if g < b:
                hue += 360
        elif mx == g:
            hue = (b - r) / delta * 60 + 120
        else:
            hue = (r - g) / delta * 60 + 240

    if normalized:
        s_out = round_half_up(sat, 3)
        l_out = round_half_up(lightness, 3)
    else:
        s_out = round_half_up(sat * 100)
        l_out = round_half_up(lightness * 100)

    return {
        "h": int(round_half_up(hue)) % 360,
        "s": s_out,
        "l": l_out,
        "hue_range": hue_range_for(hue, sat),
    }


def hue_range_for(h: float, s: float) -> HueRange:
    """
    Does: Estimate the hue spread attributable to one shade from its saturation.
    Returns: (0, 360) for achromatic or wide spreads, else (h - spread, h + spread)
             clamped to [0, 360] and rounded to 0.1°.
    """
    if s < ACHROMATIC_SATURATION:
        return (0, 360)

    spread = max(MIN_HUE_SPREAD, MAX_HUE_SPREAD * (1 - s))
    start = max(0.0, h - spread)
    end = min(360.0, h + spread)

    if end - start > FULL_CIRCLE_SPAN:
        return (0, 360)

    return (round_half_up(start, 1), round_half_up(end, 1))


# =============================================================================
# 4) FAMILY DECISION TREE
# =============================================================================

def _base_family(h: float) -> str:
    if h >= 345 or h <= 15:
        return "red"
    for upper, name in HUE_SECTORS:
        if h < upper:
            return name
    return "red"


def family_of(h: float, s: float = 1.0, l: float = 0.5) -> str:
    """
    Does: Map HSL (h degrees, s/l fractions) to a family tag.
    Rule order is significant: the first matching rule wins.
    """
    h = (h % 360 + 360) % 360

    # achromatic
    if l < 0.15:
        return "black"
    if s < 0.1:
        return "white" if l > 0.9 else "gray"

    # early specials
    if s < 0.3 and l > 0.6:
        return "pastel"
    if s > 0.8 and l > 0.8:
        return "neon"

    base = _base_family(h)

    # earth tones; the inner test always holds once the outer one does
    if s < 0.5 and l < 0.7 and base in EARTHY_BASES:
        if s < 0.6 and l < 0.7:
            return "brown"
        return "earth"

    if base in PINK_BASES and l > 0.7 and 0.3 < s < 0.8:
        return "pink"

    if base in METALLIC_BASES and 0.2 < s < 0.7 and l > 0.5:
        return "metallic"

    if base in SKIN_BASES and 0.2 < s < 0.7 and 0.4 < l < 0.9:
        return "skin"

    if base in JEWEL_BASES and s > 0.7 and l > 0.5:
        return "jewel"

    if base in NATURE_BASES and 0.3 < s < 0.8 and 0.3 < l < 0.9:
        return "nature"

    if base in FOOD_BASES and s > 0.5 and l > 0.5:
        return "food"

    return FAMILY_REMAPS.get(base, base)


# =============================================================================
# 5) COARSE CLASSES
# =============================================================================

def temperature_of(h: float) -> str:
    """Does: 'warm' (0–60°, 300–360°), 'cool' (120–240°) or 'neutral'."""
    h = h % 360
    if 0 <= h <= 60 or 300 <= h <= 360:
        return "warm"
    if 120 <= h <= 240:
        return "cool"
    return "neutral"


def lightness_class(l: float) -> str:
    if l < 0.2:
        return "very-dark"
    if l < 0.4:
        return "dark"
    if l < 0.6:
        return "medium"
    if l < 0.8:
        return "light"
    return "very-light"


def saturation_class(s: float) -> str:
    if s < 0.05:
        return "achromatic"
    if s < 0.25:
        return "muted"
    if s < 0.5:
        return "soft"
    if s < 0.75:
        return "vivid"
    return "saturated"


def hue_distance(h1: float, h2: float) -> float:
    """Does: Shortest angular distance between two hues, in degrees."""
    d = abs(h1 - h2) % 360
    return min(d, 360 - d)
