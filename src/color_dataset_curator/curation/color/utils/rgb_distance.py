"""
rgb_distance.py
===============

Does: Perceptual color distances used by curation: sRGB→Lab conversion, CIE76 ΔE
      between hex colors, and the weighted HSL distances of quality scoring.
Used By: Priority merge (ΔE threshold), quality scorer (uniqueness/representativity).
Returns: Distances as floats; invalid hex degrades to black through hex_to_rgb.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache

from color_dataset_curator.curation.color.metrics import RGB, hex_to_rgb, hue_distance

__all__ = [
    "rgb_to_lab",
    "lab_distance",
    "delta_e",
    "hsl_distance",
    "centroid_distance",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

Lab = tuple[float, float, float]

# ── Tunables ─────────────────────────────────────────────────────────────────
D65_WHITE = (0.95047, 1.00000, 1.08883)
UNIQUENESS_WEIGHTS = (0.4, 0.3, 0.3)        # h, s, l
REPRESENTATIVITY_WEIGHTS = (0.3, 0.3, 0.4)  # h, s, l


# =============================================================================
# 1) LAB / ΔE76
# =============================================================================

def _srgb_to_linear(v: float) -> float:
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def _f_lab(t: float) -> float:
    d = 6 / 29
    return t ** (1 / 3) if t > d ** 3 else (t / (3 * d * d) + 4 / 29)


@lru_cache(maxsize=8192)
def rgb_to_lab(rgb: RGB) -> Lab:
    """Does: Convert normalized sRGB channels ([0,1]) to CIE Lab under D65."""
    r, g, b = (_srgb_to_linear(float(c)) for c in rgb)
    x = 0.4124564 * r + 0.3575761 * g + 0.1804375 * b
    y = 0.2126729 * r + 0.7151522 * g + 0.0721750 * b
    z = 0.0193339 * r + 0.1191920 * g + 0.9503041 * b
    xn, yn, zn = D65_WHITE
    fx, fy, fz = _f_lab(x / xn), _f_lab(y / yn), _f_lab(z / zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: ΔE76 between two normalized RGB triples."""
    l1, a1, b1 = rgb_to_lab(rgb1)
    l2, a2, b2 = rgb_to_lab(rgb2)
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def delta_e(hex1: str, hex2: str) -> float:
    """Does: ΔE76 between two hex colors (2.3 ≈ just-noticeable difference)."""
    return lab_distance(hex_to_rgb(hex1), hex_to_rgb(hex2))


# =============================================================================
# 2) WEIGHTED HSL DISTANCES (h degrees, s/l percent)
# =============================================================================

def hsl_distance(a: tuple[float, float, float], b: tuple[float, float, float]) -> float:
    """
    Does: Weighted Euclidean distance between two (h, s, l) triples, hue wrapping
          around the circle. Scaled ×100 so identical colors give 0, opposite
          extremes give ~100.
    """
    wh, ws, wl = UNIQUENESS_WEIGHTS
    dh = hue_distance(a[0], b[0]) / 360
    ds = (a[1] - b[1]) / 100
    dl = (a[2] - b[2]) / 100
    return math.sqrt(wh * dh * dh + ws * ds * ds + wl * dl * dl) * 100


def centroid_distance(a: tuple[float, float, float], centroid: tuple[float, float, float]) -> float:
    """Does: Weighted distance to a family centroid in [0,~1]; raw hue delta, no wrap."""
    wh, ws, wl = REPRESENTATIVITY_WEIGHTS
    dh = (a[0] - centroid[0]) / 360
    ds = (a[1] - centroid[1]) / 100
    dl = (a[2] - centroid[2]) / 100
    return math.sqrt(wh * dh * dh + ws * ds * ds + wl * dl * dl)
