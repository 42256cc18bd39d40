"""
quality.py
==========

Does: Score one color's value to a curated dataset from its spectral context:
      uniqueness against hue neighbours, saturation/lightness position inside the
      family's range, and closeness to the family centroid.
Used By: Dataset pruner.
Returns: QualityMetrics with component scores in [0,1] and an integer overall 0–100.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypedDict

from color_dataset_curator.curation.color.metrics import round_half_up
from color_dataset_curator.curation.color.utils.rgb_distance import centroid_distance, hsl_distance
from color_dataset_curator.curation.distribution.spectrum import FamilyRange, hsl_units

__all__ = [
    "QualityMetrics",
    "score_color",
    "family_centroid",
    "uniqueness_score",
    "saturation_quality",
    "lightness_quality",
    "family_representativity",
]
__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
W_UNIQUENESS = 35
W_SATURATION = 25
W_LIGHTNESS = 25
W_REPRESENTATIVITY = 15
EDGE_NEAR = 10      # lightness units from a family bound → 0.3
EDGE_MID = 20       # → 0.6
REPRESENTATIVITY_FLOOR = 0.3

HslTriple = tuple[float, float, float]


class QualityMetrics(TypedDict):
    color: Mapping[str, Any]
    uniqueness: float
    saturation_quality: float
    lightness_quality: float
    family_representativity: float
    overall_score: int


# ── Components ───────────────────────────────────────────────────────────────
def uniqueness_score(hsl: HslTriple, nearby: Sequence[HslTriple]) -> float:
    if not nearby:
        return 1.0
    return min(1.0, min(hsl_distance(hsl, o) for o in nearby) / 100)


def saturation_quality(s: float, s_min: float, s_max: float) -> float:
    """Does: Higher near the family's saturation extremes, lower near its midpoint."""
    mid = (s_min + s_max) / 2
    half = max(mid - s_min, s_max - mid)
    if half <= 0:
        return 1.0
    return min(1.0, abs(s - mid) / half)


def lightness_quality(l: float, l_min: float, l_max: float) -> float:
    if l < l_min + EDGE_NEAR or l > l_max - EDGE_NEAR:
        return 0.3
    if l < l_min + EDGE_MID or l > l_max - EDGE_MID:
        return 0.6
    return 1.0


def family_centroid(family_hsl: Sequence[HslTriple]) -> HslTriple | None:
    if not family_hsl:
        return None
    n = len(family_hsl)
    return (
        sum(c[0] for c in family_hsl) / n,
        sum(c[1] for c in family_hsl) / n,
        sum(c[2] for c in family_hsl) / n,
    )


def family_representativity(hsl: HslTriple, centroid: HslTriple | None) -> float:
    if centroid is None:
        return 1.0
    return max(REPRESENTATIVITY_FLOOR, 1.0 - centroid_distance(hsl, centroid) * 2)


# ── Public API ───────────────────────────────────────────────────────────────
def score_color(
    color: Mapping[str, Any],
    nearby_colors: Sequence[Mapping[str, Any]],
    family_colors: Sequence[Mapping[str, Any]],
    ranges: FamilyRange,
    *,
    centroid: HslTriple | None = None,
) -> QualityMetrics:
    """
    Does: Compute all quality components for `color`.
    `ranges` is the family bounding box from analyze_coverage. Pass a precomputed
    `centroid` to skip averaging `family_colors` on every call.
    """
    hsl = hsl_units(color)
    if centroid is None:
        centroid = family_centroid([hsl_units(c) for c in family_colors])

    u = uniqueness_score(hsl, [hsl_units(c) for c in nearby_colors])
    sq = saturation_quality(hsl[1], ranges["min_s"], ranges["max_s"])
    lq = lightness_quality(hsl[2], ranges["min_l"], ranges["max_l"])
    fr = family_representativity(hsl, centroid)

    overall = int(round_half_up(
        u * W_UNIQUENESS + sq * W_SATURATION + lq * W_LIGHTNESS + fr * W_REPRESENTATIVITY
    ))
    return {
        "color": color,
        "uniqueness": u,
        "saturation_quality": sq,
        "lightness_quality": lq,
        "family_representativity": fr,
        "overall_score": overall,
    }
