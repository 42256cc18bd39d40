"""
spectrum.py
===========

Does: Partition a color set over the hue circle into 24 buckets of 15°, with density
      and mean saturation/lightness per bucket, and track each family's HSL bounding
      box. Flags under-populated buckets as spectral gaps.
Used By: Quality scorer (family ranges), dataset pruner (coverage, gap backfill).
Returns: SpectrumCoverage dicts in HSL units (h degrees, s/l percent).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any, TypedDict

from color_dataset_curator.curation.color.metrics import family_of, hex_to_hsl

__all__ = [
    "BUCKET_SIZE",
    "BUCKET_COUNT",
    "SpectrumBucket",
    "FamilyRange",
    "SpectrumCoverage",
    "hsl_units",
    "bucket_key",
    "color_family",
    "analyze_coverage",
    "get_critical_buckets",
    "populated_buckets",
]
__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
BUCKET_SIZE = 15
BUCKET_COUNT = 360 // BUCKET_SIZE
CRITICAL_DENSITY_RATIO = 0.5


# ── Types ─────────────────────────────────────────────────────────────────────
class SpectrumBucket(TypedDict):
    hue_min: int
    hue_max: int
    colors: list[Mapping[str, Any]]
    density: int
    avg_saturation: float
    avg_lightness: float


class FamilyRange(TypedDict):
    min_h: float
    max_h: float
    min_s: float
    max_s: float
    min_l: float
    max_l: float


class SpectrumCoverage(TypedDict):
    buckets: dict[int, SpectrumBucket]
    min_hue: float
    max_hue: float
    families: set[str]
    family_ranges: dict[str, FamilyRange]


# ── Record accessors ─────────────────────────────────────────────────────────
def hsl_units(color: Mapping[str, Any]) -> tuple[float, float, float]:
    """
    Does: (h degrees, s percent, l percent) of a record.
    Record hsl carries s/l as fractions; values above 1 are taken as percent already.
    Records without hsl fall back to their hex.
    """
    hsl = color.get("hsl")
    if isinstance(hsl, Mapping) and "h" in hsl:
        h = float(hsl.get("h") or 0)
        s = float(hsl.get("s") or 0)
        l = float(hsl.get("l") or 0)
        if s <= 1 and l <= 1:
            s, l = s * 100, l * 100
        return h, s, l
    m = hex_to_hsl(color.get("hex"))
    return float(m["h"]), float(m["s"]), float(m["l"])


def color_family(color: Mapping[str, Any]) -> str:
    family = color.get("family")
    if family:
        return str(family)
    h, s, l = hsl_units(color)
    return family_of(h, s / 100, l / 100)


def bucket_key(h: float) -> int:
    """Does: Lower bound of the 15° bucket holding hue `h` (360 wraps to 0)."""
    return int(math.floor((h % 360) / BUCKET_SIZE) * BUCKET_SIZE)


# =============================================================================
# 1) COVERAGE
# =============================================================================

def analyze_coverage(colors: Iterable[Mapping[str, Any]]) -> SpectrumCoverage:
    """
    Does: Bucket colors by hue and accumulate per-family HSL extents.
    Returns: Coverage with all 24 buckets present; min_hue/max_hue span the populated
             buckets (0/0 when there are none).
    """
    buckets: dict[int, SpectrumBucket] = {
        i: {
            "hue_min": i,
            "hue_max": i + BUCKET_SIZE,
            "colors": [],
            "density": 0,
            "avg_saturation": 0.0,
            "avg_lightness": 0.0,
        }
        for i in range(0, 360, BUCKET_SIZE)
    }
    families: set[str] = set()
    ranges: dict[str, FamilyRange] = {}
    sums: dict[int, list[float]] = {i: [0.0, 0.0] for i in buckets}

    for color in colors:
        h, s, l = hsl_units(color)
        key = bucket_key(h)
        buckets[key]["colors"].append(color)
        sums[key][0] += s
        sums[key][1] += l

        family = color_family(color)
        families.add(family)
        rng = ranges.get(family)
        if rng is None:
            ranges[family] = {"min_h": h, "max_h": h, "min_s": s, "max_s": s, "min_l": l, "max_l": l}
        else:
            rng["min_h"] = min(rng["min_h"], h)
            rng["max_h"] = max(rng["max_h"], h)
            rng["min_s"] = min(rng["min_s"], s)
            rng["max_s"] = max(rng["max_s"], s)
            rng["min_l"] = min(rng["min_l"], l)
            rng["max_l"] = max(rng["max_l"], l)

    for key, bucket in buckets.items():
        n = len(bucket["colors"])
        bucket["density"] = n
        if n:
            bucket["avg_saturation"] = sums[key][0] / n
            bucket["avg_lightness"] = sums[key][1] / n

    populated = [b for b in buckets.values() if b["density"] > 0]
    return {
        "buckets": buckets,
        "min_hue": min((b["hue_min"] for b in populated), default=0),
        "max_hue": max((b["hue_max"] for b in populated), default=0),
        "families": families,
        "family_ranges": ranges,
    }


def populated_buckets(coverage: SpectrumCoverage) -> list[SpectrumBucket]:
    return [b for b in coverage["buckets"].values() if b["density"] > 0]


# =============================================================================
# 2) GAPS
# =============================================================================

def get_critical_buckets(coverage: SpectrumCoverage) -> list[SpectrumBucket]:
    """Does: Populated buckets whose density is below half the mean populated density."""
    populated = populated_buckets(coverage)
    if not populated:
        return []
    mean = sum(b["density"] for b in populated) / len(populated)
    return [b for b in populated if b["density"] < mean * CRITICAL_DENSITY_RATIO]
