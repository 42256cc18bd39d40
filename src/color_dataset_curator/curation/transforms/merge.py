"""
merge.py
========

Does: Combine datasets.
      - merge_datasets: concatenate, then (optionally) semantic deduplication.
      - priority_merge: keep every primary color and add only those secondary colors
        that are perceptually new (CIE76 ΔE to every primary ≥ threshold).
Used By: The `merge` / `pmerge` CLI commands.
Returns: {"data", "stats"} dicts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from color_dataset_curator.curation.color.metrics import RGB, hex_to_rgb
from color_dataset_curator.curation.color.records import hex_key
from color_dataset_curator.curation.color.utils.rgb_distance import lab_distance
from color_dataset_curator.curation.dedupe.deduplicator import deduplicate
from color_dataset_curator.curation.general.types import SemanticOracle

logger = logging.getLogger(__name__)

__all__ = ["merge_datasets", "priority_merge", "DEFAULT_DELTA_E", "EARLY_EXIT_DELTA_E"]

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_DELTA_E = 2.3       # just-noticeable difference
EARLY_EXIT_DELTA_E = 0.5


def merge_datasets(
    datasets: Iterable[Sequence[Mapping[str, Any]]],
    *,
    dedupe: bool = True,
    priority: Iterable[Mapping[str, Any]] = (),
    analyzer: SemanticOracle | None = None,
) -> dict[str, Any]:
    """Does: Concatenate datasets in order; deduplicate the union unless `dedupe=False`."""
    inputs = [list(ds) for ds in datasets]
    combined = [rec for ds in inputs for rec in ds]
    if dedupe:
        result = deduplicate(combined, priority, analyzer=analyzer)
        data, groups = result["colors"], result["stats"]
    else:
        data, groups = combined, []

    stats = {
        "input_count": len(inputs),
        "input_total": len(combined),
        "merged": len(data),
        "removed": len(combined) - len(data),
        "duplicates": groups,
    }
    logger.info("merged %d datasets: %d → %d colors", len(inputs), len(combined), len(data))
    return {"data": data, "stats": stats}


def _rgb_of(rec: Mapping[str, Any]) -> RGB:
    rgb = rec.get("rgb")
    if isinstance(rgb, (list, tuple)) and len(rgb) == 3:
        try:
            r, g, b = (float(c) for c in rgb)
        except (TypeError, ValueError):
            return hex_to_rgb(rec.get("hex"))
        if r > 1 or g > 1 or b > 1:
            r, g, b = r / 255, g / 255, b / 255
        return (r, g, b)
    return hex_to_rgb(rec.get("hex"))


def priority_merge(
    primary: Sequence[Mapping[str, Any]],
    secondary: Sequence[Mapping[str, Any]],
    threshold: float = DEFAULT_DELTA_E,
) -> dict[str, Any]:
    """
    Does: Merge `secondary` into `primary`, dropping secondary colors that match a
          primary hex exactly or sit closer than `threshold` ΔE to any primary color.
    Returns: Result sorted by hex; stats carry counts and the skip rate (percent).
    """
    primary_hexes = {hex_key(c) for c in primary}
    primary_rgbs = [_rgb_of(c) for c in primary]

    skipped: set[str] = set()
    for sec in secondary:
        key = hex_key(sec)
        if key in primary_hexes:
            skipped.add(key)
            continue
        rgb = _rgb_of(sec)
        min_de = float("inf")
        for prgb in primary_rgbs:
            min_de = min(min_de, lab_distance(rgb, prgb))
            if min_de < EARLY_EXIT_DELTA_E:
                break
        if min_de < threshold:
            skipped.add(key)

    unique_secondary = [c for c in secondary if hex_key(c) not in skipped]
    merged = sorted([*primary, *unique_secondary], key=lambda c: str(c.get("hex", "")).lower())

    skip_rate = len(skipped) / len(secondary) * 100 if secondary else 0.0
    stats = {
        "original_primary": len(primary),
        "original_secondary": len(secondary),
        "total_unique": len(merged),
        "skipped_from_secondary": len(skipped),
        "skip_rate": round(skip_rate, 1),
        "delta_e_threshold": threshold,
    }
    logger.info(
        "priority merge: %d + %d → %d (skipped %d, ΔE < %.2f)",
        len(primary), len(secondary), len(merged), len(skipped), threshold,
    )
    return {"data": merged, "stats": stats}
