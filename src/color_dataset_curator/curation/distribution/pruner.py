"""
pruner.py
=========

Does: Reduce a color dataset to a target size while keeping family diversity and hue
      coverage. Every color is scored (quality.score_color), then selected in phases:
        1) top-N per family (with overshoot),
        2) global quality ranking truncated to the target,
        3) top-up from the best excluded colors when phase 1 came up short,
        4) spectral gap backfill: for the sparsest hue buckets, insert the best excluded
           color of that bucket, re-rank and re-truncate after each insertion.
Used By: Orchestrator (curate), the `prune` CLI command.
Returns: {"data", "stats"}; data is ordered by descending score.

Notes:
- The family floor (`min_families`) and `min_coverage` are measured and reported,
  not enforced; a shortfall is logged as a warning.
- `preserve_extremes` is accepted and echoed in stats only.
- Neighbour search scans ±2 hue buckets, so scoring is O(n·k) for k colors per
  neighbourhood instead of O(n²).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, TypedDict

from color_dataset_curator.curation.color.metrics import hue_distance
from color_dataset_curator.curation.color.records import hex_key
from color_dataset_curator.curation.distribution.quality import (
    QualityMetrics,
    family_centroid,
    score_color,
)
from color_dataset_curator.curation.distribution.spectrum import (
    BUCKET_COUNT,
    BUCKET_SIZE,
    analyze_coverage,
    bucket_key,
    color_family,
    get_critical_buckets,
    hsl_units,
    populated_buckets,
)
from color_dataset_curator.curation.general.types import ProgressSink, no_progress
from color_dataset_curator.curation.general.utils import debug, env_float

log = logging.getLogger(__name__)

__all__ = ["PruneOptions", "PruneResult", "prune", "score_all", "default_options"]
__docformat__ = "google"

# ── Tunables (env-overridable) ───────────────────────────────────────────────
NEARBY_HUE_DEG = env_float("CURATOR_NEARBY_HUE_DEG", 30.0)
GAP_FILL_RATIO = env_float("CURATOR_GAP_FILL_RATIO", 0.05)
FAMILY_OVERSHOOT = env_float("CURATOR_FAMILY_OVERSHOOT", 1.2)
MIN_FAMILIES_FLOOR = 20
MIN_FAMILIES_RATIO = 0.7
DEFAULT_MIN_COVERAGE = 0.85


class PruneOptions(TypedDict, total=False):
    min_families: int
    min_coverage: float
    preserve_extremes: bool


class PruneResult(TypedDict):
    data: list[Mapping[str, Any]]
    stats: dict[str, Any]


def default_options(colors: Sequence[Mapping[str, Any]]) -> PruneOptions:
    distinct = len({color_family(c) for c in colors})
    return {
        "min_families": max(MIN_FAMILIES_FLOOR, math.ceil(distinct * MIN_FAMILIES_RATIO)),
        "min_coverage": DEFAULT_MIN_COVERAGE,
        "preserve_extremes": True,
    }


# =============================================================================
# 1) SCORING
# =============================================================================

def _bucket_index(h: float) -> int:
    return bucket_key(h) // BUCKET_SIZE


def score_all(
    colors: Sequence[Mapping[str, Any]],
    *,
    progress: ProgressSink | None = None,
) -> list[QualityMetrics]:
    """
    Does: Score every color against its hue neighbours and its family.
    Neighbours are within NEARBY_HUE_DEG and carry a different hex.
    """
    tick = progress or no_progress
    if not colors:
        return []

    coverage = analyze_coverage(colors)
    hsls = [hsl_units(c) for c in colors]
    hexes = [hex_key(c) for c in colors]
    fams = [color_family(c) for c in colors]

    by_bucket: dict[int, list[int]] = {}
    for i, (h, _, _) in enumerate(hsls):
        by_bucket.setdefault(_bucket_index(h), []).append(i)

    by_family: dict[str, list[int]] = {}
    for i, fam in enumerate(fams):
        by_family.setdefault(fam, []).append(i)
    centroids = {fam: family_centroid([hsls[i] for i in idx]) for fam, idx in by_family.items()}

    reach = math.ceil(NEARBY_HUE_DEG / BUCKET_SIZE)
    span = range(-reach, reach + 1) if 2 * reach + 1 < BUCKET_COUNT else range(BUCKET_COUNT)

    scored: list[QualityMetrics] = []
    step = max(1, len(colors) // 20)
    for i, color in enumerate(colors):
        h = hsls[i][0]
        home = _bucket_index(h)
        seen: set[int] = set()
        nearby = []
        for off in span:
            b = (home + off) % BUCKET_COUNT
            if b in seen:
                continue
            seen.add(b)
            for j in by_bucket.get(b, ()):
                if hexes[j] != hexes[i] and hue_distance(hsls[j][0], h) < NEARBY_HUE_DEG:
                    nearby.append(colors[j])

        fam = fams[i]
        family_colors = [colors[j] for j in by_family[fam]]
        scored.append(
            score_color(color, nearby, family_colors, coverage["family_ranges"][fam], centroid=centroids[fam])
        )
        if i % step == 0:
            tick(100.0 * (i + 1) / len(colors))
    tick(100.0)
    return scored


# =============================================================================
# 2) SELECTION
# =============================================================================

def _rank(indices: list[int], scores: list[int]) -> list[int]:
    # stable: equal scores keep input order
    return sorted(indices, key=lambda i: -scores[i])


def _select(
    scored: list[QualityMetrics],
    target: int,
    logger: logging.Logger,
) -> list[int]:
    scores = [m["overall_score"] for m in scored]
    fams = [color_family(m["color"]) for m in scored]

    # Step 1: family representation
    by_family: dict[str, list[int]] = {}
    for i, fam in enumerate(fams):
        by_family.setdefault(fam, []).append(i)
    per_family = math.ceil(target / len(by_family) * FAMILY_OVERSHOOT)
    logger.info("  Step 1: family representation (%d families, top %d each)", len(by_family), per_family)
    superset: list[int] = []
    for idx in by_family.values():
        superset.extend(_rank(idx, scores)[:per_family])

    # Step 2: quality ranking
    logger.info("  Step 2: quality ranking (%d candidates)", len(superset))
    final = _rank(superset, scores)[:target]

    # Step 3: top-up to exactly min(target, n)
    wanted = min(target, len(scored))
    if len(final) < wanted:
        chosen = set(final)
        extra = [i for i in _rank(list(range(len(scored))), scores) if i not in chosen]
        final = _rank(final + extra[: wanted - len(final)], scores)
        logger.info("  Step 3: topped up to %d", len(final))

    # Step 4: spectral gaps
    coverage = analyze_coverage(scored[i]["color"] for i in final)
    gaps = sorted(get_critical_buckets(coverage), key=lambda b: b["density"])
    budget = math.ceil(target * GAP_FILL_RATIO)
    logger.info("  Step 4: spectrum gaps (%d critical, fill up to %d)", len(gaps), budget)
    hues = [hsl_units(m["color"])[0] % 360 for m in scored]
    for gap in gaps[:budget]:
        chosen = set(final)
        candidates = [
            i for i in range(len(scored))
            if i not in chosen and gap["hue_min"] <= hues[i] < gap["hue_max"]
        ]
        if not candidates:
            continue
        best = _rank(candidates, scores)[0]
        final = _rank(final + [best], scores)[:target]
        debug(
            f"gap {gap['hue_min']}°: +{scored[best]['color'].get('hex')} "
            f"({scores[best]}) {'kept' if best in final else 'evicted'}",
            topic="prune",
        )
    return final


# =============================================================================
# 3) PUBLIC API
# =============================================================================

def prune(
    colors: Sequence[Mapping[str, Any]],
    target: int,
    options: PruneOptions | None = None,
    logger: logging.Logger | None = None,
    *,
    progress: ProgressSink | None = None,
) -> PruneResult:
    """
    Does: Select `min(target, len(colors))` colors maximizing quality while keeping
          family and hue coverage.
    Returns: {"data": kept records (score order), "stats": counts, mean scores and
             family/coverage measurements}.
    """
    logger = logger or log
    config: PruneOptions = {**default_options(colors), **(options or {})}
    target = max(0, int(target))

    logger.info("Pruning dataset: %d → %d", len(colors), target)
    logger.info(
        "Min families: %d, min coverage: %.0f%%",
        config["min_families"], config["min_coverage"] * 100,
    )

    original = analyze_coverage(colors)
    logger.info(
        "  Original families: %d, hue range %d°–%d°",
        len(original["families"]), original["min_hue"], original["max_hue"],
    )

    scored = score_all(colors, progress=progress)
    final = _select(scored, target, logger) if scored and target else []

    kept_set = set(final)
    kept_scores = [scored[i]["overall_score"] for i in final]
    removed_scores = [m["overall_score"] for i, m in enumerate(scored) if i not in kept_set]
    data = [scored[i]["color"] for i in final]

    kept_cov = analyze_coverage(data)
    orig_buckets = len(populated_buckets(original))
    coverage = len(populated_buckets(kept_cov)) / orig_buckets if orig_buckets else 1.0
    families_kept = len(kept_cov["families"])

    stats = {
        "removed_count": len(colors) - len(data),
        "kept_count": len(data),
        "avg_score_kept": sum(kept_scores) / len(kept_scores) if kept_scores else 0.0,
        "avg_score_removed": sum(removed_scores) / len(removed_scores) if removed_scores else 0.0,
        "original_families": len(original["families"]),
        "families_kept": families_kept,
        "min_families": config["min_families"],
        "families_satisfied": families_kept >= config["min_families"],
        "coverage": coverage,
        "min_coverage": config["min_coverage"],
        "coverage_satisfied": coverage >= config["min_coverage"],
        "preserve_extremes": config["preserve_extremes"],
    }

    if not stats["families_satisfied"]:
        logger.warning("Not enough families (%d < %d)", families_kept, config["min_families"])
    if not stats["coverage_satisfied"]:
        logger.warning("Hue coverage %.0f%% below %.0f%%", coverage * 100, config["min_coverage"] * 100)
    logger.info(
        "Kept %d, removed %d (avg score %.1f vs %.1f)",
        stats["kept_count"], stats["removed_count"], stats["avg_score_kept"], stats["avg_score_removed"],
    )
    return {"data": data, "stats": stats}
