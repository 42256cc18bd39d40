"""
recalc.py
=========

Does: Recompute every derived field (rgb, hsl, hue_range, family) from each record's hex.
Used By: The `recalc` CLI command; repairs datasets edited by hand or by other tools.
Returns: {"data", "stats"}; records are copied, never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from color_dataset_curator.curation.color.metrics import family_of, hex_to_hsl, hex_to_rgb, normalize_hex
from color_dataset_curator.curation.general.types import ProgressSink, no_progress

logger = logging.getLogger(__name__)

__all__ = ["recalculate_from_hex"]


def recalculate_from_hex(
    records: Sequence[Mapping[str, Any]],
    *,
    keep_family: bool = False,
    progress: ProgressSink | None = None,
) -> dict[str, Any]:
    """
    Does: Rebuild rgb / hsl (h degrees, s/l fractions) / hue_range / family from hex.
    `keep_family=True` preserves a family the record already carries; by default it
    is re-derived so it always matches hsl. Records with an invalid hex are kept
    unchanged and counted as errors.
    """
    tick = progress or no_progress
    stats = {
        "total": len(records),
        "recalculated": {"rgb": 0, "hsl": 0, "hue_range": 0, "family": 0},
        "errors": 0,
    }
    out: list[dict[str, Any]] = []
    for i, rec in enumerate(records):
        norm = normalize_hex(rec.get("hex"))
        if norm is None:
            stats["errors"] += 1
            out.append(dict(rec))
            tick(100.0 * (i + 1) / len(records))
            continue

        m = hex_to_hsl(norm)
        hsl = {"h": m["h"], "s": m["s"] / 100, "l": m["l"] / 100}
        new = dict(rec)
        new["hex"] = norm
        new["rgb"] = hex_to_rgb(norm)
        new["hsl"] = hsl
        new["hue_range"] = m["hue_range"]
        if not (keep_family and rec.get("family")):
            new["family"] = family_of(hsl["h"], hsl["s"], hsl["l"])
            stats["recalculated"]["family"] += 1
        for key in ("rgb", "hsl", "hue_range"):
            stats["recalculated"][key] += 1
        out.append(new)
        tick(100.0 * (i + 1) / len(records))

    logger.info("recalc: %d records, %d errors", stats["total"], stats["errors"])
    return {"data": out, "stats": stats}
