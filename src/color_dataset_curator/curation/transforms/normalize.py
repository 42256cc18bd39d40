"""
normalize.py
============

Does: Convert rgb / hsl values between full ranges (rgb 0–255, h 0–360, s/l 0–100) and
      normalized [0,1].
Used By: The `normalize` and `recalc --denormalize` CLI commands.
Returns: {"data", "stats"}.

Notes:
- normalize: values above 1 are divided by their full range (3 decimals); values
  already in [0,1] are left as they are.
- denormalize: values ≤ 1.001 are scaled to the full range; larger values are only
  rounded.
- hue: an int h is degrees whatever its size, so h=1 normalizes to 0.003 and
  denormalizes to 1. Denormalized hues wrap into [0,360).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, Literal

from color_dataset_curator.curation.color.metrics import round_half_up

logger = logging.getLogger(__name__)

__all__ = ["Mode", "Target", "process_value", "process_hue", "process_normalization"]

Mode = Literal["normalize", "denormalize"]
Target = Literal["rgb", "hsl", "all"]

RGB_FULL = 255
HUE_FULL = 360
PERCENT_FULL = 100
DENORMALIZE_CEILING = 1.001


def process_value(value: Any, mode: Mode, full: float) -> float:
    """
    Does: Normalize or denormalize one channel value.
    Raises: ValueError for non-numeric or NaN values.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise ValueError(f"Invalid value: {value!r}")
    if mode == "normalize":
        return round_half_up(value / full if value > 1 else value, 3)
    if value <= DENORMALIZE_CEILING:
        return int(round_half_up(value * full))
    return int(round_half_up(value))


def process_hue(value: Any, mode: Mode) -> float:
    """
    Does: Normalize or denormalize a hue. An int hue is always degrees (records store
    it that way); a float in [0,1] is an already-normalized fraction of the circle.
    Raises: ValueError for non-numeric or NaN values.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise ValueError(f"Invalid value: {value!r}")
    degrees = isinstance(value, int) or value > DENORMALIZE_CEILING
    if mode == "normalize":
        return round_half_up(value / HUE_FULL, 3) if degrees else round_half_up(value, 3)
    turned = value if degrees else value * HUE_FULL
    return int(round_half_up(turned)) % HUE_FULL


def _process_rgb(rgb: Any, mode: Mode) -> list[float]:
    if isinstance(rgb, Mapping):
        channels = [rgb.get("r", 0), rgb.get("g", 0), rgb.get("b", 0)]
    elif isinstance(rgb, (list, tuple)) and len(rgb) == 3:
        channels = list(rgb)
    else:
        raise ValueError(f"Invalid rgb: {rgb!r}")
    return [process_value(c, mode, RGB_FULL) for c in channels]


def _process_hsl(hsl: Any, mode: Mode) -> dict[str, float]:
    if not isinstance(hsl, Mapping):
        raise ValueError(f"Invalid hsl: {hsl!r}")
    return {
        "h": process_hue(hsl.get("h"), mode),
        "s": process_value(hsl.get("s"), mode, PERCENT_FULL),
        "l": process_value(hsl.get("l"), mode, PERCENT_FULL),
    }


def process_normalization(
    records: Sequence[Mapping[str, Any]],
    mode: Mode = "normalize",
    target: Target = "all",
) -> dict[str, Any]:
    """Does: Apply `mode` to the rgb and/or hsl of every record; bad values are skipped."""
    stats = {
        "total_colors": len(records),
        "rgb_processed": 0,
        "rgb_skipped": 0,
        "hsl_processed": 0,
        "hsl_skipped": 0,
        "mode": mode,
    }
    out: list[dict[str, Any]] = []
    for rec in records:
        new = dict(rec)
        if target in ("rgb", "all") and rec.get("rgb") is not None:
            try:
                new["rgb"] = _process_rgb(rec["rgb"], mode)
                stats["rgb_processed"] += 1
            except ValueError:
                stats["rgb_skipped"] += 1
        if target in ("hsl", "all") and rec.get("hsl") is not None:
            try:
                new["hsl"] = _process_hsl(rec["hsl"], mode)
                stats["hsl_processed"] += 1
            except ValueError:
                stats["hsl_skipped"] += 1
        out.append(new)

    logger.info(
        "%s: rgb %d/%d skipped, hsl %d/%d skipped", mode,
        stats["rgb_processed"], stats["rgb_skipped"], stats["hsl_processed"], stats["hsl_skipped"],
    )
    return {"data": out, "stats": stats}
