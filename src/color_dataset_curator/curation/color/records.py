"""
records.py
==========

Does: Define the canonical ColorRecord shape and build records from a hex value,
      deriving rgb, hsl, family and hue_range with ColorMath.
Used By: Format extraction, transforms (recalc, merge), CLI output, tests.
Returns: Fresh dicts; input mappings are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypedDict

from color_dataset_curator.curation.color.metrics import (
    HueRange,
    RGB,
    family_of,
    hex_to_hsl,
    hex_to_rgb,
    normalize_hex,
)

logger = logging.getLogger(__name__)

__all__ = [
    "HSL",
    "ColorRecord",
    "hex_key",
    "name_key",
    "record_hsl",
    "build_record",
    "complete_record",
]
__docformat__ = "google"


# ── Types ─────────────────────────────────────────────────────────────────────
class HSL(TypedDict):
    h: float  # degrees [0, 360)
    s: float  # [0, 1]
    l: float  # [0, 1]


class ColorRecord(TypedDict):
    hex: str
    name: str
    family: str
    rgb: RGB
    hsl: HSL
    hue_range: HueRange


# ── Keys used for grouping ────────────────────────────────────────────────────
def hex_key(record: Mapping[str, Any]) -> str:
    """Does: Lower-case hex without '#', the equality key for color values."""
    return str(record.get("hex", "")).strip().lower().lstrip("#")


def name_key(record: Mapping[str, Any]) -> str:
    """Does: Lower-case name, the equality key for labels ('' = unnamed)."""
    return str(record.get("name", "") or "").lower()


# ── Builders ─────────────────────────────────────────────────────────────────
def record_hsl(hex_value: str) -> HSL:
    """Does: HSL at integer degree / integer percent precision, s/l as fractions."""
    m = hex_to_hsl(hex_value)
    return {"h": m["h"], "s": m["s"] / 100, "l": m["l"] / 100}


def build_record(hex_value: str, name: str = "", *, family: str | None = None) -> ColorRecord:
    """
    Does: Build a full ColorRecord from a hex and a name.
    Invalid hex degrades to black ('#000000') rather than raising.
    """
    norm = normalize_hex(hex_value)
    if norm is None:
        logger.debug("[RECORD] invalid hex %r → #000000", hex_value)
        norm = "#000000"
    metrics = hex_to_hsl(norm)
    hsl: HSL = {"h": metrics["h"], "s": metrics["s"] / 100, "l": metrics["l"] / 100}
    return {
        "hex": norm,
        "name": "" if name is None else str(name),
        "family": family or family_of(hsl["h"], hsl["s"], hsl["l"]),
        "rgb": hex_to_rgb(norm),
        "hsl": hsl,
        "hue_range": metrics["hue_range"],
    }


def complete_record(raw: Mapping[str, Any]) -> ColorRecord | None:
    """
    Does: Turn a loosely-shaped mapping into a ColorRecord. Only hex and name are
          read; rgb, hsl, family and hue_range are always re-derived from hex so the
          record is internally consistent whatever the source carried.
    Returns: None if the mapping has no usable hex (also read from "color"/"value").
    """
    hex_raw = raw.get("hex", raw.get("color", raw.get("value")))
    norm = normalize_hex(hex_raw)
    if norm is None:
        return None

    name = raw.get("name", "")
    return build_record(norm, "" if name is None else str(name))
