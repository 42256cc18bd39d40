"""
ordering.py
===========

Does: Sort color records for human-friendly palettes.
      - family: families ordered by mean hue, records by (lightness, hue) inside each
      - hue: 30° hue blocks in spectrum order, records by (lightness, hue) inside each
      - name / hex / family-key: plain case-insensitive lexical sort
Used By: The `sort` CLI command.
Returns: {"data", "stats"}; sorts are stable.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any, Literal

from color_dataset_curator.curation.distribution.spectrum import color_family, hsl_units

logger = logging.getLogger(__name__)

__all__ = ["SortField", "SORT_FIELDS", "sort_records"]

SortField = Literal["family", "hue", "name", "hex", "family-key"]
SORT_FIELDS: tuple[str, ...] = ("family", "hue", "name", "hex", "family-key")
HUE_BLOCK_SIZE = 30


def _lh(rec: Mapping[str, Any]) -> tuple[float, float]:
    h, _, l = hsl_units(rec)
    return l, h


def _sort_key(rec: Mapping[str, Any], by: str) -> Any:
    if by in ("family", "family-key"):
        return str(rec.get("family") or "unknown").lower()
    if by == "hex":
        return str(rec.get("hex") or "").lower()
    if by == "hue":
        return hsl_units(rec)[0]
    return str(rec.get("name") or "").lower()


def _grouped(groups: dict[Any, list[Mapping[str, Any]]], order: list[Any]) -> list[Mapping[str, Any]]:
    out: list[Mapping[str, Any]] = []
    for key in order:
        out.extend(sorted(groups[key], key=_lh))
    return out


def sort_records(
    records: Sequence[Mapping[str, Any]],
    by: SortField = "hex",
    reverse: bool = False,
) -> dict[str, Any]:
    """
    Does: Sort records by `by`; `reverse` flips the final order.
    Raises: ValueError for an unknown field.
    """
    if by not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field '{by}' (expected one of {', '.join(SORT_FIELDS)})")

    if by == "family":
        groups: dict[Any, list[Mapping[str, Any]]] = {}
        for rec in records:
            groups.setdefault(color_family(rec), []).append(rec)
        mean_hue = {f: sum(hsl_units(r)[0] for r in g) / len(g) for f, g in groups.items()}
        data = _grouped(groups, sorted(groups, key=lambda f: mean_hue[f]))
        if reverse:
            data.reverse()
    elif by == "hue":
        groups = {}
        for rec in records:
            block = int(math.floor(hsl_units(rec)[0] / HUE_BLOCK_SIZE))
            groups.setdefault(block, []).append(rec)
        data = _grouped(groups, sorted(groups))
        if reverse:
            data.reverse()
    else:
        data = sorted(records, key=lambda r: _sort_key(r, by), reverse=reverse)

    stats = {
        "original": len(records),
        "sorted": len(data),
        "field": by,
        "reverse": reverse,
        "unique_values": len({_sort_key(r, by) for r in data}),
    }
    logger.info("sorted %d records by %s%s", len(data), by, " (reverse)" if reverse else "")
    return {"data": data, "stats": stats}
