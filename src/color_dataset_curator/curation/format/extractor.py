"""
extractor.py
============

Does: Turn raw deserialized data into canonical ColorRecords: infer the structure,
      take the top candidate and run the matching extractor. Derived fields (rgb,
      hsl, family, hue_range) come from ColorMath.
Used By: Orchestrator (curate), CLI commands that read datasets.
Returns: {"colors", "format", "confidence", "skipped"}; items without a usable hex
         are skipped and counted, never fatal.
Raises: DatasetFormatError when no detector recognizes the input.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypedDict

from color_dataset_curator.curation.color.constants import HEX_FULL_RE
from color_dataset_curator.curation.color.metrics import normalize_hex
from color_dataset_curator.curation.color.records import ColorRecord, build_record, complete_record
from color_dataset_curator.curation.errors import DatasetFormatError
from color_dataset_curator.curation.format.detector import (
    ARRAY_OF_OBJECTS,
    HEX_STRING_PAIRS,
    JSON_OBJECT_MAP,
    OBJECT_ENTRIES,
    PALETTE_RECORD,
    STRUCTURED_CATEGORIES,
    UNKNOWN,
    infer,
)
from color_dataset_curator.curation.general.utils import debug

logger = logging.getLogger(__name__)

__all__ = ["ParseResult", "parse_dataset", "extract_records", "EXTRACTORS"]
__docformat__ = "google"


class ParseResult(TypedDict):
    colors: list[ColorRecord]
    format: str
    confidence: float
    skipped: int


# ── Per-structure item iterators: yield (hex, name) or a raw mapping ─────────
def _iter_palette(data: Mapping[str, Any]) -> Iterator[Any]:
    yield from data.values()


def _hex_rank(value: Any) -> int:
    if not isinstance(value, str) or normalize_hex(value) is None:
        return 0
    text = value.strip()
    if not HEX_FULL_RE.match(text):
        return 1
    return 3 if text.startswith("#") else 2


def _hex_first(a: Any, b: Any) -> tuple[Any, Any]:
    """Order a pair as (hex, name): '#rrggbb' beats bare 'rrggbb' beats 3-digit shorthand."""
    return (b, a) if _hex_rank(b) > _hex_rank(a) else (a, b)


def _iter_pairs(data: Iterable[Any]) -> Iterator[Any]:
    for a, b in data:
        yield _hex_first(a, b)


def _iter_entries(data: Mapping[str, Any]) -> Iterator[Any]:
    for key, value in data.items():
        if isinstance(value, str):
            yield _hex_first(key, value)
        else:
            yield (value, key)


def _iter_objects(data: Iterable[Any]) -> Iterator[Any]:
    yield from data


def _iter_structured(data: Mapping[str, Any]) -> Iterator[Any]:
    for key, value in data.items():
        if key == "meta" or not isinstance(value, (list, tuple)):
            continue
        for item in value:
            if isinstance(item, Mapping):
                yield item


EXTRACTORS: dict[str, Callable[[Any], Iterator[Any]]] = {
    PALETTE_RECORD: _iter_palette,
    JSON_OBJECT_MAP: _iter_palette,
    HEX_STRING_PAIRS: _iter_pairs,
    OBJECT_ENTRIES: _iter_entries,
    ARRAY_OF_OBJECTS: _iter_objects,
    STRUCTURED_CATEGORIES: _iter_structured,
}


def _to_record(item: Any) -> ColorRecord | None:
    if isinstance(item, Mapping):
        return complete_record(item)
    if not isinstance(item, tuple):
        return None
    hex_value, name = item
    if normalize_hex(hex_value) is None:
        return None
    return build_record(hex_value, "" if name is None else str(name))


def extract_records(raw: Any, structure: str) -> tuple[list[ColorRecord], int]:
    """
    Does: Extract records from `raw` read as `structure`.
    Returns: (records in source order, number of skipped items).
    """
    iterate = EXTRACTORS.get(structure)
    if iterate is None:
        raise DatasetFormatError(f"No extractor for structure '{structure}'")

    records: list[ColorRecord] = []
    skipped = 0
    for item in iterate(raw):
        rec = _to_record(item)
        if rec is None:
            skipped += 1
            continue
        records.append(rec)
    if skipped:
        logger.warning("skipped %d item(s) without a valid hex (%s)", skipped, structure)
    return records, skipped


def parse_dataset(raw: Any) -> ParseResult:
    """
    Does: Infer the structure of `raw`, then extract canonical records with it.
    Raises: DatasetFormatError if the best interpretation is 'unknown'.
    """
    top = infer(raw)[0]
    if top["type"] == UNKNOWN:
        raise DatasetFormatError("Unrecognized dataset structure")

    colors, skipped = extract_records(raw, top["type"])
    debug(f"{top['type']} ({top['confidence']:.2f}) → {len(colors)} colors", topic="format")
    return {
        "colors": colors,
        "format": top["type"],
        "confidence": top["confidence"],
        "skipped": skipped,
    }
