"""
detector.py
===========

Does: Infer the structure of an already-deserialized color dataset. A fixed table of
      independent shape detectors each proposes at most one StructureCandidate
      (type, confidence, schema, metadata); candidates are ranked by confidence.
Used By: Dataset extraction (parse_dataset), the `infer` CLI command.
Returns: A non-empty list of candidates; `unknown@0` when nothing matches.

Notes:
- Detectors never extract records; they only describe the shape.
- Ranking is a stable sort, so equal confidences keep table order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypedDict

from color_dataset_curator.curation.color.constants import (
    HEX6_RE,
    HEX_ANY_RE,
    HEX_FULL_RE,
)
from color_dataset_curator.curation.general.utils import debug

logger = logging.getLogger(__name__)

__all__ = [
    "StructureCandidate",
    "PALETTE_RECORD",
    "JSON_OBJECT_MAP",
    "HEX_STRING_PAIRS",
    "OBJECT_ENTRIES",
    "ARRAY_OF_OBJECTS",
    "STRUCTURED_CATEGORIES",
    "UNKNOWN",
    "STRUCTURE_TYPES",
    "DETECTORS",
    "infer",
    "best_candidate",
]
__docformat__ = "google"


# ── Types ─────────────────────────────────────────────────────────────────────
class StructureCandidate(TypedDict):
    type: str
    confidence: float
    schema: dict[str, Any]
    metadata: dict[str, Any]


PALETTE_RECORD = "palette-record"
JSON_OBJECT_MAP = "json-object-map"
HEX_STRING_PAIRS = "hex-string-pairs"
OBJECT_ENTRIES = "object-entries"
ARRAY_OF_OBJECTS = "array-of-objects"
STRUCTURED_CATEGORIES = "structured-categories"
UNKNOWN = "unknown"

STRUCTURE_TYPES: tuple[str, ...] = (
    PALETTE_RECORD,
    JSON_OBJECT_MAP,
    HEX_STRING_PAIRS,
    OBJECT_ENTRIES,
    ARRAY_OF_OBJECTS,
    STRUCTURED_CATEGORIES,
    UNKNOWN,
)

# ── Tunables ─────────────────────────────────────────────────────────────────
PALETTE_CONFIDENCE = 0.98
PALETTE_MIN_CLEAN_FRACTION = 0.8
JSON_MAP_CONFIDENCE = 0.95
PAIRS_BASE_CONFIDENCE = 0.8
PAIRS_FULL_HEX_BONUS = 0.2
OBJECTS_HEX_WEIGHT = 0.4
OBJECTS_NAME_WEIGHT = 0.4
OBJECTS_EXTRA_WEIGHT = 0.2
STRUCTURED_META_WEIGHT = 0.3
STRUCTURED_ARRAY_WEIGHT = 0.1


def _unknown() -> StructureCandidate:
    return {"type": UNKNOWN, "confidence": 0.0, "schema": {}, "metadata": {}}


# =============================================================================
# 1) SHAPE HELPERS
# =============================================================================

def _is_mapping(data: Any) -> bool:
    return isinstance(data, Mapping)


def _is_sequence(data: Any) -> bool:
    return isinstance(data, (list, tuple))


def _is_palette_entry(value: Any) -> bool:
    return (
        _is_mapping(value)
        and isinstance(value.get("name"), str)
        and isinstance(value.get("hex"), str)
        and bool(HEX6_RE.match(value["hex"]))
    )


def _looks_hex(value: Any) -> bool:
    return bool(HEX_ANY_RE.match(str(value)))


def _looks_full_hex(value: Any) -> bool:
    return bool(HEX_FULL_RE.match(str(value)))


def _looks_hex6(value: Any) -> bool:
    return bool(HEX6_RE.match(str(value)))


def _type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    if _is_sequence(value):
        return "array"
    return "object"


def _clean_palette_fraction(data: Mapping[str, Any]) -> float:
    values = list(data.values())
    if not values:
        return 0.0
    return sum(1 for v in values if _is_palette_entry(v)) / len(values)


# =============================================================================
# 2) DETECTORS (predicate, confidence, schema, metadata)
# =============================================================================

# palette-record: {code: {name, hex}} tolerant of ≤20% corrupt values
def _palette_predicate(data: Any) -> bool:
    return _is_mapping(data) and bool(data) and _clean_palette_fraction(data) >= PALETTE_MIN_CLEAN_FRACTION


def _palette_confidence(data: Mapping[str, Any]) -> float:
    return PALETTE_CONFIDENCE * _clean_palette_fraction(data)


def _palette_schema(_data: Any) -> dict[str, Any]:
    return {"structure": "record<code-to-{name,hex}>", "fields": {"name": "string", "hex": "string"}}


def _palette_metadata(data: Mapping[str, Any]) -> dict[str, Any]:
    return {"total": len(data), "clean": sum(1 for v in data.values() if _is_palette_entry(v))}


# json-object-map: strict variant, every value clean and named
def _json_map_predicate(data: Any) -> bool:
    return (
        _is_mapping(data)
        and bool(data)
        and all(_is_palette_entry(v) and v["name"] for v in data.values())
    )


def _json_map_confidence(_data: Any) -> float:
    return JSON_MAP_CONFIDENCE


def _json_map_schema(_data: Any) -> dict[str, Any]:
    return {"structure": "id-to-color-object"}


def _json_map_metadata(data: Mapping[str, Any]) -> dict[str, Any]:
    return {"entries": len(data)}


# hex-string-pairs: [[hex, name], [name, hex], ...]
def _is_pair(item: Any) -> bool:
    if not _is_sequence(item) or len(item) != 2:
        return False
    a, b = item
    return (_looks_hex(a) and isinstance(b, str)) or (isinstance(a, str) and _looks_hex(b))


def _pairs_predicate(data: Any) -> bool:
    return _is_sequence(data) and bool(data) and all(_is_pair(item) for item in data)


def _pairs_confidence(data: list[Any]) -> float:
    full = sum(1 for a, b in data if _looks_full_hex(a) or _looks_full_hex(b))
    return PAIRS_BASE_CONFIDENCE + full / len(data) * PAIRS_FULL_HEX_BONUS


def _pairs_schema(_data: Any) -> dict[str, Any]:
    return {"items": ["hex|string", "string|hex"]}


def _pairs_metadata(data: list[Any]) -> dict[str, Any]:
    hex_first = sum(1 for a, _ in data if _looks_hex(a))
    return {"pairs": len(data), "hex_first": hex_first, "hex_second": len(data) - hex_first}


# object-entries: {hex: name} or {name: hex}
def _entry_loose(key: Any, value: Any) -> bool:
    return (_looks_full_hex(key) and isinstance(value, str)) or (
        isinstance(key, str) and _looks_full_hex(value)
    )


def _entry_strict(key: Any, value: Any) -> bool:
    return (_looks_hex6(key) and isinstance(value, str)) or (
        isinstance(key, str) and _looks_hex6(value)
    )


def _entries_predicate(data: Any) -> bool:
    return _is_mapping(data) and bool(data) and any(_entry_loose(k, v) for k, v in data.items())


def _entries_confidence(data: Mapping[str, Any]) -> float:
    valid = sum(1 for k, v in data.items() if _entry_strict(k, v))
    return valid / max(1, len(data))


def _entries_schema(data: Mapping[str, Any]) -> dict[str, Any]:
    keys = list(data.keys())
    values = list(data.values())
    return {
        "key_type": _type_name(keys[0]),
        "value_type": _type_name(values[0]),
        "key_pattern": "hex" if all(_looks_hex6(k) for k in keys) else "name",
        "value_pattern": "hex" if all(_looks_hex6(v) for v in values) else "name",
    }


def _entries_metadata(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "entries": len(data),
        "hex_keys": sum(1 for k in data if _looks_hex6(k)),
        "hex_values": sum(1 for v in data.values() if _looks_hex6(v)),
    }


# array-of-objects: [{hex, name, ...}, ...]; the first item drives the score
def _objects_predicate(data: Any) -> bool:
    return (
        _is_sequence(data)
        and bool(data)
        and all(_is_mapping(item) and ("hex" in item or "name" in item) for item in data)
    )


def _objects_confidence(data: list[Mapping[str, Any]]) -> float:
    sample = data[0]
    score = 0.0
    if "hex" in sample:
        score += OBJECTS_HEX_WEIGHT
    if "name" in sample:
        score += OBJECTS_NAME_WEIGHT
    if "family" in sample or "hsl" in sample:
        score += OBJECTS_EXTRA_WEIGHT
    return min(score, 1.0)


def _objects_schema(data: list[Mapping[str, Any]]) -> dict[str, Any]:
    return {str(k): _type_name(v) for k, v in data[0].items()}


def _objects_metadata(data: list[Any]) -> dict[str, Any]:
    return {"entries": len(data)}


# structured-categories: {meta: {...}, <category>: [{hex|color, ...}], ...}
def _is_color_array(value: Any) -> bool:
    return _is_sequence(value) and bool(value) and _is_mapping(value[0])


def _structured_predicate(data: Any) -> bool:
    return (
        _is_mapping(data)
        and "meta" in data
        and any(
            _is_color_array(v) and bool(v[0].get("hex") or v[0].get("color"))
            for v in data.values()
        )
    )


def _structured_confidence(data: Mapping[str, Any]) -> float:
    arrays = sum(1 for v in data.values() if _is_color_array(v))
    return min(STRUCTURED_META_WEIGHT + arrays * STRUCTURED_ARRAY_WEIGHT, 1.0)


def _structured_schema(data: Mapping[str, Any]) -> dict[str, Any]:
    categories = {}
    for key, value in data.items():
        if _is_sequence(value) and value:
            categories[str(key)] = "array<object>" if _is_mapping(value[0]) else _type_name(value[0])
    return {"meta": "object", "categories": categories}


def _structured_metadata(data: Mapping[str, Any]) -> dict[str, Any]:
    meta = data.get("meta")
    family = meta.get("family") if _is_mapping(meta) else None
    categories = [str(k) for k in data if k != "meta"]
    total = sum(len(data[k]) for k in data if k != "meta" and _is_sequence(data[k]))
    return {"family": family or "unknown", "categories": categories, "total_colors": total}


Detector = tuple[
    str,
    Callable[[Any], bool],
    Callable[[Any], float],
    Callable[[Any], dict[str, Any]],
    Callable[[Any], dict[str, Any]],
]

# Evaluation order doubles as the tie-break order.
DETECTORS: tuple[Detector, ...] = (
    (PALETTE_RECORD, _palette_predicate, _palette_confidence, _palette_schema, _palette_metadata),
    (JSON_OBJECT_MAP, _json_map_predicate, _json_map_confidence, _json_map_schema, _json_map_metadata),
    (HEX_STRING_PAIRS, _pairs_predicate, _pairs_confidence, _pairs_schema, _pairs_metadata),
    (OBJECT_ENTRIES, _entries_predicate, _entries_confidence, _entries_schema, _entries_metadata),
    (ARRAY_OF_OBJECTS, _objects_predicate, _objects_confidence, _objects_schema, _objects_metadata),
    (STRUCTURED_CATEGORIES, _structured_predicate, _structured_confidence, _structured_schema, _structured_metadata),
)


# =============================================================================
# 3) PUBLIC API
# =============================================================================

def infer(raw: Any) -> list[StructureCandidate]:
    """
    Does: Run every detector against `raw` and rank the candidates they propose.
    Returns: Candidates sorted by descending confidence (stable). Non-containers and
             containers no detector recognizes give [unknown@0].
    """
    if not (_is_mapping(raw) or _is_sequence(raw)):
        debug(f"non-container input: {type(raw).__name__}", topic="format")
        return [_unknown()]

    candidates: list[StructureCandidate] = []
    for kind, predicate, confidence, schema, metadata in DETECTORS:
        if not predicate(raw):
            continue
        cand: StructureCandidate = {
            "type": kind,
            "confidence": float(confidence(raw)),
            "schema": schema(raw),
            "metadata": metadata(raw),
        }
        debug(f"{kind} → {cand['confidence']:.3f}", topic="format")
        candidates.append(cand)

    if not candidates:
        logger.debug("no detector matched a %s of %d items", type(raw).__name__, len(raw))
        return [_unknown()]

    candidates.sort(key=lambda c: c["confidence"], reverse=True)
    return candidates


def best_candidate(raw: Any) -> StructureCandidate:
    """Does: Shortcut for infer(raw)[0]."""
    return infer(raw)[0]
