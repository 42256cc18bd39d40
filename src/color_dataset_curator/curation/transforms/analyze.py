"""
analyze.py
==========

Does: Profile a dataset: hex validity, duplicate counts (hex / name / exact pair),
      name length and word statistics, top names and words, distributions by name
      length and leading hex byte, and naming-pattern counts.
Used By: The `analyze` CLI command.
Returns: A JSON-serializable report dict.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["analyze_dataset"]

TOP_NAMES = 5
TOP_WORDS = 10
LENGTH_BUCKET = 5

_VALID_HEX_RE = re.compile(r"^#(?:[0-9a-f]{6}|[0-9a-f]{3})$", re.IGNORECASE)
_DIGIT_RE = re.compile(r"\d")
_SPECIAL_RE = re.compile(r"[^a-zA-Z\s-]")
_CAMEL_RE = re.compile(r"[a-z][A-Z]")
_LOWER_RE = re.compile(r"^[a-z\s-]+$")
_UPPER_RE = re.compile(r"^[A-Z\s-]+$")


def analyze_dataset(records: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
    """Does: Build the dataset profile. An empty dataset yields zeroed statistics."""
    total = len(records)
    hexes: set[str] = set()
    names: set[str] = set()
    exact: set[tuple[str, str]] = set()
    families: set[str] = set()
    hex_dupes = name_dupes = exact_dupes = valid = 0
    hex_usage = {"3-digit": 0, "6-digit": 0}
    lengths: list[int] = []
    word_counts: list[int] = []
    word_len_means: list[float] = []
    words: Counter[str] = Counter()
    length_buckets: Counter[str] = Counter()
    hex_groups: Counter[str] = Counter()
    patterns = {"has_numbers": 0, "has_special_chars": 0, "camel_case": 0, "all_lower": 0, "all_upper": 0}

    for rec in records:
        hx = str(rec.get("hex") or "")
        name = str(rec.get("name") or "")
        hkey, nkey = hx.lower(), name.lower()

        if hkey in hexes:
            hex_dupes += 1
        hexes.add(hkey)
        if nkey in names:
            name_dupes += 1
        names.add(nkey)
        if (hkey, nkey) in exact:
            exact_dupes += 1
        exact.add((hkey, nkey))
        if rec.get("family"):
            families.add(str(rec["family"]).lower())

        if _VALID_HEX_RE.match(hx):
            valid += 1
        if len(hx) == 4:
            hex_usage["3-digit"] += 1
        elif len(hx) == 7:
            hex_usage["6-digit"] += 1
        hex_groups[hkey[1:3]] += 1

        lengths.append(len(name))
        tokens = nkey.split() or [""]
        word_counts.append(len(tokens))
        word_len_means.append(sum(len(t) for t in tokens) / len(tokens))
        words.update(t for t in tokens if t)
        length_buckets[f"{len(name) // LENGTH_BUCKET * LENGTH_BUCKET}-"] += 1

        if _DIGIT_RE.search(name):
            patterns["has_numbers"] += 1
        if _SPECIAL_RE.search(name):
            patterns["has_special_chars"] += 1
        if _CAMEL_RE.search(name):
            patterns["camel_case"] += 1
        if _LOWER_RE.match(name):
            patterns["all_lower"] += 1
        if _UPPER_RE.match(name):
            patterns["all_upper"] += 1

    all_names = [str(r.get("name") or "") for r in records]
    by_len = sorted(all_names, key=len)

    return {
        "total": total,
        "valid": valid,
        "invalid": total - valid,
        "families": len(families),
        "duplicates": {
            "hex_duplicates": hex_dupes,
            "name_duplicates": name_dupes,
            "exact_duplicates": exact_dupes,
            "unique_hex": len(hexes),
            "unique_names": len(names),
        },
        "stats": {
            "name_length": {
                "avg": sum(lengths) / total if total else 0.0,
                "min": min(lengths, default=0),
                "max": max(lengths, default=0),
            },
            "hex_usage": hex_usage,
            "name_words": {
                "avg_words": sum(word_counts) / total if total else 0.0,
                "avg_word_length": sum(word_len_means) / total if total else 0.0,
            },
        },
        "top": {
            "longest_names": sorted(all_names, key=len, reverse=True)[:TOP_NAMES],
            "shortest_names": by_len[:TOP_NAMES],
            "most_common_words": [w for w, _ in words.most_common(TOP_WORDS)],
        },
        "distributions": {
            "name_length_buckets": dict(length_buckets),
            "hex_groups": dict(hex_groups),
        },
        "patterns": patterns,
    }
