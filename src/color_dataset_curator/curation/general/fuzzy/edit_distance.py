# src/color_dataset_curator/curation/general/fuzzy/edit_distance.py
from __future__ import annotations

"""
edit_distance.py

Does: Damerau-Levenshtein edit distance in two flavours: restricted (optimal string
      alignment, the default) and unrestricted, both computed by rapidfuzz.
Returns: Integer distances; helpers for "closest other member" lookups.
Used by: Semantic deduplicator (name uniqueness term).
"""

from typing import Sequence

from rapidfuzz.distance import OSA, DamerauLevenshtein

__all__ = [
    "damerau_levenshtein",
    "min_distance_to_others",
]

__docformat__ = "google"


def damerau_levenshtein(a: str, b: str, *, restricted: bool = True) -> int:
    """
    Does: Minimum number of insertions, deletions, substitutions and adjacent
          transpositions turning `a` into `b`.
    With `restricted=True` (default) a transposed pair may not be edited again
    ("ca" → "abc" costs 3); `restricted=False` lifts that limit (costs 2).
    """
    a = a or ""
    b = b or ""
    metric = OSA if restricted else DamerauLevenshtein
    return metric.distance(a, b)


def min_distance_to_others(names: Sequence[str], index: int, *, restricted: bool = True) -> int | None:
    """
    Does: Smallest edit distance from names[index] to every other position.
    Members are told apart by position, so equal strings elsewhere count (distance 0).
    Returns: None when there is no other member.
    """
    target = names[index] or ""
    metric = OSA if restricted else DamerauLevenshtein
    best: int | None = None
    for k, other in enumerate(names):
        if k == index:
            continue
        dist = metric.distance(target, other or "")
        if best is None or dist < best:
            best = dist
            if best == 0:
                break
    return best
