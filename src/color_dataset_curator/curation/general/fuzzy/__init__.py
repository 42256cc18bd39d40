# src/color_dataset_curator/curation/general/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing string-similarity utilities: Damerau-Levenshtein edit distance
and rapidfuzz-backed kernel matching for color names.

Returns: Public API for edit distance, name tokenization and kernel lookup.
Used by: Semantic deduplicator, semantic analyzer, dataset analysis.
"""

from __future__ import annotations

# ── Edit distance ────────────────────────────────────────────────────────────
from .edit_distance import (
    damerau_levenshtein,
    min_distance_to_others,
)

# ── Scoring ──────────────────────────────────────────────────────────────────
from .scoring import (
    fuzzy_kernel_match,
    match_kernels,
    normalize_name,
    tokenize_name,
)

__all__ = [
    # Edit distance
    "damerau_levenshtein",
    "min_distance_to_others",
    # Scoring
    "normalize_name",
    "tokenize_name",
    "fuzzy_kernel_match",
    "match_kernels",
]

__docformat__ = "google"
