# src/color_dataset_curator/curation/general/fuzzy/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Token normalization and fuzzy kernel lookup for color names: split a name into
      tokens, then match each token against a kernel vocabulary (exact first, then a
      rapidfuzz ratio above a tunable cutoff).
Returns: Normalized tokens and (kernel, score) matches.
Used by: Semantic analyzer (kernel extraction), dataset analysis (word stats).
"""

import re
from typing import Collection, Iterable

from rapidfuzz import fuzz as rf_fuzz
from rapidfuzz import process as rf_process

from color_dataset_curator.curation.general.utils.env import env_float

__all__ = [
    "normalize_name",
    "tokenize_name",
    "fuzzy_kernel_match",
    "match_kernels",
]

__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
FUZZY_KERNEL_THRESHOLD = env_float("CURATOR_FUZZY_KERNEL_THRESHOLD", 88.0)
MIN_FUZZY_TOKEN_LEN = 4     # shorter tokens only match exactly

_CAMEL_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")
_SPLIT_RE = re.compile(r"[^a-z0-9]+")


# ─────────────────────────────────────────────────────────────────────────────
# Utils
# ─────────────────────────────────────────────────────────────────────────────

def normalize_name(s: str) -> str:
    """
    Does: Lowercase, trim, map hyphens/underscores to spaces, collapse spaces.
    """
    if s is None:
        return ""
    s = str(s).lower().strip().replace("-", " ").replace("_", " ")
    return " ".join(s.split())


def tokenize_name(name: str) -> list[str]:
    """Does: Split a name into lower-case alphanumeric tokens (camelCase aware)."""
    if not name:
        return []
    spaced = _CAMEL_RE.sub(" ", str(name))
    return [t for t in _SPLIT_RE.split(spaced.lower()) if t]


# ─────────────────────────────────────────────────────────────────────────────
# 1) Kernel Matching
# ─────────────────────────────────────────────────────────────────────────────

def fuzzy_kernel_match(
    token: str,
    kernels: Collection[str],
    *,
    threshold: float | None = None,
) -> tuple[str, float] | None:
    """
    Does: Match one token to the closest kernel word.
    Returns: (kernel, score 0–100) or None. Exact hits score 100.
    """
    token = normalize_name(token)
    if not token or not kernels:
        return None
    if token in kernels:
        return token, 100.0
    if len(token) < MIN_FUZZY_TOKEN_LEN:
        return None

    cutoff = FUZZY_KERNEL_THRESHOLD if threshold is None else threshold
    hit = rf_process.extractOne(token, kernels, scorer=rf_fuzz.ratio, score_cutoff=cutoff)
    if hit is None:
        return None
    kernel, score, _ = hit
    return kernel, float(score)


def match_kernels(
    tokens: Iterable[str],
    kernels: Collection[str],
    *,
    threshold: float | None = None,
) -> list[str]:
    """Does: Ordered, de-duplicated kernel hits for a token stream."""
    out: list[str] = []
    for tok in tokens:
        hit = fuzzy_kernel_match(tok, kernels, threshold=threshold)
        if hit is not None and hit[0] not in out:
            out.append(hit[0])
    return out
