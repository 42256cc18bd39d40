"""
analyzer.py
===========

Does: Default name-semantics oracle. Extracts semantic kernels (root color words such
      as "crimson", "sage", "navy") from a color name and scores how well the name
      fits the family its hex actually falls in.
Used By: Semantic deduplicator (winner selection, report kernel distribution).
Returns: Scores in [0,100] and {"kernels": [...]} dicts.

Scoring:
- 100  the name is a CSS/XKCD name for exactly this hex, or a kernel's family equals
       the record family
-  70  a kernel's family is an affinity of the record family (e.g. "coral" on pink)
-  50  no kernel found (neutral)
-  25  kernels found, none related to the record family
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

from color_dataset_curator.curation.color.constants import FAMILIES, FAMILY_AFFINITY
from color_dataset_curator.curation.color.metrics import family_of, hex_to_hsl
from color_dataset_curator.curation.color.vocab import is_standard_name
from color_dataset_curator.curation.general.fuzzy.scoring import match_kernels, tokenize_name
from color_dataset_curator.curation.general.types import Semantics
from color_dataset_curator.curation.general.utils import debug, load_config

logger = logging.getLogger(__name__)

__all__ = [
    "LexiconSemanticAnalyzer",
    "load_kernel_lexicon",
    "get_default_analyzer",
]
__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
LEXICON_FILE = "semantic_kernels"
SCORE_EXACT = 100.0
SCORE_AFFINITY = 70.0
SCORE_NEUTRAL = 50.0
SCORE_MISMATCH = 25.0


# =============================================================================
# 1) LEXICON
# =============================================================================

def _validate_lexicon(data: dict[str, Any]) -> dict[str, Any]:
    unknown = sorted(k for k in data if k not in FAMILIES)
    if unknown:
        raise ValueError(f"unknown families: {', '.join(unknown)}")
    for family, words in data.items():
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ValueError(f"'{family}' must map to a list of strings")
    return data


def load_kernel_lexicon() -> dict[str, list[str]]:
    """Does: Load {family: [kernel words]} from data/semantic_kernels.json."""
    return load_config(LEXICON_FILE, validator=_validate_lexicon)


# =============================================================================
# 2) ANALYZER
# =============================================================================

class LexiconSemanticAnalyzer:
    """
    Kernel-lexicon implementation of the SemanticOracle protocol.

    A kernel word may belong to several families ("copper" → orange, metallic);
    `extract_semantics` keeps kernels in name order.
    """

    def __init__(
        self,
        lexicon: Mapping[str, Iterable[str]] | None = None,
        *,
        threshold: float | None = None,
    ) -> None:
        if lexicon is None:
            lexicon = load_kernel_lexicon()
        self._families_by_kernel: dict[str, list[str]] = {}
        for family, words in lexicon.items():
            for word in words:
                fams = self._families_by_kernel.setdefault(word.lower(), [])
                if family not in fams:
                    fams.append(family)
        self._kernels = frozenset(self._families_by_kernel)
        self._threshold = threshold

    @property
    def kernels(self) -> frozenset[str]:
        return self._kernels

    def kernel_families(self, kernel: str) -> list[str]:
        return list(self._families_by_kernel.get(kernel.lower(), ()))

    def extract_semantics(self, name: str) -> Semantics:
        tokens = tokenize_name(name)
        return {"kernels": match_kernels(tokens, self._kernels, threshold=self._threshold)}

    def score_semantic_match(self, color: Mapping[str, Any]) -> float:
        """
        Does: Score a record's name against the family of its hex.
        The family is re-derived from hex when the record carries none.
        """
        name = str(color.get("name") or "")
        hex_value = str(color.get("hex") or "")
        family = color.get("family")
        if not family:
            m = hex_to_hsl(hex_value)
            family = family_of(m["h"], m["s"] / 100, m["l"] / 100)

        if name and hex_value and is_standard_name(name, hex_value):
            debug(f"standard name '{name}' == {hex_value}", topic="semantics")
            return SCORE_EXACT

        kernels = self.extract_semantics(name)["kernels"]
        if not kernels:
            return SCORE_NEUTRAL

        related = FAMILY_AFFINITY.get(family, frozenset())
        score = SCORE_MISMATCH
        for kernel in kernels:
            fams = self._families_by_kernel.get(kernel, ())
            if family in fams:
                return SCORE_EXACT
            if any(f in related for f in fams):
                score = SCORE_AFFINITY
        debug(f"'{name}' ({family}) kernels={kernels} → {score}", topic="semantics")
        return score


@lru_cache(maxsize=1)
def get_default_analyzer() -> LexiconSemanticAnalyzer:
    """Does: Shared analyzer over the packaged lexicon (built once)."""
    analyzer = LexiconSemanticAnalyzer()
    logger.debug("semantic analyzer ready: %d kernels", len(analyzer.kernels))
    return analyzer
