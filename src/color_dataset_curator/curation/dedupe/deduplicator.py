"""
deduplicator.py
===============

Does: Collapse semantic duplicates in a color list in two passes. Records sharing a hex
      are grouped first (HEX); the surviving winners sharing a non-empty name are
      grouped next (NAME). Each multi-member group keeps one winner, chosen by a
      weighted score over priority membership, semantic fit, name uniqueness, name
      length and list position.
Used By: Orchestrator (curate), merge transforms, the `dedupe` CLI command.
Returns: {"colors", "stats"} where stats lists one DuplicateGroup per collapsed group.

Complexity: O(n) grouping plus O(g²·L²) edit distances per group of size g.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypedDict

from color_dataset_curator.curation.color.metrics import hex_to_hsl, round_half_up, temperature_of
from color_dataset_curator.curation.color.records import hex_key, name_key
from color_dataset_curator.curation.general.fuzzy.edit_distance import min_distance_to_others
from color_dataset_curator.curation.general.types import ProgressSink, SemanticOracle, no_progress
from color_dataset_curator.curation.general.utils import debug

logger = logging.getLogger(__name__)

__all__ = [
    "DuplicateGroup",
    "DedupeResult",
    "SemanticDeduplicator",
    "deduplicate",
    "generate_report",
]
__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
PRIORITY_BONUS = 60.0
SEMANTIC_WEIGHT = 0.3
UNIQUENESS_WEIGHT = 0.15
LENGTH_WEIGHT = 0.1
ORDINAL_WEIGHT = 0.05
IDEAL_NAME_LENGTH = 10
SEMANTIC_REASON_MIN = 50
REASON_SEP = " | "


# ── Types ─────────────────────────────────────────────────────────────────────
class DuplicateGroup(TypedDict):
    hex: str
    names: list[str]
    selected: str
    reason: str


class DedupeResult(TypedDict):
    colors: list[dict[str, Any]]
    stats: list[DuplicateGroup]


PriorityKeys = frozenset[tuple[str, str]]


def _priority_keys(priority_colors: Iterable[Mapping[str, Any]]) -> PriorityKeys:
    return frozenset((hex_key(pc), name_key(pc)) for pc in priority_colors)


def _name(color: Mapping[str, Any]) -> str:
    return str(color.get("name") or "")


class SemanticDeduplicator:
    """
    Two-pass deduplicator bound to a semantic oracle.

    The oracle defaults to the packaged kernel-lexicon analyzer; tests and callers
    may pass any object with `score_semantic_match` / `extract_semantics`.
    """

    def __init__(self, analyzer: SemanticOracle | None = None, *, restricted: bool = True) -> None:
        if analyzer is None:
            from color_dataset_curator.curation.general.semantics import get_default_analyzer

            analyzer = get_default_analyzer()
        self.analyzer = analyzer
        self.restricted = restricted

    # ── Winner selection ─────────────────────────────────────────────────────
    def score_candidate(
        self,
        group: Sequence[Mapping[str, Any]],
        index: int,
        priority: PriorityKeys = frozenset(),
    ) -> float:
        """Does: Weighted score of group[index]; group members are told apart by position."""
        color = group[index]
        name = _name(color)
        score = 0.0

        if (hex_key(color), name_key(color)) in priority:
            score += PRIORITY_BONUS

        score += float(self.analyzer.score_semantic_match(color)) * SEMANTIC_WEIGHT

        min_dist = min_distance_to_others([_name(c) for c in group], index, restricted=self.restricted)
        uniqueness = 100.0 if min_dist is None else min(min_dist * 10, 100)
        score += uniqueness * UNIQUENESS_WEIGHT

        score += max(0, IDEAL_NAME_LENGTH - abs(len(name) - IDEAL_NAME_LENGTH)) * LENGTH_WEIGHT
        score += (len(group) - index) * 5 * ORDINAL_WEIGHT
        return score

    def select_best_name(
        self,
        group: Sequence[Mapping[str, Any]],
        priority_colors: Iterable[Mapping[str, Any]] | PriorityKeys = (),
    ) -> Mapping[str, Any]:
        """
        Does: Pick the group's winner.
        Ties resolve to the earliest member (first maximum).
        """
        priority = priority_colors if isinstance(priority_colors, frozenset) else _priority_keys(priority_colors)
        best_idx = 0
        best_score = float("-inf")
        for idx in range(len(group)):
            s = self.score_candidate(group, idx, priority)
            if s > best_score:
                best_idx, best_score = idx, s
        return group[best_idx]

    def selection_reason(
        self,
        group: Sequence[Mapping[str, Any]],
        winner: Mapping[str, Any],
        priority_colors: Iterable[Mapping[str, Any]] | PriorityKeys = (),
    ) -> str:
        """Does: Human-readable rationale for a winner (reporting only)."""
        priority = priority_colors if isinstance(priority_colors, frozenset) else _priority_keys(priority_colors)
        reasons: list[str] = []
        names = [_name(c) for c in group]

        if (hex_key(winner), name_key(winner)) in priority:
            reasons.append("Priority dataset")
        if "gray" in names and "grey" in names:
            reasons.append("CSS standard")
        semantic = float(self.analyzer.score_semantic_match(winner))
        if semantic > SEMANTIC_REASON_MIN:
            reasons.append(f"Semantic: {int(round_half_up(semantic))}")
        return REASON_SEP.join(reasons)

    def _collapse(
        self,
        group: list[Mapping[str, Any]],
        group_hex: str,
        tag: str,
        priority: PriorityKeys,
    ) -> tuple[Mapping[str, Any], DuplicateGroup]:
        winner = self.select_best_name(group, priority)
        reason = self.selection_reason(group, winner, priority)
        entry: DuplicateGroup = {
            "hex": group_hex,
            "names": [_name(c) for c in group],
            "selected": _name(winner),
            "reason": f"{reason} | {tag}",
        }
        debug(f"{tag} {group_hex}: {entry['names']} → '{entry['selected']}'", topic="dedupe")
        return winner, entry

    # ── Two-pass deduplication ───────────────────────────────────────────────
    def deduplicate(
        self,
        colors: Sequence[Mapping[str, Any]],
        priority_colors: Iterable[Mapping[str, Any]] = (),
        *,
        progress: ProgressSink | None = None,
    ) -> DedupeResult:
        """
        Does: Collapse duplicates by hex, then by name.
        Output keeps first-appearance order; unnamed records never merge by name.
        """
        tick = progress or no_progress
        priority = _priority_keys(priority_colors)

        # Phase 1: by hex
        hex_groups: dict[str, list[Mapping[str, Any]]] = {}
        for color in colors:
            hex_groups.setdefault(hex_key(color), []).append(color)
        tick(20.0)

        hex_winners: list[Mapping[str, Any]] = []
        hex_dupes: list[DuplicateGroup] = []
        for key, group in hex_groups.items():
            if len(group) == 1:
                hex_winners.append(group[0])
                continue
            winner, entry = self._collapse(group, str(group[0].get("hex", "")).lower(), "HEX", priority)
            hex_winners.append(winner)
            hex_dupes.append(entry)
        tick(50.0)

        # Phase 2: by name (unnamed winners are placeholders, kept in place)
        name_groups: dict[str, list[Mapping[str, Any]]] = {}
        for winner in hex_winners:
            key = name_key(winner)
            if key:
                name_groups.setdefault(key, []).append(winner)
        tick(70.0)

        if all(len(g) == 1 for g in name_groups.values()):
            tick(100.0)
            logger.info("dedupe: %d → %d (%d hex groups)", len(colors), len(hex_winners), len(hex_dupes))
            return {"colors": list(hex_winners), "stats": hex_dupes}

        final: list[Mapping[str, Any]] = []
        name_dupes: list[DuplicateGroup] = []
        emitted: set[str] = set()
        for winner in hex_winners:
            key = name_key(winner)
            if not key:
                final.append(winner)
                continue
            if key in emitted:
                continue
            emitted.add(key)
            group = name_groups[key]
            if len(group) == 1:
                final.append(group[0])
                continue
            joined = ", ".join(str(c.get("hex", "")) for c in group)
            best, entry = self._collapse(group, joined, "NAME", priority)
            final.append(best)
            name_dupes.append(entry)
        tick(100.0)

        logger.info(
            "dedupe: %d → %d (%d hex groups, %d name groups)",
            len(colors), len(final), len(hex_dupes), len(name_dupes),
        )
        return {"colors": final, "stats": hex_dupes + name_dupes}

    # ── Reporting ────────────────────────────────────────────────────────────
    def generate_report(
        self,
        colors: Sequence[Mapping[str, Any]],
        priority_colors: Iterable[Mapping[str, Any]] = (),
    ) -> dict[str, Any]:
        """
        Does: Re-run deduplication and summarize it.
        Returns: {"summary", "duplicates", "analysis"}; analysis counts the kept
                 colors by temperature and by first semantic kernel.
        """
        result = self.deduplicate(colors, priority_colors)
        kept = result["colors"]
        original = len(colors)
        removed = original - len(kept)
        rate = removed / original * 100 if original else 0.0

        by_category: dict[str, int] = {}
        semantic: dict[str, int] = {}
        for color in kept:
            hsl = color.get("hsl")
            h = hsl["h"] if isinstance(hsl, Mapping) and "h" in hsl else hex_to_hsl(color.get("hex"))["h"]
            temp = temperature_of(h)
            by_category[temp] = by_category.get(temp, 0) + 1

            kernels = self.analyzer.extract_semantics(_name(color)).get("kernels") or []
            main = kernels[0] if kernels else "unclassified"
            semantic[main] = semantic.get(main, 0) + 1

        return {
            "summary": {
                "original": original,
                "deduplicated": len(kept),
                "removed": removed,
                "removal_rate": f"{round_half_up(rate, 1):.1f}%",
            },
            "duplicates": result["stats"],
            "analysis": {
                "by_category": by_category,
                "semantic_distribution": semantic,
            },
        }


# ── Functional API ───────────────────────────────────────────────────────────
def deduplicate(
    colors: Sequence[Mapping[str, Any]],
    priority_colors: Iterable[Mapping[str, Any]] = (),
    *,
    analyzer: SemanticOracle | None = None,
    progress: ProgressSink | None = None,
) -> DedupeResult:
    """Does: One-shot SemanticDeduplicator(analyzer).deduplicate(...)."""
    return SemanticDeduplicator(analyzer).deduplicate(colors, priority_colors, progress=progress)


def generate_report(
    colors: Sequence[Mapping[str, Any]],
    priority_colors: Iterable[Mapping[str, Any]] = (),
    *,
    analyzer: SemanticOracle | None = None,
) -> dict[str, Any]:
    return SemanticDeduplicator(analyzer).generate_report(colors, priority_colors)
