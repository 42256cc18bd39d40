# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Run the curation pipeline end to end on in-memory data:
      parse (infer + extract) → deduplicate → optional prune.
Returns:
  - curate(raw, target_count=None, priority=None) -> {
        "data": [ColorRecord, ...],
        "stats": {"parse": {...}, "dedupe": [DuplicateGroup, ...], "prune": {...}|None}
    }
  - parse_many({label: raw}) -> ({label: [records]}, {label: parse metadata})
Used by: CLI commands and library callers.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from color_dataset_curator.curation.dedupe.deduplicator import SemanticDeduplicator
from color_dataset_curator.curation.distribution.pruner import PruneOptions, prune
from color_dataset_curator.curation.errors import DatasetError
from color_dataset_curator.curation.format.extractor import parse_dataset
from color_dataset_curator.curation.general.types import ProgressSink, SemanticOracle

logger = logging.getLogger(__name__)

__all__ = ["curate", "parse_many"]


def parse_many(raw_datasets: Mapping[str, Any]) -> tuple[dict[str, list[dict]], dict[str, dict]]:
    """
    Does: Parse several raw datasets independently.
    A dataset that fails (unrecognized structure, bad content) is logged and yields [].
    """
    parsed: dict[str, list[dict]] = {}
    meta: dict[str, dict] = {}
    if not raw_datasets:
        logger.warning("No raw datasets")
        return parsed, meta

    for label, raw in raw_datasets.items():
        if raw is None:
            continue
        try:
            logger.info("Parsing %s...", label)
            result = parse_dataset(raw)
        except DatasetError as e:
            logger.error("%s: %s", label, e)
            parsed[label] = []
            continue
        parsed[label] = result["colors"]
        meta[label] = {
            "format": result["format"],
            "confidence": result["confidence"],
            "colors_count": len(result["colors"]),
            "skipped": result["skipped"],
        }
        logger.info("  %s: %d colors (%s)", label, len(result["colors"]), result["format"])
    return parsed, meta


def curate(
    raw: Any,
    target_count: int | None = None,
    priority: Iterable[Mapping[str, Any]] | None = None,
    *,
    analyzer: SemanticOracle | None = None,
    prune_options: PruneOptions | None = None,
    progress: ProgressSink | None = None,
) -> dict[str, Any]:
    """
    Does: Parse, deduplicate and (when `target_count` is given) prune one raw dataset.
    Raises: DatasetFormatError if the input structure is not recognized.
    """
    parsed = parse_dataset(raw)
    colors = parsed["colors"]

    deduped = SemanticDeduplicator(analyzer).deduplicate(colors, priority or (), progress=progress)
    data = deduped["colors"]

    prune_stats = None
    if target_count is not None:
        pruned = prune(data, target_count, prune_options, logger, progress=progress)
        data, prune_stats = pruned["data"], pruned["stats"]

    return {
        "data": list(data),
        "stats": {
            "parse": {
                "format": parsed["format"],
                "confidence": parsed["confidence"],
                "colors_count": len(colors),
                "skipped": parsed["skipped"],
            },
            "dedupe": deduped["stats"],
            "prune": prune_stats,
        },
    }
