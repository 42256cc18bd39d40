"""
dedupe package.
==============

Does: Semantic deduplication of color records (hex pass, then name pass).
"""

from .deduplicator import DedupeResult, DuplicateGroup, SemanticDeduplicator, deduplicate, generate_report

__all__ = ["DuplicateGroup", "DedupeResult", "SemanticDeduplicator", "deduplicate", "generate_report"]
