"""
format package.
==============

Does: Structural format inference over raw datasets and canonical record extraction.
"""

from .detector import STRUCTURE_TYPES, StructureCandidate, best_candidate, infer
from .extractor import ParseResult, extract_records, parse_dataset

__all__ = [
    "STRUCTURE_TYPES",
    "StructureCandidate",
    "infer",
    "best_candidate",
    "ParseResult",
    "parse_dataset",
    "extract_records",
]
