"""
transforms package.
==================

Does: Whole-dataset operations around the curation core: recalculation from hex,
      (de)normalization, sorting, title-casing, merging and profiling.
"""

from .analyze import analyze_dataset
from .merge import merge_datasets, priority_merge
from .naming import capitalize, capitalize_names
from .normalize import process_hue, process_normalization, process_value
from .ordering import SORT_FIELDS, sort_records
from .recalc import recalculate_from_hex

__all__ = [
    "analyze_dataset",
    "merge_datasets",
    "priority_merge",
    "capitalize",
    "capitalize_names",
    "process_normalization",
    "process_value",
    "process_hue",
    "SORT_FIELDS",
    "sort_records",
    "recalculate_from_hex",
]
