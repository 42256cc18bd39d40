# color_dataset_curator/curation/__init__.py

"""
curation.
=========

Does: Ingest loosely-structured color datasets, infer their shape, normalize them into
      canonical records, remove semantic duplicates and prune to a target size.
Returns: The pipeline entry points (`curate`, `parse_dataset`, `infer`, `deduplicate`,
         `prune`) and the dataset error types.
Used by: CLI, notebooks and library callers.
"""
from __future__ import annotations

from .dedupe import deduplicate
from .distribution import prune
from .errors import DatasetError, DatasetFormatError, DatasetIOError
from .format import infer, parse_dataset
from .orchestrator import curate

__all__: list[str] = [
    "curate",
    "infer",
    "parse_dataset",
    "deduplicate",
    "prune",
    "DatasetError",
    "DatasetFormatError",
    "DatasetIOError",
]
__docformat__ = "google"
