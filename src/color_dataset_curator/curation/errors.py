"""
errors.py.

Does: Exceptions raised by the dataset glue (extraction, file I/O). The curation core
      itself never raises on dirty data; these cover whole-dataset failures only.
"""

from __future__ import annotations

__all__ = ["DatasetError", "DatasetFormatError", "DatasetIOError"]


class DatasetError(ValueError):
    """Base class for dataset-level failures."""


class DatasetFormatError(DatasetError):
    """Raise when no detector recognizes the dataset's structure."""


class DatasetIOError(DatasetError):
    """Raise when a dataset file cannot be read, decoded or written."""
