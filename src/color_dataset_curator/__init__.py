"""
color_dataset_curator
=====================

Does: Root package initializer for the color dataset curator.
Returns: Exposes the `curation` subpackages (color, format, dedupe, distribution,
         transforms) through a stable namespace.
Used by: All higher-level imports starting from `color_dataset_curator.*`.
"""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
__docformat__ = "google"
