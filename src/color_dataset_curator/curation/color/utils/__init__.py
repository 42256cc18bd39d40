"""
utils package.
=============

Does: Provide color distance helpers (Lab ΔE, weighted HSL distances) shared by
      merging and quality scoring.
"""

from .rgb_distance import (
    centroid_distance,
    delta_e,
    hsl_distance,
    lab_distance,
    rgb_to_lab,
)

__all__ = [
    "rgb_to_lab",
    "lab_distance",
    "delta_e",
    "hsl_distance",
    "centroid_distance",
]

__docformat__ = "google"
