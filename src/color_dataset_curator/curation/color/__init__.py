"""
color package.
=============

Does: Color-domain building blocks: family constants, ColorMath (hex/RGB/HSL,
      hue ranges, family decision tree), canonical records, perceptual distances
      and named-color vocabularies.
"""

from .constants import FAMILIES, FAMILY_AFFINITY
from .metrics import (
    HueRange,
    RGB,
    family_of,
    hex_to_hsl,
    hex_to_rgb,
    hue_distance,
    hue_range_for,
    is_valid_hex,
    lightness_class,
    normalize_hex,
    rgb_to_hex,
    round_half_up,
    saturation_class,
    temperature_of,
)
from .records import HSL, ColorRecord, build_record, complete_record, hex_key, name_key
from .utils import delta_e, hsl_distance
from .vocab import named_hex

__all__ = [
    "FAMILIES",
    "FAMILY_AFFINITY",
    "RGB",
    "HueRange",
    "HSL",
    "ColorRecord",
    "round_half_up",
    "normalize_hex",
    "is_valid_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "hue_range_for",
    "family_of",
    "temperature_of",
    "lightness_class",
    "saturation_class",
    "hue_distance",
    "build_record",
    "complete_record",
    "hex_key",
    "name_key",
    "delta_e",
    "hsl_distance",
    "named_hex",
]

__docformat__ = "google"
