# constants.py
# ============

"""
constants.
=========

Does: Define immutable color-domain constants: the family vocabulary, hue sectors,
      family refinement groups, neighbouring-family affinity and hex patterns.
Used By: ColorMath (family decision tree), semantic analyzer, format detectors,
         spectrum analysis.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

import re

# ── 1) Family vocabulary ─────────────────────────────────────────────────────

ACHROMATIC_FAMILIES: tuple[str, ...] = ("black", "white", "gray")
SPECIAL_FAMILIES: tuple[str, ...] = ("pastel", "neon")

# 12 base hue sectors, 30° wide, red centred on 0°
HUE_SECTORS: tuple[tuple[float, str], ...] = (
    (45, "orange"),
    (75, "yellow"),
    (105, "chartreuse"),
    (135, "green"),
    (165, "springgreen"),
    (195, "cyan"),
    (225, "azure"),
    (255, "blue"),
    (285, "violet"),
    (315, "magenta"),
    (345, "rose"),
)
BASE_FAMILIES: tuple[str, ...] = ("red",) + tuple(name for _, name in HUE_SECTORS)

REFINED_FAMILIES: tuple[str, ...] = (
    "brown", "earth", "pink", "metallic", "skin", "jewel", "nature", "food",
)

# Base families renamed at the end of the decision tree
FAMILY_REMAPS: dict[str, str] = {
    "chartreuse": "lime",
    "cyan": "teal",
    "springgreen": "teal",
    "violet": "purple",
}

FAMILIES: tuple[str, ...] = (
    ACHROMATIC_FAMILIES
    + SPECIAL_FAMILIES
    + BASE_FAMILIES
    + REFINED_FAMILIES
    + ("lime", "teal", "purple")
)

# ── 2) Refinement groups (order of rules lives in metrics.family_of) ─────────
EARTHY_BASES = frozenset({"orange", "yellow", "red"})
PINK_BASES = frozenset({"red", "rose", "magenta"})
METALLIC_BASES = frozenset({"yellow", "orange"})
SKIN_BASES = frozenset({"orange", "yellow", "brown"})
# 'purple' is never a base sector; kept so labels match existing datasets
JEWEL_BASES = frozenset({"red", "green", "blue", "purple", "magenta"})
NATURE_BASES = frozenset({"green", "blue", "springgreen", "cyan"})
FOOD_BASES = frozenset({"red", "orange", "yellow", "green", "brown"})

# ── 3) Family affinity (semantic scoring: "close enough" families) ───────────
FAMILY_AFFINITY: dict[str, frozenset[str]] = {
    "red": frozenset({"rose", "pink", "jewel", "food", "brown"}),
    "orange": frozenset({"brown", "earth", "skin", "metallic", "food", "yellow"}),
    "yellow": frozenset({"orange", "lime", "metallic", "food", "skin"}),
    "lime": frozenset({"yellow", "green", "nature"}),
    "green": frozenset({"lime", "teal", "nature", "jewel", "food"}),
    "teal": frozenset({"green", "azure", "nature"}),
    "azure": frozenset({"teal", "blue", "nature"}),
    "blue": frozenset({"azure", "purple", "nature", "jewel"}),
    "purple": frozenset({"blue", "magenta", "jewel", "pastel"}),
    "magenta": frozenset({"purple", "rose", "pink", "jewel"}),
    "rose": frozenset({"red", "pink", "magenta"}),
    "pink": frozenset({"rose", "red", "magenta", "pastel"}),
    "brown": frozenset({"earth", "orange", "skin", "red"}),
    "earth": frozenset({"brown", "orange", "skin"}),
    "skin": frozenset({"brown", "orange", "earth", "pink"}),
    "metallic": frozenset({"yellow", "orange", "gray"}),
    "gray": frozenset({"white", "black", "metallic"}),
    "white": frozenset({"gray", "pastel"}),
    "black": frozenset({"gray"}),
    "pastel": frozenset({"pink", "white", "purple"}),
    "neon": frozenset({"green", "lime", "pink", "yellow"}),
    "jewel": frozenset({"red", "green", "blue", "magenta", "purple"}),
    "nature": frozenset({"green", "blue", "teal", "azure"}),
    "food": frozenset({"red", "orange", "yellow", "green", "brown"}),
}

# ── 4) Hex patterns ──────────────────────────────────────────────────────────
HEX_ANY_RE = re.compile(r"^#?[0-9a-f]{3,8}$", re.IGNORECASE)     # loose sniffing
HEX_FULL_RE = re.compile(r"^#?[0-9a-f]{6,8}$", re.IGNORECASE)    # 6 or 8 digits
HEX6_RE = re.compile(r"^#?[0-9a-f]{6}$", re.IGNORECASE)          # strict 6 digits
HEX_BARE6_RE = re.compile(r"^[0-9a-f]{6}$", re.IGNORECASE)       # no '#'
HEX_VALID_RE = re.compile(r"^(?:[0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$")  # lower, no '#'

__all__ = [
    "ACHROMATIC_FAMILIES",
    "SPECIAL_FAMILIES",
    "HUE_SECTORS",
    "BASE_FAMILIES",
    "REFINED_FAMILIES",
    "FAMILY_REMAPS",
    "FAMILIES",
    "EARTHY_BASES",
    "PINK_BASES",
    "METALLIC_BASES",
    "SKIN_BASES",
    "JEWEL_BASES",
    "NATURE_BASES",
    "FOOD_BASES",
    "FAMILY_AFFINITY",
    "HEX_ANY_RE",
    "HEX_FULL_RE",
    "HEX6_RE",
    "HEX_BARE6_RE",
    "HEX_VALID_RE",
]
