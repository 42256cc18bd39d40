"""
vocab
=====

Does: Expose named-color vocabularies (CSS3 via webcolors, CSS4/XKCD via matplotlib)
      as {name: '#rrggbb'} lookups for semantic scoring.
Used By: Semantic analyzer (standard-name checks), tests.
Returns: Frozen sets / dicts behind lazy caches (no side effects at import).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import FrozenSet

import webcolors

from color_dataset_curator.curation.color.metrics import normalize_hex

log = logging.getLogger(__name__)

__all__ = [
    "get_css_colors",
    "get_xkcd_colors",
    "get_css_names",
    "get_xkcd_names",
    "get_all_webcolor_names",
    "named_hex",
    "is_standard_name",
]


def _key(name: str) -> str:
    return " ".join(str(name).lower().replace("-", " ").split())


# ── CSS (webcolors + matplotlib CSS4) ────────────────────────────────────────
@lru_cache(maxsize=1)
def get_css_colors() -> dict[str, str]:
    """Does: {css name: '#rrggbb'}; CSS names carry no spaces."""
    from matplotlib.colors import CSS4_COLORS  # lazy import

    colors: dict[str, str] = {}
    for name in webcolors.names("css3"):
        colors[name.lower()] = webcolors.name_to_hex(name, spec="css3").lower()
    for name, hx in CSS4_COLORS.items():
        colors.setdefault(name.lower(), hx.lower())
    return colors


# ── XKCD (matplotlib, lazy) ──────────────────────────────────────────────────
@lru_cache(maxsize=1)
def get_xkcd_colors() -> dict[str, str]:
    """Does: {xkcd name (spaces kept): '#rrggbb'}, loaded once."""
    from matplotlib.colors import XKCD_COLORS  # lazy import

    colors = {_key(k.replace("xkcd:", "")): hx.lower() for k, hx in XKCD_COLORS.items()}
    log.debug("loaded %d XKCD colors", len(colors))
    return colors


def get_css_names() -> FrozenSet[str]:
    return frozenset(get_css_colors())


def get_xkcd_names() -> FrozenSet[str]:
    return frozenset(get_xkcd_colors())


def get_all_webcolor_names() -> FrozenSet[str]:
    """Does: Canonical accessor for every standard color name (CSS + XKCD)."""
    return get_css_names() | get_xkcd_names()


# ── Lookups ──────────────────────────────────────────────────────────────────
def named_hex(name: str) -> str | None:
    """
    Does: Resolve a color name to its standard hex, CSS first, then XKCD.
    CSS lookup ignores spaces/hyphens ("Dark Slate Gray" → darkslategray).
    Returns: '#rrggbb' or None when the name is not standard.
    """
    if not name:
        return None
    key = _key(name)
    css = get_css_colors().get(key.replace(" ", ""))
    if css is not None:
        return normalize_hex(css)
    xkcd = get_xkcd_colors().get(key)
    return normalize_hex(xkcd) if xkcd is not None else None


def is_standard_name(name: str, hex_value: str) -> bool:
    """Does: True when `name` is a CSS/XKCD name whose standard hex equals `hex_value`."""
    std = named_hex(name)
    return std is not None and std == normalize_hex(hex_value)
