# tests/test_general_fuzzy.py
"""Edit distance (OSA / unrestricted Damerau-Levenshtein) and rapidfuzz kernel matching."""

from __future__ import annotations

import importlib

import pytest

ed = importlib.import_module("color_dataset_curator.curation.general.fuzzy.edit_distance")
sc = importlib.import_module("color_dataset_curator.curation.general.fuzzy.scoring")


# ──────────────────────────────────────────────────────────────────────────────
# Damerau-Levenshtein
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("restricted", [True, False])
@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("kitten", "sitting", 3),
        ("ab", "ba", 1),
        ("", "abc", 3),
        ("abc", "", 3),
        ("same", "same", 0),
        ("gray", "grey", 1),
    ],
)
def test_distance_common_cases(a, b, expected, restricted):
    assert ed.damerau_levenshtein(a, b, restricted=restricted) == expected


def test_restricted_and_unrestricted_differ_on_edited_transposition():
    assert ed.damerau_levenshtein("ca", "abc", restricted=True) == 3
    assert ed.damerau_levenshtein("ca", "abc", restricted=False) == 2


@pytest.mark.parametrize("pair", [("kitten", "sitting"), ("sage", "beige"), ("ca", "abc")])
def test_distance_is_symmetric(pair):
    a, b = pair
    for restricted in (True, False):
        assert ed.damerau_levenshtein(a, b, restricted=restricted) == ed.damerau_levenshtein(
            b, a, restricted=restricted
        )


def test_min_distance_to_others():
    names = ["red", "red", "rod"]
    assert ed.min_distance_to_others(names, 0) == 0
    assert ed.min_distance_to_others(names, 2) == 1
    assert ed.min_distance_to_others(["alone"], 0) is None


@pytest.mark.parametrize("restricted", [True, False])
def test_transposed_color_name_costs_one_edit(restricted):
    assert ed.damerau_levenshtein("magneta", "magenta", restricted=restricted) == 1


def test_missing_names_count_as_empty():
    assert ed.damerau_levenshtein(None, "tan") == 3
    assert ed.min_distance_to_others(["tan", None], 0) == 3


# ──────────────────────────────────────────────────────────────────────────────
# Tokens & kernels
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "name,tokens",
    [
        ("DarkSlateGray", ["dark", "slate", "gray"]),
        ("Sky-Blue 2", ["sky", "blue", "2"]),
        ("", []),
        ("  pale__rose ", ["pale", "rose"]),
    ],
)
def test_tokenize_name(name, tokens):
    assert sc.tokenize_name(name) == tokens


def test_normalize_name():
    assert sc.normalize_name("  Dark-Olive_Green ") == "dark olive green"
    assert sc.normalize_name(None) == ""


def test_kernel_match_exact_and_fuzzy():
    kernels = {"crimson", "sage", "navy"}
    assert sc.fuzzy_kernel_match("Crimson", kernels) == ("crimson", 100.0)
    hit = sc.fuzzy_kernel_match("crimsonn", kernels)
    assert hit is not None and hit[0] == "crimson"
    assert hit[1] == pytest.approx(93.33, abs=0.01)


def test_kernel_match_short_tokens_need_exact_hits():
    assert sc.fuzzy_kernel_match("nav", {"navy"}) is None
    assert sc.fuzzy_kernel_match("zzzzzz", {"navy"}) is None
    assert sc.fuzzy_kernel_match("navy", set()) is None


def test_kernel_match_threshold_override():
    assert sc.fuzzy_kernel_match("crimsonn", {"crimson"}, threshold=99) is None


def test_match_kernels_ordered_and_deduplicated():
    kernels = {"sage", "green", "mint"}
    assert sc.match_kernels(["mint", "sage", "mint", "green"], kernels) == ["mint", "sage", "green"]
