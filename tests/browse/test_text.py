import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from miluk_wordlist.browse.text import (  # noqa: E402
    GLOTTAL_STOP,
    UNRELEASED_GLOTTAL_STOP,
    first_sort_letter,
    leading_letter,
    normalize_for_display,
    normalize_for_sort,
)


def test_display_collapses_unreleased_glottal_stop_only():
    raw = f"tá{UNRELEASED_GLOTTAL_STOP}s æ ʔa"
    assert normalize_for_display(raw) == "táʔs æ ʔa"
    assert len(normalize_for_display(raw)) == len(raw) - 1


@pytest.mark.parametrize(
    "raw",
    ["", "plain", f"{UNRELEASED_GLOTTAL_STOP}{UNRELEASED_GLOTTAL_STOP}x", "\u0294\u031a\u031a"],
)
def test_display_normalization_is_idempotent(raw):
    once = normalize_for_display(raw)
    assert normalize_for_display(once) == once


def test_display_handles_missing_input():
    assert normalize_for_display(None) == ""


@pytest.mark.parametrize(
    "raw",
    ["ʔalá", "aʔaʔ", "ʔ", f"ta{UNRELEASED_GLOTTAL_STOP}", "\u200b ʔʔx"],
)
def test_sort_form_drops_every_glottal_stop(raw):
    assert GLOTTAL_STOP not in normalize_for_sort(raw)


def test_sort_form_strips_leading_invisible_characters():
    assert normalize_for_sort("\ufeff\u200b\u00a0  apple pie") == "apple pie"
    # interior spacing is kept
    assert normalize_for_sort("sea  lion") == "sea  lion"


def test_sort_form_maps_ash_to_e():
    assert normalize_for_sort("æqʷ Æs") == "eqʷ Es"
    assert normalize_for_display("æqʷ") == "æqʷ"


def test_unreleased_mark_does_not_survive_in_sort_form():
    assert normalize_for_sort(f"{UNRELEASED_GLOTTAL_STOP}ak") == "ak"


@pytest.mark.parametrize("raw", [None, "", "   ", "ʔ", "\u200b"])
def test_sort_form_is_total(raw):
    assert normalize_for_sort(raw) == ""
    assert first_sort_letter(raw) == ""


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("water", "W"),
        ("  \u200bfire", "F"),
        ("ʔalá", "A"),
        ("æqʷ", "E"),
    ],
)
def test_first_sort_letter(raw, expected):
    assert first_sort_letter(raw) == expected


def test_leading_letter_keeps_glottal_stop():
    assert leading_letter("ʔalá") == "ʔ"
    assert leading_letter("\u200bæqʷ") == "E"
    assert leading_letter("boo") == "B"
    assert leading_letter(None) == ""
