"""Display and sort normalization for Miluk orthography."""
from __future__ import annotations

import re

GLOTTAL_STOP = "ʔ"
# ʔ followed by COMBINING LEFT ANGLE ABOVE (the "unreleased" mark)
UNRELEASED_GLOTTAL_STOP = "\u0294\u031a"
_UNRELEASED_RE = re.compile(UNRELEASED_GLOTTAL_STOP + "+")

_LEADING_INVISIBLE_RE = re.compile(r"^[\s\u200b\u200c\u200d\u2060\ufeff]+")
_ASH_FOLD = str.maketrans({"æ": "e", "Æ": "E"})


def normalize_for_display(s: str | None) -> str:
    """Collapse the unreleased glottal stop into a plain ʔ; nothing else changes."""
    if not s:
        return ""
    return _UNRELEASED_RE.sub(GLOTTAL_STOP, s)


def _strip_leading_invisible(s: str) -> str:
    return _LEADING_INVISIBLE_RE.sub("", s)


def normalize_for_sort(s: str | None) -> str:
    """Return the collation form of *s*.

    Leading whitespace and zero-width characters are stripped, every glottal
    stop is dropped, and ash (æ/Æ) sorts as e/E. Only used for ordering and
    grouping, never for rendering.
    """
    if not s:
        return ""
    cleaned = _strip_leading_invisible(normalize_for_display(s))
    cleaned = cleaned.replace(GLOTTAL_STOP, "")
    return cleaned.translate(_ASH_FOLD)


def first_sort_letter(s: str | None) -> str:
    cleaned = normalize_for_sort(s)
    if not cleaned:
        return ""
    return cleaned[0].upper()


def leading_letter(s: str | None) -> str:
    """Upper-cased first written letter of *s*, glottal stop included.

    Same as :func:`first_sort_letter` except that a word-initial ʔ is kept,
    so a form written ``ʔalá`` reports ``ʔ`` rather than ``A``.
    """
    if not s:
        return ""
    cleaned = _strip_leading_invisible(normalize_for_display(s)).translate(_ASH_FOLD)
    if not cleaned:
        return ""
    return cleaned[0].upper()
