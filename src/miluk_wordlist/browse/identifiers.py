"""Deep-link identifiers for the visible entries of one render pass.

Identifiers depend on the visible sequence, which changes with every filter,
search or mode switch, so they are rebuilt from empty state on each call and
never cached across renders.
"""
from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List

from miluk_wordlist.lexicon.models import LexicalEntry

FALLBACK_SLUG = "entry"

_WHITESPACE_RE = re.compile(r"\s+")
_SLUG_CLEAN_RE = re.compile(r"[^a-z0-9-]")


def base_slug(headword: str | None) -> str:
    """Lower-case *headword*, hyphenate whitespace runs, keep only [a-z0-9-]."""
    text = (headword or "").lower().strip()
    text = _WHITESPACE_RE.sub("-", text)
    return _SLUG_CLEAN_RE.sub("", text)


def assign_ids(headwords: Iterable[str]) -> List[str]:
    """Return one identifier per headword, in order, all pairwise distinct.

    A slug that occurs once is used unchanged. For a repeated slug the first
    occurrence keeps it and later ones get ``-1``, ``-2`` ... in sequence
    order. A suffixed candidate that would clash with another slug in the
    same pass is skipped in favour of the next number, so
    ``["Fire", "Fire", "Fire 1"]`` becomes ``fire``, ``fire-2``, ``fire-1``.
    """
    slugs = [base_slug(headword) or FALLBACK_SLUG for headword in headwords]
    counts = Counter(slugs)
    taken = set(counts)
    seen: Counter[str] = Counter()
    assigned: List[str] = []

    for slug in slugs:
        if counts[slug] == 1 or seen[slug] == 0:
            seen[slug] += 1
            assigned.append(slug)
            continue
        candidate = f"{slug}-{seen[slug]}"
        while candidate in taken:
            seen[slug] += 1
            candidate = f"{slug}-{seen[slug]}"
        seen[slug] += 1
        taken.add(candidate)
        assigned.append(candidate)

    return assigned


def assign_entry_ids(entries: Iterable[LexicalEntry]) -> List[str]:
    return assign_ids(entry.headword for entry in entries)
