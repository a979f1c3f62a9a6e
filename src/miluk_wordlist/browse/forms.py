"""Canonical Miluk form extraction and speaker-data availability."""
from __future__ import annotations

import re

from miluk_wordlist.lexicon.models import LexicalEntry

_BRACKETED_RE = re.compile(r"\[([^\]]+)\]")


def has_primary(entry: LexicalEntry) -> bool:
    """True when the entry carries a primary-speaker slot (even an empty one)."""
    table = entry.transcriptions
    return table is not None and table.primary_speaker is not None


def has_secondary(entry: LexicalEntry) -> bool:
    table = entry.transcriptions
    return table is not None and table.secondary_speaker is not None


def canonical_form(entry: LexicalEntry) -> str:
    """Return the single best Miluk rendering of *entry*, or ``""``.

    Precedence is fixed: the primary speaker's Americanist field wins whenever
    it is filled in (first ``[...]`` form, else the text before the first
    comma); otherwise the first line of the secondary speaker's Jacobs field,
    cut at the first ``(``.
    """
    table = entry.transcriptions
    if table is None:
        return ""

    primary = table.primary_speaker
    if primary is not None and primary.americanist:
        match = _BRACKETED_RE.search(primary.americanist)
        if match:
            return match.group(1)
        return primary.americanist.split(",")[0].strip()

    secondary = table.secondary_speaker
    if secondary is not None and secondary.jacobs:
        first_line = secondary.jacobs.split("\n")[0]
        return first_line.split("(")[0].strip()

    return ""
