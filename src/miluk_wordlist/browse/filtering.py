from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from miluk_wordlist.lexicon.models import LexicalEntry

from .forms import canonical_form, has_primary, has_secondary


class SpeakerFilter(str, Enum):
    """Which entries to show, by the speaker data they carry.

    Values keep the wordlist's own names: AMP is the secondary speaker
    (Annie Miner Peterson), LHM the primary speaker (Laura Hodgkiss Metcalf).
    """

    ALL = "all"
    WITH_SECONDARY = "with-amp"
    PRIMARY_ONLY = "lhm-only"

    @classmethod
    def parse(cls, raw: "str | SpeakerFilter | None") -> "SpeakerFilter":
        if isinstance(raw, SpeakerFilter):
            return raw
        key = (raw or "").strip().lower()
        aliases = {
            "": cls.ALL,
            "with-secondary": cls.WITH_SECONDARY,
            "primary-only": cls.PRIMARY_ONLY,
        }
        if key in aliases:
            return aliases[key]
        return cls(key)

    def admits(self, entry: LexicalEntry) -> bool:
        if self is SpeakerFilter.WITH_SECONDARY:
            return has_secondary(entry)
        if self is SpeakerFilter.PRIMARY_ONLY:
            return has_primary(entry) and not has_secondary(entry)
        return True


def matches_query(entry: LexicalEntry, query: str) -> bool:
    """Case-insensitive substring match over headword, Miluk form and variants.

    Matching is diacritic-sensitive: neither side is normalized beyond
    lower-casing, so ``ala`` does not find ``alá``.
    """
    if not query:
        return True
    headword = entry.headword.lower()
    miluk = canonical_form(entry).lower()
    variants = " ".join(entry.pronunciation_variants).lower()
    return query in headword or query in miluk or query in variants


def filter_indexed(
    entries: Iterable[LexicalEntry],
    speaker_filter: SpeakerFilter | str = SpeakerFilter.ALL,
    query: str = "",
) -> List[Tuple[int, LexicalEntry]]:
    """Apply the speaker filter AND the search query, keeping dataset positions.

    *query* is expected to be lower-cased and trimmed already.
    """
    active = SpeakerFilter.parse(speaker_filter)
    return [
        (index, entry)
        for index, entry in enumerate(entries)
        if active.admits(entry) and matches_query(entry, query)
    ]


def filter_entries(
    entries: Iterable[LexicalEntry],
    speaker_filter: SpeakerFilter | str = SpeakerFilter.ALL,
    query: str = "",
) -> List[LexicalEntry]:
    return [entry for _, entry in filter_indexed(entries, speaker_filter, query)]
