"""Ordering, letter grouping and the alphabetic index for both browse modes.

Sort keys are built from the *normalized* sort form (see
:func:`miluk_wordlist.browse.text.normalize_for_sort`) and compared with the
Unicode Collation Algorithm, so case and diacritics order the way a reader
expects rather than by code point.
"""
from __future__ import annotations

import string
from enum import Enum
from functools import lru_cache
from typing import Callable, FrozenSet, Iterable, List, Sequence, Tuple, TypeVar

from pyuca import Collator

from miluk_wordlist.lexicon.models import LexicalEntry

from .forms import canonical_form
from .text import first_sort_letter, leading_letter, normalize_for_sort

OTHER_BUCKET = "#"
OTHER_LABEL = "Other"
ALPHABET: Tuple[str, ...] = tuple(string.ascii_uppercase)

_T = TypeVar("_T")


def _headword(entry: LexicalEntry) -> str:
    return entry.headword


class BrowseMode(str, Enum):
    ENGLISH = "english"
    MILUK = "miluk"

    @classmethod
    def parse(cls, raw: "str | BrowseMode | None") -> "BrowseMode":
        if isinstance(raw, BrowseMode):
            return raw
        return cls((raw or cls.ENGLISH.value).strip().lower())

    @property
    def source(self) -> Callable[[LexicalEntry], str]:
        """The display string this mode sorts and groups by."""
        return _MODE_SOURCES[self]

    def sort_key(self, entry: LexicalEntry) -> str:
        return normalize_for_sort(self.source(entry))


_MODE_SOURCES: dict[BrowseMode, Callable[[LexicalEntry], str]] = {
    BrowseMode.ENGLISH: _headword,
    BrowseMode.MILUK: canonical_form,
}


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def collation_key(sort_key: str) -> tuple:
    """UCA key for an already-normalized sort key."""
    return _collator().sort_key(sort_key)


def sort_keyed(
    items: Sequence[_T],
    mode: BrowseMode | str,
    entry_of: Callable[[_T], LexicalEntry],
) -> List[_T]:
    active = BrowseMode.parse(mode)
    # sorted() is stable: equal keys keep their filtered order
    return sorted(items, key=lambda item: collation_key(active.sort_key(entry_of(item))))


def sort_entries(entries: Iterable[LexicalEntry], mode: BrowseMode | str) -> List[LexicalEntry]:
    return sort_keyed(list(entries), mode, lambda entry: entry)


def group_letter(entry: LexicalEntry, mode: BrowseMode | str) -> str:
    """Divider letter for *entry*.

    English headwords group by their first sort letter as-is. Miluk forms
    whose first written letter is not A-Z (ʔ, ƛ, an empty form ...) share the
    ``#`` bucket.
    """
    active = BrowseMode.parse(mode)
    if active is BrowseMode.ENGLISH:
        return first_sort_letter(entry.headword)
    letter = leading_letter(canonical_form(entry))
    if letter not in ALPHABET:
        return OTHER_BUCKET
    return letter


def group_label(letter: str) -> str:
    return OTHER_LABEL if letter == OTHER_BUCKET else letter


def build_alpha_index(entries: Iterable[LexicalEntry], mode: BrowseMode | str) -> FrozenSet[str]:
    """Letters A-Z that have at least one entry in *entries*."""
    active = BrowseMode.parse(mode)
    letters = set()
    for entry in entries:
        letter = group_letter(entry, active)
        if letter in ALPHABET:
            letters.add(letter)
    return frozenset(letters)
