"""Single entry point that turns the wordlist and a browse state into a view.

Each user interaction produces a new immutable :class:`RenderState`; the UI
calls :func:`render` (or :func:`compute_view`) once per state and draws the
result. Nothing computed here is stored between calls.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from miluk_wordlist.lexicon.models import LexicalEntry

from .collation import BrowseMode, build_alpha_index, group_label, group_letter, sort_keyed
from .filtering import SpeakerFilter, filter_indexed
from .identifiers import assign_entry_ids

logger = logging.getLogger(__name__)


def normalize_query(raw: Optional[str]) -> str:
    return (raw or "").lower().strip()


@dataclass(frozen=True)
class RenderState:
    mode: BrowseMode = BrowseMode.ENGLISH
    speaker_filter: SpeakerFilter = SpeakerFilter.ALL
    query: str = ""

    def with_mode(self, mode: BrowseMode | str) -> "RenderState":
        return replace(self, mode=BrowseMode.parse(mode))

    def with_filter(self, speaker_filter: SpeakerFilter | str) -> "RenderState":
        return replace(self, speaker_filter=SpeakerFilter.parse(speaker_filter))

    def with_query(self, raw: Optional[str]) -> "RenderState":
        """Take the search box text as typed; it is lower-cased and trimmed here."""
        return replace(self, query=normalize_query(raw))


@dataclass(frozen=True)
class Section:
    """A run of consecutive visible entries under one divider."""

    letter: str
    label: str
    start: int
    count: int


@dataclass(frozen=True)
class View:
    """Filtered, sorted entries plus everything derived from them.

    ``indices[i]`` is the dataset position of ``visible[i]``; ``ids`` and
    ``group_letters`` are keyed by that position.
    """

    mode: BrowseMode
    visible: Tuple[LexicalEntry, ...]
    indices: Tuple[int, ...]
    ids: Dict[int, str]
    letters: FrozenSet[str]
    group_letters: Dict[int, str] = field(default_factory=dict)
    sections: Tuple[Section, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.visible

    def ordered_ids(self) -> List[str]:
        return [self.ids[index] for index in self.indices]

    def find(self, entry_id: str) -> Optional[Tuple[int, LexicalEntry]]:
        """Resolve a deep-link identifier to ``(dataset index, entry)``."""
        for index, entry in zip(self.indices, self.visible):
            if self.ids[index] == entry_id:
                return index, entry
        return None


def _sections(letters: Sequence[str]) -> Tuple[Section, ...]:
    sections: List[Section] = []
    for position, letter in enumerate(letters):
        if sections and sections[-1].letter == letter:
            last = sections[-1]
            sections[-1] = replace(last, count=last.count + 1)
        else:
            sections.append(Section(letter, group_label(letter), position, 1))
    return tuple(sections)


def compute_view(
    entries: Sequence[LexicalEntry],
    mode: BrowseMode | str = BrowseMode.ENGLISH,
    speaker_filter: SpeakerFilter | str = SpeakerFilter.ALL,
    query: str = "",
) -> View:
    """Filter, search, sort, identify and group *entries* in one pass.

    Pure and deterministic: the same inputs always yield the same order,
    identifiers and letters.
    """
    active_mode = BrowseMode.parse(mode)
    active_filter = SpeakerFilter.parse(speaker_filter)
    needle = normalize_query(query)

    matched = filter_indexed(entries, active_filter, needle)
    ordered = sort_keyed(matched, active_mode, lambda pair: pair[1])

    indices = tuple(index for index, _ in ordered)
    visible = tuple(entry for _, entry in ordered)
    ids = dict(zip(indices, assign_entry_ids(visible)))
    letters_in_order = [group_letter(entry, active_mode) for entry in visible]

    logger.debug(
        "Computed view",
        extra={
            "mode": active_mode.value,
            "filter": active_filter.value,
            "query": needle,
            "visible": len(visible),
            "total": len(entries),
        },
    )

    return View(
        mode=active_mode,
        visible=visible,
        indices=indices,
        ids=ids,
        letters=build_alpha_index(visible, active_mode),
        group_letters=dict(zip(indices, letters_in_order)),
        sections=_sections(letters_in_order),
    )


def render(entries: Sequence[LexicalEntry], state: RenderState) -> View:
    return compute_view(entries, state.mode, state.speaker_filter, state.query)
