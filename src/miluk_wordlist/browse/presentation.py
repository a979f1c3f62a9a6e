"""Pure display helpers for whatever renders a :class:`~.view.View`."""
from __future__ import annotations

import re
from typing import List
from urllib.parse import quote, unquote

from miluk_wordlist.lexicon.models import LexicalEntry

from .forms import has_primary, has_secondary
from .text import normalize_for_display
from .view import View

PLAYER_ACCENT = "C9952A"
PLAYER_BASE_URL = "https://w.soundcloud.com/player/"
PLAYER_OPTIONS = (
    "auto_play=false&hide_related=true&show_comments=false"
    "&show_user=false&show_reposts=false&show_teaser=false"
)

ARCHIVAL_RECORDING_LABEL = "Laura Hodgkiss Metcalf Recording"
CONTEMPORARY_RECORDING_LABEL = "Contemporary Recording"
SECONDARY_ONLY_LABEL = "Jacobs texts only — no Lolly recording"
NO_RESULTS_MESSAGE = "No entries found"

_REDIRECT_TARGET_RE = re.compile(r"url=([^&]+)")
_COLOR_RE = re.compile(r"(?<=[?&])color=[^&]+")
_URI_COMPONENT_SAFE = "!~*'()"


def is_secondary_only(entry: LexicalEntry) -> bool:
    """Entry known only from the secondary speaker's texts, with no recording."""
    return has_secondary(entry) and not has_primary(entry)


def notes_paragraphs(entry: LexicalEntry) -> List[str]:
    notes = entry.linguistics_notes or ""
    return [
        normalize_for_display(paragraph)
        for paragraph in notes.split("\n\n")
        if paragraph.strip()
    ]


def embed_audio_url(url: str) -> str:
    """Rewrite an audio source into an embeddable player URL.

    Google redirect wrappers are unwrapped first. Player URLs are recoloured,
    bare API track URLs are wrapped in a player URL, and anything else is
    returned untouched.
    """
    if not url:
        return ""
    if "google.com/url" in url:
        match = _REDIRECT_TARGET_RE.search(url)
        if match:
            url = unquote(match.group(1))

    if "w.soundcloud.com/player" in url:
        return _COLOR_RE.sub(f"color={PLAYER_ACCENT}", url, count=1)

    if "api.soundcloud.com" in url:
        return (
            f"{PLAYER_BASE_URL}?url={quote(url, safe=_URI_COMPONENT_SAFE)}"
            f"&color={PLAYER_ACCENT}&{PLAYER_OPTIONS}"
        )

    return url


def audio_labels(entry: LexicalEntry) -> List[str]:
    """Per-source captions; only shown when there is more than one recording."""
    if len(entry.audio_sources) < 2:
        return []
    return [ARCHIVAL_RECORDING_LABEL] + [CONTEMPORARY_RECORDING_LABEL] * (
        len(entry.audio_sources) - 1
    )


def entry_count_summary(view: View, total: int) -> str:
    return f"Showing {len(view.visible)} of {total} entries"
