"""Browse the Miluk wordlist in English or Miluk alphabetical order."""

from .browse import (
    BrowseMode,
    RenderState,
    SpeakerFilter,
    View,
    canonical_form,
    compute_view,
    has_primary,
    has_secondary,
)
from .lexicon import LexicalEntry, load_wordlist

__version__ = "0.1.0"

__all__ = [
    "BrowseMode",
    "LexicalEntry",
    "RenderState",
    "SpeakerFilter",
    "View",
    "canonical_form",
    "compute_view",
    "has_primary",
    "has_secondary",
    "load_wordlist",
]
