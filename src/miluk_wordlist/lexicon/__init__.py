"""Dataset models and loading for the Miluk wordlist."""

from .loader import load_wordlist, parse_entries
from .models import (
    LexicalEntry,
    PrimarySpeakerRecord,
    SecondarySpeakerRecord,
    TranscriptionTable,
)

__all__ = [
    "LexicalEntry",
    "PrimarySpeakerRecord",
    "SecondarySpeakerRecord",
    "TranscriptionTable",
    "load_wordlist",
    "parse_entries",
]
