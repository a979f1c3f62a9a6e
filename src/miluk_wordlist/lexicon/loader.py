import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

from pydantic import ValidationError

from miluk_wordlist.lexicon.models import LexicalEntry
from miluk_wordlist.lexicon.types_lexicon import EntryRecord

# Module-level logger
logger = logging.getLogger(__name__)


def _records_from_root(raw: Any) -> List[Any]:
    if isinstance(raw, list):
        logger.info(f"Loading {len(raw)} entries from list JSON")
        return raw
    if isinstance(raw, dict):
        # Support both {"wordlist": [...]} and {"entries": [...]} wrappers
        for key in ("wordlist", "entries"):
            if isinstance(raw.get(key), list):
                logger.info(f"Loading {len(raw[key])} entries from '{key}' JSON")
                return raw[key]
    logger.error("Unsupported JSON root type: %s", type(raw))
    raise ValueError(
        "Wordlist JSON must be a list of entries or an object with a 'wordlist' list"
    )


def parse_entries(records: Sequence[EntryRecord | dict]) -> List[LexicalEntry]:
    """
    Validate raw records into immutable LexicalEntry objects.
    - Keeps dataset order; an entry's position is its identity downstream.
    - Skips (with a warning) records that are not objects or lack a headword.
    """
    entries: List[LexicalEntry] = []
    for position, item in enumerate(records):
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-dict entry at position {position}: {item!r}")
            continue
        try:
            entries.append(LexicalEntry.model_validate(item))
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid entry at position {position} ({e.error_count()} errors)",
                extra={"headword": item.get("headword")},
            )
    return entries


def load_wordlist(json_path: str | Path) -> List[LexicalEntry]:
    """Load the static wordlist dataset once, in file order."""
    path = Path(json_path)
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"Wordlist dataset '{path}' does not exist or is not a file")

    raw = json.loads(path.read_text(encoding="utf-8"))
    entries = parse_entries(_records_from_root(raw))
    logger.debug("Loaded wordlist", extra={"path": str(path), "entries": len(entries)})
    return entries
