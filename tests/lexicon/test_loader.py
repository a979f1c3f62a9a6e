import json
import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from miluk_wordlist.common.config import get_config_paths  # noqa: E402
from miluk_wordlist.lexicon.loader import load_wordlist, parse_entries  # noqa: E402
from miluk_wordlist.lexicon.models import LexicalEntry  # noqa: E402


def _write(tmp_path, payload):
    path = tmp_path / "wordlist.json"
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_loads_list_root_in_file_order(tmp_path):
    path = _write(tmp_path, [{"headword": "Water"}, {"headword": "Fire"}])
    entries = load_wordlist(path)
    assert [e.headword for e in entries] == ["Water", "Fire"]


def test_loads_wrapped_root(tmp_path):
    path = _write(tmp_path, {"description": "x", "wordlist": [{"headword": "Sun"}]})
    assert [e.headword for e in load_wordlist(str(path))] == ["Sun"]


def test_maps_dataset_field_names(tmp_path):
    path = _write(
        tmp_path,
        [
            {
                "headword": "Water",
                "pronunciation_variants": ["ee-kw", 3],
                "linguistics_notes": "note",
                "pronunciation_table": {
                    "lolly": {"americanist": "[ʔíkʷ]", "ipa": "ʔiːkʷ"},
                    "annie": None,
                    "instant_phonetic_englishization": "EE-kw",
                },
                "soundcloud_urls": ["https://api.soundcloud.com/tracks/1"],
            }
        ],
    )
    (entry,) = load_wordlist(path)
    assert entry.pronunciation_variants == ("ee-kw",)
    assert entry.transcriptions.primary_speaker.americanist == "[ʔíkʷ]"
    assert entry.transcriptions.secondary_speaker is None
    assert entry.transcriptions.instant_phonetic == "EE-kw"
    assert entry.audio_sources == ("https://api.soundcloud.com/tracks/1",)


def test_invalid_records_are_skipped_with_warning(caplog):
    records = [{"headword": "Water"}, "not a record", {"headword": "   "}, {"gloss": "x"}]
    with caplog.at_level(logging.WARNING, logger="miluk_wordlist.lexicon.loader"):
        entries = parse_entries(records)
    assert [e.headword for e in entries] == ["Water"]
    assert len(caplog.records) == 3


def test_entries_are_immutable():
    entry = LexicalEntry(headword="Water")
    with pytest.raises(ValidationError):
        entry.headword = "Fire"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_wordlist(tmp_path / "nope.json")


def test_unsupported_root_raises(tmp_path):
    path = _write(tmp_path, {"headword": "Water"})
    with pytest.raises(ValueError):
        load_wordlist(path)


def test_packaged_sample_dataset_loads():
    entries = load_wordlist(get_config_paths()["wordlist"])
    assert len(entries) == 8
    assert entries[0].headword == "Water"
