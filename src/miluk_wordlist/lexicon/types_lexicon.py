from __future__ import annotations

from typing import NotRequired, TypedDict

class PrimarySpeakerRecordDict(TypedDict):
    americanist: NotRequired[str | None]
    ipa: NotRequired[str | None]

class SecondarySpeakerRecordDict(TypedDict):
    jacobs: NotRequired[str | None]
    americanist_ipa: NotRequired[str | None]

class PronunciationTableRecord(TypedDict):
    lolly: NotRequired[PrimarySpeakerRecordDict | None]
    annie: NotRequired[SecondarySpeakerRecordDict | None]
    instant_phonetic_englishization: NotRequired[str | None]

class EntryRecord(TypedDict):
    headword: str
    pronunciation_variants: NotRequired[list[str]]
    linguistics_notes: NotRequired[str | None]
    pronunciation_table: NotRequired[PronunciationTableRecord | None]
    soundcloud_urls: NotRequired[list[str]]
