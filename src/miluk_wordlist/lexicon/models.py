"""Validated, immutable models for wordlist entries.

The JSON field names follow the shipped dataset (``pronunciation_table``,
``lolly``, ``annie`` ...); the Python attribute names describe what the slots
mean. Either spelling is accepted when constructing a model.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


def _optional_text(v: Any) -> Optional[str]:
    if isinstance(v, str):
        return v
    if v is not None:
        logger.debug("Dropping non-string transcription field: %r", v)
    return None


def _text_tuple(v: Any) -> Tuple[str, ...]:
    if v is None or isinstance(v, str) or not isinstance(v, (list, tuple)):
        return ()
    return tuple(item for item in v if isinstance(item, str))


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class PrimarySpeakerRecord(_FrozenModel):
    """Transcriptions made from the primary speaker's recordings."""

    americanist: Optional[str] = None
    ipa: Optional[str] = None

    @field_validator("americanist", "ipa", mode="before")
    def coerce_text(cls, v: Any) -> Optional[str]:
        return _optional_text(v)


class SecondarySpeakerRecord(_FrozenModel):
    """Transcriptions taken from the secondary speaker's narrative texts."""

    jacobs: Optional[str] = None
    americanist_ipa: Optional[str] = None

    @field_validator("jacobs", "americanist_ipa", mode="before")
    def coerce_text(cls, v: Any) -> Optional[str]:
        return _optional_text(v)


class TranscriptionTable(_FrozenModel):
    primary_speaker: Optional[PrimarySpeakerRecord] = Field(default=None, alias="lolly")
    secondary_speaker: Optional[SecondarySpeakerRecord] = Field(default=None, alias="annie")
    instant_phonetic: Optional[str] = Field(
        default=None, alias="instant_phonetic_englishization"
    )

    @field_validator("primary_speaker", "secondary_speaker", mode="before")
    def coerce_slot(cls, v: Any) -> Any:
        # A present slot with a broken shape still counts as present.
        if v is None or isinstance(v, (dict, BaseModel)):
            return v
        logger.debug("Treating malformed speaker slot as empty: %r", v)
        return {}

    @field_validator("instant_phonetic", mode="before")
    def coerce_text(cls, v: Any) -> Optional[str]:
        return _optional_text(v)


class LexicalEntry(_FrozenModel):
    headword: str
    pronunciation_variants: Tuple[str, ...] = ()
    linguistics_notes: Optional[str] = None
    transcriptions: Optional[TranscriptionTable] = Field(
        default=None, alias="pronunciation_table"
    )
    audio_sources: Tuple[str, ...] = Field(default=(), alias="soundcloud_urls")

    @field_validator("headword", mode="before")
    def require_headword(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("headword must be a non-empty string")
        return v

    @field_validator("pronunciation_variants", "audio_sources", mode="before")
    def coerce_sequence(cls, v: Any) -> Tuple[str, ...]:
        return _text_tuple(v)

    @field_validator("linguistics_notes", mode="before")
    def coerce_notes(cls, v: Any) -> Optional[str]:
        return _optional_text(v)

    @field_validator("transcriptions", mode="before")
    def coerce_table(cls, v: Any) -> Any:
        if v is None or isinstance(v, (dict, BaseModel)):
            return v
        logger.debug("Dropping malformed pronunciation table: %r", v)
        return None
