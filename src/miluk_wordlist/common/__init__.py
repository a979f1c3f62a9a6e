"""Shared infrastructure for the wordlist browser."""

from __future__ import annotations

from .config import Settings, get_config_paths, load_settings

__all__ = [
    "Settings",
    "get_config_paths",
    "load_settings",
]
