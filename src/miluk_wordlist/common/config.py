from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from miluk_wordlist.browse.collation import BrowseMode

logger = logging.getLogger(__name__)

ENV_WORDLIST_PATH = "MILUK_WORDLIST_PATH"
ENV_DEFAULT_MODE = "MILUK_WORDLIST_MODE"
ENV_LOG_LEVEL = "MILUK_WORDLIST_LOG_LEVEL"


def get_config_paths() -> dict[str, Path]:
    """Return canonical on-disk locations for the shipped dataset."""

    package_root = Path(__file__).resolve().parents[1]
    data_dir = package_root / "data"

    return {
        "wordlist": data_dir / "wordlist.json",
    }


@dataclass(frozen=True)
class Settings:
    wordlist_path: Path
    default_mode: BrowseMode = BrowseMode.ENGLISH
    log_level: str = "INFO"


def load_settings(env_file: str | None = None) -> Settings:
    """Read settings from the environment, after loading a ``.env`` if one exists.

    Variables already present in the environment win over the file.
    """
    dotenv_path = env_file or find_dotenv(".env", usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)

    raw_path = os.getenv(ENV_WORDLIST_PATH, "").strip()
    wordlist_path = Path(raw_path) if raw_path else get_config_paths()["wordlist"]

    raw_mode = os.getenv(ENV_DEFAULT_MODE, "").strip()
    try:
        mode = BrowseMode.parse(raw_mode)
    except ValueError:
        logger.warning(
            "Unknown browse mode in environment; using english",
            extra={"value": raw_mode},
        )
        mode = BrowseMode.ENGLISH

    log_level = os.getenv(ENV_LOG_LEVEL, "INFO").strip().upper() or "INFO"
    return Settings(wordlist_path=wordlist_path, default_mode=mode, log_level=log_level)
