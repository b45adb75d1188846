"""
Runtime settings for Phone Finder.

Values come from environment variables (optionally loaded from a .env file
at the project root). Vocabulary tables live in config.patterns instead.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CATALOG_PATH = PROJECT_DIR / "data" / "phones.json"

ENV_PREFIX = "PHONEFINDER_"


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        catalog_path: JSON file holding the phone catalog
        log_dir: Directory for rotating log files
        log_level: Console log level
        summary_limit: Names listed in a multi-match summary
        max_cards: Phone cards the UI renders per reply
        debug: Show debug expanders in the Streamlit UI
    """
    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_dir: str = "logs"
    log_level: int = logging.INFO
    summary_limit: int = 5
    max_cards: int = 10
    debug: bool = False


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    value = _env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}")


def _env_bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


def _env_log_level(name: str, default: int) -> int:
    value = _env(name)
    if value is None:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"{ENV_PREFIX}{name} is not a log level: {value!r}")
    return level


def load_settings() -> Settings:
    """Build Settings from the environment (reads .env without overriding)."""
    load_dotenv(dotenv_path=PROJECT_DIR / ".env", override=False)

    catalog_path = _env("CATALOG_PATH")
    return Settings(
        catalog_path=Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH,
        log_dir=_env("LOG_DIR", "logs"),
        log_level=_env_log_level("LOG_LEVEL", logging.INFO),
        summary_limit=_env_int("SUMMARY_LIMIT", 5),
        max_cards=_env_int("MAX_CARDS", 10),
        debug=_env_bool("DEBUG", False),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings (loaded once)."""
    return load_settings()
