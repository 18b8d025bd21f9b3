"""Configuration objects and constants for the picture saver."""

from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

BASE_URL = "https://apod.nasa.gov/apod/"
PAGE_NAME = "astropix.html"
DEFAULT_PAGE_URL = BASE_URL + PAGE_NAME
PERMALINK_PATTERN = "ap%y%m%d.html"
DEFAULT_TIMEOUT = 30.0


def default_output_dir() -> Path:
    """Return the platform pictures directory plus ``apotd``."""
    return Path.home() / "Pictures" / "apotd"


def env_override(name: str) -> Optional[str]:
    """Return a non-blank environment value, or None."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def base_directory(page_url: str) -> str:
    """Strip the page name from a URL, keeping the trailing slash."""
    return page_url.rsplit("/", 1)[0] + "/"


def permalink_for(day: dt.date, page_url: str = DEFAULT_PAGE_URL) -> str:
    """Stable link to the page published on ``day``."""
    return base_directory(page_url) + day.strftime(PERMALINK_PATTERN)


@dataclass
class SaveConfig:
    """Settings that control a single run of the saver."""

    output_dir: Path = field(default_factory=default_output_dir)
    filename: Optional[str] = None
    prepend_count: bool = False
    debug: bool = False
    page_url: str = DEFAULT_PAGE_URL
    timeout: float = DEFAULT_TIMEOUT
