"""Data models used throughout the saver pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImageReference:
    """Image location as written in the page markup."""

    relative_path: str
    extension: str


@dataclass(frozen=True)
class DirectoryEntry:
    """A regular file found in the destination directory."""

    name: str
    path: Path
    modified: float


@dataclass
class SaveResult:
    """Outcome of a successful run."""

    path: Path
    image_url: str
    caption: str
    description: str
    metadata_written: bool = False
