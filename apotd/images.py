"""Image type detection, hashing and duplicate lookup in the destination directory."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Callable, List, Optional

from filetype import guess

from .models import DirectoryEntry

logger = logging.getLogger("apotd")

FileTypeOf = Callable[[Path], Optional[str]]


def detect_image_format(source) -> Optional[str]:
    """Detect image type using filetype; returns lowercase extension.

    ``source`` may be raw bytes or a path; unreadable paths raise ``OSError``.
    """
    kind = guess(str(source) if isinstance(source, Path) else source)
    if kind and kind.mime.startswith("image/"):
        ext = kind.extension.lower()
        if ext == "jpeg":
            return "jpg"
        return ext
    return None


def is_image_file(path: Path, file_type_of: FileTypeOf = detect_image_format) -> bool:
    return file_type_of(path) is not None


def content_hash(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


def list_directory(directory: Path) -> List[DirectoryEntry]:
    """Snapshot the regular files in ``directory``, oldest first.

    A missing directory is treated as empty; it is created when the image is
    written.
    """
    if not directory.exists():
        return []
    entries = []
    for path in directory.iterdir():
        if not path.is_file():
            continue
        entries.append(DirectoryEntry(path.name, path, path.stat().st_mtime))
    entries.sort(key=lambda entry: entry.modified)
    return entries


def list_images(
    directory: Path,
    file_type_of: FileTypeOf = detect_image_format,
) -> List[DirectoryEntry]:
    """Directory entries that classify as images; unreadable files are skipped."""
    images = []
    for entry in list_directory(directory):
        try:
            if not is_image_file(entry.path, file_type_of):
                continue
        except OSError as exc:
            logger.warning("Skipping %s: %s", entry.path, exc)
            continue
        images.append(entry)
    return images


def find_existing_image_with_hash(
    directory: Path,
    digest: str,
    file_type_of: FileTypeOf = detect_image_format,
) -> Optional[str]:
    """Return the name of an image in ``directory`` whose content hashes to ``digest``.

    Names are irrelevant; only content is compared. When several files share
    the digest, whichever the listing yields first is reported.
    """
    for entry in list_images(directory, file_type_of):
        try:
            data = entry.path.read_bytes()
        except OSError as exc:
            logger.warning("Skipping %s: %s", entry.path, exc)
            continue
        if content_hash(data) == digest:
            return entry.name
    return None
