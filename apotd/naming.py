"""Filename construction for saved pictures."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from .errors import NoFilenameAvailable
from .images import FileTypeOf, detect_image_format, list_images

logger = logging.getLogger("apotd")

_COUNT_PATTERN = re.compile(r"\d{4}")


def build_base_name(user_supplied: Optional[str], caption: str) -> str:
    """Prefer an explicit filename over the caption."""
    if user_supplied:
        return user_supplied
    if caption:
        return caption
    raise NoFilenameAvailable()


def next_count(directory: Path, file_type_of: FileTypeOf = detect_image_format) -> int:
    """Counter for the next picture, following the most recently modified image.

    An empty directory starts at 0. Otherwise the first 4-digit run in the
    newest image's name is incremented; a name without one counts as 0.
    Images sharing the newest modification time are ordered arbitrarily.
    """
    try:
        images = list_images(directory, file_type_of)
    except OSError as exc:
        logger.warning("Could not list %s: %s", directory, exc)
        return 0
    if not images:
        return 0
    newest = max(images, key=lambda entry: entry.modified)
    match = _COUNT_PATTERN.search(newest.name)
    previous = int(match.group(0)) if match else 0
    return previous + 1


def prepend_count(
    directory: Path,
    base_name: str,
    file_type_of: FileTypeOf = detect_image_format,
) -> str:
    return f"{next_count(directory, file_type_of):04d}-{base_name}"
