"""Line-oriented extraction of the picture, caption and alt text from a page.

The page layout has been stable for decades, so fixed positional patterns are
used instead of a full HTML parser: the first ``<IMG ... SRC=`` line holds the
picture, the first ``<b>`` line holds the caption and the ``alt="..."``
attribute (possibly spanning several lines) holds the description.
"""

from __future__ import annotations

import re
from typing import List
from urllib.parse import urljoin

from .errors import MalformedImageTag, NoImageFound
from .models import ImageReference
from .utils import collapse_to_one_line, sanitize_filename_text

NO_DESCRIPTION_SENTINEL = "See Explanation"

_IMAGE_TAG_PATTERN = re.compile(r"IMG\b.*?\bSRC=", re.IGNORECASE)
_QUOTED_PATTERN = re.compile(r'"([^"]*)"')
_BOLD_OPEN_PATTERN = re.compile(r"<b>", re.IGNORECASE)
_CAPTION_TAG_PATTERN = re.compile(r"</?b>|<br\s*/?>", re.IGNORECASE)
_ALT_OPEN_PATTERN = re.compile(r'alt="', re.IGNORECASE)
_ALT_CLOSE_PATTERN = re.compile(r'"\s*$')
_ALT_PREFIX_PATTERN = re.compile(r'^.*?alt="', re.IGNORECASE | re.DOTALL)


def extract_image_reference(page: str) -> ImageReference:
    """Return the first image referenced by the page, in document order."""
    for line in page.splitlines():
        match = _IMAGE_TAG_PATTERN.search(line)
        if not match:
            continue
        quoted = _QUOTED_PATTERN.search(line, match.end())
        if not quoted:
            raise MalformedImageTag(f"Image tag without a quoted source: {line.strip()}")
        relative_path = quoted.group(1)
        final_segment = relative_path.rsplit("/", 1)[-1]
        _, dot, extension = final_segment.rpartition(".")
        if not dot or not extension:
            raise MalformedImageTag(f"Image source has no file extension: {relative_path}")
        return ImageReference(relative_path=relative_path, extension=extension)
    raise NoImageFound()


def resolve_image_url(page_url: str, reference: ImageReference) -> str:
    return urljoin(page_url, reference.relative_path)


def extract_caption(page: str) -> str:
    """Caption from the first bold line; empty when the page has none."""
    for line in page.splitlines():
        if _BOLD_OPEN_PATTERN.search(line):
            return sanitize_filename_text(_CAPTION_TAG_PATTERN.sub("", line))
    return ""


def _collect_alt_lines(lines: List[str]) -> List[str]:
    collected: List[str] = []
    collecting = False
    for line in lines:
        if not collecting:
            opening = _ALT_OPEN_PATTERN.search(line)
            if not opening:
                continue
            collecting = True
            collected.append(line)
            # a single-line attribute closes on the line that opened it
            if _ALT_CLOSE_PATTERN.search(line, opening.end()):
                break
            continue
        collected.append(line)
        if _ALT_CLOSE_PATTERN.search(line):
            break
    return collected


def extract_descriptive_text(page: str) -> str:
    """Return the alt text as one line, or "" when no description is given.

    Pages whose alt text is blank or starts with ``See Explanation`` carry no
    usable description; that is a normal outcome, not an error.
    """
    collected = _collect_alt_lines(page.splitlines())
    if not collected:
        return ""
    text = _ALT_PREFIX_PATTERN.sub("", "\n".join(collected), count=1)
    text = collapse_to_one_line(text).strip()
    if text.endswith('"'):
        text = text[:-1].rstrip()
    if not text or text.startswith(NO_DESCRIPTION_SENTINEL):
        return ""
    return text
