"""High-level orchestration for fetching today's picture and placing it on disk."""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Optional

import requests

from .config import SaveConfig, permalink_for
from .content import (
    extract_caption,
    extract_descriptive_text,
    extract_image_reference,
    resolve_image_url,
)
from .errors import (
    DuplicateImage,
    FetchError,
    ImageFetchError,
    MetadataWriteError,
    WriteError,
)
from .images import content_hash, find_existing_image_with_hash, list_directory
from .metadata import NullMetadataWriter
from .models import SaveResult
from .naming import build_base_name, prepend_count

logger = logging.getLogger("apotd")

USER_AGENT = "apotd (+https://apod.nasa.gov/apod/)"


class PageFetcher:
    """Thin wrapper around a requests session."""

    def __init__(self, timeout: float, session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = USER_AGENT
        self.session = session

    def _get(self, url: str) -> requests.Response:
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp

    def get_text(self, url: str) -> str:
        return self._get(url).text

    def get_bytes(self, url: str) -> bytes:
        return self._get(url).content


def compose_comment(description: str, permalink: str) -> str:
    """Text stored alongside the picture: description, then permalink."""
    return " ".join(part for part in (description, permalink) if part)


def save_picture(
    config: SaveConfig,
    fetcher: Optional[PageFetcher] = None,
    metadata_writer=None,
    today: Optional[dt.date] = None,
) -> SaveResult:
    """Fetch the page, save its picture and optionally annotate the saved file.

    Raises an ``ApotdError`` subclass for every failure. The image is written
    before the comment; a failing comment leaves the image in place.
    """
    fetcher = fetcher or PageFetcher(config.timeout)
    metadata_writer = metadata_writer or NullMetadataWriter()
    output_dir = Path(config.output_dir)

    logger.info("Fetching %s", config.page_url)
    try:
        page = fetcher.get_text(config.page_url)
    except requests.RequestException as exc:
        raise FetchError(
            f"Could not fetch {config.page_url}: {exc}. "
            "Is the network connection up?"
        ) from exc

    logger.info("Extracting image reference")
    reference = extract_image_reference(page)
    image_url = resolve_image_url(config.page_url, reference)
    if config.debug:
        logger.debug("Image reference: %s -> %s", reference, image_url)

    logger.info("Fetching image %s", image_url)
    try:
        data = fetcher.get_bytes(image_url)
    except requests.RequestException as exc:
        raise ImageFetchError(f"Could not fetch image {image_url}: {exc}") from exc
    digest = content_hash(data)

    caption = extract_caption(page)
    base_name = build_base_name(config.filename, caption)
    if config.debug:
        logger.debug("Caption: %r, hash: %s, %d bytes", caption, digest, len(data))

    logger.info("Checking %s for an identical image", output_dir)
    try:
        if config.debug:
            logger.debug(
                "Directory listing: %s",
                [entry.name for entry in list_directory(output_dir)],
            )
        existing = find_existing_image_with_hash(output_dir, digest)
    except OSError as exc:
        raise WriteError(f"Could not read {output_dir}: {exc}") from exc
    if existing:
        raise DuplicateImage(existing)

    filename = base_name
    if config.prepend_count:
        filename = prepend_count(output_dir, base_name)
    target = output_dir / f"{filename}.{reference.extension}"

    logger.info("Writing %s", target)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        raise WriteError(f"Could not write {target}: {exc}") from exc

    description = extract_descriptive_text(page)
    result = SaveResult(
        path=target,
        image_url=image_url,
        caption=caption,
        description=description,
    )
    if not metadata_writer.available:
        return result

    permalink = permalink_for(today or dt.date.today(), config.page_url)
    if not description:
        logger.info("No description on today's page; storing the permalink only")
    logger.info("Writing comment for %s", target)
    outcome = metadata_writer.write(target, compose_comment(description, permalink))
    if outcome.exit_code != 0:
        raise MetadataWriteError(target, outcome.exit_code, outcome.stdout, outcome.stderr)
    result.metadata_written = True
    return result
