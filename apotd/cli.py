"""Command-line entry point for saving the astronomy picture of the day."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_PAGE_URL, DEFAULT_TIMEOUT, SaveConfig, default_output_dir, env_override
from .crawler import PageFetcher, save_picture
from .errors import ApotdError
from .metadata import select_metadata_writer
from .notify import build_notifier

logger = logging.getLogger("apotd.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download today's astronomy picture, named after its caption.",
    )
    parser.add_argument(
        "--dir",
        type=Path,
        default=Path(env_override("APOTD_DIR") or default_output_dir()),
        help="Directory where pictures are saved (default: ~/Pictures/apotd)",
    )
    parser.add_argument(
        "--filename",
        default=None,
        help="Name for the saved picture, without extension (default: the caption)",
    )
    parser.add_argument(
        "--prepend-count",
        action="store_true",
        help="Prefix the name with a counter following the newest saved picture",
    )
    parser.add_argument(
        "--url",
        default=env_override("APOTD_URL") or DEFAULT_PAGE_URL,
        help="Page to read the picture from",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    parser.add_argument(
        "--mail-to",
        default=env_override("APOTD_MAIL_TO"),
        help="Address that receives a report when a run fails",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = SaveConfig(
        output_dir=args.dir.expanduser(),
        filename=args.filename,
        prepend_count=args.prepend_count,
        debug=args.verbose,
        page_url=args.url,
        timeout=args.timeout,
    )
    notifier = build_notifier(
        args.mail_to,
        sender=env_override("APOTD_MAIL_FROM"),
        smtp_host=env_override("APOTD_SMTP_HOST"),
    )

    try:
        result = save_picture(
            config,
            fetcher=PageFetcher(config.timeout),
            metadata_writer=select_metadata_writer(),
        )
    except ApotdError as exc:
        message = str(exc)
        delivery_error = notifier.notify(message)
        if delivery_error:
            message = f"{message}\n(also failed to send the failure report: {delivery_error})"
        print(message, file=sys.stderr)
        return 1

    print(f"Saved {result.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
