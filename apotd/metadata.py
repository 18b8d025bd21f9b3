"""Attach descriptive comments to saved pictures where the platform supports it."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from .utils import escape_for_shell_argument

logger = logging.getLogger("apotd")

_FINDER_COMMENT_SCRIPT = (
    "osascript"
    " -e 'on run argv'"
    " -e 'tell application \"Finder\" to set comment of"
    " (POSIX file (item 1 of argv) as alias) to (item 2 of argv)'"
    " -e 'end run'"
)


@dataclass
class MetadataWriteResult:
    """Exit status and captured output of a metadata write."""

    exit_code: int
    stdout: str
    stderr: str


class NullMetadataWriter:
    """Stand-in for platforms without file comments."""

    available = False

    def write(self, path: Path, text: str) -> MetadataWriteResult:
        return MetadataWriteResult(0, "", "")


class FinderCommentWriter:
    """Set the Finder comment of a file via ``osascript``."""

    available = True

    def build_command(self, path: Path, text: str) -> str:
        return " ".join(
            [
                _FINDER_COMMENT_SCRIPT,
                escape_for_shell_argument(str(Path(path).resolve())),
                escape_for_shell_argument(text),
            ]
        )

    def write(self, path: Path, text: str) -> MetadataWriteResult:
        command = self.build_command(path, text)
        logger.debug("Running %s", command)
        completed = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            check=False,
        )
        return MetadataWriteResult(completed.returncode, completed.stdout, completed.stderr)


def select_metadata_writer(platform: str = sys.platform):
    """Pick the comment writer for ``platform``."""
    if platform == "darwin":
        return FinderCommentWriter()
    return NullMetadataWriter()
