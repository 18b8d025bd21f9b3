"""Failures that end a run."""

from __future__ import annotations


class ApotdError(Exception):
    """Base class for every terminal failure."""


class FetchError(ApotdError):
    pass


class NoImageFound(ApotdError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "No image found on today's page; today's content is probably "
            "not an image (maybe a video)."
        )


class MalformedImageTag(ApotdError):
    pass


class ImageFetchError(ApotdError):
    pass


class NoFilenameAvailable(ApotdError):
    def __init__(self) -> None:
        super().__init__(
            "No caption found on the page; supply a filename with --filename."
        )


class DuplicateImage(ApotdError):
    """The fetched image already exists in the destination directory."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Image already saved as {filename}")


class WriteError(ApotdError):
    pass


class MetadataWriteError(ApotdError):
    """The metadata writer exited with a nonzero status."""

    def __init__(self, path, exit_code: int, stdout: str, stderr: str) -> None:
        self.path = path
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"Saved {path} but failed to write its comment "
            f"(exit status {exit_code})\nstdout: {stdout.strip()}\nstderr: {stderr.strip()}"
        )
