"""Utility helpers for string normalization."""

from __future__ import annotations

import re

PLACEHOLDER_GLYPH = "★"

_UNSAFE_PATTERN = re.compile(r"[<>|\\:()&;#]")
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")
_SHELL_SPECIAL_PATTERN = re.compile(r"([^\w.,/@%+=:★-])")


def sanitize_filename_text(value: str) -> str:
    """Replace characters that are unsafe in filenames and trim the result."""
    return _UNSAFE_PATTERN.sub(PLACEHOLDER_GLYPH, value).strip()


def collapse_to_one_line(value: str) -> str:
    return _LINE_BREAK_PATTERN.sub(" ", value)


def escape_for_shell_argument(value: str) -> str:
    """Backslash-escape every character the shell could treat specially, for one word."""
    return _SHELL_SPECIAL_PATTERN.sub(r"\\\1", value)
