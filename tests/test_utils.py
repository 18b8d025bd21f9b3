from apotd.utils import (
    PLACEHOLDER_GLYPH,
    collapse_to_one_line,
    escape_for_shell_argument,
    sanitize_filename_text,
)


def test_sanitize_replaces_each_unsafe_character():
    assert sanitize_filename_text("A:B#C") == "A★B★C"


def test_sanitize_covers_full_set_and_trims():
    cleaned = sanitize_filename_text("  <a>|b\\c(d)&e;f  ")
    assert cleaned == "★a★★b★c★d★★e★f"
    assert cleaned.count(PLACEHOLDER_GLYPH) == 8


def test_sanitize_keeps_safe_text():
    assert sanitize_filename_text("Dark Nebulae in Orion") == "Dark Nebulae in Orion"
    assert sanitize_filename_text("") == ""


def test_collapse_to_one_line_handles_all_line_breaks():
    assert collapse_to_one_line("a\nb\r\nc\rd") == "a b c d"


def test_escape_for_shell_argument():
    assert escape_for_shell_argument("it's $5!") == "it\\'s\\ \\$5\\!"
    assert escape_for_shell_argument('a"b\\c;d\te') == 'a\\"b\\\\c\\;d\\\te'


def test_escape_leaves_plain_text_alone():
    assert escape_for_shell_argument("Nebula-2024.jpg") == "Nebula-2024.jpg"
