"""Tests for the shared quoted-string scanner."""

from __future__ import annotations

import pytest

from string_switches.parser.quoting import (
    QUOTE_CHARS,
    at_boundary,
    consume_quoted,
    is_control,
    scan_word,
    skip_whitespace,
)


class TestConsumeQuoted:
    def test_ascii_quotes(self):
        assert consume_quoted('"Blind Tiger" hot', 0) == ("Blind Tiger", 13)

    def test_smart_quotes(self):
        assert consume_quoted("“Blind Tiger”", 0) == ("Blind Tiger", 13)

    def test_mixed_open_close(self):
        assert consume_quoted("“mixed\"", 0) == ("mixed", 7)
        assert consume_quoted("\"mixed”", 0) == ("mixed", 7)

    def test_starts_mid_string(self):
        assert consume_quoted('x:"a b"', 2) == ("a b", 7)

    def test_escaped_ascii_quote(self):
        assert consume_quoted(r'"say \"hi\""', 0) == ('say "hi"', 12)

    def test_escaped_smart_quotes(self):
        assert consume_quoted("\"\\“x\\”\"", 0) == ("“x”", 7)

    def test_backslash_before_other_char_kept(self):
        assert consume_quoted(r'"C:\temp"', 0) == (r"C:\temp", 9)

    def test_empty_quoted(self):
        assert consume_quoted('""', 0) == ("", 2)

    def test_unclosed(self):
        assert consume_quoted('"no end', 0) is None

    def test_trailing_escaped_quote_closes_the_run(self):
        assert consume_quoted('"abc\\"', 0) == ("abc\\", 6)

    def test_double_backslash_before_close(self):
        assert consume_quoted('"a\\\\"', 0) == ("a\\\\", 5)

    def test_windows_path_ending_in_backslash(self):
        assert consume_quoted(r'"C:\my dir\"', 0) == ("C:\\my dir\\", 12)

    def test_last_escaped_quote_wins_when_unclosed(self):
        assert consume_quoted(r'"a\" b\" c', 0) == ('a" b\\', 8)

    def test_escaped_smart_close_can_close(self):
        assert consume_quoted("\"x\\”", 0) == ("x\\", 4)

    def test_escaped_smart_open_cannot_close(self):
        assert consume_quoted("\"x\\“", 0) is None

    def test_accept_rejects_forward_close(self):
        s = r'"x\" "y"'
        assert consume_quoted(s, 0) == ('x" ', 6)
        assert consume_quoted(s, 0, lambda end: end >= len(s) or s[end] == " ") == ("x\\", 4)

    def test_accept_rejects_everything(self):
        assert consume_quoted('"x"y', 0, lambda end: False) is None

    def test_control_character_rejected(self):
        assert consume_quoted('"tab\there"', 0) is None
        assert consume_quoted('"new\nline"', 0) is None

    def test_format_character_rejected(self):
        # U+200B ZERO WIDTH SPACE is category Cf
        assert consume_quoted('"a\u200bb"', 0) is None

    def test_unescaped_opening_smart_quote_inside(self):
        assert consume_quoted('"a “b" c', 0) is None

    def test_not_at_quote(self):
        assert consume_quoted("plain", 0) is None

    def test_closing_smart_quote_cannot_open(self):
        assert consume_quoted("”text”", 0) is None

    def test_past_end(self):
        assert consume_quoted('""', 5) is None


class TestIsControl:
    @pytest.mark.parametrize("ch", ["\t", "\n", "\x00", "\x7f", "\u200b"])
    def test_controls(self, ch):
        assert is_control(ch) is True

    @pytest.mark.parametrize("ch", ["a", " ", "é", "\\", "“"])
    def test_non_controls(self, ch):
        assert is_control(ch) is False


class TestCursorHelpers:
    def test_quote_chars(self):
        assert QUOTE_CHARS == frozenset('"“”')

    def test_at_boundary(self):
        assert at_boundary("ab", 2) is True
        assert at_boundary("a b", 1) is True
        assert at_boundary("ab", 1) is False

    def test_skip_whitespace(self):
        assert skip_whitespace("  \t x", 0) == 4
        assert skip_whitespace("x", 0) == 0
        assert skip_whitespace("   ", 0) == 3

    def test_scan_word(self):
        assert scan_word("soy milk", 0) == 3
        assert scan_word("soy", 0) == 3
        assert scan_word(" x", 0) == 0
