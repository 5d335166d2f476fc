"""
Unit tests for the line normalizer.
"""

import pytest

from md2roff.normalize import normalize_line


class TestNormalizeLine:
    """Tests for normalize_line."""

    def test_trims_and_squeezes(self):
        """Test that outer blanks go and inner runs shrink to one space."""
        assert normalize_line("  hello   world  ") == "hello world"

    def test_tabs_and_newlines_are_whitespace(self):
        """Test that any whitespace run is squeezed."""
        assert normalize_line("a\n\tb") == "a b"

    def test_space_kept_after_punctuation(self):
        """Test that a run after , ; . ) } ] keeps one space."""
        assert normalize_line("end.   Next") == "end. Next"
        assert normalize_line("(a)  [b]  {c}") == "(a) [b] {c}"

    def test_space_dropped_between_symbols(self):
        """Test that a run between two non-alphanumerics is removed."""
        assert normalize_line("( (") == "(("
        assert normalize_line("x -- --") == "x ----"

    def test_space_kept_before_word(self):
        """Test that a run followed by an alphanumeric keeps one space."""
        assert normalize_line("’  now") == "’ now"

    def test_font_escapes(self):
        """Test that font escapes keep their neighbouring words apart."""
        assert normalize_line("The  \\fBls\\fP  command") == "The \\fBls\\fP command"

    def test_empty(self):
        """Test empty and blank input."""
        assert normalize_line("") == ""
        assert normalize_line(" \t ") == ""

    @pytest.mark.parametrize("text", [
        "  hello   world  ",
        "( ( x -- -- y",
        "a ,  b ;  c",
        "\\fIit\\fP  ‘\\f[CR]code\\fP’ .",
    ])
    def test_idempotent(self, text):
        """Test that normalizing twice changes nothing."""
        once = normalize_line(text)
        assert normalize_line(once) == once
