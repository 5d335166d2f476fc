"""
Unit tests for the misused-term dictionary.
"""

import pytest

from md2roff.dictionary import MISUSED_WORDS, correct_misused_words


class TestCorrectMisusedWords:
    """Tests for correct_misused_words."""

    @pytest.mark.parametrize("wrong,correct", [
        ("file name", "filename"),
        ("super-user", "superuser"),
        ("i-nodes", "inodes"),
        ("Unixes", "Unix systems"),
        ("x86_64", "x86-64"),
        ("builtin", "built-in"),
    ])
    def test_replacements(self, wrong, correct):
        """Test single replacements from the table."""
        assert correct_misused_words(f"a {wrong} here") == f"a {correct} here"

    def test_whole_words_only(self):
        """Test that terms inside longer words are left alone."""
        assert correct_misused_words("runtimes and builtins") == "runtimes and builtins"

    def test_several_terms(self):
        """Test a sentence with more than one term."""
        text = "Set the time zone and the host name."
        assert correct_misused_words(text) == "Set the timezone and the hostname."

    def test_corrections_are_stable(self):
        """Test that no correction is itself a misused term."""
        for correct in MISUSED_WORDS.values():
            assert correct not in MISUSED_WORDS
