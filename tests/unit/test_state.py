"""
Unit tests for the scanner state containers.
"""

import pytest

from md2roff.state import LineBuffer, ListKind, ListStack, ScannerState


class TestListStack:
    """Tests for ListStack."""

    def test_push_and_pop(self):
        """Test that levels stack innermost on top."""
        stack = ListStack()
        assert not stack
        stack.push(ListKind.ORDERED)
        stack.push(ListKind.UNORDERED, indent=2)

        assert stack.depth == 2
        assert stack.top.kind == ListKind.UNORDERED
        assert stack.top.indent == 2
        assert stack.pop().kind == ListKind.UNORDERED
        assert stack.top.kind == ListKind.ORDERED

    def test_new_level_starts_at_one(self):
        """Test the default ordinal of a new level."""
        level = ListStack().push(ListKind.ORDERED)
        assert level.next_index == 1

    def test_capped_depth(self):
        """Test that push refuses to go past MAX_DEPTH."""
        stack = ListStack()
        for _ in range(ListStack.MAX_DEPTH):
            assert stack.push(ListKind.UNORDERED) is not None

        assert stack.is_full()
        assert stack.push(ListKind.UNORDERED) is None
        assert len(stack) == ListStack.MAX_DEPTH

    def test_pop_empty(self):
        """Test that popping an empty stack raises."""
        with pytest.raises(IndexError):
            ListStack().pop()


class TestLineBuffer:
    """Tests for LineBuffer."""

    def test_append_and_take(self):
        """Test accumulating and draining text."""
        buffer = LineBuffer()
        buffer.append("one ")
        buffer.append("two")
        buffer.append("")

        assert len(buffer) == 7
        assert buffer.endswith("two")
        assert buffer.take() == "one two"
        assert not buffer
        assert buffer.text == ""

    def test_split_last_line(self):
        """Test splitting off the text of the current source line."""
        buffer = LineBuffer()
        buffer.append("intro ")
        buffer.mark_line()
        buffer.append("Title")

        assert buffer.split_last_line() == ("intro ", "Title")

    def test_clear_resets_mark(self):
        """Test that clearing also forgets the line mark."""
        buffer = LineBuffer()
        buffer.append("old ")
        buffer.mark_line()
        buffer.clear()
        buffer.append("new")

        assert buffer.split_last_line() == ("", "new")


class TestScannerState:
    """Tests for ScannerState defaults."""

    def test_defaults(self):
        """Test the state of a fresh conversion."""
        state = ScannerState()
        assert state.pos == 0
        assert state.at_line_start
        assert not state.in_code_block
        assert state.quote_depth == 0
        assert not state.suppress_output
        assert not state.lists
        assert not state.buffer

    def test_states_do_not_share_containers(self):
        """Test that each state gets its own list stack and buffer."""
        a, b = ScannerState(), ScannerState()
        a.lists.push(ListKind.ORDERED)
        a.buffer.append("x")
        assert not b.lists
        assert not b.buffer
