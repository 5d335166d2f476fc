"""
Mutable scanner state for one document conversion.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ListKind(Enum):
    """Kinds of markdown lists."""
    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass
class ListLevel:
    """One open list: its kind, the next ordinal and the marker indentation."""
    kind: ListKind
    next_index: int = 1
    indent: int = 0


class ListStack:
    """
    Stack of currently open lists, innermost on top.

    Depth is capped at ``MAX_DEPTH``; ``push`` returns None instead of
    opening a level past the cap.
    """

    MAX_DEPTH = 32

    def __init__(self):
        self._levels: list[ListLevel] = []

    def __len__(self) -> int:
        return len(self._levels)

    def __bool__(self) -> bool:
        return bool(self._levels)

    @property
    def top(self) -> Optional[ListLevel]:
        return self._levels[-1] if self._levels else None

    @property
    def depth(self) -> int:
        return len(self._levels)

    def is_full(self) -> bool:
        return len(self._levels) >= self.MAX_DEPTH

    def push(self, kind: ListKind, indent: int = 0) -> Optional[ListLevel]:
        if self.is_full():
            return None
        level = ListLevel(kind=kind, indent=indent)
        self._levels.append(level)
        return level

    def pop(self) -> ListLevel:
        if not self._levels:
            raise IndexError("pop from an empty list stack")
        return self._levels.pop()


class LineBuffer:
    """
    Text of the output line being composed.

    Remembers where the current source line started so a setext ruler can
    split the last line off as a header title.
    """

    def __init__(self):
        self._chunks: list[str] = []
        self._length = 0
        self._line_mark = 0

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    @property
    def text(self) -> str:
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def append(self, s: str) -> None:
        if s:
            self._chunks.append(s)
            self._length += len(s)

    def endswith(self, suffix: str) -> bool:
        return self.text.endswith(suffix)

    def mark_line(self) -> None:
        """Record that a new source line starts at the current end."""
        self._line_mark = self._length

    def split_last_line(self) -> tuple[str, str]:
        """Return (text before the current source line, current source line)."""
        text = self.text
        return text[:self._line_mark], text[self._line_mark:]

    def clear(self) -> None:
        self._chunks = []
        self._length = 0
        self._line_mark = 0

    def take(self) -> str:
        """Return the buffered text and clear the buffer."""
        text = self.text
        self.clear()
        return text


@dataclass
class ScannerState:
    """Everything the block and inline scanners mutate while reading."""
    pos: int = 0
    at_line_start: bool = True
    in_code_block: bool = False
    bold_open: bool = False
    italic_open: bool = False
    quote_depth: int = 0  # recorded depth
    emitted_quote_depth: int = 0  # depth the output currently reflects
    previous_line_blank: bool = True
    section: str = ""
    suppress_output: bool = False
    lists: ListStack = field(default_factory=ListStack)
    buffer: LineBuffer = field(default_factory=LineBuffer)
