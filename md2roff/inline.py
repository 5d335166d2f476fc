"""
Inline scanner: escapes, strong/emphasis toggles, code spans and links.

Text is accumulated in the line buffer of the scanner state; font
changes are appended to it as dialect escape strings, links flush the
buffer and go out as structural events.
"""

from dataclasses import dataclass
from typing import Optional

from .events import Link, ManReference
from .normalize import normalize_line
from .state import ScannerState

# Backslash escapes; any other character stands for itself
ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "f": "\f",
    "b": "\b",
    "a": "\a",
    "e": "\x1b",
}

# Characters after which a markup marker may open
OPENING_CONTEXT = "({[,.;`'\" \t\n\r"

# Punctuation kept outside a link when it follows the closing parenthesis
LINK_PUNCTUATION = ".,)]}"

MAN_TARGET = "man"


class ConversionError(Exception):
    """Raised when a document cannot be converted."""
    pass


class UnterminatedCodeSpanError(ConversionError):
    """Raised when an inline code span has no closing back-tick."""

    def __init__(self, line: int):
        super().__init__(f"inline code (`) not closed, opened on line {line}")
        self.line = line


@dataclass(frozen=True)
class LinkMatch:
    """A recognized ``[title](target)`` and where scanning resumes."""
    title: str
    target: str
    punctuation: str
    image: bool
    end: int


def line_number(text: str, pos: int) -> int:
    return text.count("\n", 0, pos) + 1


def match_link(text: str, pos: int) -> Optional[LinkMatch]:
    """
    Recognize a link or image starting at ``pos``.

    Returns None when the brackets do not form a link, including
    ``[^note]`` footnote references.
    """
    image = text.startswith("![", pos)
    start = pos + 2 if image else pos + 1
    if text.startswith("^", start):
        return None

    close = text.find("]", start)
    if close == -1 or not text.startswith("(", close + 1):
        return None
    end = text.find(")", close + 2)
    if end == -1:
        return None

    title = " ".join(text[start:close].split())
    # [title](url "tooltip"): the tooltip is dropped
    target_words = text[close + 2:end].split()
    target = target_words[0] if target_words else ""

    after = end + 1
    punctuation = text[after] if after < len(text) and text[after] in LINK_PUNCTUATION else ""
    return LinkMatch(title, target, punctuation, image, after + len(punctuation))


class InlineScanner:
    """
    Consumes one character (or one construct) per ``step``.

    With ``allow_links`` off, links collapse to their title; used for
    header titles and table cells, which are rendered as fragments.
    """

    def __init__(self, text: str, state: ScannerState, emitter, options, allow_links: bool = True):
        self.text = text
        self.state = state
        self.emitter = emitter
        self.options = options
        self.allow_links = allow_links
        self.fonts = emitter.fonts

    def step(self) -> None:
        text = self.text
        state = self.state
        pos = state.pos
        ch = text[pos]
        nxt = text[pos + 1] if pos + 1 < len(text) else ""

        if ch == "\\":
            state.buffer.append(ESCAPES.get(nxt, nxt))
            state.pos += 1 + len(nxt)
        elif self._is_strong(ch, nxt):
            self._toggle("bold_open", self.fonts.bold)
        elif self._is_emphasis(ch, nxt):
            self._toggle("italic_open", self.fonts.italic)
        elif ch == "`":
            self._code_span()
        elif ch == "[" or (ch == "!" and nxt == "["):
            self._link()
        else:
            state.buffer.append(ch)
            state.pos += 1

    def render_fragment(self, fragment: str) -> str:
        """Scan a detached piece of text and return it normalized."""
        scanner = InlineScanner(fragment, ScannerState(), self.emitter, self.options, allow_links=False)
        while scanner.state.pos < len(fragment):
            scanner.step()
        return normalize_line(scanner.state.buffer.text)

    def _is_strong(self, ch: str, nxt: str) -> bool:
        if self.options.strict_quoting:
            return (ch == "*" and nxt == "*") or (ch == "_" and nxt == "_")
        return ch == "*"

    def _is_emphasis(self, ch: str, nxt: str) -> bool:
        if self.options.strict_quoting:
            return ch in ("*", "_")
        return ch == "_"

    def _toggle(self, flag: str, font: str) -> None:
        text = self.text
        state = self.state
        pos = state.pos
        run = 2 if text[pos + 1:pos + 2] in ("*", "_") else 1

        if getattr(state, flag):
            setattr(state, flag, False)
            state.buffer.append(self.fonts.previous)
        else:
            prev = text[pos - 1] if pos > 0 else " "
            if prev in OPENING_CONTEXT:
                if prev in ",.;":
                    state.buffer.append(" ")
                setattr(state, flag, True)
                state.buffer.append(font)
            else:
                # mid-word marker, e.g. snake_case
                state.buffer.append(text[pos:pos + run])
        state.pos += run

    def _code_span(self) -> None:
        text = self.text
        state = self.state
        close = text.find("`", state.pos + 1)
        if close == -1:
            raise UnterminatedCodeSpanError(line_number(text, state.pos))
        state.buffer.append(self.fonts.code_open + text[state.pos + 1:close] + self.fonts.code_close)
        state.pos = close + 1

    def _link(self) -> None:
        state = self.state
        match = match_link(self.text, state.pos)
        if match is None:
            state.buffer.append(self.text[state.pos])
            state.pos += 1
            return

        state.pos = match.end
        if not self.allow_links:
            state.buffer.append(match.title + match.punctuation)
            return

        self.emitter.flush_line(state.buffer)
        if match.target == MAN_TARGET:
            page, _, section = match.title.partition(" ")
            self.emitter.emit(ManReference(page, section.strip() or None, match.punctuation))
        else:
            self.emitter.emit(Link(match.title, match.target, match.punctuation, match.image))
