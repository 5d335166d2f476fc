"""
Base class for dialect backends.

A backend turns one structural event into the literal roff text of its
macro package. It keeps no state between events: everything it needs
travels in the event.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple

from ..events import Event, LineBreak
from ..options import Dialect, SynopsisStyle
from ..synopsis import TokenKind, run_text

# Control character swapped in while a code line starting with "." is written
ALTERNATE_CONTROL = "!"


class FontSet(NamedTuple):
    """Inline font switches of a dialect."""
    bold: str
    italic: str
    previous: str
    code_open: str
    code_close: str


ROFF_FONTS = FontSet(
    bold="\\fB",
    italic="\\fI",
    previous="\\fP",
    code_open="\u2018\\f[CR]",
    code_close="\\fP\u2019",
)


def quote_arg(text: str) -> str:
    """Quote a macro argument when it is empty or holds blanks."""
    text = text.replace('"', "\\(dq")
    if not text or any(ch.isspace() for ch in text):
        return f'"{text}"'
    return text


def option_text(text: str) -> str:
    """Write option dashes as roff minus signs."""
    return text.replace("-", "\\-")


class Backend(ABC):
    """Renders structural events for one macro package."""

    dialect: Dialect
    macro_file: str
    fonts: FontSet = ROFF_FONTS
    # quotes opened inside a list item must close before the item ends
    quotes_close_with_items: bool = False

    def render(self, event: Event) -> str:
        return getattr(self, event.handler)(event)

    # -- document ---------------------------------------------------------

    def document_start(self, event) -> str:
        lines = []
        if event.uses_tables:
            lines.append("'\\\" t")
        lines.append(".\\# roff document")
        lines.append(f".do mso {self.macro_file}")
        lines.extend(self.title_lines(event.title))
        return "\n".join(lines) + "\n"

    @abstractmethod
    def title_lines(self, title) -> list[str]:
        ...

    # -- blocks -----------------------------------------------------------

    @abstractmethod
    def paragraph_break(self, event) -> str:
        ...

    def line_break(self, event) -> str:
        return ".br\n"

    @abstractmethod
    def header(self, event) -> str:
        ...

    @abstractmethod
    def list_open(self, event) -> str:
        ...

    @abstractmethod
    def list_close(self, event) -> str:
        ...

    @abstractmethod
    def item_open(self, event) -> str:
        ...

    def item_end(self, event) -> str:
        return ""

    @abstractmethod
    def code_block_open(self, event) -> str:
        ...

    @abstractmethod
    def code_block_close(self, event) -> str:
        ...

    def code_line(self, event) -> str:
        if event.text.startswith("."):
            return (
                f".cc {ALTERNATE_CONTROL}\n"
                f"{event.text}\n"
                f"{ALTERNATE_CONTROL}cc .\n"
            )
        return event.text + "\n"

    def box_open(self, event) -> str:
        return ".ft B\n"

    def box_close(self, event) -> str:
        return ".ft P\n"

    @abstractmethod
    def quote_open(self, event) -> str:
        ...

    @abstractmethod
    def quote_close(self, event) -> str:
        ...

    # -- tables (tbl works under every macro package) ---------------------

    def table_open(self, event) -> str:
        heads = " ".join("cB" for _ in event.alignments)
        body = " ".join(event.alignments)
        return f".TS\nallbox;\n{heads}\n{body}.\n"

    def table_row(self, event) -> str:
        return "\t".join(event.cells) + "\n"

    def table_close(self, event) -> str:
        return ".TE\n"

    # -- inline structures ------------------------------------------------

    @abstractmethod
    def link(self, event) -> str:
        ...

    def man_reference(self, event) -> str:
        f = self.fonts
        section = f"({event.section})" if event.section else ""
        return f"{f.bold}{event.page}{f.previous}{section}{event.punctuation}\n"

    # -- synopsis ---------------------------------------------------------

    def synopsis(self, event) -> str:
        if event.style is SynopsisStyle.PLAIN:
            return self._synopsis_lines(event.synopsis, highlight=False)
        if event.style is SynopsisStyle.HIGHLIGHTED:
            return self._synopsis_lines(event.synopsis, highlight=True)
        raise ValueError(
            f"The {self.dialect.value} dialect cannot render a {event.style.value} synopsis"
        )

    def highlight_run(self, run) -> str:
        """Options bold, operands italic, punctuation upright."""
        f = self.fonts
        parts = []
        for token in run:
            if token.kind is TokenKind.OPTION:
                parts.append(f"{f.bold}{option_text(token.text)}{f.previous}")
            elif token.kind is TokenKind.OPERAND:
                parts.append(f"{f.italic}{token.text}{f.previous}")
            else:
                parts.append(token.text)
        return "".join(parts).strip()

    def _synopsis_lines(self, synopsis, highlight: bool) -> str:
        br = self.line_break(LineBreak())
        out = []
        for program, run in synopsis.lines():
            body = self.highlight_run(run) if highlight else run_text(run).strip()
            out.append(" ".join(part for part in (program, body) if part) + "\n")
        return br.join(out)
