"""
ms backend: the manuscript macros.
"""

from ..options import Dialect
from ..state import ListKind
from .base import Backend, quote_arg


class MsBackend(Backend):
    """Renders events with the ms macro package."""

    dialect = Dialect.MS
    macro_file = "s.tmac"

    def title_lines(self, title) -> list[str]:
        return [".TL", title.name, ".LP"]

    def paragraph_break(self, event) -> str:
        return ".PP\n"

    def header(self, event) -> str:
        if event.level <= 3:
            return f".SH {event.level}\n{event.title}\n"
        return f".IP {quote_arg(f'{self.fonts.bold}{event.title}{self.fonts.previous}')}\n"

    def list_open(self, event) -> str:
        return ".RS\n" if event.depth > 1 else ""

    def list_close(self, event) -> str:
        return ".RE\n" if event.depth > 1 else ""

    def item_open(self, event) -> str:
        if event.kind is ListKind.UNORDERED:
            return ".IP \\(bu 4\n"
        return f".IP {event.number}. 4\n"

    def code_block_open(self, event) -> str:
        return ".DS I\n.ft CR\n"

    def code_block_close(self, event) -> str:
        return ".ft\n.DE\n"

    def box_open(self, event) -> str:
        return ".B1\n"

    def box_close(self, event) -> str:
        return ".B2\n"

    def quote_open(self, event) -> str:
        return ".RS\n"

    def quote_close(self, event) -> str:
        return ".RE\n"

    def link(self, event) -> str:
        if event.title and event.title != event.target:
            return f"{event.title} <{event.target}>{event.punctuation}\n"
        return f"<{event.target}>{event.punctuation}\n"
