"""
mm backend: the memorandum macros.
"""

from ..options import Dialect
from ..state import ListKind
from .base import Backend


class MmBackend(Backend):
    """Renders events with the mm macro package. Block quotes are not supported."""

    dialect = Dialect.MM
    macro_file = "m.tmac"

    def title_lines(self, title) -> list[str]:
        return []

    def paragraph_break(self, event) -> str:
        return ".P\n"

    def header(self, event) -> str:
        if event.level <= 3:
            title = event.title.replace('"', "\\(dq")
            return f'.H {event.level} "{title}"\n'
        return f".P\n\\fB{event.title}\\fP\n"

    def list_open(self, event) -> str:
        return ".AL\n" if event.kind is ListKind.ORDERED else ".BL\n"

    def list_close(self, event) -> str:
        return ".LE\n"

    def item_open(self, event) -> str:
        if event.kind is ListKind.ORDERED:
            return f".LI {event.number}.\n"
        return ".LI\n"

    def code_block_open(self, event) -> str:
        return ".DS I\n.ft CR\n"

    def code_block_close(self, event) -> str:
        return ".ft\n.DE\n"

    def quote_open(self, event) -> str:
        return ""

    def quote_close(self, event) -> str:
        return ""

    def link(self, event) -> str:
        if event.title and event.title != event.target:
            return f"{event.title} <{event.target}>{event.punctuation}\n"
        return f"<{event.target}>{event.punctuation}\n"
