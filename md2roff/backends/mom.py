"""
mom backend: typesetting with the mom macros.
"""

from ..options import Dialect
from ..state import ListKind
from .base import Backend, FontSet

MOM_FONTS = FontSet(
    bold="\\*[BD]",
    italic="\\*[IT]",
    previous="\\*[PREV]",
    code_open="`\\*[CODE]",
    code_close="\\*[CODE OFF]'",
)

# Enumerator styles of ordered lists by nesting depth
_ENUMERATORS = {1: "DIGIT", 2: "ALPHA", 3: "DIGIT", 4: "alpha"}


class MomBackend(Backend):
    """Renders events with the mom macro package."""

    dialect = Dialect.MOM
    macro_file = "mom.tmac"
    fonts = MOM_FONTS

    def title_lines(self, title) -> list[str]:
        name = title.name.replace('"', "\\(dq")
        return [
            f'.TITLE "{name}"',
            '.AUTHOR "md2roff"',
            ".PAPER A4",
            ".PRINTSTYLE TYPESET",
            ".START",
        ]

    def paragraph_break(self, event) -> str:
        return ".PP\n"

    def line_break(self, event) -> str:
        return ".BR\n"

    def header(self, event) -> str:
        if event.level <= 3:
            title = event.title.replace('"', "\\(dq")
            return f'.HEADING {event.level} "{title}"\n'
        return f".PP\n{MOM_FONTS.bold}{event.title}{MOM_FONTS.previous}\n"

    def list_open(self, event) -> str:
        if event.kind is ListKind.ORDERED:
            return f".LIST {_ENUMERATORS.get(event.depth, 'DIGIT')}\n"
        return ".LIST BULLET\n" if event.depth % 2 else ".LIST DASH\n"

    def list_close(self, event) -> str:
        return ".LIST OFF\n"

    def item_open(self, event) -> str:
        if event.kind is ListKind.ORDERED and event.restart:
            return f".RESET_LIST {event.number}\n.ITEM\n"
        return ".ITEM\n"

    def code_block_open(self, event) -> str:
        return ".CODE\n"

    def code_block_close(self, event) -> str:
        return ".CODE OFF\n"

    def box_open(self, event) -> str:
        return ".DRH\n"

    def box_close(self, event) -> str:
        return ".DRH\n"

    def quote_open(self, event) -> str:
        return ".BLOCKQUOTE\n" if event.depth == 1 else ""

    def quote_close(self, event) -> str:
        return ".BLOCKQUOTE OFF\n" if event.depth == 1 else ""

    def link(self, event) -> str:
        title = f"{event.title} " if event.title and event.title != event.target else ""
        return f"{title}\\*[UL]{event.target}\\*[ULX]{event.punctuation}\n"
