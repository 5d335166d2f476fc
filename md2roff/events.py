"""
Structural events passed from the scanners to a dialect backend.

Each event names the backend method that renders it in ``handler``.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from .options import SynopsisStyle
from .state import ListKind
from .synopsis import Synopsis
from .title import TitleBlock


@dataclass(frozen=True)
class Event:
    handler: ClassVar[str] = ""


@dataclass(frozen=True)
class DocumentStart(Event):
    handler: ClassVar[str] = "document_start"
    title: TitleBlock
    uses_tables: bool = False


@dataclass(frozen=True)
class ParagraphBreak(Event):
    handler: ClassVar[str] = "paragraph_break"


@dataclass(frozen=True)
class LineBreak(Event):
    handler: ClassVar[str] = "line_break"


@dataclass(frozen=True)
class ListOpen(Event):
    handler: ClassVar[str] = "list_open"
    kind: ListKind
    depth: int = 1


@dataclass(frozen=True)
class ListClose(Event):
    handler: ClassVar[str] = "list_close"
    kind: ListKind
    depth: int = 1


@dataclass(frozen=True)
class ItemOpen(Event):
    """
    Start of a list item.

    ``number`` is meaningful for ordered lists only; ``restart`` is set
    when it does not follow from the previous item (or from 1).
    """
    handler: ClassVar[str] = "item_open"
    kind: ListKind
    depth: int = 1
    number: int = 1
    restart: bool = False


@dataclass(frozen=True)
class ItemEnd(Event):
    handler: ClassVar[str] = "item_end"
    kind: ListKind
    depth: int = 1


@dataclass(frozen=True)
class Header(Event):
    handler: ClassVar[str] = "header"
    level: int
    title: str


@dataclass(frozen=True)
class CodeBlockOpen(Event):
    handler: ClassVar[str] = "code_block_open"
    info: str = ""


@dataclass(frozen=True)
class CodeBlockClose(Event):
    handler: ClassVar[str] = "code_block_close"


@dataclass(frozen=True)
class CodeLine(Event):
    handler: ClassVar[str] = "code_line"
    text: str


@dataclass(frozen=True)
class Link(Event):
    handler: ClassVar[str] = "link"
    title: str
    target: str
    punctuation: str = ""
    image: bool = False


@dataclass(frozen=True)
class ManReference(Event):
    handler: ClassVar[str] = "man_reference"
    page: str
    section: Optional[str] = None
    punctuation: str = ""


@dataclass(frozen=True)
class BoxOpen(Event):
    handler: ClassVar[str] = "box_open"


@dataclass(frozen=True)
class BoxClose(Event):
    handler: ClassVar[str] = "box_close"


@dataclass(frozen=True)
class QuoteOpen(Event):
    handler: ClassVar[str] = "quote_open"
    depth: int = 1


@dataclass(frozen=True)
class QuoteClose(Event):
    handler: ClassVar[str] = "quote_close"
    depth: int = 1


@dataclass(frozen=True)
class TableOpen(Event):
    handler: ClassVar[str] = "table_open"
    alignments: tuple[str, ...] = field(default_factory=tuple)  # "l", "c" or "r" per column


@dataclass(frozen=True)
class TableRow(Event):
    handler: ClassVar[str] = "table_row"
    cells: tuple[str, ...] = field(default_factory=tuple)
    header: bool = False


@dataclass(frozen=True)
class TableClose(Event):
    handler: ClassVar[str] = "table_close"


@dataclass(frozen=True)
class SynopsisBlock(Event):
    handler: ClassVar[str] = "synopsis"
    synopsis: Synopsis
    style: SynopsisStyle = SynopsisStyle.HIGHLIGHTED
