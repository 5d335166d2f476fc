"""
Block scanner: the single pass over a markdown document.

Line-start constructs (headers, lists, quotes, fences, tables, the
synopsis block) are recognized by the ``match_*`` functions, which only
look at the text and return what they found. ``BlockScanner`` applies
the matches to the scanner state and feeds events to the emitter;
everything between line starts goes through the inline scanner.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .events import (
    BoxClose,
    BoxOpen,
    CodeBlockClose,
    CodeBlockOpen,
    CodeLine,
    DocumentStart,
    Header,
    ItemEnd,
    ItemOpen,
    LineBreak,
    ListClose,
    ListOpen,
    ParagraphBreak,
    SynopsisBlock,
    TableClose,
    TableOpen,
    TableRow,
)
from .inline import InlineScanner, line_number
from .normalize import normalize_line
from .options import ConversionOptions, Dialect
from .state import ListKind, ListStack, ScannerState
from .synopsis import SYNOPSIS_KEYWORD, SYNOPSIS_SECTION, parse_synopsis
from .title import fallback_title, parse_title_line

logger = logging.getLogger(__name__)

FENCE = "```"
RULER_CHARS = "=-*"
HARD_BREAK = "  "

_DELIMITER_CELL = re.compile(r"^\s*(:?)-+(:?)\s*$")
_ROW_START = re.compile(r"^\|", re.MULTILINE)


@dataclass(frozen=True)
class HeaderMatch:
    level: int
    title: str
    boxed: bool
    end: int


@dataclass(frozen=True)
class ListMarker:
    kind: ListKind
    indent: int
    number: Optional[int]
    content: int  # position of the item text


@dataclass(frozen=True)
class TableMatch:
    alignments: tuple
    rows: list
    end: int


def line_end(text: str, pos: int) -> int:
    end = text.find("\n", pos)
    return len(text) if end == -1 else end


def match_header(text: str, pos: int) -> Optional[HeaderMatch]:
    """
    ``#`` headers. A line that also ends with ``#`` is a boxed line
    rather than a header.
    """
    if not text.startswith("#", pos):
        return None
    end = line_end(text, pos)
    line = text[pos:end].rstrip()
    level = len(line) - len(line.lstrip("#"))
    nxt = min(end + 1, len(text))
    if line.endswith("#"):
        return HeaderMatch(level, line.strip("#").strip(), True, nxt)
    return HeaderMatch(level, line[level:].strip(), False, nxt)


def match_quote(text: str, pos: int) -> Optional[tuple[int, int]]:
    """Return (depth, position after the markers) for a ``>`` line."""
    if not text.startswith(">", pos):
        return None
    end = line_end(text, pos)
    depth = 0
    i = pos
    while i < end and text[i] in "> \t":
        if text[i] == ">":
            depth += 1
        i += 1
    return depth, i


def match_list_marker(text: str, pos: int) -> Optional[ListMarker]:
    end = line_end(text, pos)
    i = pos
    indent = 0
    while i < end and text[i] in " \t":
        indent += 4 if text[i] == "\t" else 1
        i += 1
    if i >= end:
        return None

    if text[i] in "*+-":
        if i + 1 < end and text[i + 1] in " \t":
            return ListMarker(ListKind.UNORDERED, indent, None, i + 2)
        return None

    j = i
    while j < end and text[j].isdigit():
        j += 1
    if j == i or j >= end or text[j] != ".":
        return None
    if j + 1 < end and text[j + 1] not in " \t":
        return None
    k = j + 1
    while k < end and text[k] in " \t":
        k += 1
    return ListMarker(ListKind.ORDERED, indent, int(text[i:j]), k)


def match_ruler(text: str, pos: int) -> Optional[tuple[str, int]]:
    """Return (ruler character, next line start) for ``===``/``---``/``***`` lines."""
    end = line_end(text, pos)
    line = text[pos:end].rstrip()
    if len(line) >= 3 and line[0] in RULER_CHARS and line == line[0] * len(line):
        return line[0], min(end + 1, len(text))
    return None


def split_row(line: str) -> list[str]:
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def _alignment(cell: str) -> str:
    m = _DELIMITER_CELL.match(cell)
    left, right = m.group(1), m.group(2)
    if left and right:
        return "c"
    if right:
        return "r"
    return "l"


def match_table(text: str, pos: int) -> Optional[TableMatch]:
    """A pipe table: header row, delimiter row, then rows starting with ``|``."""
    if not text.startswith("|", pos):
        return None
    end = line_end(text, pos)
    header = split_row(text[pos:end])
    if end + 1 >= len(text):
        return None

    delimiter_end = line_end(text, end + 1)
    delimiter = split_row(text[end + 1:delimiter_end])
    if len(delimiter) != len(header) or not all(_DELIMITER_CELL.match(c) for c in delimiter):
        return None

    width = len(header)
    rows = [header]
    i = delimiter_end + 1
    while i < len(text):
        row_end = line_end(text, i)
        line = text[i:row_end]
        if not line.lstrip().startswith("|"):
            break
        cells = split_row(line)[:width]
        rows.append(cells + [""] * (width - len(cells)))
        i = row_end + 1
    return TableMatch(tuple(_alignment(c) for c in delimiter), rows, min(i, len(text)))


def document_uses_tables(text: str) -> bool:
    return any(match_table(text, m.start()) for m in _ROW_START.finditer(text))


class BlockScanner:
    """
    Converts one document, writing through ``emitter``.

    ``emitter`` must share ``state`` with the scanner; ``Md2Roff`` wires
    the two together.
    """

    def __init__(self, text: str, docname: str, emitter, options: ConversionOptions,
                 today: Optional[date] = None, state: Optional[ScannerState] = None):
        self.text = text
        self.docname = docname
        self.emitter = emitter
        self.options = options
        self.today = today or date.today()
        self.state = state if state is not None else emitter.state
        self.inline = InlineScanner(text, self.state, emitter, options)

    def run(self) -> None:
        text = self.text
        state = self.state
        self._document_start()
        while state.pos < len(text):
            if state.in_code_block:
                self._code_line()
                continue
            if state.at_line_start:
                state.at_line_start = False
                if self._line_start():
                    continue
            if text[state.pos] == "\n":
                self._end_of_line()
            else:
                self.inline.step()
        self._finish()

    # -- document boundaries ----------------------------------------------

    def _document_start(self) -> None:
        text = self.text
        state = self.state
        title = None
        if self.options.dialect in (Dialect.MAN, Dialect.MDOC):
            i = 0
            while i < len(text) and text[i].isspace():
                i += 1
            if text.startswith("#", i) and text[i + 1:i + 2] in (" ", "\t"):
                end = line_end(text, i)
                title = parse_title_line(text[i + 2:end], self.today)
                i = end
                while i < len(text) and text[i].isspace():
                    i += 1
            state.pos = i
        if title is None:
            title = fallback_title(self.docname, self.today)
        logger.debug("Title block: %s", title)
        self.emitter.emit(DocumentStart(title, uses_tables=document_uses_tables(text)))

    def _finish(self) -> None:
        state = self.state
        self.emitter.flush_line(state.buffer)
        if state.in_code_block:
            logger.warning("%s: code block not closed at end of document", self.docname)
            state.in_code_block = False
            self.emitter.emit(CodeBlockClose())
        while state.lists:
            self._close_list()
        if state.bold_open or state.italic_open:
            logger.debug("%s: emphasis still open at end of document", self.docname)
        self.emitter.close()

    # -- line starts ------------------------------------------------------

    def _line_start(self) -> bool:
        """Handle a construct at the start of a line; False if there is none."""
        text = self.text
        state = self.state
        pos = state.pos
        end = line_end(text, pos)

        if not text[pos:end].strip():
            self._blank_line(end)
            return True

        quote = match_quote(text, pos)
        if quote:
            depth, content = quote
            state.previous_line_blank = False
            self._set_quote_depth(depth)
            if content >= end:
                # a lone ">" separates paragraphs inside the quote
                self.emitter.flush_line(state.buffer)
                self.emitter.emit(ParagraphBreak())
                self._next_line(end)
            else:
                state.pos = content
            return True

        if state.quote_depth and state.previous_line_blank:
            self._set_quote_depth(0)
        state.previous_line_blank = False

        header = match_header(text, pos)
        if header:
            self._header(header)
            return True

        if state.section == SYNOPSIS_SECTION and text.startswith(SYNOPSIS_KEYWORD, pos):
            self._synopsis(pos + len(SYNOPSIS_KEYWORD))
            return True

        table = match_table(text, pos)
        if table:
            self._table(table)
            return True

        marker = match_list_marker(text, pos)
        if marker:
            self._list_item(marker)
            return True

        if text.startswith(FENCE, pos):
            self.emitter.flush_line(state.buffer)
            state.in_code_block = True
            self.emitter.emit(CodeBlockOpen(text[pos + len(FENCE):end].strip()))
            state.pos = min(end + 1, len(text))
            return True

        if not state.buffer and match_ruler(text, pos):
            # thematic break; no roff counterpart
            self._next_line(end)
            return True

        return False

    def _next_line(self, end: int) -> None:
        self.state.pos = min(end + 1, len(self.text))
        self.state.at_line_start = True

    def _blank_line(self, end: int) -> None:
        state = self.state
        self.emitter.flush_line(state.buffer)
        if state.lists:
            self._close_list()
        if state.quote_depth and not self._next_content_is_quoted(end):
            self._set_quote_depth(0)
        self.emitter.emit(ParagraphBreak())
        self._next_line(end)
        state.previous_line_blank = True

    def _next_content_is_quoted(self, end: int) -> bool:
        text = self.text
        i = end + 1
        while i < len(text):
            e = line_end(text, i)
            line = text[i:e].strip()
            if line:
                return line.startswith(">")
            i = e + 1
        return False

    def _set_quote_depth(self, depth: int) -> None:
        state = self.state
        if depth != state.quote_depth:
            self.emitter.flush_line(state.buffer)
            state.quote_depth = depth

    def _enter_section(self, name: str) -> None:
        state = self.state
        state.section = name.strip()
        state.suppress_output = self.options.is_excluded(state.section)
        if state.suppress_output:
            logger.debug("Leaving out section %s", state.section)

    def _header(self, match: HeaderMatch) -> None:
        emitter = self.emitter
        emitter.flush_line(self.state.buffer)
        if match.boxed:
            emitter.emit(BoxOpen())
            emitter.emit(LineBreak())
            if match.title:
                emitter.text(self.inline.render_fragment(match.title))
            emitter.emit(LineBreak())
            emitter.emit(BoxClose())
        else:
            if match.level == 2:
                self._enter_section(match.title)
            emitter.emit(Header(match.level, self.inline.render_fragment(match.title)))
        self.state.pos = match.end
        self.state.at_line_start = True

    def _synopsis(self, start: int) -> None:
        text = self.text
        self.emitter.flush_line(self.state.buffer)
        end = line_end(text, start)
        lines = [text[start:end]]
        i = end + 1
        while i < len(text):
            e = line_end(text, i)
            if not text[i:e].strip():
                break
            lines.append(text[i:e])
            i = e + 1
        synopsis = parse_synopsis(lines)
        self.emitter.emit(SynopsisBlock(synopsis, self.options.resolved_synopsis_style()))
        self.state.pos = min(i, len(text))
        self.state.at_line_start = True

    def _table(self, match: TableMatch) -> None:
        emitter = self.emitter
        emitter.flush_line(self.state.buffer)
        emitter.emit(TableOpen(match.alignments))
        for index, row in enumerate(match.rows):
            cells = tuple(self.inline.render_fragment(cell) for cell in row)
            emitter.emit(TableRow(cells, header=index == 0))
        emitter.emit(TableClose())
        self.state.pos = match.end
        self.state.at_line_start = True

    # -- lists ------------------------------------------------------------

    def _close_list(self) -> None:
        lists = self.state.lists
        depth = lists.depth
        level = lists.pop()
        self.emitter.emit(ItemEnd(level.kind, depth))
        self.emitter.emit(ListClose(level.kind, depth))

    def _list_item(self, marker: ListMarker) -> None:
        state = self.state
        lists = state.lists
        emitter = self.emitter
        emitter.flush_line(state.buffer)

        while len(lists) > 1 and marker.indent < lists.top.indent:
            self._close_list()

        if not lists or marker.indent > lists.top.indent:
            if lists.is_full():
                logger.warning(
                    "%s:%d: lists nested deeper than %d levels, continuing the innermost list",
                    self.docname, line_number(self.text, state.pos), ListStack.MAX_DEPTH,
                )
                emitter.emit(ItemEnd(lists.top.kind, lists.depth))
            else:
                lists.push(marker.kind, marker.indent)
                emitter.emit(ListOpen(marker.kind, lists.depth))
        else:
            emitter.emit(ItemEnd(lists.top.kind, lists.depth))

        level = lists.top
        restart = False
        if marker.number is not None:
            restart = marker.number != level.next_index
            level.next_index = marker.number
        emitter.emit(ItemOpen(level.kind, lists.depth, level.next_index, restart))
        if level.kind is ListKind.ORDERED:
            level.next_index += 1
        state.pos = marker.content

    # -- code blocks and line ends ----------------------------------------

    def _code_line(self) -> None:
        text = self.text
        state = self.state
        end = line_end(text, state.pos)
        line = text[state.pos:end]
        if line.startswith(FENCE):
            state.in_code_block = False
            self.emitter.emit(CodeBlockClose())
            state.at_line_start = True
        else:
            self.emitter.emit(CodeLine(line))
        state.pos = min(end + 1, len(text))

    def _end_of_line(self) -> None:
        text = self.text
        state = self.state
        pos = state.pos
        buffer = state.buffer

        ruler = match_ruler(text, pos + 1) if pos + 1 < len(text) else None
        if ruler:
            char, after = ruler
            state.pos = after
            state.at_line_start = True
            if not buffer.text.strip():
                buffer.clear()
                return
            before, title = buffer.split_last_line()
            buffer.clear()
            if before.strip():
                self.emitter.text(normalize_line(before))
            title = normalize_line(title)
            level = 1 if char == "=" else 2
            if level == 2:
                self._enter_section(title)
            self.emitter.emit(Header(level, title))
            return

        if buffer.endswith(HARD_BREAK):
            self.emitter.flush_line(buffer)
            self.emitter.emit(LineBreak())
        else:
            buffer.append(" ")
        buffer.mark_line()
        state.pos = pos + 1
        state.at_line_start = True
