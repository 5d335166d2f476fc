"""
Writes rendered events and text lines to the output stream.

The emitter also owns block quote nesting: the scanner only records the
depth it wants, and the matching open/close directives are written in
front of whatever is output next.
"""

from typing import TextIO

from .backends import Backend
from .events import Event, ItemEnd, ListClose, ListOpen, QuoteClose, QuoteOpen
from .normalize import normalize_line
from .state import LineBuffer, ScannerState


class Emitter:
    """Streams roff for one document conversion."""

    def __init__(self, backend: Backend, stream: TextIO, state: ScannerState):
        self.backend = backend
        self.stream = stream
        self.state = state
        # quote depth in force when each open list started
        self._list_quote_depths: list[int] = []

    @property
    def fonts(self):
        return self.backend.fonts

    def emit(self, event: Event) -> None:
        if self.state.suppress_output:
            return
        floors = self._list_quote_depths
        if (self.backend.quotes_close_with_items and floors
                and isinstance(event, (ItemEnd, ListClose))):
            self.state.quote_depth = min(self.state.quote_depth, floors[-1])
        out = self._reconcile_quotes() + self.backend.render(event)
        if isinstance(event, ListOpen):
            floors.append(self.state.emitted_quote_depth)
        elif isinstance(event, ListClose) and floors:
            floors.pop()
        self._write(out)

    def text(self, line: str) -> None:
        if self.state.suppress_output:
            return
        self._write(self._reconcile_quotes() + line + "\n")

    def flush_line(self, buffer: LineBuffer) -> None:
        """Normalize and write the buffered text, then clear the buffer."""
        line = buffer.take()
        if line.strip():
            self.text(normalize_line(line))

    def close(self) -> None:
        """Close any block quotes still open at the end of the document."""
        # quotes opened before a suppressed section still need closing
        self.state.quote_depth = 0
        self._write(self._reconcile_quotes())

    def _reconcile_quotes(self) -> str:
        state = self.state
        out = []
        while state.emitted_quote_depth < state.quote_depth:
            state.emitted_quote_depth += 1
            out.append(self.backend.render(QuoteOpen(depth=state.emitted_quote_depth)))
        while state.emitted_quote_depth > state.quote_depth:
            out.append(self.backend.render(QuoteClose(depth=state.emitted_quote_depth)))
            state.emitted_quote_depth -= 1
        return "".join(out)

    def _write(self, text: str) -> None:
        if text:
            self.stream.write(text)
