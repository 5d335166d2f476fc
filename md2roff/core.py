"""
md2roff Core Engine

Loads a markdown source, applies the official-style dictionary when
asked, and runs the scanner over it with the backend of the selected
dialect. Output is streamed to a text stream as it is produced.
"""

import io
import logging
import sys
from datetime import date
from typing import Optional, TextIO

from .backends import BACKENDS, get_backend
from .dictionary import correct_misused_words
from .emitter import Emitter
from .loader import load_document
from .options import ConversionOptions
from .scanner import BlockScanner
from .state import ScannerState

logger = logging.getLogger(__name__)


class Md2Roff:
    """
    Main conversion engine.

    One instance can convert any number of documents with the same
    options; each conversion gets fresh scanner state.
    """

    def __init__(self, options: Optional[ConversionOptions] = None, today: Optional[date] = None):
        self.options = options or ConversionOptions()
        self.today = today

    def convert(self, source: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
        """
        Convert a source to roff.

        Args:
            source: File path, URL, or "-"/None for standard input
            stream: Where to write (default: standard output)
        """
        document = load_document(source)
        logger.info("Converting %s (%s)", document.name, self.options.dialect.value)
        self.convert_text(document.text, docname=document.name, stream=stream)

    def convert_text(self, text: str, docname: str = "stdin", stream: Optional[TextIO] = None) -> None:
        """Convert markdown text already in memory."""
        stream = stream or sys.stdout
        text = text.replace("\r\n", "\n")
        if self.options.official:
            text = correct_misused_words(text)
        if not text.endswith("\n"):
            text += "\n"

        state = ScannerState()
        emitter = Emitter(get_backend(self.options.dialect), stream, state)
        BlockScanner(text, docname, emitter, self.options, today=self.today, state=state).run()

    @staticmethod
    def supported_dialects() -> dict:
        """Return the supported dialects and the macro file each one loads."""
        return {dialect.value: backend.macro_file for dialect, backend in BACKENDS.items()}


def convert(text: str, docname: str = "document", options: Optional[ConversionOptions] = None,
            today: Optional[date] = None) -> str:
    """Convert markdown text and return the roff output as a string."""
    out = io.StringIO()
    Md2Roff(options, today=today).convert_text(text, docname=docname, stream=out)
    return out.getvalue()
