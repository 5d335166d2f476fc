"""
md2roff - Markdown to *roff Transpiler

Converts markdown-flavored documents into typesetting markup for the
man, mdoc, mm, mom and ms macro packages. Single pass, no document
tree: text goes in one end and roff comes out the other.
"""

__version__ = "1.3.0"

from .core import Md2Roff, convert
from .options import ConversionOptions, Dialect, SynopsisStyle

__all__ = ["Md2Roff", "convert", "ConversionOptions", "Dialect", "SynopsisStyle"]
