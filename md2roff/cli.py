#!/usr/bin/env python3
"""
md2roff CLI

Command-line interface for markdown to *roff conversion.

Usage:
    md2roff <source> [options]
    md2roff ls.md > ls.1
    md2roff -d ls.md > ls.1                 # mdoc instead of man
    md2roff -s notes.md | groff -ms -Tpdf > notes.pdf
    md2roff https://example.com/README.md
    cat doc.md | md2roff -

Options:
    -n, -d, -m, -o, -s   Target man, mdoc, mm, mom or ms
    -z, --man-official   man-pages(7) style
    -q, --non-std-q      Non-strict quoting
"""

import argparse
import logging
import sys

from . import __version__
from .core import Md2Roff
from .options import ConversionOptions, Dialect, SynopsisStyle

logger = logging.getLogger(__name__)

DIALECT_DESCRIPTIONS = {
    "man": "Linux manual pages",
    "mdoc": "BSD manual pages",
    "mm": "memorandum macros",
    "mom": "typesetting with mom",
    "ms": "manuscript macros",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2roff",
        description=(
            "Markdown to *roff Transpiler\n\n"
            "Converts markdown documents into man, mdoc, mm, mom or ms\n"
            "markup. The result is written to standard output."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  md2roff ls.md > ls.1                     # man page\n"
            "  md2roff -z ls.md > ls.1                  # man-pages(7) style\n"
            "  md2roff -d ls.md > ls.1                  # mdoc\n"
            "  md2roff -o report.md | groff -mom -Tpdf  # typeset with mom\n"
            "  md2roff --synopsis-style plain ls.md     # no .SY/.OP macros\n"
            "  cat ls.md | md2roff -                    # read standard input\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Markdown files or URLs to convert (\"-\" reads standard input)",
    )

    dialect = parser.add_mutually_exclusive_group()
    dialect.add_argument("-n", "--man", dest="dialect", action="store_const", const=Dialect.MAN,
                         help="man(7) output (default)")
    dialect.add_argument("-d", "--mdoc", dest="dialect", action="store_const", const=Dialect.MDOC,
                         help="mdoc(7) output")
    dialect.add_argument("-m", "--mm", dest="dialect", action="store_const", const=Dialect.MM,
                         help="mm output")
    dialect.add_argument("-o", "--mom", dest="dialect", action="store_const", const=Dialect.MOM,
                         help="mom output")
    dialect.add_argument("-s", "--ms", dest="dialect", action="store_const", const=Dialect.MS,
                         help="ms output")
    parser.set_defaults(dialect=Dialect.MAN)

    parser.add_argument(
        "-z", "--man-official",
        action="store_true",
        help="man-pages(7) style: drop COPYRIGHT/AUTHORS-like sections, fix misused terms",
    )
    parser.add_argument(
        "-q", "--non-std-q",
        action="store_true",
        help="Non-strict quoting: * is strong and _ is emphasis",
    )
    parser.add_argument(
        "--synopsis-style",
        choices=[s.value for s in SynopsisStyle],
        default=None,
        help="How SYNTAX: lines in a SYNOPSIS section are rendered",
    )
    parser.add_argument(
        "--dialects",
        action="store_true",
        help="Show the supported dialects and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Debug logging on standard error",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.dialects:
        _show_dialects()
        return 0

    if not args.sources:
        parser.print_usage(sys.stderr)
        print("Error: No sources provided. Specify files, URLs, or - for standard input.", file=sys.stderr)
        return 1

    try:
        options = ConversionOptions(
            dialect=args.dialect,
            official=args.man_official,
            strict_quoting=not args.non_std_q,
            synopsis_style=args.synopsis_style,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = Md2Roff(options)
    error_count = 0
    for source in args.sources:
        try:
            engine.convert(source)
        except Exception as e:
            logger.debug("Conversion of %s failed", source, exc_info=True)
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    return 1 if error_count else 0


def _show_dialects():
    """Display the supported dialects."""
    dialects = Md2Roff.supported_dialects()
    print("\nSupported Dialects:")
    print("-" * 40)
    for name, macro_file in dialects.items():
        print(f"  {name:<6} {macro_file:<10} {DIALECT_DESCRIPTIONS[name]}")
    print()


if __name__ == "__main__":
    sys.exit(main())
