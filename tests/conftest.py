"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from md2roff.backends import get_backend
from md2roff.core import convert
from md2roff.events import DocumentStart
from md2roff.options import ConversionOptions
from md2roff.title import fallback_title

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Conversion Fixtures
# ============================================================================


@pytest.fixture
def today():
    """Provide a fixed conversion date."""
    return date(2026, 10, 7)


@pytest.fixture
def render(today):
    """
    Convert markdown to roff with a fixed date.

    Keyword arguments are passed on to ConversionOptions.
    """
    def _render(text, docname="test", **options):
        return convert(text, docname=docname, options=ConversionOptions(**options), today=today)
    return _render


@pytest.fixture
def body(render, today):
    """
    Convert markdown that has no title line and return the output
    without the prologue and the synthesized title.
    """
    def _body(text, dialect="man", **options):
        out = render(text, dialect=dialect, **options)
        prologue = get_backend(dialect).render(DocumentStart(fallback_title("test", today)))
        assert out.startswith(prologue)
        return out[len(prologue):]
    return _body


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def man_page_source():
    """A complete manual page written in markdown."""
    return (FIXTURES_DIR / "ls.md").read_text(encoding="utf-8")


@pytest.fixture
def report_source():
    """A general document with a table and nested lists."""
    return (FIXTURES_DIR / "report.md").read_text(encoding="utf-8")


@pytest.fixture
def man_page_file(tmp_path, man_page_source):
    """Write the manual page to a temporary file."""
    path = tmp_path / "ls.md"
    path.write_text(man_page_source, encoding="utf-8")
    return path
