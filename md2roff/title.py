"""
Title block of a document: read from a leading ``# name section date``
line, or made up from the document name and today's date.
"""

from dataclasses import dataclass
import datetime
from typing import Optional

MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DEFAULT_SECTION = "7"


@dataclass(frozen=True)
class TitleBlock:
    """
    Page title data.

    ``synthesized`` is True when no title line was found and the block
    was built from the document name.
    """
    name: str
    section: str = DEFAULT_SECTION
    date: str = ""
    extra: str = ""
    synthesized: bool = False
    today: Optional[datetime.date] = None


def format_date(day: datetime.date) -> str:
    """Format a date the way man page footers show it: ``Oct 7 2026``."""
    return f"{MONTHS[day.month - 1]} {day.day} {day.year}"


def parse_title_line(line: str, today: datetime.date) -> TitleBlock:
    """
    Parse the text after ``# `` on the first line.

    The first word is the page name (upper-cased), the second the manual
    section, the third the date; anything left is kept verbatim.
    """
    fields = line.split(None, 3)
    name = fields[0].upper() if fields else ""
    section = fields[1] if len(fields) > 1 else DEFAULT_SECTION
    day = fields[2] if len(fields) > 2 else format_date(today)
    extra = fields[3].strip() if len(fields) > 3 else ""
    return TitleBlock(name=name, section=section, date=day, extra=extra, today=today)


def fallback_title(docname: str, today: datetime.date) -> TitleBlock:
    return TitleBlock(
        name=docname,
        section=DEFAULT_SECTION,
        date=format_date(today),
        synthesized=True,
        today=today,
    )
