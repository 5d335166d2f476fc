"""
Conversion options: the macro package to target and the knobs that
change how the scanner reads the document.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Dialect(Enum):
    """Supported *roff macro packages."""
    MAN = "man"
    MDOC = "mdoc"
    MM = "mm"
    MOM = "mom"
    MS = "ms"


class SynopsisStyle(Enum):
    """How the command grammar of a SYNOPSIS block is rendered."""
    PLAIN = "plain"
    HIGHLIGHTED = "highlighted"
    SY = "sy"  # man(7) .SY/.OP/.YS
    NM = "nm"  # mdoc(7) .Nm/.Op/.Fl/.Ar


# Sections dropped from the output in official style
OFFICIAL_EXCLUDED_SECTIONS = (
    "COPYRIGHT",
    "AUTHOR",
    "AUTHORS",
    "HOMEPAGE",
    "REPORTING BUGS",
)

_DEFAULT_SYNOPSIS_STYLE = {
    Dialect.MAN: SynopsisStyle.SY,
    Dialect.MDOC: SynopsisStyle.NM,
}


@dataclass
class ConversionOptions:
    """
    Settings for one conversion.

    Strings are accepted for ``dialect`` and ``synopsis_style`` and are
    coerced to their enums.
    """
    dialect: Dialect = Dialect.MAN
    official: bool = False  # man-pages(7) style: section suppression + dictionary
    strict_quoting: bool = True  # **/__ strong, */_ emphasis
    synopsis_style: Optional[SynopsisStyle] = None  # None picks the dialect default
    excluded_sections: tuple[str, ...] = OFFICIAL_EXCLUDED_SECTIONS

    def __post_init__(self):
        if not isinstance(self.dialect, Dialect):
            try:
                self.dialect = Dialect(str(self.dialect).lower())
            except ValueError:
                valid = ", ".join(d.value for d in Dialect)
                raise ValueError(f"Dialect must be one of {valid}, got {self.dialect!r}")

        if self.synopsis_style is not None and not isinstance(self.synopsis_style, SynopsisStyle):
            try:
                self.synopsis_style = SynopsisStyle(str(self.synopsis_style).lower())
            except ValueError:
                valid = ", ".join(s.value for s in SynopsisStyle)
                raise ValueError(f"Synopsis style must be one of {valid}, got {self.synopsis_style!r}")

        if self.synopsis_style is SynopsisStyle.SY and self.dialect is not Dialect.MAN:
            raise ValueError(f"The sy synopsis style needs the man dialect, got {self.dialect.value}")
        if self.synopsis_style is SynopsisStyle.NM and self.dialect is not Dialect.MDOC:
            raise ValueError(f"The nm synopsis style needs the mdoc dialect, got {self.dialect.value}")

        self.excluded_sections = tuple(self.excluded_sections)

    def resolved_synopsis_style(self) -> SynopsisStyle:
        """Return the explicit synopsis style or the dialect's default."""
        if self.synopsis_style is not None:
            return self.synopsis_style
        return _DEFAULT_SYNOPSIS_STYLE.get(self.dialect, SynopsisStyle.HIGHLIGHTED)

    def is_excluded(self, section: str) -> bool:
        """Check whether a section is suppressed under official style."""
        return self.official and section.strip() in self.excluded_sections
