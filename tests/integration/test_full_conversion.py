"""
Integration tests converting complete documents.
"""

import pytest

from md2roff.backends import get_backend
from md2roff.options import Dialect

pytestmark = pytest.mark.integration


class TestManualPage:
    """
    End-to-end conversion of a manual page:
    1. Read the title line
    2. Convert sections, synopsis, lists, code and quotes
    3. Emit man macros
    """

    def test_man(self, render, man_page_source):
        """Test the complete man(7) output."""
        out = render(man_page_source, docname="ls")

        assert out == (
            ".\\# roff document\n"
            ".do mso man.tmac\n"
            ".TH LS 1 2024-01-01\n"
            ".SH NAME\n"
            ".PP\n"
            "ls - list directory contents\n"
            ".PP\n"
            ".SH SYNOPSIS\n"
            ".PP\n"
            ".SY ls\n"
            ".OP \\-a\n"
            ".OP \\-l\n"
            ".OP \\-\\-color when\n"
            "\\fIfile\\fP ...\n"
            ".YS\n"
            ".PP\n"
            ".SH DESCRIPTION\n"
            ".PP\n"
            "List information about the \\fBfiles\\fP (the current directory by default). "
            "Entries are sorted alphabetically if none of \u2018\\f[CR]-cftuvSUX\\fP\u2019 is given.\n"
            ".PP\n"
            ".SS Options\n"
            ".PP\n"
            ".IP \\(bu 4\n"
            "\u2018\\f[CR]-a\\fP\u2019, show entries starting with .\n"
            ".IP \\(bu 4\n"
            "\u2018\\f[CR]-l\\fP\u2019, use a long listing format\n"
            ".PP\n"
            "Example:\n"
            ".PP\n"
            ".in +4n\n"
            ".EX\n"
            "ls -la /tmp\n"
            ".cc !\n"
            ".hidden\n"
            "!cc .\n"
            ".EE\n"
            ".in\n"
            ".PP\n"
            ".RS\n"
            "Note: output to a terminal is coloured by default.\n"
            ".RE\n"
            ".PP\n"
            ".SH SEE ALSO\n"
            ".PP\n"
            ".BR dir (1),\n"
            ".BR vdir (1).\n"
            ".PP\n"
            ".SH AUTHORS\n"
            ".PP\n"
            "Written by Richard M. Stallman and David MacKenzie.\n"
            ".PP\n"
            ".SH COPYRIGHT\n"
            ".PP\n"
            "Copyright 2024 Free Software Foundation.\n"
        )

    def test_man_official(self, render, man_page_source):
        """Test that official style ends the page after SEE ALSO."""
        out = render(man_page_source, docname="ls", official=True)

        assert out.endswith(".SH SEE ALSO\n.PP\n.BR dir (1),\n.BR vdir (1).\n.PP\n")
        assert "Stallman" not in out
        assert "Copyright" not in out

    def test_mdoc(self, render, man_page_source):
        """Test the mdoc output of the same page."""
        out = render(man_page_source, docname="ls", dialect="mdoc")

        assert ".Dd $Mdocdate: 2024-01-01 $\n.Dt LS 1\n.Os\n.Sh NAME\n" in out
        assert ".Nm ls\n.Op Fl a\n.Op Fl l\n.Op Fl -color Ar when\n.Ar file ...\n" in out
        assert ".Bl -bullet -offset indent\n.It\n" in out
        assert ".Bd -literal -offset indent\nls -la /tmp\n" in out
        assert ".Xr dir 1 ,\n.Xr vdir 1 .\n" in out


class TestGeneralDocument:
    """End-to-end conversion of a document with a table and nested lists."""

    def test_ms(self, render, report_source):
        """Test the complete ms output."""
        out = render(report_source, docname="report", dialect="ms")

        assert out == (
            "'\\\" t\n"
            ".\\# roff document\n"
            ".do mso s.tmac\n"
            ".TL\n"
            "report\n"
            ".LP\n"
            ".SH 1\n"
            "Quarterly Report\n"
            ".PP\n"
            "Sales grew in \\fIevery\\fP region; see the table.\n"
            ".PP\n"
            ".TS\n"
            "allbox;\n"
            "cB cB cB\n"
            "l r c.\n"
            "Region\tQ1\tQ2\n"
            "North\t10\t12\n"
            "South\t7\t9\n"
            ".TE\n"
            ".PP\n"
            ".IP 1. 4\n"
            "Hire staff\n"
            ".IP 2. 4\n"
            "Open the \\fBnew\\fP office\n"
            ".RS\n"
            ".IP \\(bu 4\n"
            "Berlin\n"
            ".IP \\(bu 4\n"
            "Madrid\n"
            ".RE\n"
            ".IP 3. 4\n"
            "Review budget\n"
            ".PP\n"
            "More at\n"
            "the wiki <https://wiki.example.com/report>.\n"
        )

    def test_mom(self, render, report_source):
        """Test list and heading macros in mom."""
        out = render(report_source, docname="report", dialect="mom")

        assert '.TITLE "report"\n' in out
        assert '.HEADING 1 "Quarterly Report"\n' in out
        assert ".LIST DIGIT\n.ITEM\nHire staff\n" in out
        assert ".LIST DASH\n.ITEM\nBerlin\n.ITEM\nMadrid\n.LIST OFF\n.ITEM\nReview budget\n.LIST OFF\n" in out
        assert ".RESET_LIST" not in out

    def test_mm(self, render, report_source):
        """Test list and heading macros in mm."""
        out = render(report_source, docname="report", dialect="mm")

        assert '.H 1 "Quarterly Report"\n' in out
        assert ".AL\n.LI 1.\nHire staff\n" in out
        assert ".BL\n.LI\nBerlin\n" in out


@pytest.mark.parametrize("dialect", list(Dialect))
def test_every_dialect_converts_both_documents(dialect, render, man_page_source, report_source):
    """Test that each dialect handles the fixture documents."""
    macro_file = get_backend(dialect).macro_file
    for source in (man_page_source, report_source):
        out = render(source, dialect=dialect)
        assert f".\\# roff document\n.do mso {macro_file}\n" in out
