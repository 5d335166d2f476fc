"""
Unit tests for the conversion engine.
"""

import io

from md2roff import ConversionOptions, Md2Roff, convert


class TestMd2Roff:
    """Tests for the Md2Roff engine."""

    def test_convert_file_to_stream(self, man_page_file, today):
        """Test converting a file into a given stream."""
        out = io.StringIO()
        Md2Roff(today=today).convert(str(man_page_file), stream=out)

        assert ".TH LS 1 2024-01-01\n" in out.getvalue()

    def test_convert_text_to_stdout(self, capsys, today):
        """Test that output goes to standard output by default."""
        Md2Roff(ConversionOptions(dialect="ms"), today=today).convert_text("hi", docname="note")
        assert capsys.readouterr().out.endswith(".TL\nnote\n.LP\nhi\n")

    def test_missing_final_newline(self, today):
        """Test that the last line is converted without a newline."""
        assert convert("last **line**", today=today).endswith("last \\fBline\\fP\n")

    def test_fresh_state_per_document(self, today):
        """Test that one document's open lists do not leak into the next."""
        engine = Md2Roff(ConversionOptions(dialect="mm"), today=today)
        first, second = io.StringIO(), io.StringIO()
        engine.convert_text("- a\n", stream=first)
        engine.convert_text("b\n", stream=second)

        assert first.getvalue().endswith(".BL\n.LI\na\n.LE\n")
        assert second.getvalue().endswith("m.tmac\nb\n")

    def test_supported_dialects(self):
        """Test the dialect listing."""
        dialects = Md2Roff.supported_dialects()
        assert dialects == {
            "man": "man.tmac",
            "mdoc": "mdoc.tmac",
            "mm": "m.tmac",
            "mom": "mom.tmac",
            "ms": "s.tmac",
        }

    def test_default_options(self):
        """Test that an engine without options targets man."""
        assert Md2Roff().options.dialect.value == "man"
