"""Tests for digits.py."""

from pomotui.digits import GLYPH_ROWS, GLYPH_WIDTH, format_time, render_big_time


class TestFormatTime:
    """Test MM:SS formatting."""

    def test_format_time(self):
        assert format_time(25 * 60) == "25:00"
        assert format_time(65) == "01:05"
        assert format_time(0) == "00:00"

    def test_long_durations(self):
        """Minutes past 99 keep all their digits."""
        assert format_time(120 * 60 + 5) == "120:05"


class TestRenderBigTime:
    """Test block glyph rendering."""

    def test_shape(self):
        """Five rows, five glyphs wide, all the same width."""
        lines = render_big_time(25 * 60).split("\n")
        assert len(lines) == GLYPH_ROWS
        assert all(len(line) == 5 * GLYPH_WIDTH for line in lines)

    def test_colon_column(self):
        """The colon dots sit on rows two and four."""
        lines = render_big_time(0).split("\n")
        colon = [line[2 * GLYPH_WIDTH:3 * GLYPH_WIDTH] for line in lines]
        assert [("██" in row) for row in colon] == [False, True, False, True, False]

    def test_digits_differ(self):
        assert render_big_time(60) != render_big_time(120)
