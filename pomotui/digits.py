"""Block-glyph rendering of MM:SS countdowns."""

from typing import Dict, List

GLYPH_ROWS = 5
GLYPH_WIDTH = 9

# Five rows per glyph, each nine columns wide including a trailing gap.
GLYPHS: Dict[str, List[str]] = {
    "0": [" ██████  ", "██    ██ ", "██    ██ ", "██    ██ ", " ██████  "],
    "1": ["   ██    ", " ████    ", "   ██    ", "   ██    ", " ██████  "],
    "2": [" ██████  ", "      ██ ", " ██████  ", "██       ", "████████ "],
    "3": [" ██████  ", "      ██ ", " ██████  ", "      ██ ", " ██████  "],
    "4": ["██    ██ ", "██    ██ ", "████████ ", "      ██ ", "      ██ "],
    "5": ["████████ ", "██       ", "███████  ", "      ██ ", "███████  "],
    "6": [" ██████  ", "██       ", "███████  ", "██    ██ ", " ██████  "],
    "7": ["████████ ", "      ██ ", "    ██   ", "  ██     ", "██       "],
    "8": [" ██████  ", "██    ██ ", " ██████  ", "██    ██ ", " ██████  "],
    "9": [" ██████  ", "██    ██ ", " ███████ ", "      ██ ", " ██████  "],
    ":": ["         ", "   ██    ", "         ", "   ██    ", "         "],
}
BLANK = [" " * GLYPH_WIDTH] * GLYPH_ROWS


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS (minutes may exceed two digits)."""
    mins, secs = divmod(max(seconds, 0), 60)
    return f"{mins:02d}:{secs:02d}"


def render_big_time(seconds: int) -> str:
    """Render a countdown as rows of block glyphs."""
    glyphs = [GLYPHS.get(char, BLANK) for char in format_time(seconds)]
    return "\n".join(
        "".join(glyph[row] for glyph in glyphs)
        for row in range(GLYPH_ROWS)
    )
