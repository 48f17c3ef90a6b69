"""Render single characters of the bitmap fonts as star pictures."""

from __future__ import annotations

from .fonts import FONT_5X7, FONT_8X12, FONT_11X16, Font

INK = "*"
PAPER = " "


def _render(font: Font, char: str) -> str:
    """Draw each strip of the glyph as one text line, most significant bit first.

    The picture is followed by an empty line.
    """
    strips = font.glyph(char)
    lines = (
        "".join(
            INK if strip & (1 << bit) else PAPER
            for bit in reversed(range(font.bits))
        )
        for strip in strips
    )
    return "".join(f"{line}\n" for line in lines) + "\n"


def render_char_5x7(char: str) -> str:
    """Return ``char`` drawn with the 5x7 font, one column of the glyph per line."""
    return _render(FONT_5X7, char)


def render_char_11x16(char: str) -> str:
    """Return ``char`` drawn with the 11x16 font, one column of the glyph per line."""
    return _render(FONT_11X16, char)


def render_char_8x12(char: str) -> str:
    """Return ``char`` drawn with the 8x12 font, one row of the glyph per line."""
    return _render(FONT_8X12, char)