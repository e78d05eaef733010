#!/usr/bin/env python3
"""
🈁 jblock - Glyph Compositor
============================

Joins glyphs left to right into one multi-line canvas.

Two layouts are kept apart on purpose, since each has its own sizing rules:

- Uniform: font or placeholder glyphs side by side, one blank column
  between them, shorter glyphs padded with empty rows at the bottom.
- Blocks: every character becomes a 5-row ink frame whose width is
  ``max(display_width * 3, 6)``, with the character itself in the middle
  row and two blank columns between frames.
"""

from typing import Callable, Iterable, List, Sequence

from jblock_config import (
    INK_CHAR,
    EMPTY_CHAR,
    GLYPH_SEPARATOR,
    BLOCK_SEPARATOR,
    BLOCK_ROWS,
    BLOCK_WIDTH_SCALE,
    BLOCK_MIN_WIDTH,
)
from jblock_font import Glyph, GlyphSource
from jblock_width import display_width

# Equal-length rows, top to bottom
Canvas = List[str]


def _join(glyphs: Sequence[Glyph], separator: str) -> Canvas:
    if not glyphs:
        return []

    height = max(glyph.height for glyph in glyphs)
    canvas = []
    for row in range(height):
        parts = []
        for glyph in glyphs:
            if row < glyph.height:
                parts.append(glyph.rows[row])
            else:
                parts.append(EMPTY_CHAR * glyph.width)
        canvas.append(separator.join(parts))
    return canvas


def compose(glyphs: Sequence[Glyph]) -> Canvas:
    """
    Uniform composition.

    Height is the tallest glyph; width is the sum of glyph widths plus one
    separator column between neighbours.
    """
    return _join(glyphs, GLYPH_SEPARATOR)


def block_width(char_width: int) -> int:
    """Frame width for a character ``char_width`` columns wide."""
    return max(char_width * BLOCK_WIDTH_SCALE, BLOCK_MIN_WIDTH)


def block_glyph(char: str, char_width: int) -> Glyph:
    """
    One character's block-mode frame.

    Rows are equal in display columns; the middle row is shorter in code
    points when the character is wider than one column.
    """
    width = block_width(char_width)
    middle = BLOCK_ROWS // 2

    rows = []
    for row in range(BLOCK_ROWS):
        if row == 0 or row == BLOCK_ROWS - 1:
            rows.append(INK_CHAR * width)
        elif row == middle:
            padding = max(0, width - char_width)
            left = padding // 2
            right = padding - left
            rows.append(INK_CHAR * left + char + INK_CHAR * right)
        else:
            rows.append(INK_CHAR + EMPTY_CHAR * (width - 2) + INK_CHAR)
    return Glyph(tuple(rows), GlyphSource.BLOCK)


def compose_blocks(chars: Iterable[str],
                   width_fn: Callable[[str], int] = display_width) -> Canvas:
    """Block-mode composition of each character in ``chars``."""
    glyphs = [block_glyph(char, width_fn(char) or 1) for char in chars]
    return _join(glyphs, BLOCK_SEPARATOR)
