#!/usr/bin/env python3
"""
🈁 jblock - Block Art Renderer
==============================

Turns short strings into large gradient-colored block art for the terminal.

Japanese text goes through the legacy font path: each character is
resolved to a JIS codepoint and drawn from the bundled double-byte font,
with hand-drawn placeholders for anything the font cannot supply. Other
text is handed to pyfiglet.

Module Interface
================
- contains_japanese(): detect hiragana, katakana and CJK ideographs
- render_japanese_text(): font/placeholder art, colored
- render_japanese_block(): compact per-character block frames, colored
- render_logo(): picks the right path for any text

Example Usage
=============
```python
from jblock_render import render_logo

print(render_logo("日本", ["#ff0000", "#0000ff"], "diagonal"))
print(render_logo("HELLO", "sunset"))
```
"""

import logging
from typing import Mapping, Optional, Union

import pyfiglet

from jblock_config import EMPTY_CHAR, Direction, get_rendering_config
from jblock_font import Glyph, GlyphSource, get_font_store
from jblock_resolve import resolve
from jblock_patterns import pattern_for
from jblock_compose import Canvas, compose, compose_blocks
from jblock_gradient import PaletteLike, colorize

logger = logging.getLogger('jblock_render')

JAPANESE_RANGES = (
    (0x3040, 0x309F),   # Hiragana
    (0x30A0, 0x30FF),   # Katakana
    (0x4E00, 0x9FFF),   # CJK Unified Ideographs
)

DEFAULT_FIGLET_FONT = 'block'
FALLBACK_FIGLET_FONT = 'standard'
DEFAULT_LOGO_PALETTE = 'rainbow'

DirectionLike = Union[Direction, str, None]


def contains_japanese(text: str) -> bool:
    """True if any character is hiragana, katakana or a CJK ideograph."""
    return any(
        start <= ord(char) <= end
        for char in text
        for start, end in JAPANESE_RANGES
    )


def _direction(direction: DirectionLike) -> Direction:
    if direction is None:
        return get_rendering_config().default_direction
    return Direction.parse(direction)


# ============================================================================
# JAPANESE FONT PATH
# ============================================================================

def glyph_for(char: str, font_store: Optional[Mapping] = None) -> Glyph:
    """Font glyph for ``char`` if it resolves, otherwise its placeholder."""
    if font_store is None:
        font_store = get_font_store()
    codepoint = resolve(char, font_store)
    if codepoint is not None:
        return font_store[codepoint]
    return pattern_for(char)


def build_japanese_art(text: str, font_store: Optional[Mapping] = None) -> Canvas:
    """Uncolored canvas for ``text`` using font glyphs and placeholders."""
    glyphs = [glyph_for(char, font_store) for char in text]
    if glyphs:
        from_font = sum(1 for glyph in glyphs if glyph.source is GlyphSource.FONT)
        logger.debug(f"{len(glyphs)} glyphs, {from_font} from font, "
                     f"{len(glyphs) - from_font} placeholders")
    return compose(glyphs)


def render_japanese_text(text: str, palette: PaletteLike,
                         direction: DirectionLike = Direction.VERTICAL,
                         font_store: Optional[Mapping] = None) -> str:
    """
    Render Japanese text as colored block art.

    Args:
        text: Text to render
        palette: Preset name or color stops
        direction: vertical (default), horizontal or diagonal
        font_store: Glyph source (defaults to the store loaded at startup)

    Returns:
        Multi-line colored block ready to print; empty for empty text
    """
    canvas = build_japanese_art(text, font_store)
    return '\n'.join(colorize(canvas, palette, _direction(direction)))


# ============================================================================
# BLOCK FRAME PATH
# ============================================================================

def build_japanese_block(text: str) -> Canvas:
    """Uncolored per-character block frames for ``text``."""
    return compose_blocks(text)


def render_japanese_block(text: str, palette: PaletteLike,
                          direction: DirectionLike = Direction.VERTICAL) -> str:
    """Per-character block frames, colored."""
    return '\n'.join(colorize(build_japanese_block(text), palette, _direction(direction)))


# ============================================================================
# BIG TEXT PATH
# ============================================================================

def build_big_text(text: str, font: str = DEFAULT_FIGLET_FONT) -> Canvas:
    """Large-font canvas from pyfiglet, rows padded to equal length."""
    try:
        figlet = pyfiglet.Figlet(font=font)
    except pyfiglet.FontNotFound:
        logger.warning(f"Figlet font {font!r} not found - using {FALLBACK_FIGLET_FONT}")
        figlet = pyfiglet.Figlet(font=FALLBACK_FIGLET_FONT)

    rows = figlet.renderText(text).rstrip('\n').split('\n')
    width = max((len(row) for row in rows), default=0)
    return [row.ljust(width, EMPTY_CHAR) for row in rows]


def render_logo(text: str, palette: Optional[PaletteLike] = None,
                direction: DirectionLike = None,
                font: str = DEFAULT_FIGLET_FONT) -> str:
    """
    Render any text as a colored logo.

    Japanese text uses the legacy font path; everything else is drawn with
    the figlet ``font``. Without a palette the rainbow preset is used.
    """
    if not palette:
        palette = DEFAULT_LOGO_PALETTE

    if contains_japanese(text):
        return render_japanese_text(text, palette, direction)

    canvas = build_big_text(text, font) if text else []
    return '\n'.join(colorize(canvas, palette, _direction(direction)))
