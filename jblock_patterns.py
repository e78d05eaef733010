#!/usr/bin/env python3
"""
🈁 jblock - Placeholder Pattern Library
=======================================

Hand-drawn 10-row glyphs for common kana and kanji, used whenever a
character cannot be drawn from the legacy font. Characters without a
drawing get a generic bordered block with the character itself in the
middle row. ``pattern_for`` is total and deterministic.
"""

from typing import Dict, Tuple

from jblock_config import INK_CHAR, EMPTY_CHAR, PLACEHOLDER_HEIGHT, PLACEHOLDER_WIDTH
from jblock_font import Glyph, GlyphSource

_INNER_WIDTH = PLACEHOLDER_WIDTH - 2

_CAP = EMPTY_CHAR * 2 + INK_CHAR * (_INNER_WIDTH - 2) + EMPTY_CHAR * 2
_SHOULDER = EMPTY_CHAR + INK_CHAR + EMPTY_CHAR * (_INNER_WIDTH - 2) + INK_CHAR + EMPTY_CHAR


def _framed(*inner: str) -> Tuple[str, ...]:
    """Wrap six interior rows in the rounded placeholder frame."""
    body = tuple(INK_CHAR + row + INK_CHAR for row in inner)
    return (_CAP, _SHOULDER) + body + (_SHOULDER, _CAP)


PATTERNS: Dict[str, Tuple[str, ...]] = {
    ' ': (EMPTY_CHAR * (PLACEHOLDER_WIDTH // 2),) * PLACEHOLDER_HEIGHT,
    'あ': _framed(
        '   █      ',
        '████████  ',
        '   █  █   ',
        '  ███████ ',
        ' █ █ █  █ ',
        '  █  █ █  ',
    ),
    'い': _framed(
        ' █        ',
        ' █      █ ',
        ' █       █',
        ' █       █',
        ' █  █     ',
        '  ██      ',
    ),
    'う': _framed(
        '   ████   ',
        '          ',
        ' ███████  ',
        '       █  ',
        '      █   ',
        '   ███    ',
    ),
    'え': _framed(
        '   ████   ',
        '          ',
        ' ███████  ',
        '    ██    ',
        '  ██  █   ',
        ' █     ██ ',
    ),
    'お': _framed(
        '  █    █  ',
        '█████   █ ',
        '  █       ',
        '  █ ████  ',
        ' ██     █ ',
        '█ █  ███  ',
    ),
    'こ': _framed(
        '  ██████  ',
        '       █  ',
        '          ',
        '          ',
        ' █        ',
        '  ███████ ',
    ),
    'ん': _framed(
        '    █     ',
        '   █      ',
        '  █       ',
        '  ███     ',
        ' █   █  █ ',
        '█     ██  ',
    ),
    'に': _framed(
        '█  █████  ',
        '█         ',
        '█         ',
        '█         ',
        '█  █      ',
        '█   █████ ',
    ),
    'ち': _framed(
        '   █      ',
        '████████  ',
        '   █      ',
        '  █ ███   ',
        '  ██   █  ',
        '     ██   ',
    ),
    'は': _framed(
        '█   █     ',
        '█ ██████  ',
        '█   █     ',
        '█   █     ',
        '█  ████   ',
        '█ █ █  ██ ',
    ),
    '世': _framed(
        ' █ █  █   ',
        '██████████',
        ' █ █  █   ',
        ' █ ████   ',
        ' █        ',
        ' ████████ ',
    ),
    '界': _framed(
        ' ████████ ',
        ' █  ██  █ ',
        ' ████████ ',
        '  ██  ██  ',
        ' █ █  █ █ ',
        '   █  █   ',
    ),
    '日': _framed(
        '  ██████  ',
        '  █    █  ',
        '  ██████  ',
        '  █    █  ',
        '  █    █  ',
        '  ██████  ',
    ),
    '本': _framed(
        '    ██    ',
        '██████████',
        '   ████   ',
        '  █ ██ █  ',
        ' ████████ ',
        '    ██    ',
    ),
    '語': _framed(
        '██  █████ ',
        '   ██ █   ',
        '██  █████ ',
        '     █  █ ',
        '██ ██████ ',
        '█ ██    █ ',
    ),
    'の': _framed(
        '   ████   ',
        '  █ █  █  ',
        ' █  █   █ ',
        ' █  █   █ ',
        ' █ █   █  ',
        '  █  ██   ',
    ),
    'テ': _framed(
        '  ██████  ',
        '          ',
        '██████████',
        '    █     ',
        '   █      ',
        ' ██       ',
    ),
    'ス': _framed(
        ' ███████  ',
        '       █  ',
        '      █   ',
        '    ██ █  ',
        '  ██    █ ',
        '██       █',
    ),
    'ト': _framed(
        '   █      ',
        '   █      ',
        '   ███    ',
        '   █  ██  ',
        '   █      ',
        '   █      ',
    ),
}


def generic_pattern(char: str) -> Tuple[str, ...]:
    """Bordered block with ``char`` embedded in its middle row."""
    ring = EMPTY_CHAR * 2 + INK_CHAR * 4 + EMPTY_CHAR * 2
    side = EMPTY_CHAR + INK_CHAR + EMPTY_CHAR * 4 + INK_CHAR + EMPTY_CHAR
    centre = EMPTY_CHAR + INK_CHAR + EMPTY_CHAR + char + EMPTY_CHAR * 2 + INK_CHAR + EMPTY_CHAR
    return _framed(
        EMPTY_CHAR + ring + EMPTY_CHAR,
        EMPTY_CHAR + side + EMPTY_CHAR,
        EMPTY_CHAR + centre + EMPTY_CHAR,
        EMPTY_CHAR + side + EMPTY_CHAR,
        EMPTY_CHAR + ring + EMPTY_CHAR,
        EMPTY_CHAR * _INNER_WIDTH,
    )


def pattern_for(char: str) -> Glyph:
    """Placeholder glyph for ``char``; always 10 rows."""
    rows = PATTERNS.get(char)
    if rows is None:
        rows = generic_pattern(char)
    return Glyph(rows, GlyphSource.PLACEHOLDER)
