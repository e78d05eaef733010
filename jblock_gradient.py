#!/usr/bin/env python3
"""
🈁 jblock - Directional Colorizer
=================================

Gradient Coloring
=================
Colors a composed canvas with a multi-stop gradient. Stops are blended
linearly in RGB; output uses 24-bit ANSI foreground sequences.

Directions
==========
- vertical: one gradient from the first non-blank row to the last, each row
  a single color
- horizontal: the same left-to-right gradient on every row
- diagonal: the horizontal gradient, with the palette rotated further for
  each row down the canvas

Whitespace cells are never colored and whitespace-only rows are returned
unchanged. A single-stop palette gives flat coloring in every direction.

Module Interface
================
- gradient_colors(): sample a palette into N colors
- color_grid(): per-cell RGB for a canvas (shared with image export)
- colorize(): colored canvas rows
- colorize_line() / colorize_block(): single-line and multi-line helpers
- strip_ansi(): remove color sequences
"""

import re
import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from jblock_config import RGBColor, RESET, Direction, resolve_palette, rgb_to_ansi

logger = logging.getLogger('jblock_gradient')

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')

# Per-cell colors for one row; None marks an uncolored cell
RowColors = List[Optional[RGBColor]]

PaletteLike = Union[str, Sequence]


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences."""
    return ANSI_ESCAPE.sub('', text)


def is_blank(row: str) -> bool:
    return not row.strip()


# ============================================================================
# GRADIENT MATH
# ============================================================================

def gradient_colors(stops: Sequence[RGBColor], count: int) -> List[RGBColor]:
    """
    Sample ``count`` evenly spaced colors from a multi-stop gradient.

    The first sample is the first stop and the last sample is the last stop.
    """
    if count <= 0 or not stops:
        return []
    if len(stops) == 1:
        return [tuple(stops[0])] * count

    stop_array = np.asarray(stops, dtype=float)
    stop_positions = np.linspace(0.0, 1.0, len(stops))
    samples = np.linspace(0.0, 1.0, count) if count > 1 else np.zeros(1)

    channels = [np.interp(samples, stop_positions, stop_array[:, c]) for c in range(3)]
    rgb = np.rint(np.stack(channels, axis=1)).astype(np.uint8)
    return [(int(r), int(g), int(b)) for r, g, b in rgb]


def rotate_palette(stops: Sequence[RGBColor], row: int, total_rows: int) -> List[RGBColor]:
    """Palette rotated by floor(row / total_rows * len(stops)) positions."""
    stops = list(stops)
    if not stops or total_rows <= 0:
        return stops
    shift = (row * len(stops) // total_rows) % len(stops)
    return stops[shift:] + stops[:shift]


def line_colors(line: str, stops: Sequence[RGBColor]) -> RowColors:
    """
    Left-to-right gradient over the non-whitespace cells of ``line``.

    Whitespace cells do not consume a color.
    """
    ink_count = sum(1 for char in line if not char.isspace())
    colors = iter(gradient_colors(stops, max(ink_count, len(stops))))
    return [None if char.isspace() else next(colors) for char in line]


def color_grid(canvas: Sequence[str], palette: PaletteLike,
               direction: Union[Direction, str, None] = Direction.VERTICAL) -> List[Optional[RowColors]]:
    """
    Per-cell colors for every row of ``canvas``; None for blank rows.
    """
    stops = resolve_palette(palette)
    direction = Direction.parse(direction)
    grid: List[Optional[RowColors]] = [None] * len(canvas)

    if direction is Direction.VERTICAL:
        filled = [i for i, row in enumerate(canvas) if not is_blank(row)]
        if not filled:
            return grid
        first, last = filled[0], filled[-1]
        row_colors = gradient_colors(stops, last - first + 1)
        for i in filled:
            color = row_colors[i - first]
            grid[i] = [None if char.isspace() else color for char in canvas[i]]

    elif direction is Direction.HORIZONTAL:
        for i, row in enumerate(canvas):
            if not is_blank(row):
                grid[i] = line_colors(row, stops)

    else:
        total = len(canvas)
        for i, row in enumerate(canvas):
            if not is_blank(row):
                grid[i] = line_colors(row, rotate_palette(stops, i, total))

    return grid


# ============================================================================
# ANSI OUTPUT
# ============================================================================

def format_row(row: str, colors: Optional[RowColors]) -> str:
    """Apply per-cell colors, emitting a sequence only when the color changes."""
    if colors is None:
        return row

    parts = []
    current = None
    for char, color in zip(row, colors):
        if color is not None and color != current:
            parts.append(rgb_to_ansi(color))
            current = color
        parts.append(char)

    if current is not None:
        parts.append(RESET)
    return ''.join(parts)


def colorize(canvas: Sequence[str], palette: PaletteLike,
             direction: Union[Direction, str, None] = Direction.VERTICAL) -> List[str]:
    """
    Color a canvas.

    Args:
        canvas: Rows of block art
        palette: Preset name or sequence of color stops
        direction: vertical, horizontal or diagonal

    Returns:
        Colored rows; blank rows are passed through unchanged
    """
    grid = color_grid(canvas, palette, direction)
    return [format_row(row, colors) for row, colors in zip(canvas, grid)]


def colorize_line(line: str, palette: PaletteLike) -> str:
    """Left-to-right gradient over a single line."""
    return colorize([line], palette, Direction.HORIZONTAL)[0]


def colorize_block(block: str, palette: PaletteLike) -> str:
    """Top-to-bottom gradient over a multi-line block."""
    return '\n'.join(colorize(block.split('\n'), palette, Direction.VERTICAL))
