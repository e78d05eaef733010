#!/usr/bin/env python3
"""
🈁 jblock - Image Export
========================

Rasterizes a canvas into a PNG-ready image. Every non-whitespace cell is
filled as a solid rectangle in the same color the terminal output would
give it, so the picture matches the ANSI rendering cell for cell.

Example Usage
=============
```python
from jblock_render import build_japanese_art
from jblock_image import save_image

save_image(build_japanese_art("日本"), "nihon.png", "sunset", "diagonal")
```
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image

from jblock_config import RGBColor, Direction, get_rendering_config
from jblock_gradient import PaletteLike, color_grid

logger = logging.getLogger('jblock_image')


def render_to_image(canvas: Sequence[str], palette: PaletteLike,
                    direction: Union[Direction, str, None] = Direction.VERTICAL,
                    cell_width: Optional[int] = None,
                    cell_height: Optional[int] = None,
                    background: Optional[RGBColor] = None) -> Image.Image:
    """
    Draw ``canvas`` as an RGB image.

    Args:
        canvas: Rows of block art (uncolored)
        palette: Preset name or color stops
        direction: Gradient direction
        cell_width: Pixels per column (config default if None)
        cell_height: Pixels per row (config default if None)
        background: Fill for empty cells (config default if None)

    Returns:
        PIL image of size (columns * cell_width, rows * cell_height); an
        empty canvas gives a single background cell
    """
    rendering = get_rendering_config()
    cell_width = cell_width or rendering.cell_width
    cell_height = cell_height or rendering.cell_height
    background = background or rendering.background

    columns = max((len(row) for row in canvas), default=0)
    rows = len(canvas)

    buffer = np.full((max(rows, 1) * cell_height, max(columns, 1) * cell_width, 3),
                     background, dtype=np.uint8)

    grid = color_grid(canvas, palette, direction)
    for y, row_colors in enumerate(grid):
        if row_colors is None:
            continue
        top = y * cell_height
        for x, color in enumerate(row_colors):
            if color is None:
                continue
            left = x * cell_width
            buffer[top:top + cell_height, left:left + cell_width] = color

    return Image.fromarray(buffer)


def save_image(canvas: Sequence[str], path: Union[str, Path], palette: PaletteLike,
               direction: Union[Direction, str, None] = Direction.VERTICAL,
               **kwargs) -> Path:
    """Render ``canvas`` and save it; the format follows the file suffix."""
    path = Path(path)
    image = render_to_image(canvas, palette, direction, **kwargs)
    image.save(path)
    logger.info(f"Saved {image.width}x{image.height} image to {path}")
    return path
