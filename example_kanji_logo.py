#!/usr/bin/env python3
"""
🈁 jblock - Kanji Logo Example
==============================

Prints a gradient logo and optionally saves it as a PNG.

    python example_kanji_logo.py 日本語 --palette sunset --direction diagonal
    python example_kanji_logo.py HELLO --palette ocean --png hello.png
    python example_kanji_logo.py 世界 --blocks
"""

import argparse
import logging

from jblock_config import PALETTES, Direction, get_config
from jblock_render import (
    contains_japanese,
    render_logo,
    render_japanese_block,
    build_japanese_art,
    build_japanese_block,
    build_big_text,
)
from jblock_image import save_image


def main():
    parser = argparse.ArgumentParser(description='jblock gradient logo')
    parser.add_argument('text')
    parser.add_argument('--palette', default='rainbow',
                        help=f"preset ({', '.join(sorted(PALETTES))}) or comma-separated colors")
    parser.add_argument('--direction', default=Direction.VERTICAL.value,
                        choices=[d.value for d in Direction])
    parser.add_argument('--blocks', action='store_true',
                        help='compact per-character frames instead of font glyphs')
    parser.add_argument('--png', help='also save the logo to this image file')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if get_config().debug_mode else logging.WARNING)

    palette = args.palette if args.palette in PALETTES else args.palette.split(',')

    if args.blocks:
        print(render_japanese_block(args.text, palette, args.direction))
        canvas = build_japanese_block(args.text)
    else:
        print(render_logo(args.text, palette, args.direction))
        if contains_japanese(args.text):
            canvas = build_japanese_art(args.text)
        else:
            canvas = build_big_text(args.text)

    if args.png:
        output = save_image(canvas, args.png, palette, args.direction)
        print(f"\n✓ Saved {output}")


if __name__ == "__main__":
    main()
