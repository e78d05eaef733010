"""Font resources bundled with jblock; installed alongside the modules."""

from pathlib import Path

FONTS_DIR = Path(__file__).resolve().parent
