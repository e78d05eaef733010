#!/usr/bin/env python3
"""
🈁 jblock - Glyph Font Store
============================

Legacy Double-Byte Font Loading
===============================
Parses a figlet-style double-byte font (jiskan16.flf and friends) into a
read-only mapping from legacy codepoint to glyph.

Resource Format
===============
Header and comment lines come first and are ignored. The character table
starts at the first line shaped like ``<decimal> <hex>``::

    18044 467c
    ################$@
    #              #$@
    ...
    ################$@@

Every glyph row ends with ``$@``; the last row of an entry ends with
``$@@``. Rows carrying neither marker are skipped. ``#`` marks an ink cell
and is converted to the canonical block character.

Loading is best-effort: a missing or unreadable resource yields an empty
store, never an exception.

Module Interface
================
- Glyph / GlyphSource: immutable glyph value
- FontStore: read-only codepoint -> Glyph mapping
- load(): parse resource bytes
- load_font_file(): parse a resource on disk
- get_font_store(): process-wide store built at import
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from jblock_config import (
    INK_CHAR,
    EMPTY_CHAR,
    FONT_INK_MARKER,
    FONT_END_MARKER,
    FONT_ROW_MARKER,
    get_font_config,
)

logger = logging.getLogger('jblock_font')

# Start of a character-table entry: decimal code, space, hex code
ENTRY_HEADER = re.compile(r'^(\d+) ([0-9a-fA-F]+)$')


# ============================================================================
# GLYPH
# ============================================================================

class GlyphSource(Enum):
    FONT = "font"
    PLACEHOLDER = "placeholder"
    BLOCK = "block"


@dataclass(frozen=True)
class Glyph:
    """One character's art as equal-length text rows."""
    rows: Tuple[str, ...]
    source: GlyphSource = GlyphSource.FONT

    @classmethod
    def from_rows(cls, rows: Sequence[str], source: GlyphSource = GlyphSource.FONT) -> "Glyph":
        """Build a glyph, right-padding rows to the widest one."""
        width = max((len(row) for row in rows), default=0)
        return cls(tuple(row.ljust(width, EMPTY_CHAR) for row in rows), source)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __str__(self) -> str:
        return '\n'.join(self.rows)


# ============================================================================
# FONT STORE
# ============================================================================

def normalize_codepoint(code: Union[str, int]) -> str:
    """Lowercase, zero-padded 4-digit hex form of a legacy codepoint."""
    if isinstance(code, int):
        return f"{code:04x}"
    return code.strip().lower().zfill(4)


class FontStore(Mapping):
    """
    Read-only mapping from legacy codepoint to Glyph.

    Keys are compared case-insensitively and zero-padded, so ``"467C"``,
    ``"467c"`` and ``0x467c`` all find the same glyph.
    """

    def __init__(self, glyphs: Optional[Mapping[str, Glyph]] = None):
        normalized = {normalize_codepoint(k): v for k, v in (glyphs or {}).items()}
        self._glyphs = MappingProxyType(normalized)

    def __getitem__(self, code: Union[str, int]) -> Glyph:
        return self._glyphs[normalize_codepoint(code)]

    def __contains__(self, code) -> bool:
        if not isinstance(code, (str, int)):
            return False
        return normalize_codepoint(code) in self._glyphs

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self) -> str:
        return f"FontStore({len(self)} glyphs)"


EMPTY_STORE = FontStore()


def _strip_row(line: str, marker: str) -> str:
    row = line.rstrip('\r\n').replace(marker, '', 1)
    return row.replace(FONT_INK_MARKER, INK_CHAR)


def parse_font_text(text: str) -> Dict[str, Glyph]:
    """
    Parse the character table of a legacy font.

    Malformed lines are skipped. An entry header met before the previous
    entry's end marker closes that entry and starts a new one.
    """
    lines = text.split('\n')
    glyphs: Dict[str, Glyph] = {}
    i = 0

    # Skip header and comments
    while i < len(lines) and not ENTRY_HEADER.match(lines[i].strip()):
        i += 1

    while i < len(lines):
        match = ENTRY_HEADER.match(lines[i].strip())
        if not match:
            i += 1
            continue

        # Decimal code is informational; the hex code is the key
        hex_code = normalize_codepoint(match.group(2))
        rows: List[str] = []
        i += 1

        while i < len(lines):
            line = lines[i]
            if '@@' in line:
                rows.append(_strip_row(line, FONT_END_MARKER).replace('@@', '', 1))
                i += 1
                break
            if ENTRY_HEADER.match(line.strip()):
                logger.debug(f"Entry {hex_code} has no end marker")
                break
            if FONT_ROW_MARKER in line:
                rows.append(_strip_row(line, FONT_ROW_MARKER))
            i += 1

        if rows:
            glyphs[hex_code] = Glyph.from_rows(rows, GlyphSource.FONT)

    return glyphs


def load(resource: Optional[bytes], encoding: str = "utf-8") -> FontStore:
    """
    Build a FontStore from raw resource bytes.

    Fails soft: None, undecodable or unparseable data gives an empty store.
    """
    if not resource:
        return EMPTY_STORE
    try:
        text = resource.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning(f"Font resource could not be decoded: {e}")
        return EMPTY_STORE
    return FontStore(parse_font_text(text))


def load_font_file(path: Union[str, Path], encoding: str = "utf-8") -> FontStore:
    """Load a font resource from disk; a missing file gives an empty store."""
    path = Path(path)
    try:
        resource = path.read_bytes()
    except OSError as e:
        logger.warning(f"Font loading failed for {path}: {e}")
        return EMPTY_STORE

    store = load(resource, encoding)
    if store:
        logger.info(f"Loaded {len(store)} glyphs from {path.name}")
    else:
        logger.warning(f"No glyphs found in {path}")
    return store


# ============================================================================
# PROCESS-WIDE STORE
# ============================================================================

def _load_default_store() -> FontStore:
    font_config = get_font_config()
    return load_font_file(font_config.font_path, font_config.encoding)

# Built once at import; read-only afterwards
_font_store = _load_default_store()


def get_font_store() -> FontStore:
    """The font store loaded from the configured resource at startup."""
    return _font_store
