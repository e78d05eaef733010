#!/usr/bin/env python3
"""
🈁 jblock - Codepoint Resolver
==============================

Unicode -> Legacy Codepoint Resolution
======================================
Maps one Unicode character to a legacy double-byte codepoint that the
loaded font can draw. Conversions are tried in a fixed order and the first
codepoint present in the font store wins:

1. ISO-2022-JP: escape sequences dropped, the two payload bytes combined
2. Shift_JIS: the two bytes combined
3. Fallback tables for the same two targets: JIS X 0208 read from the
   EUC-JIS-2004 table (high bits cleared) and Shift_JIS read from the
   Microsoft CP932 table, which covers vendor characters the strict codecs
   reject

A conversion that succeeds but lands on a codepoint the font does not
contain is a miss, and resolution moves on. Conversion errors are misses
for that scheme only. ``resolve`` never raises.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Mapping, Optional

logger = logging.getLogger('jblock_resolve')

# Designations that introduce a two-byte JIS X 0208 payload
JIS_X0208_DESIGNATIONS = (b"\x1b$B", b"\x1b$@")


@dataclass(frozen=True)
class CodepointCandidate:
    scheme: str
    codepoint: str


def _big_endian(high: int, low: int) -> str:
    return f"{(high << 8) | low:04x}"


def _iso2022_jp(char: str) -> Optional[str]:
    encoded = char.encode('iso2022_jp')
    # ESC $ B <hi> <lo> ESC ( B; single-byte JIS-Roman output is not a payload
    if len(encoded) >= 5 and encoded[:3] in JIS_X0208_DESIGNATIONS:
        return _big_endian(encoded[3], encoded[4])
    return None


def _shift_jis(char: str) -> Optional[str]:
    encoded = char.encode('shift_jis')
    if len(encoded) >= 2:
        return _big_endian(encoded[0], encoded[1])
    return None


def _jisx0208_table(char: str) -> Optional[str]:
    encoded = char.encode('euc_jis_2004')
    if len(encoded) >= 2:
        return _big_endian(encoded[0] & 0x7f, encoded[1] & 0x7f)
    return None


def _cp932_table(char: str) -> Optional[str]:
    encoded = char.encode('cp932')
    if len(encoded) >= 2:
        return _big_endian(encoded[0], encoded[1])
    return None


@dataclass(frozen=True)
class ResolverStrategy:
    """One conversion scheme in the resolution chain."""
    scheme: str
    convert: Callable[[str], Optional[str]]

    def candidate(self, char: str) -> Optional[CodepointCandidate]:
        """Convert without consulting the font; errors count as a miss."""
        try:
            codepoint = self.convert(char)
        except (UnicodeError, LookupError) as e:
            logger.debug(f"{self.scheme}: cannot convert {char!r}: {e}")
            return None
        if codepoint is None:
            return None
        return CodepointCandidate(self.scheme, codepoint)

    def __call__(self, char: str, font_store: Mapping) -> Optional[CodepointCandidate]:
        found = self.candidate(char)
        if found is None:
            return None
        logger.debug(f"{self.scheme}: char {char!r} -> hex {found.codepoint}")
        if found.codepoint in font_store:
            return found
        return None


RESOLVER_CHAIN: List[ResolverStrategy] = [
    ResolverStrategy('iso2022_jp', _iso2022_jp),
    ResolverStrategy('shift_jis', _shift_jis),
    ResolverStrategy('jisx0208', _jisx0208_table),
    ResolverStrategy('cp932', _cp932_table),
]


def iter_candidates(char: str) -> Iterator[CodepointCandidate]:
    """Every conversion of ``char`` in chain order, hits and misses alike."""
    for strategy in RESOLVER_CHAIN:
        found = strategy.candidate(char)
        if found is not None:
            yield found


def resolve_candidate(char: str, font_store: Mapping) -> Optional[CodepointCandidate]:
    """First candidate whose codepoint the font store contains."""
    if not font_store:
        return None
    for strategy in RESOLVER_CHAIN:
        found = strategy(char, font_store)
        if found is not None:
            return found
    logger.debug(f"No automatic conversion found for character: {char!r}")
    return None


def resolve(char: str, font_store: Mapping) -> Optional[str]:
    """
    Legacy codepoint for ``char`` present in ``font_store``, or None.

    Args:
        char: A single Unicode character
        font_store: Mapping keyed by lowercase 4-digit hex codepoints

    Returns:
        The codepoint as a lowercase 4-digit hex string, or None when
        unresolved
    """
    found = resolve_candidate(char, font_store)
    return found.codepoint if found else None
