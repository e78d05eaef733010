#!/usr/bin/env python3
"""
🈁 jblock - Width Calculation Module
====================================

Visual Width Calculation System
================================
Terminal column widths for the characters being turned into block art.
Block mode sizes every character's block from its display width, so wide
(CJK) characters and narrow (ASCII) characters get blocks that line up.

Core Features
=============
- Unicode-aware width calculation via wcwidth (CJK, emoji, combining marks)
- LRU caching sized from configuration, guarded by a lock
- Control and zero-width characters never measure below one column
  when asked for a per-character width

Module Interface
================
- WidthCalculator: cached width lookups
- get_width(): Width of a whole string
- display_width(): Width of a single character, minimum 1

Example Usage
=============
```python
from jblock_width import get_width, display_width

get_width("Hello")      # 5
get_width("日本")        # 4
display_width("日")      # 2
display_width("\\u0301") # 1 (combining mark, clamped)
```
"""

import threading
import logging
from typing import Optional
from collections import OrderedDict

from wcwidth import wcwidth, wcswidth

from jblock_config import get_cache_config, register_config_callback

# Configure logging
logger = logging.getLogger('jblock_width')


class WidthCalculator:
    """
    Text width calculator with an LRU cache.

    Cache reads, writes and resizes all happen under one lock.
    """

    def __init__(self,
                 cache_size: Optional[int] = None,
                 enable_cache: Optional[bool] = None):
        """
        Initialize width calculator.

        Args:
            cache_size: Maximum number of cached strings (uses config if None)
            enable_cache: Whether to enable string caching (uses config if None)
        """
        cache_config = get_cache_config()
        if cache_size is None:
            cache_size = cache_config.width_cache_size
        if enable_cache is None:
            enable_cache = cache_config.enable_caching

        self._string_cache = OrderedDict()
        self._cache_size = cache_size
        self._cache_enabled = enable_cache
        self._lock = threading.Lock()

        logger.debug(f"WidthCalculator initialized with cache_size={cache_size}, "
                     f"cache_enabled={enable_cache}")

    def get_width(self, text: str) -> int:
        """
        Get visual width of text in terminal columns.

        Args:
            text: Text to measure

        Returns:
            Visual width in columns (0 for empty/control-only text)
        """
        if not text:
            return 0

        cached = self._get_cached(text)
        if cached is not None:
            return cached

        width = self._calculate_width(text)
        self._cache_result(text, width)
        return width

    def __len__(self) -> int:
        """Number of cached strings."""
        with self._lock:
            return len(self._string_cache)

    def _get_cached(self, text: str) -> Optional[int]:
        if not self._cache_enabled:
            return None

        with self._lock:
            if text in self._string_cache:
                self._string_cache.move_to_end(text)
                return self._string_cache[text]
        return None

    @staticmethod
    def _calculate_width(text: str) -> int:
        """
        wcswidth reports -1 for strings with control characters; those are
        measured char by char with the control characters counted as zero.
        """
        width = wcswidth(text)
        if width >= 0:
            return width
        return sum(max(wcwidth(char), 0) for char in text)

    def _cache_result(self, text: str, width: int):
        if not self._cache_enabled:
            return

        with self._lock:
            while self._string_cache and len(self._string_cache) >= self._cache_size:
                self._string_cache.popitem(last=False)
            self._string_cache[text] = width

    def resize(self, cache_size: int, enable_cache: bool = True):
        """Apply new cache limits, trimming the cache if it shrank."""
        with self._lock:
            self._cache_size = cache_size
            self._cache_enabled = enable_cache
            if not enable_cache:
                self._string_cache.clear()
            while len(self._string_cache) > cache_size:
                self._string_cache.popitem(last=False)
        logger.debug(f"Width cache resized to {cache_size}, enabled={enable_cache}")


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_calculator = None
_calculator_lock = threading.Lock()

def _get_default_calculator() -> WidthCalculator:
    global _default_calculator

    if _default_calculator is None:
        with _calculator_lock:
            if _default_calculator is None:
                _default_calculator = WidthCalculator()

    return _default_calculator


def get_width(text: str) -> int:
    """
    Get visual width of text using default calculator.

    Example:
        >>> get_width("Hello")
        5
        >>> get_width("你好")
        4
    """
    return _get_default_calculator().get_width(text)


def display_width(char: str) -> int:
    """
    Column width of a single character, never less than 1.

    Zero-width and control characters are treated as one column so that
    every character still gets a visible block.
    """
    return max(get_width(char), 1)


def _on_config_change(old_config, new_config):
    if _default_calculator is not None:
        _default_calculator.resize(new_config.cache.width_cache_size,
                                   new_config.cache.enable_caching)


register_config_callback(_on_config_change)
