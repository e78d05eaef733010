#!/usr/bin/env python3
"""
🈁 jblock - Configuration Module
================================

Centralized Configuration System
=================================
Complete configuration for Japanese block-art rendering including:
- Glyph cell characters and legacy font markers
- Placeholder and block-mode glyph geometry
- Gradient direction enum
- Font, rendering and cache settings with environment overrides
- Named gradient palettes
- RGB color utilities

Configuration Overview
======================
Every other module reads its constants and settings from here. Settings are
held by a singleton ``ConfigurationManager`` that applies ``JBLOCK_*``
environment overrides at startup and supports validated reloads with change
callbacks.

Environment Overrides
=====================
- JBLOCK_FONT_PATH: legacy font resource to load at startup
- JBLOCK_DIRECTION: default gradient direction
- JBLOCK_PALETTE: default palette preset name
- JBLOCK_WIDTH_CACHE_SIZE: display width cache entries
- JBLOCK_DEBUG: enable debug mode (true/1/yes)
"""

import threading
import logging
import os
from pathlib import Path
from typing import Tuple, Dict, List, Optional, Callable, Sequence, Union
from dataclasses import dataclass, field
from enum import Enum

from PIL import ImageColor

from jblock_fonts import FONTS_DIR

# Configure logging
logger = logging.getLogger('jblock_config')

# Type alias for RGB colors
RGBColor = Tuple[int, int, int]

# ============================================================================
# GLYPH CELLS
# ============================================================================

INK_CHAR = "█"           # Canonical filled cell
EMPTY_CHAR = " "         # Canonical empty cell

# ============================================================================
# LEGACY FONT FORMAT
# ============================================================================

FONT_INK_MARKER = "#"    # Ink cell as stored in the font resource
FONT_END_MARKER = "$@@"  # Terminates the last row of a character entry
FONT_ROW_MARKER = "$@"   # Terminates every other row

DEFAULT_FONT_PATH = FONTS_DIR / "jiskan16.flf"

# ============================================================================
# GLYPH GEOMETRY
# ============================================================================

PLACEHOLDER_HEIGHT = 10  # Rows in every placeholder glyph
PLACEHOLDER_WIDTH = 12   # Columns in every placeholder glyph

BLOCK_ROWS = 5           # Rows per character in block mode
BLOCK_WIDTH_SCALE = 3    # Block width = display width * scale
BLOCK_MIN_WIDTH = 6      # ...but never narrower than this

GLYPH_SEPARATOR = " "    # Between glyphs in uniform mode
BLOCK_SEPARATOR = "  "   # Between characters in block mode

# ============================================================================
# CONFIGURATION ENUMS
# ============================================================================

class Direction(Enum):
    """Gradient directions"""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"

    @classmethod
    def parse(cls, value: Union["Direction", str, None]) -> "Direction":
        """
        Tolerant conversion from user input.

        Unknown or empty values fall back to VERTICAL with a warning.
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.VERTICAL
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.warning(f"Unknown gradient direction {value!r} - using vertical")
            return cls.VERTICAL


# ============================================================================
# PALETTE PRESETS
# ============================================================================

PALETTES: Dict[str, List[str]] = {
    'rainbow': ['#ff0000', '#ff7f00', '#ffff00', '#00ff00', '#0000ff', '#4b0082', '#9400d3'],
    'grad-blue': ['#4ea8ff', '#7f88ff'],
    'sunset': ['#ff9966', '#ff5e62', '#ffa34e'],
    'dawn': ['#00c6ff', '#0072ff'],
    'nebula': ['#654ea3', '#eaafc8'],
    'ocean': ['#667eea', '#764ba2', '#6b8dd6'],
    'fire': ['#ff0844', '#ffb199'],
    'forest': ['#134e5e', '#71b280'],
    'gold': ['#f7971e', '#ffd200'],
    'purple': ['#c471f5', '#fa71cd'],
    'mint': ['#00d2ff', '#3a7bd5'],
    'matrix': ['#00ff41', '#008f11'],
    'mono': ['#f07178', '#f07178'],
}

DEFAULT_PALETTE_NAME = 'grad-blue'

# ============================================================================
# FONT CONFIGURATION
# ============================================================================

@dataclass
class FontConfig:
    """
    Legacy font resource settings.

    Attributes:
        font_path: Path of the font resource loaded at startup
        encoding: Text encoding of the resource
    """

    font_path: Path = DEFAULT_FONT_PATH
    encoding: str = "utf-8"

    def validate(self) -> bool:
        """Validate font configuration"""
        if not str(self.font_path):
            raise ValueError("Font path must not be empty")
        if not self.encoding:
            raise ValueError("Font encoding must not be empty")
        return True


# ============================================================================
# RENDERING CONFIGURATION
# ============================================================================

@dataclass
class RenderingConfig:
    """Gradient and raster output configuration"""

    default_direction: Direction = Direction.VERTICAL
    default_palette: str = DEFAULT_PALETTE_NAME

    # Raster export cell size (pixels)
    cell_width: int = 8
    cell_height: int = 16
    background: RGBColor = (15, 15, 35)

    def validate(self) -> bool:
        """Validate rendering configuration"""
        if self.default_palette not in PALETTES:
            raise ValueError(f"Unknown default palette: {self.default_palette}")
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError("Cell dimensions must be positive")
        return True


# ============================================================================
# CACHE CONFIGURATION
# ============================================================================

@dataclass
class CacheConfig:
    """Display width cache parameters"""

    width_cache_size: int = 1000
    enable_caching: bool = True

    def validate(self) -> bool:
        """Validate cache configuration"""
        if self.width_cache_size <= 0:
            raise ValueError("Width cache size must be positive")
        return True


# ============================================================================
# MAIN CONFIGURATION CLASS
# ============================================================================

@dataclass
class JBlockConfig:
    """Complete system configuration"""

    font: FontConfig = field(default_factory=FontConfig)
    rendering: RenderingConfig = field(default_factory=RenderingConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    debug_mode: bool = False

    def validate(self) -> bool:
        """Validate entire configuration"""
        self.font.validate()
        self.rendering.validate()
        self.cache.validate()
        return True


# ============================================================================
# CONFIGURATION MANAGER (SINGLETON)
# ============================================================================

class ConfigurationManager:
    """
    Singleton configuration manager with runtime reloading.
    Thread-safe management of global configuration with change notifications.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._config = JBlockConfig()
        self._callbacks = []
        self._config_lock = threading.RLock()
        self._load_environment_overrides(self._config)

        self._initialized = True
        logger.debug("Configuration manager initialized")

    @staticmethod
    def _load_environment_overrides(config: JBlockConfig):
        """Load configuration overrides from environment variables"""

        if 'JBLOCK_FONT_PATH' in os.environ:
            config.font.font_path = Path(os.environ['JBLOCK_FONT_PATH'])

        if 'JBLOCK_DIRECTION' in os.environ:
            config.rendering.default_direction = Direction.parse(os.environ['JBLOCK_DIRECTION'])
        if 'JBLOCK_PALETTE' in os.environ:
            name = os.environ['JBLOCK_PALETTE']
            if name in PALETTES:
                config.rendering.default_palette = name
            else:
                logger.warning(f"Ignoring unknown JBLOCK_PALETTE {name!r}")

        if 'JBLOCK_WIDTH_CACHE_SIZE' in os.environ:
            try:
                config.cache.width_cache_size = int(os.environ['JBLOCK_WIDTH_CACHE_SIZE'])
            except ValueError:
                logger.warning("Ignoring non-integer JBLOCK_WIDTH_CACHE_SIZE")

        if 'JBLOCK_DEBUG' in os.environ:
            config.debug_mode = os.environ['JBLOCK_DEBUG'].lower() in ('true', '1', 'yes')

    @property
    def config(self) -> JBlockConfig:
        """Get current configuration"""
        with self._config_lock:
            return self._config

    def reload(self, new_config: Optional[JBlockConfig] = None) -> bool:
        """
        Reload configuration and notify callbacks.

        Args:
            new_config: New configuration to apply (rebuilt from env if None)

        Returns:
            True if reload successful
        """
        with self._config_lock:
            old_config = self._config

            try:
                if new_config is None:
                    new_config = JBlockConfig()
                    self._load_environment_overrides(new_config)
                new_config.validate()
                self._config = new_config

                self._notify_callbacks(old_config, self._config)

                logger.info("Configuration reloaded successfully")
                return True

            except ValueError as e:
                logger.error(f"Configuration reload failed: {e}")
                self._config = old_config
                return False

    def register_callback(self, callback: Callable[[JBlockConfig, JBlockConfig], None]):
        """
        Register callback for configuration changes.

        Args:
            callback: Function called with (old_config, new_config)
        """
        self._callbacks.append(callback)

    def unregister_callback(self, callback: Callable):
        """Remove a registered callback"""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _notify_callbacks(self, old_config: JBlockConfig, new_config: JBlockConfig):
        """Notify all registered callbacks of configuration change"""
        for callback in self._callbacks:
            try:
                callback(old_config, new_config)
            except Exception as e:
                logger.error(f"Callback notification failed: {e}")


# ============================================================================
# PUBLIC API FUNCTIONS
# ============================================================================

_manager = ConfigurationManager()

def get_config() -> JBlockConfig:
    """Get current system configuration"""
    return _manager.config

def reload_config(new_config: Optional[JBlockConfig] = None) -> bool:
    """Reload system configuration"""
    return _manager.reload(new_config)

def register_config_callback(callback: Callable[[JBlockConfig, JBlockConfig], None]):
    """Register for configuration change notifications"""
    _manager.register_callback(callback)

def unregister_config_callback(callback: Callable):
    """Unregister a configuration change callback"""
    _manager.unregister_callback(callback)

def get_font_config() -> FontConfig:
    """Get font configuration"""
    return _manager.config.font

def get_rendering_config() -> RenderingConfig:
    """Get rendering configuration"""
    return _manager.config.rendering

def get_cache_config() -> CacheConfig:
    """Get cache configuration"""
    return _manager.config.cache

# ============================================================================
# RGB COLOR UTILITIES
# ============================================================================

RESET = "\033[0m"

def parse_color(value: Union[str, Sequence[int]]) -> RGBColor:
    """
    Convert a color stop to an RGB tuple.

    Accepts hex strings ('#ff0', '#ff0000'), CSS color names and
    RGB tuples.

    Raises:
        ValueError: if the value is not a recognizable color
    """
    if isinstance(value, str):
        rgb = ImageColor.getrgb(value.strip())
        return (rgb[0], rgb[1], rgb[2])
    r, g, b = value
    return (int(r), int(g), int(b))

def rgb_to_ansi(rgb: RGBColor) -> str:
    """Convert RGB tuple to ANSI color code"""
    r, g, b = rgb
    return f"\033[38;2;{r};{g};{b}m"

def resolve_palette(palette: Union[str, Sequence, None]) -> List[RGBColor]:
    """
    Turn a preset name or a sequence of color stops into RGB stops.

    Never raises: unparseable stops are dropped, and an empty result
    falls back to the configured default palette.
    """
    if isinstance(palette, str):
        if palette in PALETTES:
            palette = PALETTES[palette]
        else:
            palette = [palette]

    stops = []
    for stop in palette or ():
        try:
            stops.append(parse_color(stop))
        except (ValueError, TypeError) as e:
            logger.warning(f"Dropping invalid color stop {stop!r}: {e}")

    if not stops:
        default_name = get_rendering_config().default_palette
        stops = [parse_color(color) for color in PALETTES[default_name]]

    return stops
