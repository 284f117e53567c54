"""shinyconsole - colorize console text by character, word, sentence or paragraph"""

from .assigner import Policy, assign, validate_palette
from .colors import ALL_COLORS, INVISIBLE, VISIBLE_COLORS, ConsoleColor, parse_color
from .console import console, error_console
from .errors import InvalidPaletteError, ShinyError, UnsupportedScopeError
from .painter import RAINBOW_COLORS, colorize, paint, rainbow, random_colorize
from .palettes import PALETTES, Palette, PaletteInfo, get_palette, get_palette_info, get_palette_listing
from .renderer import preserved_color, render, render_single
from .segmenter import Scope, Segment, is_blank, parse_scope, segment
from .terminal import MemoryTerminal, RichTerminal, Terminal, get_terminal

__all__ = [
    # Operations
    "RAINBOW_COLORS",
    "colorize",
    "paint",
    "rainbow",
    "random_colorize",
    # Colors
    "ALL_COLORS",
    "INVISIBLE",
    "VISIBLE_COLORS",
    "ConsoleColor",
    "parse_color",
    # Palettes
    "PALETTES",
    "Palette",
    "PaletteInfo",
    "get_palette",
    "get_palette_info",
    "get_palette_listing",
    # Segmenter
    "Scope",
    "Segment",
    "is_blank",
    "parse_scope",
    "segment",
    # Assigner
    "Policy",
    "assign",
    "validate_palette",
    # Renderer
    "preserved_color",
    "render",
    "render_single",
    # Terminal
    "MemoryTerminal",
    "RichTerminal",
    "Terminal",
    "get_terminal",
    # Console
    "console",
    "error_console",
    # Errors
    "InvalidPaletteError",
    "ShinyError",
    "UnsupportedScopeError",
]
