"""
Named color palettes.

This module is the single source of truth for the palettes shipped with
shinyconsole. Each palette is a plain tuple of ConsoleColor values exposed as
a module constant (e.g. `CHRISTMAS`), so it can be passed directly to
`paint()` / `colorize()`. Tuples are used so the shared constants cannot be
mutated by a caller.

The same palettes are also listed in the `PALETTES` registry, which adds a
group and a short description. The registry serves two audiences:
  - **Code**: `get_palette(name)` resolves a user-supplied name such as
    "st-patricks-day" or "Visible On Black" to its colors.
  - **Users**: `get_palette_listing()` formats the registry with Rich markup
    for the demo program's /palettes command, with every palette name drawn
    in its own colors.
"""

from typing import TypedDict

from .colors import ConsoleColor
from .errors import InvalidPaletteError

Palette = tuple[ConsoleColor, ...]

# Holidays
CHRISTMAS: Palette = (ConsoleColor.RED, ConsoleColor.GREEN)
EASTER: Palette = (ConsoleColor.MAGENTA, ConsoleColor.CYAN, ConsoleColor.YELLOW, ConsoleColor.GREEN)
FATHERS_DAY: Palette = (ConsoleColor.BLUE, ConsoleColor.DARK_BLUE, ConsoleColor.CYAN)
HALLOWEEN: Palette = (ConsoleColor.DARK_YELLOW, ConsoleColor.DARK_MAGENTA)
MOTHERS_DAY: Palette = (
    ConsoleColor.MAGENTA,
    ConsoleColor.RED,
    ConsoleColor.YELLOW,
    ConsoleColor.WHITE,
)
NEW_YEARS: Palette = (
    ConsoleColor.DARK_YELLOW,
    ConsoleColor.YELLOW,
    ConsoleColor.WHITE,
    ConsoleColor.GRAY,
)
ST_PATRICKS_DAY: Palette = (ConsoleColor.GREEN, ConsoleColor.DARK_GREEN)
VALENTINES_DAY: Palette = (
    ConsoleColor.RED,
    ConsoleColor.WHITE,
    ConsoleColor.MAGENTA,
    ConsoleColor.DARK_RED,
)

# National flags
AMERICAN: Palette = (ConsoleColor.RED, ConsoleColor.WHITE, ConsoleColor.BLUE)
CANADIAN: Palette = (ConsoleColor.RED, ConsoleColor.WHITE)
IRISH: Palette = (ConsoleColor.GREEN, ConsoleColor.WHITE, ConsoleColor.DARK_YELLOW)
ITALIAN: Palette = (ConsoleColor.GREEN, ConsoleColor.WHITE, ConsoleColor.RED)

# Pride flags
GAY_PRIDE: Palette = (
    ConsoleColor.DARK_BLUE,
    ConsoleColor.BLUE,
    ConsoleColor.CYAN,
    ConsoleColor.GREEN,
    ConsoleColor.YELLOW,
    ConsoleColor.RED,
)
LESBIAN_PRIDE: Palette = (
    ConsoleColor.DARK_RED,
    ConsoleColor.RED,
    ConsoleColor.DARK_YELLOW,
    ConsoleColor.WHITE,
    ConsoleColor.MAGENTA,
)
NON_BINARY_PRIDE: Palette = (ConsoleColor.YELLOW, ConsoleColor.WHITE, ConsoleColor.MAGENTA)
PANSEXUAL_PRIDE: Palette = (ConsoleColor.MAGENTA, ConsoleColor.YELLOW, ConsoleColor.CYAN)
RAINBOW: Palette = (
    ConsoleColor.RED,
    ConsoleColor.DARK_YELLOW,
    ConsoleColor.YELLOW,
    ConsoleColor.GREEN,
    ConsoleColor.CYAN,
    ConsoleColor.BLUE,
    ConsoleColor.MAGENTA,
)
TRANSGENDER_PRIDE: Palette = (ConsoleColor.CYAN, ConsoleColor.MAGENTA, ConsoleColor.WHITE)

# General purpose
ALL: Palette = tuple(ConsoleColor)
COOL: Palette = (
    ConsoleColor.DARK_BLUE,
    ConsoleColor.DARK_CYAN,
    ConsoleColor.BLUE,
    ConsoleColor.CYAN,
    ConsoleColor.DARK_GRAY,
)
PASTELS: Palette = (
    ConsoleColor.DARK_YELLOW,
    ConsoleColor.YELLOW,
    ConsoleColor.GREEN,
    ConsoleColor.CYAN,
    ConsoleColor.BLUE,
    ConsoleColor.MAGENTA,
    ConsoleColor.WHITE,
    ConsoleColor.GRAY,
)
VISIBLE_ON_BLACK: Palette = (
    ConsoleColor.RED,
    ConsoleColor.DARK_YELLOW,
    ConsoleColor.YELLOW,
    ConsoleColor.GREEN,
    ConsoleColor.BLUE,
    ConsoleColor.DARK_BLUE,
    ConsoleColor.MAGENTA,
    ConsoleColor.CYAN,
    ConsoleColor.DARK_CYAN,
    ConsoleColor.WHITE,
    ConsoleColor.GRAY,
    ConsoleColor.DARK_GRAY,
)
WARM: Palette = (
    ConsoleColor.RED,
    ConsoleColor.DARK_RED,
    ConsoleColor.DARK_YELLOW,
    ConsoleColor.YELLOW,
    ConsoleColor.MAGENTA,
)


class PaletteInfo(TypedDict):
    """Registry entry for a named palette."""

    name: str  # Lookup key, snake_case (e.g. "st_patricks_day")
    group: str  # One of PALETTE_GROUPS
    colors: Palette
    description: str  # Short label for the /palettes listing


PALETTE_GROUPS = ("holidays", "national", "prides", "standard")

PALETTES: list[PaletteInfo] = [
    {"name": "christmas", "group": "holidays", "colors": CHRISTMAS, "description": "Red and green"},
    {"name": "easter", "group": "holidays", "colors": EASTER, "description": "Spring brights"},
    {"name": "fathers_day", "group": "holidays", "colors": FATHERS_DAY, "description": "Blues"},
    {"name": "halloween", "group": "holidays", "colors": HALLOWEEN, "description": "Orange and purple"},
    {"name": "mothers_day", "group": "holidays", "colors": MOTHERS_DAY, "description": "Flowers"},
    {"name": "new_years", "group": "holidays", "colors": NEW_YEARS, "description": "Gold and silver"},
    {"name": "st_patricks_day", "group": "holidays", "colors": ST_PATRICKS_DAY, "description": "Greens"},
    {"name": "valentines_day", "group": "holidays", "colors": VALENTINES_DAY, "description": "Reds and pinks"},
    {"name": "american", "group": "national", "colors": AMERICAN, "description": "United States flag"},
    {"name": "canadian", "group": "national", "colors": CANADIAN, "description": "Canadian flag"},
    {"name": "irish", "group": "national", "colors": IRISH, "description": "Irish flag"},
    {"name": "italian", "group": "national", "colors": ITALIAN, "description": "Italian flag"},
    {"name": "gay_pride", "group": "prides", "colors": GAY_PRIDE, "description": "Gay men's pride flag"},
    {"name": "lesbian_pride", "group": "prides", "colors": LESBIAN_PRIDE, "description": "Lesbian pride flag"},
    {"name": "non_binary_pride", "group": "prides", "colors": NON_BINARY_PRIDE, "description": "Non-binary pride flag"},
    {"name": "pansexual_pride", "group": "prides", "colors": PANSEXUAL_PRIDE, "description": "Pansexual pride flag"},
    {"name": "rainbow", "group": "prides", "colors": RAINBOW, "description": "Rainbow flag"},
    {"name": "transgender_pride", "group": "prides", "colors": TRANSGENDER_PRIDE, "description": "Transgender pride flag"},
    {"name": "all", "group": "standard", "colors": ALL, "description": "Every console color, black included"},
    {"name": "cool", "group": "standard", "colors": COOL, "description": "Blues, cyans and gray"},
    {"name": "pastels", "group": "standard", "colors": PASTELS, "description": "Soft brights"},
    {"name": "visible_on_black", "group": "standard", "colors": VISIBLE_ON_BLACK, "description": "High contrast on a dark background"},
    {"name": "warm", "group": "standard", "colors": WARM, "description": "Reds, yellows and magenta"},
]

_BY_NAME: dict[str, PaletteInfo] = {info["name"]: info for info in PALETTES}


def _normalize(name: str) -> str:
    return "_".join(name.strip().lower().replace("-", " ").replace("_", " ").replace("'", "").split())


def get_palette_info(name: str) -> PaletteInfo:
    """Look up a registry entry by name.

    Names are matched case-insensitively, with hyphens, spaces and underscores
    treated alike, so "St-Patricks Day" finds `st_patricks_day`.

    Raises:
        InvalidPaletteError: if no palette has that name.
    """
    info = _BY_NAME.get(_normalize(name))
    if info is None:
        raise InvalidPaletteError(f"Unknown palette: {name!r}")
    return info


def get_palette(name: str) -> Palette:
    """Look up a named palette's colors. See `get_palette_info` for matching rules."""
    return get_palette_info(name)["colors"]


def get_palette_listing() -> str:
    """Generate Rich-markup text listing every registered palette by group.

    Each palette name is drawn one character per color in its own palette, so
    the listing doubles as a preview. BLACK is shown dimmed rather than
    invisible.

    Returns:
        Formatted string with Rich markup, ready for console.print().
    """
    lines = ["[bold]Palettes:[/bold]"]
    width = max(len(info["name"]) for info in PALETTES) + 2

    for group in PALETTE_GROUPS:
        lines.append("")
        lines.append(f"  [bold]{group.capitalize()}[/bold]")
        for info in PALETTES:
            if info["group"] != group:
                continue
            preview = "".join(
                f"[{_preview_style(info['colors'][i % len(info['colors'])])}]{char}[/]"
                for i, char in enumerate(info["name"])
            )
            padding = " " * (width - len(info["name"]))
            lines.append(f"    {preview}{padding}- {info['description']}")

    return "\n".join(lines)


def _preview_style(color: ConsoleColor) -> str:
    if color is ConsoleColor.BLACK:
        return "dim"
    return color.value
