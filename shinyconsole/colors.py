"""
The sixteen classic console colors.

Each member's value is the Rich color name that renders it, so a member can be
handed straight to `rich.style.Style(color=...)`. The mapping follows the way
Windows consoles pair their "Dark" colors with the standard ANSI colors and
their bright colors with the ANSI bright variants.

BLACK is the invisible sentinel: on the default (black) terminal background
text written in it cannot be seen, so single-color writes treat it as "no
color" and `VISIBLE_COLORS` leaves it out.
"""

from enum import Enum


class ConsoleColor(Enum):
    BLACK = "black"
    DARK_BLUE = "blue"
    DARK_GREEN = "green"
    DARK_CYAN = "cyan"
    DARK_RED = "red"
    DARK_MAGENTA = "magenta"
    DARK_YELLOW = "yellow"
    GRAY = "white"
    DARK_GRAY = "bright_black"
    BLUE = "bright_blue"
    GREEN = "bright_green"
    CYAN = "bright_cyan"
    RED = "bright_red"
    MAGENTA = "bright_magenta"
    YELLOW = "bright_yellow"
    WHITE = "bright_white"

    @property
    def display_name(self) -> str:
        """Name in the "DarkYellow" form used by console APIs."""
        return "".join(part.capitalize() for part in self.name.split("_"))


INVISIBLE = ConsoleColor.BLACK

ALL_COLORS: tuple[ConsoleColor, ...] = tuple(ConsoleColor)

VISIBLE_COLORS: tuple[ConsoleColor, ...] = tuple(c for c in ConsoleColor if c is not INVISIBLE)


def _normalize(name: str) -> str:
    return name.strip().replace("-", "").replace("_", "").replace(" ", "").lower()


# Lookup table keyed by the normalized enum name ("darkyellow") and the Rich
# color name ("yellow", "brightblack"). Where the two collide the enum name
# wins, so "red" is RED and not DARK_RED.
_BY_NAME: dict[str, ConsoleColor] = {}
for _color in ConsoleColor:
    _BY_NAME.setdefault(_normalize(_color.value), _color)
for _color in ConsoleColor:
    _BY_NAME[_normalize(_color.name)] = _color
del _color


def parse_color(value: object) -> ConsoleColor | None:
    """Resolve a color argument to a ConsoleColor.

    Accepts a ConsoleColor member, its enum name ("DARK_YELLOW"), its
    display name ("DarkYellow") or its Rich color name ("bright_black").
    Matching ignores case, underscores, hyphens and spaces.

    Returns:
        The matching color, or None when the value is not a known color.
    """
    if isinstance(value, ConsoleColor):
        return value
    if isinstance(value, str):
        return _BY_NAME.get(_normalize(value))
    return None
