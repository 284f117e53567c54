"""
Public colorization operations.

Each operation runs the same three passes: segment the text, assign colors,
render. Argument problems (an empty palette, an unknown scope) are detected
before the first pass, so a call that raises has written nothing and left the
terminal color untouched. Empty or None text returns immediately without
touching the terminal.

    from shinyconsole import colorize, paint, rainbow, Scope
    from shinyconsole.palettes import CHRISTMAS

    rainbow("Hello, Rainbow!")
    colorize("This text is red.", ConsoleColor.RED)
    paint("Merry Christmas to all", CHRISTMAS, scope=Scope.WORDS)
"""

import random
from collections.abc import Iterable

from .assigner import Policy, assign, validate_palette
from .colors import VISIBLE_COLORS, ConsoleColor
from .config import DEFAULT_SCOPE
from .renderer import render, render_single
from .segmenter import Scope, parse_scope, segment
from .terminal import Terminal

# Fixed palette used by rainbow(); deliberately not the "rainbow" pride
# palette, which has cyan in place of dark blue.
RAINBOW_COLORS: tuple[ConsoleColor, ...] = (
    ConsoleColor.RED,
    ConsoleColor.DARK_YELLOW,
    ConsoleColor.YELLOW,
    ConsoleColor.GREEN,
    ConsoleColor.BLUE,
    ConsoleColor.DARK_BLUE,
    ConsoleColor.MAGENTA,
)


def paint(
    text: str | None,
    palette: Iterable[object] | None,
    randomize: bool = False,
    scope: Scope | str | None = None,
    terminal: Terminal | None = None,
    rng: random.Random | None = None,
) -> None:
    """Write text with colors from a palette applied per segment.

    Args:
        text: Text to write. Empty or None is a no-op.
        palette: Colors to apply, in order. Must not be empty.
        randomize: Pick colors at random (never the same twice in a row)
                   instead of cycling through the palette.
        scope: Segmentation granularity. None uses SHINY_DEFAULT_SCOPE.
        terminal: Where to write. Defaults to the shared stdout terminal.
        rng: Random source for randomize=True.

    Raises:
        InvalidPaletteError: if the palette is None, empty or holds a non-color.
        UnsupportedScopeError: if the scope is not supported.
    """
    if not text:
        return

    colors = validate_palette(palette)
    resolved_scope = parse_scope(DEFAULT_SCOPE if scope is None else scope)
    policy = Policy.RANDOM if randomize else Policy.SEQUENTIAL

    segments = segment(text, resolved_scope)
    render(segments, assign(segments, colors, policy, rng), terminal)


def colorize(
    text: str | None,
    color: object,
    randomize: bool = False,
    scope: Scope | str = Scope.CHARACTERS,
    terminal: Terminal | None = None,
) -> None:
    """Write text in a single color, or in a palette's colors.

    None, or any iterable other than a string (list, tuple, set, generator),
    is treated as a palette and handled exactly as `paint()` handles it,
    including the InvalidPaletteError it raises for a missing or empty one.
    Anything else is a single color: the whole text is written in it, and an
    unknown color or BLACK falls back to writing the text uncolored.
    """
    if color is None or (isinstance(color, Iterable) and not isinstance(color, str)):
        paint(text, color, randomize=randomize, scope=scope, terminal=terminal)
        return
    render_single(text, color, terminal)


def rainbow(text: str | None, terminal: Terminal | None = None) -> None:
    """Write text one character per color through a fixed seven-color rainbow."""
    paint(text, RAINBOW_COLORS, scope=Scope.CHARACTERS, terminal=terminal)


def random_colorize(
    text: str | None,
    terminal: Terminal | None = None,
    rng: random.Random | None = None,
) -> None:
    """Write each character in a random visible color, never repeating a neighbour's."""
    paint(text, VISIBLE_COLORS, randomize=True, scope=Scope.CHARACTERS, terminal=terminal, rng=rng)
