"""
Choosing a color for each segment.

`assign()` maps a list of segments to a list of colors, one per segment and
aligned by index. Blank segments always get None and never touch the palette
state, so whitespace neither consumes a color nor breaks a cycle.

Two policies are supported:

  - SEQUENTIAL walks the palette in order and wraps around. The i-th non-blank
    segment gets `palette[i % len(palette)]`.
  - RANDOM draws uniformly from the palette, redrawing while the draw equals
    the color given to the previous non-blank segment. A one-color palette
    cannot satisfy that, so with a single entry the draw is always accepted.

Nothing here writes to the terminal; `assign()` is a pure function of its
arguments and the random source.
"""

import random
from collections.abc import Iterable, Sequence
from enum import Enum

from .colors import ConsoleColor, parse_color
from .config import RANDOM_SEED
from .errors import InvalidPaletteError
from .segmenter import Segment

# Shared default random source. Seeded from SHINY_RANDOM_SEED when set, which
# makes randomized output reproducible across runs.
_rng = random.Random(RANDOM_SEED)


class Policy(Enum):
    SEQUENTIAL = "sequential"
    RANDOM = "random"


def validate_palette(palette: Iterable[object] | None) -> tuple[ConsoleColor, ...]:
    """Check a palette and normalize its entries to ConsoleColor.

    Entries may be ConsoleColor members or color names understood by
    `parse_color`. Order and repeats are kept as given.

    Raises:
        InvalidPaletteError: if the palette is None, empty, a bare string, or
            holds an entry that is not a color.
    """
    if palette is None or isinstance(palette, str):
        raise InvalidPaletteError("Palette must contain at least one color.")

    colors = []
    for entry in palette:
        color = parse_color(entry)
        if color is None:
            raise InvalidPaletteError(f"Invalid palette entry: {entry!r}")
        colors.append(color)

    if not colors:
        raise InvalidPaletteError("Palette must contain at least one color.")
    return tuple(colors)


def assign(
    segments: Sequence[Segment],
    palette: Iterable[object] | None,
    policy: Policy = Policy.SEQUENTIAL,
    rng: random.Random | None = None,
) -> list[ConsoleColor | None]:
    """Pick a color, or None, for every segment.

    Args:
        segments: Segments as produced by `segment()`.
        palette: Colors to draw from. Validated once, before any assignment.
        policy: SEQUENTIAL or RANDOM.
        rng: Random source for the RANDOM policy. Defaults to the module's
             shared source.

    Returns:
        A list the same length as `segments`; None for blank segments.

    Raises:
        InvalidPaletteError: if the palette is empty or invalid.
    """
    colors = validate_palette(palette)
    if policy is Policy.RANDOM:
        return _assign_random(segments, colors, rng or _rng)
    return _assign_sequential(segments, colors)


def _assign_sequential(
    segments: Sequence[Segment], palette: tuple[ConsoleColor, ...]
) -> list[ConsoleColor | None]:
    assigned: list[ConsoleColor | None] = []
    cursor = 0
    for seg in segments:
        if seg.is_blank:
            assigned.append(None)
            continue
        assigned.append(palette[cursor])
        cursor += 1
        if cursor == len(palette):
            cursor = 0
    return assigned


def _assign_random(
    segments: Sequence[Segment], palette: tuple[ConsoleColor, ...], rng: random.Random
) -> list[ConsoleColor | None]:
    assigned: list[ConsoleColor | None] = []
    last: ConsoleColor | None = None
    # With fewer than two distinct colors a different draw can never come up,
    # so the no-repeat rule is waived instead of retrying forever.
    can_differ = len(set(palette)) > 1
    for seg in segments:
        if seg.is_blank:
            assigned.append(None)
            continue
        color = rng.choice(palette)
        while can_differ and color is last:
            color = rng.choice(palette)
        assigned.append(color)
        last = color
    return assigned
