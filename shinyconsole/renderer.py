"""
Writing segments to a terminal in their assigned colors.

Both entry points follow the same discipline: the foreground color in effect
when the call starts is captured once, and restored once when the call ends,
whether it ends normally or with an exception. `preserved_color()` is the
context manager that implements this; it also holds the terminal's lock for
the whole call.

A segment whose color is None is written in the terminal's *default* color,
not in the captured one, so whitespace between colored runs never inherits a
color.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from .colors import INVISIBLE, ConsoleColor, parse_color
from .segmenter import Segment
from .terminal import Terminal, get_terminal


@contextmanager
def preserved_color(terminal: Terminal) -> Iterator[Terminal]:
    """Hold the terminal's lock and restore its foreground color on exit."""
    with terminal.lock:
        saved = terminal.foreground
        try:
            yield terminal
        finally:
            terminal.foreground = saved


def render(
    segments: Sequence[Segment],
    colors: Sequence[ConsoleColor | None],
    terminal: Terminal | None = None,
) -> None:
    """Write each segment in its color; `colors[i]` belongs to `segments[i]`."""
    if len(segments) != len(colors):
        raise ValueError(f"Got {len(colors)} colors for {len(segments)} segments")
    if not segments:
        return

    terminal = terminal or get_terminal()
    with preserved_color(terminal):
        for seg, color in zip(segments, colors):
            if color is None:
                terminal.reset_color()
            else:
                terminal.foreground = color
            terminal.write(seg.text)


def render_single(text: str | None, color: object, terminal: Terminal | None = None) -> None:
    """Write the whole text in one color.

    An unknown color, or the invisible BLACK, is not an error: the text is
    written without touching the foreground color at all.
    """
    if not text:
        return

    terminal = terminal or get_terminal()
    resolved = parse_color(color)
    if resolved is None or resolved is INVISIBLE:
        with terminal.lock:
            terminal.write(text)
        return

    with preserved_color(terminal):
        terminal.foreground = resolved
        terminal.write(text)
