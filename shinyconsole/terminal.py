"""
The terminal capability the renderer writes through.

A Terminal exposes the three things colorized output needs: the current
foreground color (readable and settable), a reset to the default color, and a
plain write. Passing one explicitly to the renderer keeps the ambient console
state out of the core logic and lets tests substitute `MemoryTerminal`.

`foreground` is None when the terminal is showing its default color.

Each Terminal also owns a re-entrant lock. The renderer holds it from the
moment it captures the current color until it has restored it, so two
threads colorizing through the same Terminal cannot bleed colors into each
other's output. Code that writes to the same stream without going through
the Terminal is not covered by the lock.
"""

import threading

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from .colors import ConsoleColor
from .console import console as default_console


class Terminal:
    """Base terminal: tracks the foreground register, subclasses do the writing."""

    def __init__(self) -> None:
        self.foreground: ConsoleColor | None = None
        self.lock = threading.RLock()

    def reset_color(self) -> None:
        self.foreground = None

    def write(self, text: str) -> None:
        raise NotImplementedError


class RichTerminal(Terminal):
    """Terminal that writes through a Rich Console.

    ANSI terminals cannot report their current color, so the foreground
    register lives here and each write carries its own style. The style is
    rendered to ANSI codes for the console's detected color system and the
    result goes straight to the console's file, so tabs, carriage returns and
    control characters reach the terminal unchanged.
    """

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or default_console

    def write(self, text: str) -> None:
        # None when the console has no color support (not a tty, NO_COLOR)
        color_system = COLOR_SYSTEMS.get(self.console.color_system or "")
        if self.foreground is not None and color_system is not None:
            text = Style(color=self.foreground.value).render(
                text,
                color_system=color_system,
                legacy_windows=self.console.legacy_windows,
            )
        file = self.console.file
        file.write(text)
        file.flush()


class MemoryTerminal(Terminal):
    """Terminal that records writes instead of displaying them.

    `writes` holds (text, color) pairs in order, with the color that was in
    effect for each write.
    """

    def __init__(self, foreground: ConsoleColor | None = None) -> None:
        super().__init__()
        self.foreground = foreground
        self.writes: list[tuple[str, ConsoleColor | None]] = []

    def write(self, text: str) -> None:
        self.writes.append((text, self.foreground))

    @property
    def text(self) -> str:
        """Everything written so far, without colors."""
        return "".join(text for text, _ in self.writes)


_default_terminal: RichTerminal | None = None
_default_lock = threading.Lock()


def get_terminal() -> RichTerminal:
    """Return the process-wide terminal bound to the shared stdout console."""
    global _default_terminal
    with _default_lock:
        if _default_terminal is None:
            _default_terminal = RichTerminal()
        return _default_terminal
