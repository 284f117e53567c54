"""
Shared Rich Console singletons for terminal output.

Every write shinyconsole makes goes through one of two consoles:

  - `console` (stdout) carries the colorized text itself and the demo program's
    output. The default `RichTerminal` is bound to it, so the foreground color
    the library tracks always refers to this one stream.
  - `error_console` (stderr) carries diagnostics such as configuration
    warnings, so they never land in the middle of colorized output.

Rich handles color-system detection and the NO_COLOR / FORCE_COLOR
environment variables, so neither console is configured beyond that.

Usage:
    from .console import error_console
    error_console.print("[yellow]Warning: ...[/yellow]")
"""

from rich.console import Console

# Highlighting is off: the library decides colors itself and Rich's
# repr highlighter would otherwise recolor numbers and quoted strings.
console = Console(highlight=False)

error_console = Console(stderr=True, highlight=False)
