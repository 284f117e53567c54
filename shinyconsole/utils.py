"""
Helpers for the demo program: version lookup, the welcome header and the
showcase that demonstrates each public operation.
"""

from importlib.metadata import PackageNotFoundError, version

from rich import box
from rich.panel import Panel

from .colors import ConsoleColor
from .console import console
from .painter import colorize, paint, rainbow, random_colorize
from .palettes import get_palette
from .segmenter import Scope

SHOWCASE_TEXT = (
    "Shiny text for plain consoles. Colors cycle or shuffle!\n"
    "Whitespace stays uncolored.\n\n"
    "A second paragraph? Sure."
)


def get_version() -> str:
    """Get the installed package version, or "dev" when running from source."""
    try:
        return version("shinyconsole")
    except PackageNotFoundError:
        return "dev"


def print_header():
    """Print the welcome banner and a quick command reference."""
    console.print()
    rainbow("  S H I N Y   C O N S O L E")
    console.print()

    header_text = f"""[dim]shinyconsole v{get_version()}[/dim]

[bold]Commands:[/bold]
  [green]/palettes[/green]       - List the named palettes
  [green]/palette[/green] <name> - Switch palette
  [green]/scope[/green] <name>   - characters, words, sentences or paragraphs
  [green]/random[/green]         - Toggle random color order
  [green]/help[/green]           - Show all commands
  [green]/quit[/green]           - Exit the demo"""

    console.print(Panel(header_text, box=box.ROUNDED, expand=False))


def run_showcase(palette_name: str, randomize: bool = False):
    """Demonstrate each operation, then every scope with the given palette."""
    palette = get_palette(palette_name)

    message = "Hello, Rainbow!"
    console.print(f'\n[bold]rainbow("{message}"):[/bold]')
    rainbow(message)
    console.print()

    message = "Random colors!"
    console.print(f'\n[bold]random_colorize("{message}"):[/bold]')
    random_colorize(message)
    console.print()

    message = "This text is red."
    console.print(f'\n[bold]colorize("{message}", ConsoleColor.RED):[/bold]')
    colorize(message, ConsoleColor.RED)
    console.print()

    order = "random" if randomize else "sequential"
    for scope in Scope:
        console.print(f"\n[bold]{palette_name} by {scope.value} ({order}):[/bold]")
        paint(SHOWCASE_TEXT, palette, randomize=randomize, scope=scope)
        console.print()
