import sys
from dataclasses import dataclass

from .commands import find_command, get_help_text
from .config import DEFAULT_PALETTE, DEFAULT_SCOPE, RANDOMIZE
from .console import console
from .errors import ShinyError
from .painter import paint, rainbow
from .palettes import get_palette, get_palette_info, get_palette_listing
from .segmenter import Scope, parse_scope
from .utils import print_header, run_showcase


@dataclass
class DemoSettings:
    """Palette, scope and order used when painting plain input lines."""

    palette_name: str = DEFAULT_PALETTE
    scope: Scope = DEFAULT_SCOPE
    randomize: bool = RANDOMIZE

    def describe(self) -> str:
        order = "random" if self.randomize else "sequential"
        return f"palette={self.palette_name}, scope={self.scope.value}, order={order}"


def handle_command(user_input: str, settings: DemoSettings) -> bool:
    """Run one slash command. Returns False when the demo should exit.

    Invalid arguments print an error and leave the settings unchanged.
    """
    trigger, _, argument = user_input.partition(" ")
    argument = argument.strip()
    cmd = find_command(trigger)

    if cmd is None:
        console.print(f"[red]✗ Unknown command: {trigger}. Type /help for a list.[/red]")
        return True

    name = cmd["triggers"][0]

    if name == "/quit":
        console.print("\n[green]✓ Goodbye![/green]\n")
        return False

    if name == "/help":
        console.print(get_help_text())
        return True

    if name == "/palettes":
        console.print(get_palette_listing())
        return True

    if name == "/demo":
        run_showcase(settings.palette_name, settings.randomize)
        return True

    if name == "/rainbow":
        rainbow(argument)
        console.print()
        return True

    try:
        if name == "/palette":
            settings.palette_name = get_palette_info(argument)["name"]
        elif name == "/scope":
            settings.scope = parse_scope(argument)
        elif name == "/random":
            if argument.lower() in ("on", "true", "yes"):
                settings.randomize = True
            elif argument.lower() in ("off", "false", "no"):
                settings.randomize = False
            elif not argument:
                settings.randomize = not settings.randomize
            else:
                console.print(f"[red]✗ Expected on or off, got: {argument}[/red]")
                return True
    except ShinyError as e:
        console.print(f"[red]✗ {e}[/red]")
        return True

    console.print(f"[green]✓ {settings.describe()}[/green]")
    return True


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv
    settings = DemoSettings()

    # One-shot mode: paint the arguments and exit
    if args:
        paint(" ".join(args), get_palette(settings.palette_name), settings.randomize, settings.scope)
        console.print()
        return

    print_header()
    run_showcase(settings.palette_name, settings.randomize)
    console.print(f"\n[dim]{settings.describe()}[/dim]")

    # Interactive loop
    while True:
        try:
            print()
            user_input = console.input("[bold blue]Text:[/bold blue] ")
        except (EOFError, KeyboardInterrupt):
            console.print("\n[green]✓ Goodbye![/green]\n")
            break

        if not user_input.strip():
            continue

        if user_input.startswith("/"):
            if not handle_command(user_input.strip(), settings):
                break
            continue

        paint(user_input, get_palette(settings.palette_name), settings.randomize, settings.scope)
        console.print()
