"""
Command registry for the shinyconsole demo program.

This module is the single source of truth for the slash commands the demo
understands. The handlers live in main.py; this module only holds the
metadata (triggers, usage and a description), so /help and the dispatcher
cannot drift apart.
"""

from typing import TypedDict

from rich.markup import escape


class CommandInfo(TypedDict):
    """Type definition for command information."""

    triggers: list[str]  # Command triggers (e.g., ["/help"] or ["/quit", "/exit"])
    usage: str  # Arguments shown after the trigger in /help, may be empty
    description: str  # Short one-line description for /help display


COMMANDS: list[CommandInfo] = [
    {
        "triggers": ["/help"],
        "usage": "",
        "description": "Show all available commands",
    },
    {
        "triggers": ["/palettes"],
        "usage": "",
        "description": "List the named palettes",
    },
    {
        "triggers": ["/palette"],
        "usage": "<name>",
        "description": "Switch to a named palette",
    },
    {
        "triggers": ["/scope"],
        "usage": "<characters|words|sentences|paragraphs>",
        "description": "Set how text is split before coloring",
    },
    {
        "triggers": ["/random"],
        "usage": "[on|off]",
        "description": "Toggle random color order",
    },
    {
        "triggers": ["/rainbow"],
        "usage": "<text>",
        "description": "Print text in rainbow colors",
    },
    {
        "triggers": ["/demo"],
        "usage": "",
        "description": "Run the showcase again",
    },
    {
        "triggers": ["/quit", "/exit"],
        "usage": "",
        "description": "Exit the demo",
    },
]


def find_command(trigger: str) -> CommandInfo | None:
    """Return the registry entry for a trigger, ignoring case."""
    trigger = trigger.lower()
    for cmd in COMMANDS:
        if trigger in cmd["triggers"]:
            return cmd
    return None


def get_help_text() -> str:
    """Generate Rich-markup help text for the /help command.

    Returns:
        Formatted string with Rich markup, ready for console.print().
    """
    lines = ["[bold]Available Commands:[/bold]"]
    entries = [(", ".join(cmd["triggers"]), cmd) for cmd in COMMANDS]
    width = max(len(trigger_str) for trigger_str, _ in entries) + 2

    for trigger_str, cmd in entries:
        padding = " " * (width - len(trigger_str))
        lines.append(f"  [cyan]{trigger_str}[/cyan]{padding}- {cmd['description']}")
        if cmd["usage"]:
            lines.append(f"  {' ' * width}  [dim]{cmd['triggers'][0]} {escape(cmd['usage'])}[/dim]")

    lines.append("")
    lines.append("Anything else you type is printed with the current palette and scope.")
    lines.append("[cyan]Ctrl+D[/cyan] or [cyan]Ctrl+C[/cyan] also exits.")

    return "\n".join(lines)
