"""
CLI command modules for scifi_classes.

Each command module defines a single Typer-compatible command function.
"""

from scifi_classes.cli.commands.greet import greet_command
from scifi_classes.cli.commands.list_quotes import list_command
from scifi_classes.cli.commands.quote import quote_command

__all__ = [
    "greet_command",
    "list_command",
    "quote_command",
]
