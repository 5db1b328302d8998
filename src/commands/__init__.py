"""Command system for the Satisfactory control bot.

Each command is a class that inherits from BaseCommand and implements:
- descriptor: the slash command schema (name, description, options)
- handle(invocation): run the command logic and return a CommandOutcome
"""

from typing import Optional

from .base import (
    BaseCommand,
    CommandDescriptor,
    CommandName,
    CommandOption,
    CommandOutcome,
    CommandRegistry,
    OutcomeKind,
)
from .satisfactory import SatisfactoryCommand


def build_registry(service: Optional[str] = None) -> CommandRegistry:
    """Create the registry of every command the bot serves."""
    if service is None:
        return CommandRegistry([SatisfactoryCommand()])
    return CommandRegistry([SatisfactoryCommand(service=service)])


__all__ = [
    "BaseCommand",
    "CommandDescriptor",
    "CommandName",
    "CommandOption",
    "CommandOutcome",
    "CommandRegistry",
    "OutcomeKind",
    "SatisfactoryCommand",
    "build_registry",
]
