"""Base command class, command schemas and registry."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
import re

from interactions import Invocation


# Discord's CHAT_INPUT naming rule, restricted to lowercase ASCII
_NAME_PATTERN = re.compile(r"^[-_a-z0-9]{1,32}$")

CHAT_INPUT_COMMAND = 1
STRING_OPTION = 3


class CommandName(str, Enum):
    """Every command the bot knows about."""

    SATISFACTORY = "satisfactory"


def _check_name(name: str) -> None:
    if not _NAME_PATTERN.match(name):
        raise ValueError(f"Invalid command/option name: {name!r}")


def _check_description(description: str) -> None:
    if not 1 <= len(description) <= 100:
        raise ValueError("Description must be 1-100 characters")


@dataclass(frozen=True)
class CommandOption:
    """A string option with an optional fixed set of choices."""

    name: str
    description: str
    choices: Tuple[str, ...] = ()
    required: bool = False

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_description(self.description)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": STRING_OPTION,
            "name": self.name,
            "description": self.description,
            "required": self.required,
        }
        if self.choices:
            payload["choices"] = [{"name": c, "value": c} for c in self.choices]
        return payload


@dataclass(frozen=True)
class CommandDescriptor:
    """Schema of a slash command as published to Discord."""

    name: str
    description: str
    options: Tuple[CommandOption, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_description(self.description)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the application command JSON schema."""
        return {
            "type": CHAT_INPUT_COMMAND,
            "name": self.name,
            "description": self.description,
            "options": [option.to_payload() for option in self.options],
        }


class OutcomeKind(str, Enum):
    OK = "ok"
    VALIDATION_FAILED = "validation_failed"
    EXECUTION_FAILED = "execution_failed"


@dataclass(frozen=True)
class CommandOutcome:
    """Tagged result of a handler; the dispatcher turns it into a reply."""

    kind: OutcomeKind
    message: str

    @classmethod
    def ok(cls, message: str) -> "CommandOutcome":
        return cls(OutcomeKind.OK, message)

    @classmethod
    def validation_failed(cls, message: str) -> "CommandOutcome":
        return cls(OutcomeKind.VALIDATION_FAILED, message)

    @classmethod
    def execution_failed(cls, message: str) -> "CommandOutcome":
        return cls(OutcomeKind.EXECUTION_FAILED, message)


class BaseCommand(ABC):
    """Base class for all slash commands."""

    @property
    @abstractmethod
    def descriptor(self) -> CommandDescriptor:
        """Schema published to Discord; its name is the lookup key."""
        pass

    @property
    def name(self) -> str:
        return self.descriptor.name

    @abstractmethod
    async def handle(self, invocation: Invocation) -> CommandOutcome:
        """Run the command.

        Handlers may defer the reply through `invocation.replies` but leave
        the final reply to the dispatcher.
        """
        pass


class CommandRegistry:
    """Immutable table of commands, keyed by CommandName."""

    def __init__(self, commands: Iterable[BaseCommand]):
        table: Dict[CommandName, BaseCommand] = {}
        for command in commands:
            key = CommandName(command.name)
            if key in table:
                raise ValueError(f"Duplicate command name: {command.name}")
            table[key] = command
        self._commands: Mapping[CommandName, BaseCommand] = MappingProxyType(table)

    def __iter__(self) -> Iterator[BaseCommand]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def get(self, name: str) -> Optional[BaseCommand]:
        """Get a command by exact name, or None if it isn't registered."""
        try:
            key = CommandName(name)
        except ValueError:
            return None
        return self._commands.get(key)

    def descriptors(self) -> List[CommandDescriptor]:
        return [command.descriptor for command in self]

    def to_payload(self) -> List[Dict[str, Any]]:
        """Body of the global command registration request."""
        return [descriptor.to_payload() for descriptor in self.descriptors()]
