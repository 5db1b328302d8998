"""Tests for command schemas and the command registry."""
from dataclasses import FrozenInstanceError

import pytest

from commands import (
    BaseCommand,
    CommandDescriptor,
    CommandOption,
    CommandOutcome,
    CommandRegistry,
    SatisfactoryCommand,
    build_registry,
)


class _Duplicate(BaseCommand):
    @property
    def descriptor(self) -> CommandDescriptor:
        return CommandDescriptor(name="satisfactory", description="Another one")

    async def handle(self, invocation) -> CommandOutcome:
        return CommandOutcome.ok("")


class _Unknown(BaseCommand):
    @property
    def descriptor(self) -> CommandDescriptor:
        return CommandDescriptor(name="factorio", description="Not a known command")

    async def handle(self, invocation) -> CommandOutcome:
        return CommandOutcome.ok("")


def test_satisfactory_payload() -> None:
    """The published schema matches what Discord expects for the command."""
    assert SatisfactoryCommand().descriptor.to_payload() == {
        "type": 1,
        "name": "satisfactory",
        "description": "Controls the satisfactory server",
        "options": [
            {
                "type": 3,
                "name": "action",
                "description": "Action to perform",
                "required": True,
                "choices": [
                    {"name": "start", "value": "start"},
                    {"name": "stop", "value": "stop"},
                    {"name": "restart", "value": "restart"},
                ],
            }
        ],
    }


def test_option_without_choices_omits_key() -> None:
    option = CommandOption(name="note", description="Free text")
    assert "choices" not in option.to_payload()
    assert option.to_payload()["required"] is False


@pytest.mark.parametrize("name", ["", "Satisfactory", "has space", "x" * 33])
def test_descriptor_rejects_invalid_names(name) -> None:
    with pytest.raises(ValueError):
        CommandDescriptor(name=name, description="ok")


def test_descriptor_rejects_long_description() -> None:
    with pytest.raises(ValueError):
        CommandDescriptor(name="ok", description="x" * 101)


def test_descriptor_is_immutable() -> None:
    descriptor = SatisfactoryCommand().descriptor
    with pytest.raises(FrozenInstanceError):
        descriptor.name = "other"  # type: ignore[misc]


class TestCommandRegistry:
    def test_build_registry_contains_satisfactory(self):
        registry = build_registry()
        assert len(registry) == 1
        assert isinstance(registry.get("satisfactory"), SatisfactoryCommand)

    def test_build_registry_passes_service(self):
        command = build_registry("custom.service").get("satisfactory")
        assert command.service == "custom.service"

    def test_lookup_is_exact(self):
        registry = build_registry()
        assert registry.get("Satisfactory") is None
        assert registry.get("satisfactory ") is None
        assert registry.get("unknown") is None

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            CommandRegistry([SatisfactoryCommand(), _Duplicate()])

    def test_names_outside_enum_rejected(self):
        with pytest.raises(ValueError):
            CommandRegistry([_Unknown()])

    def test_payload_lists_every_descriptor(self):
        registry = build_registry()
        assert registry.to_payload() == [
            d.to_payload() for d in registry.descriptors()
        ]
        assert [p["name"] for p in registry.to_payload()] == ["satisfactory"]
