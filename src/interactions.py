"""Boundary between discord.py interactions and command handlers.

`Invocation.from_interaction` validates the shape of an inbound event once;
handlers and the dispatcher only see the resulting `Invocation` and talk
back to Discord through `InteractionReplies`.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import discord


class InteractionReplies:
    """Reply operations for a single interaction."""

    def __init__(self, interaction: discord.Interaction):
        self._interaction = interaction

    @property
    def acknowledged(self) -> bool:
        """True once an initial response (reply or defer) has been sent."""
        return self._interaction.response.is_done()

    async def defer(self) -> None:
        await self._interaction.response.defer()

    async def send(self, content: str, ephemeral: bool = False) -> None:
        """Send the initial response to the interaction."""
        await self._interaction.response.send_message(content, ephemeral=ephemeral)

    async def edit(self, content: str) -> None:
        """Replace the content of the deferred reply."""
        await self._interaction.edit_original_response(content=content)


@dataclass(frozen=True)
class Invocation:
    name: str
    options: Mapping[str, str]
    replies: InteractionReplies

    def option(self, name: str) -> Optional[str]:
        return self.options.get(name)

    @classmethod
    def from_interaction(cls, interaction: discord.Interaction) -> Optional["Invocation"]:
        """Return an Invocation for slash command events, None for anything else."""
        if interaction.type != discord.InteractionType.application_command:
            return None

        data: Dict[str, Any] = dict(interaction.data or {})
        name = data.get("name")
        if not isinstance(name, str) or not name:
            return None

        options: Dict[str, str] = {}
        for option in data.get("options") or []:
            # Sub-command groups carry no value
            if "value" not in option or option["value"] is None:
                continue
            options[option["name"]] = str(option["value"])

        return cls(
            name=name,
            options=MappingProxyType(options),
            replies=InteractionReplies(interaction),
        )


__all__ = ["Invocation", "InteractionReplies"]
