"""Route inbound interactions to registered command handlers."""

import sys
import traceback

import discord

from commands import CommandOutcome, CommandRegistry, OutcomeKind
from interactions import Invocation


GENERIC_ERROR_MESSAGE = "There was an error while executing this command!"


class Dispatcher:
    """Looks up the handler for each slash command and delivers its reply."""

    def __init__(self, registry: CommandRegistry):
        self._registry = registry

    async def dispatch(self, interaction: discord.Interaction) -> None:
        invocation = Invocation.from_interaction(interaction)
        if invocation is None:
            return

        command = self._registry.get(invocation.name)
        if command is None:
            return

        try:
            outcome = await command.handle(invocation)
            await self._deliver(invocation, outcome)
        except Exception:
            print(f"Error executing {invocation.name}:", file=sys.stderr)
            traceback.print_exc()
            await self._report_error(invocation)

    async def _report_error(self, invocation: Invocation) -> None:
        replies = invocation.replies
        # Once deferred, the deferred message is the reply
        if replies.acknowledged:
            await replies.edit(GENERIC_ERROR_MESSAGE)
        else:
            await replies.send(GENERIC_ERROR_MESSAGE, ephemeral=True)

    async def _deliver(self, invocation: Invocation, outcome: CommandOutcome) -> None:
        replies = invocation.replies
        if outcome.kind is OutcomeKind.VALIDATION_FAILED:
            await replies.send(outcome.message, ephemeral=True)
        elif replies.acknowledged:
            await replies.edit(outcome.message)
        else:
            await replies.send(outcome.message)


__all__ = ["Dispatcher", "GENERIC_ERROR_MESSAGE"]
