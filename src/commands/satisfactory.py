"""satisfactory command - Start, stop or restart the Satisfactory server."""

import asyncio

from commands.base import (
    BaseCommand,
    CommandDescriptor,
    CommandName,
    CommandOption,
    CommandOutcome,
)
from config import DEFAULT_SERVICE
from executor import ServerAction, ServerCommandError, run_server_action
from interactions import Invocation


ACTION_OPTION = "action"


class SatisfactoryCommand(BaseCommand):
    def __init__(self, service: str = DEFAULT_SERVICE):
        self._service = service
        self._descriptor = CommandDescriptor(
            name=CommandName.SATISFACTORY.value,
            description="Controls the satisfactory server",
            options=(
                CommandOption(
                    name=ACTION_OPTION,
                    description="Action to perform",
                    choices=tuple(action.value for action in ServerAction),
                    required=True,
                ),
            ),
        )

    @property
    def descriptor(self) -> CommandDescriptor:
        return self._descriptor

    @property
    def service(self) -> str:
        return self._service

    async def handle(self, invocation: Invocation) -> CommandOutcome:
        value = invocation.option(ACTION_OPTION)
        if not value:
            return CommandOutcome.validation_failed("Please specify an action")
        try:
            action = ServerAction(value)
        except ValueError:
            return CommandOutcome.validation_failed(f"Unknown action: {value}")

        await invocation.replies.defer()

        # systemctl blocks; keep the event loop serving other interactions
        try:
            await asyncio.to_thread(run_server_action, action, self._service)
        except ServerCommandError:
            return CommandOutcome.execution_failed("Failed to run server command")
        return CommandOutcome.ok(f"Successfully ran server command: {action.value}")
