"""Publish the command schemas to Discord as global application commands."""

import sys
from typing import Optional

import requests

from commands import CommandRegistry
from endpoints import get_application_commands_endpoint
from session import BotSession


class CommandBootstrapper:
    def __init__(self, registry: CommandRegistry, session: BotSession):
        self._registry = registry
        self._session = session
        self._attempted = False

    def register_once(self) -> Optional[bool]:
        """Register on the first ready event only.

        discord.py fires on_ready again after reconnects; later calls are
        no-ops and return None.
        """
        if self._attempted:
            return None
        self._attempted = True
        return self.register()

    def register(self) -> bool:
        """PUT the full global command list, replacing what Discord has.

        Returns:
            True on success. Failures are printed and reported as False;
            the bot keeps running with whatever commands Discord already
            knows.
        """
        settings = self._session.settings
        url = get_application_commands_endpoint(settings.application_id, settings.api_url)
        try:
            response = self._session.http.put(url, json=self._registry.to_payload())
            response.raise_for_status()
        except requests.RequestException as exc:
            print(f"Failed to register commands: {exc}", file=sys.stderr)
            return False
        print("Registered commands")
        return True


__all__ = ["CommandBootstrapper"]
