#!/usr/bin/env python3
"""Satisfactory control bot - Main entry point."""

import asyncio
import sys

import discord

from bootstrap import CommandBootstrapper
from commands import CommandRegistry, build_registry
from config import load_settings
from dispatcher import Dispatcher
from endpoints import get_invite_url
from session import BotSession


def create_client(session: BotSession, registry: CommandRegistry) -> discord.Client:
    """Build the gateway client and wire registration and dispatch to it."""
    client = discord.Client(intents=discord.Intents(guilds=True))
    bootstrapper = CommandBootstrapper(registry, session)
    dispatcher = Dispatcher(registry)

    @client.event
    async def on_ready() -> None:
        # requests is blocking
        await asyncio.to_thread(bootstrapper.register_once)
        print("Ready!")
        print(
            "Connect the bot to your servers at: "
            + get_invite_url(session.settings.application_id)
        )

    @client.event
    async def on_interaction(interaction: discord.Interaction) -> None:
        await dispatcher.dispatch(interaction)

    return client


def main():
    """Main application entry point."""
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    registry = build_registry(settings.service)

    with BotSession(settings) as session:
        client = create_client(session, registry)
        client.run(settings.bot_token)


if __name__ == "__main__":
    main()
