"""Shared test fixtures for the Satisfactory control bot."""
from typing import Any, Dict, List, Optional, Tuple

import discord
import pytest

from config import Settings


class FakeResponse:
    """Stand-in for discord.InteractionResponse that records calls."""

    def __init__(self, calls: List[Tuple[str, Any]]):
        self._calls = calls
        self._done = False

    def is_done(self) -> bool:
        return self._done

    async def defer(self) -> None:
        if self._done:
            raise discord.InteractionResponded(None)  # type: ignore[arg-type]
        self._done = True
        self._calls.append(("defer", None))

    async def send_message(self, content: str, ephemeral: bool = False) -> None:
        if self._done:
            raise discord.InteractionResponded(None)  # type: ignore[arg-type]
        self._done = True
        self._calls.append(("send_message", {"content": content, "ephemeral": ephemeral}))


class FakeInteraction:
    """Minimal discord.Interaction double; `calls` lists every reply made."""

    def __init__(
        self,
        name: Optional[str] = "satisfactory",
        options: Optional[Dict[str, Any]] = None,
        interaction_type: discord.InteractionType = discord.InteractionType.application_command,
    ):
        self.calls: List[Tuple[str, Any]] = []
        self.type = interaction_type
        data: Dict[str, Any] = {}
        if name is not None:
            data["name"] = name
        if options is not None:
            data["options"] = [
                {"name": key, "type": 3, "value": value} for key, value in options.items()
            ]
        self.data = data
        self.response = FakeResponse(self.calls)

    async def edit_original_response(self, content: str) -> None:
        self.calls.append(("edit", {"content": content}))


@pytest.fixture
def make_interaction():
    """Factory for FakeInteraction objects."""
    return FakeInteraction


@pytest.fixture
def settings() -> Settings:
    return Settings(
        bot_token="test-token",
        application_id="123456789",
        api_url="https://discord.test/api/v10",
        service="satisfactory.service",
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove bot variables from the environment and disable .env loading."""
    for name in (
        "DISCORD_BOT_TOKEN",
        "DISCORD_APPLICATION_ID",
        "DISCORD_API_URL",
        "SATISFACTORY_SERVICE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("config.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch
