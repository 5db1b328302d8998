"""Runtime configuration for the Satisfactory control bot.

Values come from the process environment, optionally seeded from a `.env`
file (see .env.example):

- DISCORD_BOT_TOKEN: bot authentication token (required)
- DISCORD_APPLICATION_ID: application identifier (required)
- DISCORD_API_URL: REST API base URL (optional)
- SATISFACTORY_SERVICE: systemd unit to control (optional)
"""
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

from endpoints import DEFAULT_API_URL, get_api_base_url


ENV_TOKEN_NAME = "DISCORD_BOT_TOKEN"
ENV_APPLICATION_ID_NAME = "DISCORD_APPLICATION_ID"
ENV_SERVICE_NAME = "SATISFACTORY_SERVICE"
DEFAULT_SERVICE = "satisfactory.service"


@dataclass(frozen=True)
class Settings:
    bot_token: str
    application_id: str
    api_url: str = DEFAULT_API_URL
    service: str = DEFAULT_SERVICE


def _get_env(name: str, required: bool = True) -> Optional[str]:
    val = os.getenv(name)
    if required and not val:
        raise ValueError(f"Missing required environment variable: {name}")
    return val


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from the environment.

    Args:
        dotenv: Load a `.env` file into the environment first. Variables
            already set in the environment win over the file.

    Raises:
        ValueError: if a required variable is missing or the API URL is
            malformed.
    """
    if dotenv:
        load_dotenv()

    bot_token = _get_env(ENV_TOKEN_NAME)
    application_id = _get_env(ENV_APPLICATION_ID_NAME)
    service = _get_env(ENV_SERVICE_NAME, required=False) or DEFAULT_SERVICE

    return Settings(
        bot_token=bot_token,  # type: ignore[arg-type]
        application_id=application_id,  # type: ignore[arg-type]
        api_url=get_api_base_url(),
        service=service,
    )


__all__ = ["Settings", "load_settings", "DEFAULT_SERVICE"]
