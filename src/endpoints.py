"""Endpoint helpers for the Discord API.

This module centralizes how we build Discord URLs. The REST base URL can be
overridden with `DISCORD_API_URL` (see .env.example); it defaults to the
v10 API.
"""
from typing import Optional
from urllib.parse import quote, urlencode
import os


ENV_BASE_URL_NAME = "DISCORD_API_URL"
DEFAULT_API_URL = "https://discord.com/api/v10"
OAUTH2_AUTHORIZE_URL = "https://discord.com/oauth2/authorize"

# Use Application Commands
INVITE_PERMISSIONS = 2147483648
INVITE_SCOPES = ("bot", "applications.commands")


def get_api_base_url(url: Optional[str] = None) -> str:
    """Return the base API URL from argument, environment or default.

    Raises:
        ValueError: if the URL doesn't look like an http(s) URL.
    """
    if url is None:
        url = os.getenv(ENV_BASE_URL_NAME) or DEFAULT_API_URL

    if not (url.startswith("http://") or url.startswith("https://")):
        raise ValueError(
            "Base API URL must start with http:// or https://; got: " + url
        )

    return url.rstrip("/")


def get_application_commands_endpoint(application_id: str, base_url: Optional[str] = None) -> str:
    """Return the global /applications/<id>/commands endpoint URL."""
    base_url = get_api_base_url(base_url)
    return f"{base_url}/applications/{application_id}/commands"


def get_invite_url(application_id: str) -> str:
    """Return the OAuth2 URL an admin uses to add the bot to a server."""
    query = urlencode(
        {
            "client_id": application_id,
            "permissions": INVITE_PERMISSIONS,
            "scope": " ".join(INVITE_SCOPES),
        },
        quote_via=quote,
    )
    return f"{OAUTH2_AUTHORIZE_URL}?{query}"


__all__ = [
    "get_api_base_url",
    "get_application_commands_endpoint",
    "get_invite_url",
    "ENV_BASE_URL_NAME",
    "DEFAULT_API_URL",
]
