"""Process-scoped session shared by the bootstrapper and the gateway client."""

from typing import Dict, Optional

import requests

from config import Settings


USER_AGENT = "DiscordBot (satisfactory-control, 0.1.0)"


class BotSession:
    """Settings plus an authenticated HTTP session for the Discord REST API.

    Created once in main() and passed to whatever needs it, so tests can
    swap in a fake `http` session.
    """

    def __init__(self, settings: Settings, http: Optional[requests.Session] = None):
        self.settings = settings
        self.http = http if http is not None else requests.Session()
        self.http.headers.update(self.headers)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "Authorization": f"Bot {self.settings.bot_token}",
        }

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "BotSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["BotSession"]
