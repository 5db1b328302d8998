"""Run systemd lifecycle actions against the game server unit."""

from enum import Enum
from typing import List
import subprocess
import sys


SYSTEMCTL = ("sudo", "systemctl")


class ServerAction(str, Enum):
    START = "start"
    STOP = "stop"
    RESTART = "restart"


class ServerCommandError(RuntimeError):
    """Raised when a systemctl call fails for any reason."""


def build_command(action: ServerAction, service: str) -> List[str]:
    return [*SYSTEMCTL, action.value, service]


def run_server_action(action: ServerAction, service: str) -> None:
    """Run `sudo systemctl <action> <service>` and block until it exits.

    Assumes passwordless sudo for systemctl is already provisioned on the
    host.

    Args:
        action: A validated lifecycle action.
        service: systemd unit name, e.g. "satisfactory.service".

    Raises:
        ServerCommandError: if the process exits non-zero or cannot be
            spawned. The cause is printed to stderr, not carried in the
            message.
    """
    cmd = build_command(action, service)
    print("Running: " + " ".join(cmd))
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as exc:
        print(f"Server command failed: {exc}", file=sys.stderr)
        if exc.stderr:
            print(exc.stderr.strip(), file=sys.stderr)
        raise ServerCommandError("Failed to run server command") from exc
    except OSError as exc:
        print(f"Could not spawn server command: {exc}", file=sys.stderr)
        raise ServerCommandError("Failed to run server command") from exc


__all__ = ["ServerAction", "ServerCommandError", "build_command", "run_server_action"]
