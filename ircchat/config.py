"""Configuration loading utilities.

Connection details come from environment variables; anything missing is
asked for interactively through the supplied ``prompt`` callable.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from .irc.models import RegistrationInformation, ServerInformation
from .settings import ClientSettings, load_settings

Prompt = Callable[[str], str]

__all__ = [
    "ClientSettings",
    "load_registration_information",
    "load_server_information",
    "load_settings",
]


def _value(
    env_name: str, label: str, prompt: Prompt | None, *, ask: bool = True
) -> str:
    value = os.environ.get(env_name, "").strip()
    if value or not ask:
        return value
    return (prompt or input)(label).strip()


def load_server_information(prompt: Prompt | None = None) -> ServerInformation:
    """Read host and port from ``IRC_HOST``/``IRC_PORT`` or the prompt.

    A blank port falls back to ``DEFAULT_PORT``.

    Raises:
        pydantic.ValidationError: If the host is blank or the port is not a
            valid port number.
    """
    host = _value("IRC_HOST", "Server: ", prompt)
    port = _value("IRC_PORT", "Port: ", prompt)
    if not port:
        return ServerInformation(host_name=host)
    return ServerInformation(host_name=host, port=port)


def load_registration_information(prompt: Prompt | None = None) -> RegistrationInformation:
    """Read the PASS/NICK/USER details from ``IRC_*`` variables or the prompt.

    When ``IRC_NICKNAME`` is set the remaining fields are taken from the
    environment only, so an unattended start never blocks on input.
    """
    unattended = bool(os.environ.get("IRC_NICKNAME", "").strip())
    nickname = _value("IRC_NICKNAME", "Enter nickname: ", prompt)
    username = _value("IRC_USERNAME", "Enter username: ", prompt, ask=not unattended)
    real_name = _value("IRC_REALNAME", "Enter real name: ", prompt, ask=not unattended)
    password = _value("IRC_PASSWORD", "Enter pass: ", prompt, ask=not unattended)
    return RegistrationInformation(
        nickname=nickname,
        username=username,
        real_name=real_name,
        password=password,
    )
