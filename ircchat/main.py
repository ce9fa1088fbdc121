#!/usr/bin/env python3
"""
Main entry point for the IRC chat client
"""

import asyncio
import logging
import sys

from pydantic import ValidationError

from .chat import ConsoleUserInterface, IRCChatApplication
from .config import (
    load_registration_information,
    load_server_information,
    load_settings,
)
from .errors import log_error
from .irc import IRCClient, RegistrationInformation, ServerInformation
from .logging_config import LoggerConfigurator
from .logs.logger import logger
from .settings import ClientSettings


async def main(
    settings: ClientSettings,
    server_info: ServerInformation,
    registration_info: RegistrationInformation,
) -> bool:
    """Run one chat session.

    Returns:
        True when the session ran, False when the connection failed.
    """
    logger.log_event("app", "start")
    client = IRCClient(settings=settings)
    ui = ConsoleUserInterface(time_format=settings.time_format)
    app = IRCChatApplication(client, ui)
    try:
        return await app.start(server_info, registration_info)
    finally:
        await client.disconnect()
        logger.log_event("app", "shutdown", level=logging.DEBUG)


def run() -> None:
    """Synchronous entry point for the application.

    Raises:
        SystemExit: With status 1 on invalid configuration or a failed
            connection, 0 otherwise.
    """
    try:
        settings = load_settings()
        LoggerConfigurator(log_file=settings.log_file).configure()
        server_info = load_server_information()
        registration_info = load_registration_information()
    except ValidationError as e:
        logger.log_event("app", "config_invalid", level=logging.ERROR, error=str(e))
        print(f"ERROR: Invalid configuration\n{e}", file=sys.stderr)
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        sys.exit(0)

    try:
        ok = asyncio.run(main(settings, server_info, registration_info))
    except KeyboardInterrupt:
        sys.exit(0)
    except Exception as e:
        log_error("Top-level error", e)
        sys.exit(1)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    run()
