"""
Configuration constants for the IRC chat client

This module contains the configurable constants used throughout the application.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value


# Standard plaintext IRC port
DEFAULT_PORT = _get_env_int("DEFAULT_PORT", 6667)

# Charset used to decode inbound lines (outbound is always UTF-8)
DEFAULT_ENCODING = _get_env_str("DEFAULT_ENCODING", "utf-8")

# Short time pattern used for console timestamps ("H:mm" style)
DEFAULT_TIME_FORMAT = _get_env_str("DEFAULT_TIME_FORMAT", "%H:%M")

# Trailing text sent with QUIT
QUIT_MESSAGE = _get_env_str("QUIT_MESSAGE", "Client quit")

# Placeholder used when a prefix carries no nickname
UNKNOWN_USER = "unknown"

# Characters stripped from the end of every inbound line
LINE_TERMINATORS = "\r\n\0"

# Prompt shown in front of user input
INPUT_IDENTIFIER = " > "
