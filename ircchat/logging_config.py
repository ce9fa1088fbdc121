r"""
Logging configuration module for the IRC chat client.

Provides a configurable logging setup using the colorlog library together with
a structured error logging helper. Log output goes to stderr so it never mixes
with the chat transcript printed on stdout.
"""

import logging
import os
import sys
from typing import Any

import colorlog

_DEBUG_VALUES = ("true", "1", "yes")


def log_structured_error(
    error_type: str,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context.

    Args:
        error_type: Category of the error (e.g., 'network', 'parsing', 'handler')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception is not None:
        structured_message += f" | Exception: {type(exception).__name__}: {exception}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)


def resolve_log_level() -> int:
    """Pick the root log level from the environment.

    ``DEBUG`` wins when set to a truthy value; otherwise ``IRC_LOG_LEVEL`` is
    used (defaults to WARNING so the interactive console stays readable).
    """
    if os.environ.get("DEBUG", "").lower() in _DEBUG_VALUES:
        return logging.DEBUG
    name = os.environ.get("IRC_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog."""

    def __init__(self, log_file: str | None = None):
        """Initialize the configurator.

        Args:
            log_file: Optional path of an additional plain-text log file.
        """
        self.log_file = log_file

    def configure(self) -> None:
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level
        - IRC_LOG_LEVEL: Level name used otherwise (default WARNING)
        """
        log_level = resolve_log_level()

        formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        handlers: list[logging.Handler] = [handler]

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
            )
            handlers.append(file_handler)

        logging.basicConfig(
            level=log_level,
            handlers=handlers,
            format="%(message)s",
            force=True,
        )

        # Ensure root logger level is set
        logging.getLogger().setLevel(log_level)
        logging.getLogger("asyncio").setLevel(logging.WARNING)
