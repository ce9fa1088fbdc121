"""Console front end: terminal UI and the interactive chat loop."""

from .app import IRCChatApplication, UserInterface  # noqa: F401
from .console import ConsoleUserInterface, format_message  # noqa: F401

__all__ = [
    "ConsoleUserInterface",
    "IRCChatApplication",
    "UserInterface",
    "format_message",
]
