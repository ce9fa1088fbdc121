"""Line-based terminal user interface."""

from __future__ import annotations

import asyncio
import sys
from datetime import datetime
from typing import TextIO

from ..constants import DEFAULT_TIME_FORMAT, INPUT_IDENTIFIER
from ..irc.models import Message, MessageType


def format_message(
    text: str,
    name: str | None,
    message_type: MessageType,
    *,
    time_format: str = DEFAULT_TIME_FORMAT,
    now: datetime | None = None,
) -> str:
    """Format a message for output with a timestamp and the sender.

    User     -> ``[12:30] <alice> hi``
    Server   -> ``[12:30] == alice has joined #python``
    Private  -> ``[12:30] *alice* hi``
    """
    timestamp = (now or datetime.now()).strftime(time_format)
    if message_type is MessageType.USER:
        return f"[{timestamp}] <{name}> {text}"
    if message_type is MessageType.PRIVATE:
        return f"[{timestamp}] *{name}* {text}"
    return f"[{timestamp}] == {text}"


class ConsoleUserInterface:
    """Writes chat output to a text stream and reads input lines from stdin."""

    def __init__(
        self,
        time_format: str = DEFAULT_TIME_FORMAT,
        stream: TextIO | None = None,
    ) -> None:
        self.time_format = time_format
        self.stream = stream or sys.stdout
        self._title = ""

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value
        if self._is_tty():
            # OSC 0: set window title
            self.stream.write(f"\x1b]0;{value}\x07")
            self.stream.flush()

    def _is_tty(self) -> bool:
        try:
            return self.stream.isatty()
        except (AttributeError, ValueError):
            return False

    def setup_interface(self) -> None:
        self.title = ""

    def output_message(self, message: Message) -> None:
        line = format_message(
            message.text, message.user, message.type, time_format=self.time_format
        )
        self.stream.write(line + "\n")
        self.stream.flush()

    async def get_user_input(self, nickname: str | None) -> str:
        """Read one line without blocking the event loop.

        Returns ``"/quit"`` when stdin is closed so the caller shuts down
        cleanly.
        """
        try:
            return await asyncio.to_thread(input, INPUT_IDENTIFIER)
        except EOFError:
            return "/quit"
