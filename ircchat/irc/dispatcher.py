"""Routing of inbound server lines onto named server events."""

from __future__ import annotations

import logging

from ..errors import ParsingError
from ..logs.logger import logger
from .events import EventDispatcher, Handler
from .models import ServerEvent
from .parser import IRCMessage, parse_irc_message

COMMAND_EVENTS: dict[str, ServerEvent] = {
    "NOTICE": ServerEvent.NOTICE,
    "PRIVMSG": ServerEvent.CHANNEL_MESSAGE,
    "JOIN": ServerEvent.JOIN,
    "PART": ServerEvent.PART,
    "NICK": ServerEvent.NICK_CHANGE,
    "PING": ServerEvent.PING,
    "QUIT": ServerEvent.QUIT,
}


def event_for_command(command: str) -> ServerEvent | None:
    """Return the server event a command keyword maps to.

    Numeric replies are either informational or errors that carry their own
    text, so they are all treated as notices. Anything else is unmapped.
    """
    event = COMMAND_EVENTS.get(command.upper())
    if event is not None:
        return event
    if command.isdigit():
        return ServerEvent.NOTICE
    return None


class IRCDispatcher:
    """Parses raw server lines and fires the matching server event."""

    def __init__(self) -> None:
        self.events = EventDispatcher("server")

    def register(self, event: ServerEvent, handler: Handler) -> None:
        self.events.register(event, handler)

    async def process_line(self, raw_line: str) -> IRCMessage | None:
        """Parse ``raw_line`` and dispatch it.

        Returns the parsed message, or ``None`` when the line was skipped.
        Subscriber failures propagate as ``HandlerError``.
        """
        if not raw_line.strip():
            return None
        try:
            message = parse_irc_message(raw_line)
        except ParsingError:
            logger.log_event(
                "irc", "malformed_line", level=logging.WARNING, raw=raw_line
            )
            return None

        await self.dispatch(message)
        return message

    async def dispatch(self, message: IRCMessage) -> None:
        event = event_for_command(message.command)
        if event is None:
            logger.log_event(
                "irc",
                "unhandled_command",
                level=logging.DEBUG,
                command=message.command,
            )
            return
        await self.events.dispatch(event, message)
