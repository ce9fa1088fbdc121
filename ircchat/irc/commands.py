"""Routing of local slash commands onto named command events."""

from __future__ import annotations

import logging

from ..logs.logger import logger
from .events import EventDispatcher, Handler
from .models import CommandEvent
from .parser import UserCommand, parse_user_command

KEYWORD_EVENTS: dict[str, CommandEvent] = {
    "JOIN": CommandEvent.JOIN,
    "PART": CommandEvent.PART,
    "MSG": CommandEvent.MESSAGE,
    "NICK": CommandEvent.NICK,
    "HELP": CommandEvent.HELP,
    "QUIT": CommandEvent.QUIT,
}


class UserCommandDispatcher:
    """Parses ``/keyword [param]*`` input and fires the matching command event.

    Keywords are matched case-insensitively. Anything unmatched fires
    ``CommandEvent.UNKNOWN`` with the command (original keyword intact) so
    the handler can report it back to the user.
    """

    def __init__(self) -> None:
        self.events = EventDispatcher("command")

    def register(self, event: CommandEvent, handler: Handler) -> None:
        self.events.register(event, handler)

    async def process_input(self, raw_command: str) -> UserCommand:
        command = parse_user_command(raw_command)
        event = KEYWORD_EVENTS.get(command.keyword, CommandEvent.UNKNOWN)
        logger.log_event(
            "command",
            "unknown" if event is CommandEvent.UNKNOWN else "dispatch",
            level=logging.DEBUG,
            command=command.command,
        )
        await self.events.dispatch(event, command)
        return command
