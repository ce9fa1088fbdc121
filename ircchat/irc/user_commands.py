"""Client reactions to slash commands typed by the user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import QUIT_MESSAGE
from .models import CommandEvent, Message
from .parser import IRCMessage, UserCommand

if TYPE_CHECKING:  # pragma: no cover
    from .client import IRCClient
    from .commands import UserCommandDispatcher

HELP_LINES = (
    "/join <channel> \tJoins a channel",
    "/part \t\tLeaves the current channel",
    "/lang \t\tSets the translation language. If 'off', turns translation off",
    "/msg <user> <msg> \tSends a private message",
    "/nick <nickname> \tChange nickname",
    "/quit \t\tDisconnects the client",
)


class UserCommandHandlers:
    def __init__(self, client: IRCClient) -> None:
        self.client = client

    def register(self, dispatcher: UserCommandDispatcher) -> None:
        dispatcher.register(CommandEvent.JOIN, self.join_command_sent)
        dispatcher.register(CommandEvent.PART, self.part_command_sent)
        dispatcher.register(CommandEvent.MESSAGE, self.private_message_command_sent)
        dispatcher.register(CommandEvent.NICK, self.nick_command_sent)
        dispatcher.register(CommandEvent.HELP, self.help_command_sent)
        dispatcher.register(CommandEvent.QUIT, self.quit_command_sent)
        dispatcher.register(CommandEvent.UNKNOWN, self.unknown_command_sent)

    async def private_message_command_sent(self, command: UserCommand) -> None:
        """``/msg <user> <text...>``: send straight to one user."""
        if len(command.parameters) < 2:
            return
        receiving_user, *words = command.parameters
        await self.client.send_to_server(
            IRCMessage(
                command="PRIVMSG",
                parameters=[receiving_user],
                trailing=" ".join(words),
            )
        )

    async def join_command_sent(self, command: UserCommand) -> None:
        """Leave the current channel (if any) and ask to join the new one.

        The current channel only changes once the server confirms the JOIN.
        """
        if not command.parameters:
            return
        current = self.client.current_channel
        if current:
            await self.client.send_to_server(
                IRCMessage(command="PART", parameters=[current])
            )
        await self.client.send_to_server(
            IRCMessage(command="JOIN", parameters=[command.parameters[0]])
        )

    async def part_command_sent(self, command: UserCommand) -> None:
        current = self.client.current_channel
        if not current:
            return
        await self.client.emit_channel_changed("")
        await self.client.send_to_server(IRCMessage(command="PART", parameters=[current]))
        self.client.current_channel = None

    async def nick_command_sent(self, command: UserCommand) -> None:
        await self.client.send_to_server(
            IRCMessage(command="NICK", parameters=list(command.parameters))
        )

    async def help_command_sent(self, command: UserCommand) -> None:
        for line in HELP_LINES:
            await self.client.emit_message(Message(text=line))

    async def quit_command_sent(self, command: UserCommand) -> None:
        await self.client.send_to_server(
            IRCMessage(command="QUIT", trailing=QUIT_MESSAGE)
        )
        self.client.request_quit()

    async def unknown_command_sent(self, command: UserCommand) -> None:
        await self.client.emit_message(
            Message(text=f'The command "/{command.command}" is not a known command.')
        )
