"""Client reactions to events routed from the server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..logs.logger import logger
from .models import Message, MessageType, ServerEvent
from .parser import IRCMessage, parse_user_from_prefix

if TYPE_CHECKING:  # pragma: no cover
    from .client import IRCClient
    from .dispatcher import IRCDispatcher


def _channel_of(message: IRCMessage) -> str | None:
    return message.parameters[0] if message.parameters else None


class ServerEventHandlers:
    def __init__(self, client: IRCClient) -> None:
        self.client = client

    def register(self, dispatcher: IRCDispatcher) -> None:
        dispatcher.register(ServerEvent.CHANNEL_MESSAGE, self.message_received)
        dispatcher.register(ServerEvent.NOTICE, self.notice_received)
        dispatcher.register(ServerEvent.JOIN, self.join_received)
        dispatcher.register(ServerEvent.PART, self.part_received)
        dispatcher.register(ServerEvent.NICK_CHANGE, self.nick_received)
        dispatcher.register(ServerEvent.PING, self.ping_received)
        dispatcher.register(ServerEvent.QUIT, self.quit_received)

    async def notice_received(self, message: IRCMessage) -> None:
        await self.client.emit_message(
            Message(text=message.trailing or "", type=MessageType.SERVER)
        )

    async def message_received(self, message: IRCMessage) -> None:
        """PRIVMSG addressed to our own nickname is private, anything else is channel chatter."""
        user = parse_user_from_prefix(message.prefix)
        message_type = MessageType.USER
        if message.parameters and message.parameters[0] == self.client.nickname:
            message_type = MessageType.PRIVATE
        await self.client.emit_message(
            Message(text=message.trailing or "", type=message_type, user=user)
        )

    async def nick_received(self, message: IRCMessage) -> None:
        previous_nick = parse_user_from_prefix(message.prefix)
        new_nick = message.trailing
        if new_nick is None and message.parameters:
            new_nick = message.parameters[0]
        new_nick = new_nick or ""

        if previous_nick == self.client.nickname and new_nick:
            self.client.nickname = new_nick
            logger.log_event(
                "irc", "nick_changed", level=logging.INFO, nickname=new_nick
            )

        await self.client.emit_message(
            Message(text=f"{previous_nick} is now known as {new_nick}")
        )

    async def join_received(self, message: IRCMessage) -> None:
        channel = _channel_of(message)
        if channel is None:
            return
        user = parse_user_from_prefix(message.prefix)

        self.client.current_channel = channel
        logger.log_event(
            "irc", "channel_changed", level=logging.DEBUG, channel=channel
        )
        await self.client.emit_channel_changed(channel)
        await self.client.emit_message(Message(text=f"{user} has joined {channel}"))

    async def part_received(self, message: IRCMessage) -> None:
        channel = _channel_of(message)
        if channel is None:
            return
        user = parse_user_from_prefix(message.prefix)
        await self.client.emit_message(Message(text=f"{user} has left {channel}"))

    async def ping_received(self, message: IRCMessage) -> None:
        # Echo the server token back so servers that check it accept the reply.
        await self.client.send_to_server(
            IRCMessage(
                command="PONG",
                parameters=list(message.parameters),
                trailing=message.trailing,
            )
        )

    async def quit_received(self, message: IRCMessage) -> None:
        user = parse_user_from_prefix(message.prefix)
        if user == self.client.nickname:
            return
        reason = message.trailing or ""
        await self.client.emit_message(Message(text=f"User {user} has quit [{reason}]"))
