"""Async IRC client: one server, one channel at a time."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..errors import NetworkError, NotConnectedError
from ..logs.logger import logger
from ..settings import ClientSettings
from .commands import UserCommandDispatcher
from .connection import IRCConnectionController
from .dispatcher import IRCDispatcher
from .events import EventDispatcher
from .listener import IRCListener
from .models import (
    ClientEvent,
    ConnectionState,
    Message,
    RegistrationInformation,
    ServerInformation,
)
from .parser import IRCMessage
from .server_events import ServerEventHandlers
from .transport import TcpTransport, Transport
from .user_commands import UserCommandHandlers

NO_CHANNEL_TEXT = "You are not in a channel. Use /join <channel> first."


class IRCClient:  # pylint: disable=too-many-instance-attributes
    """Owns the transport stream and the session state of one connection.

    Session state (nickname, current channel, connection flag) is only
    changed by the client's own server-event and user-command handlers. A
    client instance connects once; there is no reconnect.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        self.transport: Transport = transport or TcpTransport()
        self.settings = settings or ClientSettings()
        self.server_information: ServerInformation | None = None
        self.nickname: str | None = None
        self.current_channel: str | None = None
        self.connected = False
        self.state = ConnectionState.DISCONNECTED
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None
        self.quit_requested = asyncio.Event()
        self._write_lock = asyncio.Lock()

        self.outward = EventDispatcher("client")
        self.dispatcher = IRCDispatcher()
        self.command_dispatcher = UserCommandDispatcher()
        self.server_events = ServerEventHandlers(self)
        self.server_events.register(self.dispatcher)
        self.user_commands = UserCommandHandlers(self)
        self.user_commands.register(self.command_dispatcher)
        self.connection = IRCConnectionController(self)
        self.listener = IRCListener(self)

    @property
    def is_connected(self) -> bool:
        return self.connected

    def _set_state(self, new_state: ConnectionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                user=self.nickname,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    def _mark_disconnected(self) -> None:
        self.connected = False
        self._set_state(ConnectionState.DISCONNECTED)

    # Outward events

    def add_message_handler(
        self, handler: Callable[[Message], Awaitable[None] | None]
    ) -> None:
        self.outward.register(ClientEvent.MESSAGE_RECEIVED, handler)

    def add_channel_handler(
        self, handler: Callable[[str], Awaitable[None] | None]
    ) -> None:
        self.outward.register(ClientEvent.CHANNEL_CHANGED, handler)

    async def emit_message(self, message: Message) -> None:
        await self.outward.dispatch(ClientEvent.MESSAGE_RECEIVED, message)

    async def emit_channel_changed(self, channel: str) -> None:
        await self.outward.dispatch(ClientEvent.CHANNEL_CHANGED, channel)

    # Connection

    async def connect(
        self,
        server_info: ServerInformation,
        registration_info: RegistrationInformation | None,
    ) -> None:
        """Connect, register and start the read loop in the background.

        Raises:
            ValueError: If ``registration_info`` is None (before any I/O).
            SessionStateError: If this client has connected or been shut down
                before (a client connects once).
            NetworkError: If the transport cannot connect or the handshake
                cannot be written.
        """
        await self.connection.connect(server_info, registration_info)

    async def handle_connection(
        self, registration_info: RegistrationInformation | None
    ) -> None:
        await self.connection.handle_connection(registration_info)

    async def send_registration_info(
        self, registration_info: RegistrationInformation | None
    ) -> None:
        await self.connection.send_registration_info(registration_info)

    def request_quit(self) -> None:
        """Raise the one-shot signal that stops the read loop after the current line."""
        if not self.quit_requested.is_set():
            logger.log_event(
                "irc", "quit_requested", level=logging.DEBUG, user=self.nickname
            )
        self.quit_requested.set()

    async def wait_closed(self) -> None:
        task = self.listener.task
        if task is not None:
            await asyncio.shield(task)

    async def disconnect(self) -> None:
        """Stop reading and close the transport. The instance is not reusable."""
        self.request_quit()
        self._mark_disconnected()
        await self.transport.close()
        task = self.listener.task
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self.reader = None
        self.writer = None
        logger.log_event("irc", "disconnected", level=logging.DEBUG, user=self.nickname)

    # Sending

    async def send_message(self, text: str | None) -> None:
        """Send user input: slash commands are routed, anything else goes to the channel.

        Raises:
            NotConnectedError: If the client is not connected.
        """
        if not self.is_connected:
            raise NotConnectedError("The client is not connected to a server.")

        if text is None or not text.strip():
            return

        if text.startswith("/"):
            await self.command_dispatcher.process_input(text)
        else:
            await self.process_user_message(text)

    async def process_user_message(self, text: str) -> None:
        if not self.current_channel:
            logger.log_event("irc", "no_channel", level=logging.DEBUG)
            await self.emit_message(Message(text=NO_CHANNEL_TEXT))
            return
        await self.send_to_server(
            IRCMessage(command="PRIVMSG", parameters=[self.current_channel], trailing=text)
        )

    async def send_to_server(self, message: IRCMessage) -> None:
        """Write one message; writes are serialized so lines never interleave."""
        if self.writer is None:
            raise NotConnectedError("The client is not connected to a server.")

        raw = message.serialize()
        logged = "PASS ****" if message.command == "PASS" else raw.rstrip("\r\n")
        logger.log_event("irc", "raw_out", level=logging.DEBUG, raw=logged)

        async with self._write_lock:
            try:
                self.writer.write(raw.encode("utf-8"))
                await self.writer.drain()
            except (OSError, ConnectionError) as e:
                logger.log_event(
                    "irc", "send_error", level=logging.ERROR, error=str(e)
                )
                raise NetworkError(f"Failed to send {message.command}: {e}") from e
