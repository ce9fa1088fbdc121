"""Connect sequence and registration handshake."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import NetworkError, SessionStateError
from ..logs.logger import logger
from .models import ConnectionState, RegistrationInformation, ServerInformation
from .parser import IRCMessage

if TYPE_CHECKING:  # pragma: no cover
    from .client import IRCClient


class IRCConnectionController:
    """Opens the transport, registers with the server and starts reading."""

    def __init__(self, client: IRCClient) -> None:
        self.client = client

    async def connect(
        self,
        server_info: ServerInformation,
        registration_info: RegistrationInformation | None,
    ) -> None:
        client = self.client
        if registration_info is None:
            raise ValueError("The registration info object was null.")
        if (
            client.state is not ConnectionState.DISCONNECTED
            or client.connected
            or client.listener.task is not None
            or client.quit_requested.is_set()
        ):
            raise SessionStateError(
                "The client has already connected; create a new client to reconnect.",
                data={"state": client.state.name},
            )

        client.connected = False
        client.server_information = server_info
        client.nickname = registration_info.nickname

        client._set_state(ConnectionState.CONNECTING)  # noqa: SLF001
        logger.log_event(
            "irc",
            "connect_start",
            user=client.nickname,
            server=server_info.host_name,
            port=server_info.port,
        )
        try:
            await client.transport.connect(server_info.host_name, server_info.port)
        except NetworkError as e:
            logger.log_event(
                "irc",
                "connect_failed",
                level=logging.ERROR,
                user=client.nickname,
                server=server_info.host_name,
                port=server_info.port,
                error=str(e),
            )
            client._set_state(ConnectionState.DISCONNECTED)  # noqa: SLF001
            raise

        try:
            await self.handle_connection(registration_info)
        except NetworkError:
            client._mark_disconnected()  # noqa: SLF001
            raise
        logger.log_event(
            "irc",
            "connect_success",
            user=client.nickname,
            server=server_info.host_name,
            port=server_info.port,
        )

    async def handle_connection(
        self, registration_info: RegistrationInformation | None
    ) -> None:
        """Complete a fresh connection: registration first, then the read loop."""
        client = self.client
        client.reader, client.writer = client.transport.get_stream()
        client.connected = True

        await self.send_registration_info(registration_info)
        client._set_state(ConnectionState.REGISTERED)  # noqa: SLF001

        client.listener.start()

    async def send_registration_info(
        self, info: RegistrationInformation | None
    ) -> None:
        """Send PASS (when a password is set), NICK and USER, in that order."""
        if info is None:
            raise ValueError("The registration info object was null.")

        if info.password:
            await self.client.send_to_server(
                IRCMessage(command="PASS", parameters=[info.password])
            )
        await self.client.send_to_server(
            IRCMessage(command="NICK", parameters=[info.nickname])
        )
        await self.client.send_to_server(
            IRCMessage(
                command="USER",
                parameters=[info.username, "none", "none"],
                trailing=info.real_name,
            )
        )
        logger.log_event(
            "irc",
            "registration_sent",
            level=logging.DEBUG,
            user=info.nickname,
            nickname=info.nickname,
        )
