"""Interactive chat application tying the client to the console."""

from __future__ import annotations

from typing import Protocol

from ..errors import HandlerError, NetworkError, NotConnectedError, log_error
from ..irc.client import IRCClient
from ..irc.models import Message, RegistrationInformation, ServerInformation


class UserInterface(Protocol):
    title: str

    def setup_interface(self) -> None: ...

    def output_message(self, message: Message) -> None: ...

    async def get_user_input(self, nickname: str | None) -> str: ...


class IRCChatApplication:
    def __init__(
        self,
        client: IRCClient,
        user_interface: UserInterface,
        echo=print,
    ) -> None:
        self.client = client
        self.ui = user_interface
        self.echo = echo

    async def start(
        self,
        server_info: ServerInformation,
        registration_info: RegistrationInformation,
    ) -> bool:
        """Connect and run the input loop until the user quits.

        Returns False when the connection could not be established.
        """
        self.client.add_message_handler(self.output_message)
        self.client.add_channel_handler(self.change_channel)

        self.ui.setup_interface()
        self.ui.output_message(Message(text="Connecting to server..."))

        try:
            await self.client.connect(server_info, registration_info)
        except NetworkError as e:
            log_error("Connection failed", e)
            self.echo(
                f"ERROR: Unable to connect to {server_info.host_name} "
                f"on port {server_info.port}"
            )
            return False

        self.ui.title = f"{server_info.host_name} > "
        await self.prompt_for_input()
        return True

    async def prompt_for_input(self) -> None:
        """Send user input through the client until ``/quit`` or disconnection."""
        while True:
            user_input = await self.ui.get_user_input(self.client.nickname)
            try:
                await self.client.send_message(user_input)
            except NotConnectedError:
                self.echo("Not connected to a server. Exiting application.")
                break
            except NetworkError as e:
                log_error("Send failed", e)
                self.echo("Connection to the server was lost. Exiting application.")
                break
            except HandlerError as e:
                log_error("Command handler failed", e)
                if e.subgroup((NetworkError, NotConnectedError)) is not None:
                    self.echo("Connection to the server was lost. Exiting application.")
                    break

            if user_input.lower() == "/quit":
                break

    def output_message(self, message: Message | None) -> None:
        if message is not None:
            self.ui.output_message(message)

    def change_channel(self, channel: str) -> None:
        info = self.client.server_information
        host = info.host_name if info else ""
        self.ui.title = f"{host} > {channel}"
