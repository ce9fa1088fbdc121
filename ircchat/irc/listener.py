"""Read loop extracted from the client for clarity & testability."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ..constants import LINE_TERMINATORS
from ..errors import HandlerError, log_error
from ..logs.logger import logger

if TYPE_CHECKING:  # pragma: no cover
    from .client import IRCClient


class IRCListener:
    """Owns the read loop and hands every line to the server dispatcher.

    The quit signal is checked once per line. A read that is already waiting
    on the socket is not interrupted by it; the loop ends once that read
    returns (normally because the server closes the link after QUIT).
    """

    def __init__(self, client: IRCClient) -> None:
        self.client = client
        self.task: asyncio.Task[None] | None = None

    def start(self) -> asyncio.Task[None]:
        self.task = asyncio.create_task(self.listen(), name="irc-read-loop")
        return self.task

    async def listen(self) -> None:
        client = self.client
        logger.log_event(
            "irc", "listener_start", level=logging.DEBUG, user=client.nickname
        )
        try:
            while client.connected and not client.quit_requested.is_set():
                should_stop = await self.read()
                if should_stop:
                    break
        finally:
            client._mark_disconnected()  # noqa: SLF001
            logger.log_event(
                "irc", "listener_stopped", level=logging.DEBUG, user=client.nickname
            )

    async def read(self) -> bool:
        """Read and dispatch a single line. Returns True when the loop must stop."""
        client = self.client
        if client.reader is None:
            return True
        try:
            data = await client.reader.readline()
        except ValueError as e:
            # Over-long line; the reader already discarded it.
            logger.log_event("irc", "read_error", level=logging.WARNING, error=str(e))
            return False
        except (OSError, ConnectionError) as e:
            logger.log_event(
                "irc",
                "read_error",
                level=logging.ERROR,
                user=client.nickname,
                error=str(e),
            )
            return True

        if not data:
            logger.log_event(
                "irc", "connection_lost", level=logging.WARNING, user=client.nickname
            )
            return True

        line = data.decode(client.settings.encoding, errors="replace").rstrip(
            LINE_TERMINATORS
        )
        logger.log_event("irc", "raw_in", level=logging.DEBUG, raw=line)
        try:
            await client.dispatcher.process_line(line)
        except HandlerError as e:
            log_error("Server event handler failed", e, context={"raw": line})
        return False
