"""Raw byte-stream transport used by the client."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from ..errors import NetworkError
from ..logs.logger import logger

StreamPair = tuple[asyncio.StreamReader, asyncio.StreamWriter]


class Transport(Protocol):
    """Contract the client needs from a transport."""

    async def connect(self, host: str, port: int) -> None:
        """Open the connection, raising ``NetworkError`` on failure."""
        ...

    def get_stream(self) -> StreamPair:
        """Return the duplex stream of an open connection."""
        ...

    async def close(self) -> None:
        """Close the connection if open."""
        ...


class TcpTransport:
    """Plain TCP transport on top of asyncio streams."""

    def __init__(self) -> None:
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None

    async def connect(self, host: str, port: int) -> None:
        try:
            self.reader, self.writer = await asyncio.open_connection(host, port)
        except OSError as e:
            raise NetworkError(
                f"Unable to connect to {host} on port {port}: {e}",
                data={"host": host, "port": port},
            ) from e

    def get_stream(self) -> StreamPair:
        if self.reader is None or self.writer is None:
            raise NetworkError("Transport is not connected")
        return self.reader, self.writer

    async def close(self) -> None:
        writer = self.writer
        self.reader = None
        self.writer = None
        if writer is None:
            return
        try:
            writer.close()
            await writer.wait_closed()
        except (OSError, ConnectionError) as e:
            logger.log_event("irc", "send_error", level=logging.DEBUG, error=str(e))
