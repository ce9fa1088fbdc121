import asyncio

import pytest

from ircchat.errors import NetworkError
from ircchat.irc.transport import TcpTransport


@pytest.mark.asyncio
async def test_connect_failure_is_wrapped(monkeypatch):  # type: ignore[no-untyped-def]
    async def refuse(host, port):  # type: ignore[no-untyped-def]
        raise ConnectionRefusedError(111, "Connection refused")

    monkeypatch.setattr(asyncio, "open_connection", refuse)
    transport = TcpTransport()

    with pytest.raises(NetworkError) as excinfo:
        await transport.connect("irc.example.net", 6667)

    assert isinstance(excinfo.value.__cause__, ConnectionRefusedError)
    assert excinfo.value.data == {"host": "irc.example.net", "port": 6667}


def test_get_stream_before_connect():
    with pytest.raises(NetworkError):
        TcpTransport().get_stream()


@pytest.mark.asyncio
async def test_close_without_connection_is_noop():  # type: ignore[no-untyped-def]
    transport = TcpTransport()
    await transport.close()
    assert transport.writer is None


@pytest.mark.asyncio
async def test_loopback_roundtrip():  # type: ignore[no-untyped-def]
    received: list[bytes] = []

    async def serve(reader, writer):  # type: ignore[no-untyped-def]
        received.append(await reader.readline())
        writer.write(b"PING :loopback\r\n")
        await writer.drain()
        writer.close()

    server = await asyncio.start_server(serve, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    transport = TcpTransport()
    try:
        await transport.connect("127.0.0.1", port)
        reader, writer = transport.get_stream()
        writer.write(b"NICK tester\r\n")
        await writer.drain()
        line = await asyncio.wait_for(reader.readline(), timeout=2)
    finally:
        await transport.close()
        server.close()
        await server.wait_closed()

    assert received == [b"NICK tester\r\n"]
    assert line == b"PING :loopback\r\n"
    with pytest.raises(NetworkError):
        transport.get_stream()
