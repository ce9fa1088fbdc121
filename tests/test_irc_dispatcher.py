from __future__ import annotations

import pytest

from ircchat.errors import HandlerError
from ircchat.irc.dispatcher import IRCDispatcher, event_for_command
from ircchat.irc.models import ServerEvent
from ircchat.irc.parser import IRCMessage


def _recording_dispatcher() -> tuple[IRCDispatcher, list[tuple[ServerEvent, IRCMessage]]]:
    disp = IRCDispatcher()
    fired: list[tuple[ServerEvent, IRCMessage]] = []
    for event in ServerEvent:
        disp.register(event, lambda msg, ev=event: fired.append((ev, msg)))
    return disp, fired


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("NOTICE :hello", ServerEvent.NOTICE),
        ("PRIVMSG #channel :hello", ServerEvent.CHANNEL_MESSAGE),
        ("JOIN #channel", ServerEvent.JOIN),
        ("PART #channel", ServerEvent.PART),
        (":oldNick! NICK :newNick", ServerEvent.NICK_CHANGE),
        ("PING", ServerEvent.PING),
        ("QUIT", ServerEvent.QUIT),
        ("privmsg #channel :lowercase keyword", ServerEvent.CHANNEL_MESSAGE),
    ],
)
@pytest.mark.asyncio
async def test_commands_route_to_named_events(line, expected):  # type: ignore[no-untyped-def]
    disp, fired = _recording_dispatcher()
    message = await disp.process_line(line)
    assert message is not None
    assert [ev for ev, _ in fired] == [expected]


@pytest.mark.asyncio
async def test_numeric_reply_routes_like_notice():
    disp, fired = _recording_dispatcher()
    await disp.process_line("100 :numeric text")
    await disp.process_line("NOTICE :notice text")
    assert [ev for ev, _ in fired] == [ServerEvent.NOTICE, ServerEvent.NOTICE]
    assert fired[0][1].trailing == "numeric text"


@pytest.mark.asyncio
async def test_unknown_command_is_dropped():
    disp, fired = _recording_dispatcher()
    message = await disp.process_line(":irc.example.net MODE tester +i")
    assert message is not None and message.command == "MODE"
    assert fired == []


@pytest.mark.asyncio
async def test_blank_and_malformed_lines_are_skipped(caplog):  # type: ignore[no-untyped-def]
    disp, fired = _recording_dispatcher()
    assert await disp.process_line("") is None
    assert await disp.process_line(":prefix-only") is None
    assert fired == []
    assert any("malformed" in r.getMessage().lower() for r in caplog.records)


@pytest.mark.asyncio
async def test_handler_failures_surface_as_aggregate():
    disp = IRCDispatcher()

    def broken(msg: IRCMessage) -> None:
        raise RuntimeError("broken")

    disp.register(ServerEvent.PING, broken)
    disp.register(ServerEvent.PING, broken)

    with pytest.raises(HandlerError) as exc_info:
        await disp.process_line("PING :x")
    assert len(exc_info.value.exceptions) == 2


def test_event_for_command():  # type: ignore[no-untyped-def]
    assert event_for_command("433") is ServerEvent.NOTICE
    assert event_for_command("Join") is ServerEvent.JOIN
    assert event_for_command("CAP") is None
