import io
from datetime import datetime

import pytest

from ircchat.chat.console import ConsoleUserInterface, format_message
from ircchat.irc.models import Message, MessageType

NOON = datetime(2024, 5, 1, 12, 30, 45)


@pytest.mark.parametrize(
    ("message_type", "expected"),
    [
        (MessageType.USER, "[12:30] <alice> hi"),
        (MessageType.SERVER, "[12:30] == hi"),
        (MessageType.PRIVATE, "[12:30] *alice* hi"),
    ],
)
def test_format_message(message_type, expected):  # type: ignore[no-untyped-def]
    assert format_message("hi", "alice", message_type, now=NOON) == expected


def test_format_message_custom_time_format():
    line = format_message("hi", None, MessageType.SERVER, time_format="%H:%M:%S", now=NOON)
    assert line == "[12:30:45] == hi"


class TestConsoleUserInterface:
    def test_output_message_writes_one_line(self):  # type: ignore[no-untyped-def]
        stream = io.StringIO()
        ui = ConsoleUserInterface(stream=stream)

        ui.output_message(Message(text="hello", type=MessageType.USER, user="bob"))

        output = stream.getvalue()
        assert output.endswith("<bob> hello\n")
        assert output.count("\n") == 1

    def test_title_is_stored_without_escape_on_non_tty(self):  # type: ignore[no-untyped-def]
        stream = io.StringIO()
        ui = ConsoleUserInterface(stream=stream)

        ui.title = "irc.example.net > #python"

        assert ui.title == "irc.example.net > #python"
        assert stream.getvalue() == ""

    def test_title_sets_terminal_title_on_tty(self):  # type: ignore[no-untyped-def]
        class TtyStream(io.StringIO):
            def isatty(self) -> bool:
                return True

        stream = TtyStream()
        ui = ConsoleUserInterface(stream=stream)

        ui.title = "irc.example.net > "

        assert stream.getvalue() == "\x1b]0;irc.example.net > \x07"

    @pytest.mark.asyncio
    async def test_get_user_input_reads_line(self, monkeypatch):  # type: ignore[no-untyped-def]
        monkeypatch.setattr("builtins.input", lambda prompt: "/join #python")
        ui = ConsoleUserInterface(stream=io.StringIO())

        assert await ui.get_user_input("tester") == "/join #python"

    @pytest.mark.asyncio
    async def test_closed_stdin_means_quit(self, monkeypatch):  # type: ignore[no-untyped-def]
        def closed(prompt):  # type: ignore[no-untyped-def]
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)
        ui = ConsoleUserInterface(stream=io.StringIO())

        assert await ui.get_user_input("tester") == "/quit"
