import pytest
from pydantic import ValidationError

from ircchat.config import (
    load_registration_information,
    load_server_information,
    load_settings,
)
from ircchat.constants import DEFAULT_PORT
from ircchat.irc.models import RegistrationInformation, ServerInformation
from ircchat.settings import ClientSettings

_ENV = (
    "IRC_HOST",
    "IRC_PORT",
    "IRC_NICKNAME",
    "IRC_USERNAME",
    "IRC_REALNAME",
    "IRC_PASSWORD",
    "IRC_ENCODING",
    "IRC_TIME_FORMAT",
    "IRC_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):  # type: ignore[no-untyped-def]
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


class Answers:
    """Prompt stub returning canned answers and recording the labels asked."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.asked: list[str] = []

    def __call__(self, label: str) -> str:
        self.asked.append(label)
        return self.answers.pop(0)


class TestServerInformation:
    def test_prompts_for_missing_values(self):  # type: ignore[no-untyped-def]
        prompt = Answers(" irc.libera.chat ", "6697")

        info = load_server_information(prompt)

        assert info == ServerInformation(host_name="irc.libera.chat", port=6697)
        assert prompt.asked == ["Server: ", "Port: "]

    def test_environment_skips_prompt(self, monkeypatch):  # type: ignore[no-untyped-def]
        monkeypatch.setenv("IRC_HOST", "irc.example.net")
        monkeypatch.setenv("IRC_PORT", "7000")
        prompt = Answers()

        info = load_server_information(prompt)

        assert (info.host_name, info.port) == ("irc.example.net", 7000)
        assert prompt.asked == []

    @pytest.mark.parametrize("port", ["0", "65536", "abc"])
    def test_invalid_port(self, port):  # type: ignore[no-untyped-def]
        with pytest.raises(ValidationError):
            load_server_information(Answers("irc.example.net", port))

    def test_blank_port_uses_default(self):  # type: ignore[no-untyped-def]
        info = load_server_information(Answers("irc.example.net", "  "))
        assert info.port == DEFAULT_PORT

    def test_reads_builtin_input_by_default(self, monkeypatch):  # type: ignore[no-untyped-def]
        prompt = Answers("irc.example.net", "6697")
        monkeypatch.setattr("builtins.input", prompt)

        info = load_server_information()

        assert (info.host_name, info.port) == ("irc.example.net", 6697)
        assert prompt.asked == ["Server: ", "Port: "]

    def test_blank_host(self):  # type: ignore[no-untyped-def]
        with pytest.raises(ValidationError):
            load_server_information(Answers("   ", "6667"))

    def test_default_port(self):  # type: ignore[no-untyped-def]
        assert ServerInformation(host_name="irc.example.net").port == DEFAULT_PORT


class TestRegistrationInformation:
    def test_prompts_in_order(self):  # type: ignore[no-untyped-def]
        prompt = Answers("iluvcats92", "jsmith", "John Smith", "Pa$$word123")

        info = load_registration_information(prompt)

        assert prompt.asked == [
            "Enter nickname: ",
            "Enter username: ",
            "Enter real name: ",
            "Enter pass: ",
        ]
        assert info.nickname == "iluvcats92"
        assert info.username == "jsmith"
        assert info.real_name == "John Smith"
        assert info.password == "Pa$$word123"

    def test_blank_answers_default_to_nickname(self):  # type: ignore[no-untyped-def]
        info = load_registration_information(Answers("tester", "", "", ""))

        assert info.username == "tester"
        assert info.real_name == "tester"
        assert info.password is None

    def test_unattended_when_nickname_in_environment(self, monkeypatch):  # type: ignore[no-untyped-def]
        monkeypatch.setenv("IRC_NICKNAME", "bot")
        monkeypatch.setenv("IRC_PASSWORD", "secret")
        prompt = Answers()

        info = load_registration_information(prompt)

        assert prompt.asked == []
        assert info == RegistrationInformation(
            nickname="bot", username="bot", real_name="bot", password="secret"
        )

    def test_blank_nickname_is_rejected(self):  # type: ignore[no-untyped-def]
        with pytest.raises(ValidationError):
            load_registration_information(Answers("", "", "", ""))


class TestSettings:
    def test_defaults(self):  # type: ignore[no-untyped-def]
        settings = load_settings()
        assert settings == ClientSettings()
        assert settings.encoding == "utf-8"
        assert settings.time_format == "%H:%M"
        assert settings.log_file is None

    def test_environment_overrides(self, monkeypatch, tmp_path):  # type: ignore[no-untyped-def]
        monkeypatch.setenv("IRC_ENCODING", "latin-1")
        monkeypatch.setenv("IRC_TIME_FORMAT", "%H:%M:%S")
        monkeypatch.setenv("IRC_LOG_FILE", str(tmp_path / "irc.log"))

        settings = load_settings()

        assert settings.encoding == "iso8859-1"
        assert settings.time_format == "%H:%M:%S"
        assert settings.log_file == str(tmp_path / "irc.log")

    def test_unknown_encoding_rejected(self, monkeypatch):  # type: ignore[no-untyped-def]
        monkeypatch.setenv("IRC_ENCODING", "klingon-8")
        with pytest.raises(ValidationError):
            load_settings()

    def test_settings_are_frozen(self):  # type: ignore[no-untyped-def]
        with pytest.raises(ValidationError):
            ClientSettings().encoding = "ascii"  # type: ignore[misc]
