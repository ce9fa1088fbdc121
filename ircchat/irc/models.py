"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import DEFAULT_PORT


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTING = auto()
    REGISTERED = auto()


class MessageType(Enum):
    """Kind of outward message handed to the user interface."""

    USER = "user"
    SERVER = "server"
    PRIVATE = "private"


class ServerEvent(Enum):
    """Named events the server-message router can fire."""

    NOTICE = "notice"
    CHANNEL_MESSAGE = "channelMessage"
    JOIN = "join"
    PART = "part"
    NICK_CHANGE = "nickChange"
    PING = "ping"
    QUIT = "quit"


class CommandEvent(Enum):
    """Named events the user-command router can fire."""

    JOIN = "join"
    PART = "part"
    MESSAGE = "message"
    NICK = "nick"
    HELP = "help"
    QUIT = "quit"
    UNKNOWN = "unknown"


class ClientEvent(Enum):
    """Outward events exposed to the user interface."""

    MESSAGE_RECEIVED = "messageReceived"
    CHANNEL_CHANGED = "channelChanged"


@dataclass(slots=True)
class Message:
    """A user-friendly message passed back to the UI.

    Attributes:
        text: The text of the message.
        type: Whether this is channel chatter, a server notice or a direct message.
        user: Nickname of the originating user, if any.
    """

    text: str
    type: MessageType = MessageType.SERVER
    user: str | None = None


class ServerInformation(BaseModel):
    """Host and port of the IRC server being connected to."""

    model_config = ConfigDict(frozen=True)

    host_name: str = Field(min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)

    @field_validator("host_name", mode="before")
    @classmethod
    def strip_host(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class RegistrationInformation(BaseModel):
    """Information used to register a new client with an IRC server.

    Attributes:
        nickname: The nickname by which the user is identified on the server.
        username: The user name sent with USER; defaults to the nickname.
        real_name: The real name sent with USER; defaults to the nickname.
        password: Optional server password sent with PASS.
    """

    model_config = ConfigDict(frozen=True)

    nickname: str = Field(min_length=1)
    username: str = ""
    real_name: str = ""
    password: str | None = None

    @field_validator("nickname", "username", "real_name", mode="before")
    @classmethod
    def strip_names(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("password", mode="before")
    @classmethod
    def blank_password_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="before")
    @classmethod
    def default_names(cls, data: object) -> object:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        nickname = data.get("nickname")
        for key in ("username", "real_name"):
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                data[key] = nickname
        return data
