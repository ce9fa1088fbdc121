"""IRC subsystem package.

Contains message parsing, event dispatch, command routing, transport,
connection, read loop and the client that composes them.
"""

from .client import IRCClient  # noqa: F401
from .commands import UserCommandDispatcher  # noqa: F401
from .dispatcher import IRCDispatcher  # noqa: F401
from .events import EventDispatcher  # noqa: F401
from .models import (  # noqa: F401
    ClientEvent,
    CommandEvent,
    ConnectionState,
    Message,
    MessageType,
    RegistrationInformation,
    ServerEvent,
    ServerInformation,
)
from .parser import (  # noqa: F401
    IRCMessage,
    UserCommand,
    parse_irc_message,
    parse_user_command,
    parse_user_from_prefix,
)
from .transport import TcpTransport, Transport  # noqa: F401

__all__ = [
    "ClientEvent",
    "CommandEvent",
    "ConnectionState",
    "EventDispatcher",
    "IRCClient",
    "IRCDispatcher",
    "IRCMessage",
    "Message",
    "MessageType",
    "RegistrationInformation",
    "ServerEvent",
    "ServerInformation",
    "TcpTransport",
    "Transport",
    "UserCommand",
    "UserCommandDispatcher",
    "parse_irc_message",
    "parse_user_command",
    "parse_user_from_prefix",
]
