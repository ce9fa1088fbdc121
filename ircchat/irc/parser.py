"""IRC message parsing utilities.

Wire format handled here::

    [":" prefix " "] command [" " parameter]* [" :" trailing]

Everything but the command is optional. Only the trailing parameter may
contain spaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import LINE_TERMINATORS, UNKNOWN_USER
from ..errors import ParsingError


@dataclass
class IRCMessage:
    """One line of the IRC wire protocol."""

    command: str
    parameters: list[str] = field(default_factory=list)
    trailing: str | None = None
    prefix: str = ""

    @property
    def is_numeric(self) -> bool:
        return self.command.isdigit()

    def serialize(self) -> str:
        parts: list[str] = []
        if self.prefix:
            parts.append(f":{self.prefix}")
        parts.append(self.command)
        parts.extend(self.parameters)
        if self.trailing is not None:
            parts.append(f":{self.trailing}")
        return " ".join(parts) + "\r\n"

    def to_bytes(self) -> bytes:
        return self.serialize().encode("utf-8")

    def __str__(self) -> str:
        return self.serialize()


def _split_tokens(segment: str) -> list[str]:
    return [token for token in segment.split(" ") if token]


def parse_irc_message(raw_line: str) -> IRCMessage:
    """Parse one raw protocol line into an ``IRCMessage``.

    Trailing CR, LF and NUL characters are stripped first.

    Raises:
        ParsingError: If the line yields no command (e.g. it is empty or only
            carries a prefix).
    """
    line = raw_line.rstrip(LINE_TERMINATORS)
    prefix = ""
    body_start = 0

    if line.startswith(":"):
        prefix_end = line.find(" ")
        if prefix_end == -1:  # malformed; whole line is prefix, nothing else
            prefix_end = len(line)
        prefix = line[1:prefix_end]
        body_start = prefix_end + 1

    trailing: str | None = None
    trailing_start = line.find(" :", max(body_start - 1, 0))
    if trailing_start >= 0:
        trailing = line[trailing_start + 2 :]
    else:
        trailing_start = len(line)

    tokens = _split_tokens(line[body_start:trailing_start])
    if not tokens:
        raise ParsingError("Line has no command", data={"raw": raw_line})

    return IRCMessage(
        command=tokens[0],
        parameters=tokens[1:],
        trailing=trailing,
        prefix=prefix,
    )


def parse_user_from_prefix(prefix: str | None) -> str:
    """Return the nickname part of a ``nick!user@host`` prefix.

    Prefixes without a ``!`` (server names, empty prefixes) yield
    ``"unknown"``.
    """
    parts = (prefix or "").split("!")
    return parts[0] if len(parts) > 1 else UNKNOWN_USER


@dataclass
class UserCommand:
    """A slash command typed by the local user, e.g. ``/join #python``."""

    command: str
    parameters: list[str] = field(default_factory=list)

    @property
    def keyword(self) -> str:
        return self.command.upper()


def parse_user_command(raw_command: str) -> UserCommand:
    """Split ``/keyword [param]*`` into a ``UserCommand``.

    The leading slash is dropped and the keyword keeps its original case;
    parameters are whitespace separated.
    """
    tokens = raw_command.strip().split()
    if not tokens:
        return UserCommand(command="")
    head = tokens[0]
    command = head[1:] if head.startswith("/") else head
    return UserCommand(command=command, parameters=tokens[1:])
