"""Centralized internal error hierarchy.

These exceptions provide semantic categories for the protocol engine. Raw
socket errors never leave the transport layer unwrapped; they are re-raised as
``NetworkError`` with the original exception chained.

Classes:
  InternalError        – Base for all internal errors.
  NetworkError         – Transport connect/read/write failures.
  NotConnectedError    – An operation that needs a live session was attempted
                         while disconnected.
  SessionStateError    – connect called on a client that already connected.
  ParsingError         – A protocol line that cannot be turned into a message.
  HandlerError         – One or more event subscribers failed during a
                         single dispatch (aggregate).
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors.

    Covers failures to open the TCP connection as well as broken streams
    during reads and writes. The session that raised it is not retried.
    """


class NotConnectedError(InternalError):
    """Exception raised when sending while the client is not connected."""


class SessionStateError(InternalError):
    """Exception raised when connecting a client that has already been used.

    A client connects once; a new session needs a new instance.
    """


class ParsingError(InternalError):
    """Exception raised for protocol lines that produce no command."""


class HandlerError(ExceptionGroup):
    """Aggregate of subscriber failures raised by a single dispatch.

    The wrapped exceptions are available through ``exceptions`` in the order
    the failing subscribers were invoked.
    """


__all__ = [
    "InternalError",
    "NetworkError",
    "NotConnectedError",
    "ParsingError",
    "SessionStateError",
    "HandlerError",
]
