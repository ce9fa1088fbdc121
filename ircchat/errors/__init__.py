"""Error taxonomy and error logging helpers."""

from .handling import log_error
from .internal import (
    HandlerError,
    InternalError,
    NetworkError,
    NotConnectedError,
    ParsingError,
    SessionStateError,
)

__all__ = [
    "HandlerError",
    "InternalError",
    "NetworkError",
    "NotConnectedError",
    "ParsingError",
    "SessionStateError",
    "log_error",
]
