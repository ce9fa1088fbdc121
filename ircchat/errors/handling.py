from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    HandlerError,
    InternalError,
    NetworkError,
    NotConnectedError,
    ParsingError,
    SessionStateError,
)


def error_category(error: BaseException) -> str:
    """Map an exception onto the category name used in structured logs."""
    if isinstance(error, NetworkError | OSError | ConnectionError):
        return "network"
    if isinstance(error, NotConnectedError | SessionStateError):
        return "session"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, HandlerError):
        return "handler"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(
    message: str, error: BaseException, context: dict[str, object] | None = None
) -> None:
    """Logs an error message with the associated exception details.

    Aggregated handler failures are expanded so that every inner exception
    shows up in the log, in the order the subscribers ran.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    log_structured_error(
        error_type=error_category(error),
        message=f"{message}: {error}",
        exception=error,
        context=context,
    )
    if isinstance(error, HandlerError):
        for index, inner in enumerate(error.exceptions, start=1):
            log_structured_error(
                error_type="handler",
                message=f"{message} (subscriber failure {index}/{len(error.exceptions)})",
                exception=inner,
            )
