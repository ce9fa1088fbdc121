"""Ordered multi-subscriber event dispatch."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable, Hashable
from typing import Any

from ..errors import HandlerError
from ..logs.logger import logger

Handler = Callable[[Any], Awaitable[None] | None]


class EventDispatcher:
    """Fan a payload out to every subscriber registered for an event.

    Subscribers run one after another in registration order. A subscriber
    that raises does not stop the ones after it; once all have run, the
    collected failures are raised together as a ``HandlerError``. Each
    ``dispatch`` call runs the full subscriber list again.

    Handlers may be plain callables or coroutine functions.
    """

    def __init__(self, name: str = "events") -> None:
        self.name = name
        self._handlers: dict[Hashable, list[Handler]] = defaultdict(list)

    def register(self, event: Hashable, handler: Handler) -> None:
        self._handlers[event].append(handler)

    def handlers(self, event: Hashable) -> list[Handler]:
        return list(self._handlers.get(event, ()))

    def has_handlers(self, event: Hashable) -> bool:
        return bool(self._handlers.get(event))

    async def dispatch(self, event: Hashable, payload: Any) -> None:
        errors: list[Exception] = []
        for handler in self.handlers(event):
            try:
                result = handler(payload)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        if errors:
            event_name = getattr(event, "value", event)
            logger.log_event(
                "irc",
                "handler_error",
                level=logging.DEBUG,
                event=f"{self.name}.{event_name}",
                count=len(errors),
            )
            raise HandlerError(
                f"{len(errors)} handler(s) failed for {self.name}.{event_name}",
                errors,
            )
