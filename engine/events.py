"""Lifecycle event dispatch: one replaceable handler per event type."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from models.events import GameEventType

logger = logging.getLogger(__name__)


def _noop(_payload: Any) -> None:
    pass


class EventBus:
    """Holds exactly one handler per GameEventType.

    Subscribing replaces the previous handler; unsubscribed events fall back
    to a no-op so emitting is always safe.
    """

    def __init__(self) -> None:
        self._handlers: dict[GameEventType, Callable[[Any], None]] = {
            event: _noop for event in GameEventType
        }

    def subscribe(self, event: GameEventType, handler: Callable[[Any], None]) -> None:
        self._handlers[event] = handler

    def clear(self, event: GameEventType) -> None:
        """Restore the no-op handler for ``event``."""
        self._handlers[event] = _noop

    def emit(self, event: GameEventType, payload: Any) -> None:
        logger.debug("event %s", event.value)
        self._handlers[event](payload)
