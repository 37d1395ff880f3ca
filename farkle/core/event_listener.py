from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Iterable, Optional

from farkle.core.game_event import GameEvent, GameEventType

logger = logging.getLogger(__name__)

Callback = Callable[[GameEvent], None]


class EventListener:
    """Delivers published GameEvents to subscribers.

    A subscriber registered without types hears every event; with types it
    only hears those. A subscriber that raises is logged and skipped.
    """

    def __init__(self):
        # None holds the catch-all subscribers
        self._subscribers: dict[Optional[GameEventType], list[Callback]] = defaultdict(list)

    def subscribe(self, callback: Callback, types: Optional[Iterable[GameEventType]] = None):
        for key in (types if types is not None else [None]):
            if callback not in self._subscribers[key]:
                self._subscribers[key].append(callback)

    def publish(self, event: GameEvent):
        targets = self._subscribers.get(None, []) + self._subscribers.get(event.type, [])
        for callback in targets:
            try:
                callback(event)
            except Exception:
                logger.exception("Subscriber %r failed on %s", callback, event.type.name)
