from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Broadcaster:
    """Fire-and-forget fan-out to every connected channel.

    Delivery is at most once. There is no acknowledgment, no ordering
    guarantee across recipients and no backpressure; a channel that drops
    while an event is in flight simply misses it.
    """

    def __init__(self, emit: Callable[..., Any]):
        self._emit = emit

    def publish(self, event: str, payload: Any) -> None:
        try:
            self._emit(event, payload)
        except Exception:
            logger.exception("Broadcast of %s failed", event)
