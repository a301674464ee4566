from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Hashable, Optional

logger = logging.getLogger(__name__)

Channel = Hashable


class ConnectionRegistry:
    """Maps an employee identifier to its single live realtime channel.

    Registering a second channel for the same employee evicts the first one
    and forcibly disconnects it through ``disconnect``, so a stale device
    cannot keep broadcasting for an employee.
    """

    def __init__(self, disconnect: Callable[[Channel], None]):
        self._disconnect = disconnect
        self._channels: Dict[str, Channel] = {}
        self._lock = threading.Lock()

    def register(self, employee_id: str, channel: Channel) -> Optional[Channel]:
        with self._lock:
            # a channel belongs to one employee; a channel re-registering
            # under another id drops its old mapping
            stale = [emp for emp, current in self._channels.items() if current == channel and emp != employee_id]
            for emp in stale:
                del self._channels[emp]
            previous = self._channels.get(employee_id)
            self._channels[employee_id] = channel

        for emp in stale:
            logger.info("Channel %s moved from employee %s to %s", channel, emp, employee_id)

        if previous is None or previous == channel:
            logger.info("Mapped employee %s to channel %s", employee_id, channel)
            return None

        # entry already points at the new channel, so the disconnect
        # event for the old one finds nothing to remove
        logger.info(
            "Employee %s already has channel %s; disconnecting it in favour of %s",
            employee_id,
            previous,
            channel,
        )
        try:
            self._disconnect(previous)
        except Exception:
            logger.exception("Failed to disconnect evicted channel %s", previous)
        return previous

    def unregister_by_channel(self, channel: Channel) -> Optional[str]:
        with self._lock:
            for employee_id, current in self._channels.items():
                if current == channel:
                    del self._channels[employee_id]
                    break
            else:
                return None

        logger.info("Removed employee %s from active connections", employee_id)
        return employee_id

    def channel_for(self, employee_id: str) -> Optional[Channel]:
        with self._lock:
            return self._channels.get(employee_id)

    def __contains__(self, employee_id: object) -> bool:
        with self._lock:
            return employee_id in self._channels

    def __len__(self) -> int:
        with self._lock:
            return len(self._channels)
