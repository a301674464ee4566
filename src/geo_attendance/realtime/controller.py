from __future__ import annotations

import logging

from flask import request
from flask_socketio import SocketIO

from ..common.validators import normalize_employee_id
from ..container import Container
from ..core.constants import (
    EVENT_RECEIVE_LOCATION,
    EVENT_REGISTER,
    EVENT_SEND_LOCATION,
    EVENT_USER_DISCONNECTED,
)
from ..core.enums import GeofenceOutcome
from ..geofence.model import LocationReport

logger = logging.getLogger(__name__)


def register(socketio: SocketIO, container: Container) -> None:
    registry = container.connection_registry
    broadcaster = container.broadcaster

    @socketio.on("connect")
    def handle_connect(auth=None):
        logger.info("User connected %s", request.sid)

    @socketio.on(EVENT_REGISTER)
    def handle_register(employee_id=None):
        employee_id = normalize_employee_id(employee_id)
        if employee_id is None:
            logger.warning("Ignoring %s without an employee id from %s", EVENT_REGISTER, request.sid)
            return
        registry.register(employee_id, request.sid)

    @socketio.on(EVENT_SEND_LOCATION)
    def handle_send_location(data=None):
        if not isinstance(data, dict):
            logger.warning("Dropping malformed location payload from %s: %r", request.sid, data)
            return

        report = LocationReport.from_payload(data)
        outcome = container.geofence_service.handle(report)
        if outcome is GeofenceOutcome.REJECTED:
            return

        broadcaster.publish(EVENT_RECEIVE_LOCATION, {"id": request.sid, **report.payload})

    @socketio.on("disconnect")
    def handle_disconnect(reason=None):
        sid = request.sid
        logger.info("User disconnected %s", sid)
        registry.unregister_by_channel(sid)
        broadcaster.publish(EVENT_USER_DISCONNECTED, sid)
