from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .database.connection import DBConfig, DatabaseConnection
from .geofence.service import GeofenceService
from .realtime.broadcaster import Broadcaster
from .realtime.registry import ConnectionRegistry


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    geofence_service: GeofenceService

    connection_registry: ConnectionRegistry
    broadcaster: Broadcaster


def build_container(
    *,
    disconnect: Callable[[Any], None],
    emit: Callable[..., Any],
    db_config: Optional[dict] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    conn = None
    if attendance_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no attendance repository is given")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        attendance_repo = MySQLAttendanceRepository(conn)

    attendance_service = AttendanceService(attendance_repo, clock=clock)
    geofence_service = GeofenceService(attendance_repo, clock=clock)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        geofence_service=geofence_service,
        connection_registry=ConnectionRegistry(disconnect),
        broadcaster=Broadcaster(emit),
    )
