from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.exceptions import DuplicateOperationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AttendanceRecord, GeoPoint
from .repository import AttendanceRepository


def _point(lat: Any, lng: Any) -> Optional[GeoPoint]:
    if lat is None or lng is None:
        return None
    return GeoPoint(latitude=float(lat), longitude=float(lng))


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
        check_in_location=_point(r.get("check_in_lat"), r.get("check_in_lng")),
        check_out_location=_point(r.get("check_out_lat"), r.get("check_out_lng")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date,
                       check_in_time, check_in_lat, check_in_lng,
                       check_out_time, check_out_lat, check_out_lng
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_record(r)

    def create_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        location: Optional[GeoPoint] = None,
    ) -> int:
        lat = location.latitude if location else None
        lng = location.longitude if location else None
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(employee_id, work_date, check_in_time, check_in_lat, check_in_lng)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (employee_id, work_date, check_in_time, lat, lng),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            # uq_attendance_employee_day
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateOperationError(
                    f"Attendance for {employee_id} on {work_date.isoformat()} already exists"
                ) from e
            raise

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        location: Optional[GeoPoint] = None,
    ) -> bool:
        lat = location.latitude if location else None
        lng = location.longitude if location else None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, check_out_lat=%s, check_out_lng=%s
                WHERE attendance_id=%s AND check_in_time IS NOT NULL AND check_out_time IS NULL
                """,
                (check_out_time, lat, lng, int(attendance_id)),
            )
            return cur.rowcount > 0
