from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol

from .model import AttendanceRecord, GeoPoint


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        location: Optional[GeoPoint] = None,
    ) -> int:
        """Insert the day's record.

        Must raise ``DuplicateOperationError`` when a record for
        ``(employee_id, work_date)`` already exists.
        """

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        location: Optional[GeoPoint] = None,
    ) -> bool:
        """Set check-out once.

        Only applies to a record that is checked in and not yet checked out;
        returns False when nothing was updated.
        """

        raise NotImplementedError
