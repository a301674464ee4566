from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local, work_day
from ..core.constants import MSG_CHECKIN_DUPLICATE, MSG_CHECKOUT_INVALID
from ..core.exceptions import DuplicateOperationError, InvalidStateError
from .model import AttendanceRecord, AttendanceStatusView, GeoPoint
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Explicit check-in/check-out requests and status lookups.

    The day is always the server's current local day; the client timestamp
    only sets the recorded time.
    """

    def __init__(self, attendance: AttendanceRepository, *, clock: Callable[[], datetime] = now_local):
        self._attendance = attendance
        self._clock = clock

    def check_in(self, employee_id: str, *, timestamp: datetime, location: GeoPoint) -> None:
        today = work_day(self._clock())

        existing = self._attendance.get_for_employee_and_date(employee_id, today)
        if existing:
            raise DuplicateOperationError(MSG_CHECKIN_DUPLICATE)

        try:
            self._attendance.create_checkin(
                employee_id=employee_id,
                work_date=today,
                check_in_time=timestamp,
                location=location,
            )
        except DuplicateOperationError as e:
            # lost the race against a concurrent check-in
            raise DuplicateOperationError(MSG_CHECKIN_DUPLICATE) from e
        logger.info("Check-in recorded for employee %s at %s", employee_id, timestamp.isoformat())

    def check_out(self, employee_id: str, *, timestamp: datetime, location: GeoPoint) -> None:
        today = work_day(self._clock())

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record or not record.can_check_out:
            raise InvalidStateError(MSG_CHECKOUT_INVALID)

        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=timestamp,
            location=location,
        )
        if not updated:
            raise InvalidStateError(MSG_CHECKOUT_INVALID)
        logger.info("Check-out recorded for employee %s at %s", employee_id, timestamp.isoformat())

    def get_today_record(self, employee_id: str) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, work_day(self._clock()))

    def get_status(self, employee_id: str) -> AttendanceStatusView:
        return AttendanceStatusView.from_record(self.get_today_record(employee_id))
