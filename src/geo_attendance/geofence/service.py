from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, work_day
from ..core.enums import GeofenceOutcome
from ..core.exceptions import DuplicateOperationError
from .model import LocationReport

logger = logging.getLogger(__name__)


class GeofenceService:
    """Derives attendance transitions from inside/outside-office reports.

    - inside and no record today: check in now
    - outside and checked in but not out: check out now
    - anything else is a no-op (check-in is idempotent, check-out one-shot)

    Store failures are logged and reported as ``FAILED``; they never propagate
    into the realtime event loop.
    """

    def __init__(self, attendance: AttendanceRepository, *, clock: Callable[[], datetime] = now_local):
        self._attendance = attendance
        self._clock = clock

    def handle(self, report: LocationReport) -> GeofenceOutcome:
        if not report.employee_id:
            logger.warning("Dropping location report without empId: %r", report.payload)
            return GeofenceOutcome.REJECTED

        employee_id = report.employee_id
        logger.debug(
            "Received location %s,%s inside=%s for employee %s",
            report.latitude,
            report.longitude,
            report.inside_office,
            employee_id,
        )

        try:
            return self._apply(report)
        except Exception:
            logger.exception("Geofence update failed for employee %s", employee_id)
            return GeofenceOutcome.FAILED

    def _apply(self, report: LocationReport) -> GeofenceOutcome:
        now = self._clock()
        today = work_day(now)
        employee_id = report.employee_id
        record = self._attendance.get_for_employee_and_date(employee_id, today)

        if report.inside_office:
            if record:
                return GeofenceOutcome.NO_CHANGE
            try:
                self._attendance.create_checkin(
                    employee_id=employee_id,
                    work_date=today,
                    check_in_time=now,
                    location=report.location,
                )
            except DuplicateOperationError:
                logger.info("Concurrent check-in already stored for employee %s", employee_id)
                return GeofenceOutcome.NO_CHANGE
            logger.info("Check-in recorded for employee %s", employee_id)
            return GeofenceOutcome.CHECKED_IN

        if not record or not record.can_check_out:
            return GeofenceOutcome.NO_CHANGE

        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=now,
            location=report.location,
        )
        if not updated:
            logger.info("Concurrent check-out already stored for employee %s", employee_id)
            return GeofenceOutcome.NO_CHANGE
        logger.info("Check-out recorded for employee %s", employee_id)
        return GeofenceOutcome.CHECKED_OUT
