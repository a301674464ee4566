from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    attendance_id: int
    employee_id: str
    work_date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime] = None
    check_in_location: Optional[GeoPoint] = None
    check_out_location: Optional[GeoPoint] = None

    @property
    def status(self) -> AttendanceStatus:
        if self.check_in_time and self.check_out_time:
            return AttendanceStatus.CHECKED_OUT
        if self.check_in_time:
            return AttendanceStatus.CHECKED_IN
        return AttendanceStatus.NOT_CHECKED_IN

    @property
    def can_check_out(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is None


@dataclass(frozen=True)
class AttendanceStatusView:
    """Read-model returned by the status endpoint."""

    status: AttendanceStatus
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Optional[AttendanceRecord]) -> "AttendanceStatusView":
        if record is None:
            return cls(status=AttendanceStatus.NOT_CHECKED_IN)
        return cls(
            status=record.status,
            check_in_time=record.check_in_time,
            check_out_time=record.check_out_time,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "checkInTime": self.check_in_time.isoformat() if self.check_in_time else None,
            "checkOutTime": self.check_out_time.isoformat() if self.check_out_time else None,
        }
