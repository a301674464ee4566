from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from ..core.constants import MSG_FIELDS_REQUIRED
from ..core.exceptions import ValidationError

LATITUDE_LIMIT = 90.0
LONGITUDE_LIMIT = 180.0


def require_non_empty(value: Any, field_name: str) -> Any:
    if not value or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    return value


def normalize_employee_id(value: Any) -> Optional[str]:
    """Employee id as a stripped string, or None when missing or blank.

    Shared by every realtime event so ``0`` is treated the same everywhere.
    """

    if value is None or isinstance(value, (bool, dict, list)):
        return None
    text = str(value).strip()
    return text or None


def require_coordinate(value: Any, field_name: str, *, limit: float) -> float:
    # 0 is a valid coordinate, only a missing value is rejected
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} must be a number") from e
    if not math.isfinite(number) or abs(number) > limit:
        raise ValidationError(f"{field_name} must be between -{limit:g} and {limit:g}")
    return number


def require_latitude(value: Any) -> float:
    return require_coordinate(value, "latitude", limit=LATITUDE_LIMIT)


def require_longitude(value: Any) -> float:
    return require_coordinate(value, "longitude", limit=LONGITUDE_LIMIT)


def require_attendance_fields(payload: Mapping[str, Any] | None) -> tuple[str, Any, float, float]:
    """Validate a check-in/check-out body.

    Returns ``(user_id, raw_timestamp, latitude, longitude)``. Any failure is
    reported with the single message the HTTP API exposes.
    """

    payload = payload or {}
    try:
        user_id = require_non_empty(payload.get("userId"), "userId")
        timestamp = require_non_empty(payload.get("timestamp"), "timestamp")
        latitude = require_latitude(payload.get("latitude"))
        longitude = require_longitude(payload.get("longitude"))
    except ValidationError as e:
        raise ValidationError(MSG_FIELDS_REQUIRED) from e
    return str(user_id).strip(), timestamp, latitude, longitude
