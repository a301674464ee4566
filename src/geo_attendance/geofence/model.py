from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from ..attendance.model import GeoPoint
from ..common.validators import normalize_employee_id, require_latitude, require_longitude
from ..core.exceptions import ValidationError


def _coordinate(parse: Callable[[Any], float], value: Any) -> Optional[float]:
    # unusable coordinates leave the location unset, the report still counts
    try:
        return parse(value)
    except ValidationError:
        return None


@dataclass(frozen=True)
class LocationReport:
    """One periodic device location report sent over the realtime channel.

    ``payload`` keeps the message exactly as received so it can be relayed to
    other clients unchanged.
    """

    employee_id: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    inside_office: bool
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LocationReport":
        return cls(
            employee_id=normalize_employee_id(payload.get("empId")),
            latitude=_coordinate(require_latitude, payload.get("latitude")),
            longitude=_coordinate(require_longitude, payload.get("longitude")),
            inside_office=bool(payload.get("inside")),
            payload=dict(payload),
        )

    @property
    def location(self) -> Optional[GeoPoint]:
        if self.latitude is None or self.longitude is None:
            return None
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
