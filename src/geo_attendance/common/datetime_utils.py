from __future__ import annotations

from datetime import date, datetime
from numbers import Real
from typing import Any

from ..core.exceptions import ValidationError


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def work_day(moment: datetime) -> date:
    """Calendar day a moment belongs to (local midnight normalization)."""
    return moment.date()


def parse_timestamp(value: Any) -> datetime:
    """Parse a client timestamp into a naive local datetime.

    Accepts epoch milliseconds (what browsers send from ``Date.now()``) or an
    ISO-8601 string, with or without offset. Aware values are converted to
    local time before the offset is dropped.
    """

    if isinstance(value, bool):
        raise ValidationError(f"Invalid timestamp: {value!r}")

    if isinstance(value, Real):
        try:
            return datetime.fromtimestamp(float(value) / 1000.0)
        except (OverflowError, OSError, ValueError) as e:
            raise ValidationError(f"Invalid timestamp: {value!r}") from e

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValidationError(f"Invalid timestamp: {value!r}") from e
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
        return parsed

    raise ValidationError(f"Invalid timestamp: {value!r}")
