from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Union

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import ValidationError

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str, field_name: str = "date") -> date:
    """Parse YYYY-MM-DD (or a full ISO-8601 timestamp) into a calendar date."""
    text = (value or "").strip()
    try:
        return datetime.strptime(text, ISO_DATE_FORMAT).date()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValidationError(f"Invalid {field_name}: {value!r} (expected YYYY-MM-DD)") from None


def to_calendar_date(value: DateLike, field_name: str = "date") -> date:
    """Normalize a date-like value to midnight, i.e. a plain ``date``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value, field_name)
    raise ValidationError(f"Invalid {field_name}: {value!r}")


def optional_calendar_date(value: Optional[DateLike], field_name: str = "date") -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return to_calendar_date(value, field_name)


def week_start(d: date) -> date:
    """Monday of the week containing ``d`` (Sunday walks back six days)."""
    return d - timedelta(days=d.weekday())


def iso(d: Optional[date]) -> str:
    return d.strftime(ISO_DATE_FORMAT) if d else ""


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().date()
