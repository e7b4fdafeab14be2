from __future__ import annotations

import calendar
from datetime import date, datetime, timezone


def civil_date(value: date | datetime | None = None) -> date:
    """Truncate a reference instant to a calendar date.

    Aware datetimes are converted to UTC first; naive datetimes are taken as-is.
    `None` means "today" in UTC.
    """
    if value is None:
        return datetime.now(timezone.utc).date()
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def subtract_months(d: date, months: int) -> date:
    """Move `d` back by whole calendar months, clamping to the month's last day."""
    month_index = d.year * 12 + (d.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))
