"""Usage month (``YYYY-MM``) parsing and calendar-month arithmetic."""

import calendar as cal
from datetime import date

from app.core.errors import InvalidUsageMonth


def parse_usage_month(value: str) -> date:
    """Parse ``YYYY-MM`` into the first day of that month."""
    parts = value.split("-") if isinstance(value, str) else []
    if len(parts) != 2 or len(parts[0]) != 4 or len(parts[1]) != 2:
        raise InvalidUsageMonth(str(value))
    try:
        return date(int(parts[0]), int(parts[1]), 1)
    except ValueError:
        raise InvalidUsageMonth(value) from None


def format_usage_month(month: date) -> str:
    return month.strftime("%Y-%m")


def _add_months(month: date, months: int) -> date:
    """Shift the first day of a month by whole calendar months."""
    index = month.month - 1 + months
    return date(month.year + index // 12, index % 12 + 1, 1)


def previous_usage_month(usage_month: str) -> str:
    """``2025-01`` -> ``2024-12``."""
    return format_usage_month(_add_months(parse_usage_month(usage_month), -1))


def next_usage_month(usage_month: str) -> str:
    return format_usage_month(_add_months(parse_usage_month(usage_month), 1))


def due_date_for(usage_month: str, due_day: int) -> date:
    """Due date of a monthly invoice: ``due_day`` of the following month.

    The day is clamped to the month's last day (``31`` in February -> 28/29).
    """
    following = _add_months(parse_usage_month(usage_month), 1)
    max_day = cal.monthrange(following.year, following.month)[1]
    return following.replace(day=max(1, min(due_day, max_day)))
