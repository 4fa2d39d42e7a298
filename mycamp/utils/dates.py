import calendar
from datetime import date, timedelta
from typing import Iterator, Optional
from mycamp.config import BOOKING_MONTHS


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole calendar months, clamping to the last day of a shorter month."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def horizon_end(today: Optional[date] = None) -> date:
    """Last day a reservation may cover."""
    return add_months(today or date.today(), BOOKING_MONTHS)


def days_between(start: date, end: date) -> Iterator[date]:
    """Every day from ``start`` to ``end``, both included."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
