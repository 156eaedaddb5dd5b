"""
Week view: Sunday..Saturday window around a reference date, shifts grouped per day.

Only depends on the ``Storage`` read API so every backend shares it.
"""
from __future__ import annotations
import datetime as dt
from typing import TYPE_CHECKING

from .schemas import DaySchedule, WeekSchedule

if TYPE_CHECKING:
    from storage.base import Storage

DAYS_PER_WEEK = 7
END_OF_DAY = dt.time(23, 59, 59, 999000)


def _as_date(value: dt.date | dt.datetime) -> dt.date:
    return value.date() if isinstance(value, dt.datetime) else value


def week_start(reference: dt.date | dt.datetime) -> dt.date:
    """Most recent Sunday on or before ``reference``."""
    day = _as_date(reference)
    # isoweekday: Monday=1 .. Sunday=7, so Sunday maps to 0
    return day - dt.timedelta(days=day.isoweekday() % DAYS_PER_WEEK)


def week_bounds(reference: dt.date | dt.datetime) -> tuple[dt.datetime, dt.datetime]:
    """Sunday 00:00:00.000 and Saturday 23:59:59.999 of the week holding ``reference``."""
    sunday = week_start(reference)
    saturday = sunday + dt.timedelta(days=DAYS_PER_WEEK - 1)
    return dt.datetime.combine(sunday, dt.time.min), dt.datetime.combine(saturday, END_OF_DAY)


def build_week_schedule(storage: Storage, reference: dt.date | dt.datetime) -> WeekSchedule:
    start, end = week_bounds(reference)
    shifts = storage.get_shifts_by_date_range(start, end)

    buckets = {
        start.date() + dt.timedelta(days=offset): []
        for offset in range(DAYS_PER_WEEK)
    }
    for shift in shifts:
        # range query already clipped to the week, the guard is for backends that overfetch
        if shift.date in buckets:
            buckets[shift.date].append(shift)

    days = [DaySchedule(date=day, shifts=items) for day, items in sorted(buckets.items())]
    return WeekSchedule(start=start, end=end, days=days)
