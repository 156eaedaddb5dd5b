from __future__ import annotations
import datetime as dt
from typing import List

from core.schema_base import CamelModel
from shift.schemas import ShiftWithDetails


class DaySchedule(CamelModel):
    date: dt.date
    shifts: List[ShiftWithDetails] = []


class WeekSchedule(CamelModel):
    start: dt.datetime
    end: dt.datetime
    days: List[DaySchedule]
