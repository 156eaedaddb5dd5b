import datetime as dt
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query

from core.deps import get_storage
from storage.base import Storage
from .schemas import WeekSchedule

schedule_router = APIRouter(prefix="/schedule", tags=["Schedule"])

@schedule_router.get("/week", response_model=WeekSchedule)
def week_schedule(
    date: Optional[Union[dt.datetime, dt.date]] = Query(
        None, description="Any ISO date or datetime inside the wanted week; defaults to now"
    ),
    storage: Storage = Depends(get_storage),
):
    try:
        return storage.get_week_schedule(date or dt.datetime.now())
    except OverflowError:
        # the Sunday..Saturday window runs past date.min or date.max
        raise HTTPException(status_code=400, detail="date out of supported range")
