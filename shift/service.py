# shift/service.py
from __future__ import annotations
import datetime as dt
from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Shift
from .schemas import ShiftCreate, ShiftUpdate

def get_shift(db: Session, shift_id: int) -> Shift | None:
    return db.get(Shift, shift_id)

def get_shifts(
    db: Session,
    *,
    start: Optional[dt.date] = None,
    end: Optional[dt.date] = None,
) -> list[Shift]:
    stmt = select(Shift)
    if start is not None:
        stmt = stmt.where(Shift.date >= start)
    if end is not None:
        stmt = stmt.where(Shift.date <= end)
    stmt = stmt.order_by(Shift.date, Shift.id)
    return list(db.scalars(stmt))

def create_shift(db: Session, shift: ShiftCreate) -> Shift:
    row = Shift(
        date=shift.date,
        team_member_id=shift.team_member_id,
        shift_type_id=shift.shift_type_id,
        notes=shift.notes,
        needs_coverage=shift.needs_coverage,
        created_at=dt.datetime.now(dt.timezone.utc),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

def update_shift(db: Session, shift_id: int, patch: ShiftUpdate) -> Shift | None:
    row = db.get(Shift, shift_id)
    if not row:
        return None
    for k, v in patch.changes().items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row

def delete_shift(db: Session, shift_id: int) -> bool:
    row = db.get(Shift, shift_id)
    if not row:
        return False
    db.delete(row)
    db.commit()
    return True
