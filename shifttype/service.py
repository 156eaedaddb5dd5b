from __future__ import annotations
from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import ShiftType
from .schemas import ShiftTypeCreate, ShiftTypeUpdate

def get_shift_types(db: Session) -> List[ShiftType]:
    stmt = select(ShiftType).order_by(ShiftType.id)
    return list(db.scalars(stmt))

def get_shift_type(db: Session, shift_type_id: int) -> Optional[ShiftType]:
    return db.get(ShiftType, shift_type_id)

def create_shift_type(db: Session, payload: ShiftTypeCreate) -> ShiftType:
    row = ShiftType(**payload.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

def update_shift_type(db: Session, shift_type_id: int, patch: ShiftTypeUpdate) -> Optional[ShiftType]:
    row = db.get(ShiftType, shift_type_id)
    if not row:
        return None
    for k, v in patch.changes().items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row

def delete_shift_type(db: Session, shift_type_id: int) -> bool:
    row = db.get(ShiftType, shift_type_id)
    if not row:
        return False
    db.delete(row)
    db.commit()
    return True
