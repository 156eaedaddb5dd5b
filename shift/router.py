import datetime as dt
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from core.deps import get_storage
from storage.base import Storage
from .schemas import ShiftSchema, ShiftCreate, ShiftUpdate

shift_router = APIRouter(prefix="/shifts", tags=["Shifts"])

@shift_router.get("", response_model=list[ShiftSchema])
def list_shifts(
    start: Optional[dt.date] = Query(None, description="Only shifts on or after this day"),
    end: Optional[dt.date] = Query(None, description="Only shifts on or before this day"),
    storage: Storage = Depends(get_storage),
):
    if start is not None and end is not None and start > end:
        raise HTTPException(status_code=400, detail="start must be on or before end")
    return storage.list_shifts(start=start, end=end)

@shift_router.get("/{shift_id}", response_model=ShiftSchema)
def get_shift(shift_id: int, storage: Storage = Depends(get_storage)):
    obj = storage.get_shift(shift_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Shift not found")
    return obj

@shift_router.post("", response_model=ShiftSchema, status_code=status.HTTP_201_CREATED)
def create_shift(payload: ShiftCreate, storage: Storage = Depends(get_storage)):
    return storage.create_shift(payload)

@shift_router.patch("/{shift_id}", response_model=ShiftSchema)
def patch_shift(shift_id: int, payload: ShiftUpdate, storage: Storage = Depends(get_storage)):
    obj = storage.update_shift(shift_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Shift not found")
    return obj

@shift_router.delete("/{shift_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_shift(shift_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_shift(shift_id):
        raise HTTPException(status_code=404, detail="Shift not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
