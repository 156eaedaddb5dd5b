from fastapi import APIRouter, Depends, status

from core.deps import get_storage
from storage.base import Storage
from .schemas import ShiftTypeSchema, ShiftTypeCreate

shift_type_router = APIRouter(prefix="/shift-types", tags=["Shift Types"])

# List all shift types
@shift_type_router.get("", response_model=list[ShiftTypeSchema])
def list_shift_types(storage: Storage = Depends(get_storage)):
    return storage.list_shift_types()

# Create shift type
@shift_type_router.post("", response_model=ShiftTypeSchema, status_code=status.HTTP_201_CREATED)
def shift_type_post(payload: ShiftTypeCreate, storage: Storage = Depends(get_storage)):
    return storage.create_shift_type(payload)
