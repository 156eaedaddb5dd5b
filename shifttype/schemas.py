from __future__ import annotations
from datetime import time
from typing import Optional
from pydantic import ConfigDict, Field

from core.schema_base import CamelModel, PatchModel
from .models import DEFAULT_SHIFT_COLOR

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


# ---------- DB → API (read) ----------
class ShiftTypeSchema(CamelModel):
    id: int
    name: str
    start_time: time
    end_time: time
    color: str = DEFAULT_SHIFT_COLOR
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ---------- Client → API ----------
class ShiftTypeCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=128)
    start_time: time = Field(..., description="HH:MM:SS")
    end_time: time = Field(..., description="HH:MM:SS")
    color: str = Field(DEFAULT_SHIFT_COLOR, pattern=HEX_COLOR)
    description: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class ShiftTypeUpdate(PatchModel):
    non_nullable = frozenset({"name", "start_time", "end_time", "color"})

    name: Optional[str] = Field(None, min_length=1, max_length=128)
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    color: Optional[str] = Field(None, pattern=HEX_COLOR)
    description: Optional[str] = None
