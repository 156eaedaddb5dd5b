from __future__ import annotations
from datetime import time
from sqlalchemy import String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column
from core.database import Base

DEFAULT_SHIFT_COLOR = "#3A86FF"

class ShiftType(Base):
    __tablename__ = "shift_types"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)

    # wall-clock only, the date comes from the shift; end may be before start for overnight shifts
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time:   Mapped[time] = mapped_column(Time, nullable=False)

    color: Mapped[str] = mapped_column(
        String(16), nullable=False, default=DEFAULT_SHIFT_COLOR, server_default=DEFAULT_SHIFT_COLOR
    )
    description: Mapped[str | None] = mapped_column(Text(), nullable=True)

    __table_args__ = {"sqlite_autoincrement": True}
