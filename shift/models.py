from __future__ import annotations
import datetime as dt
from sqlalchemy import Boolean, Date, DateTime, Integer, Text, Index, false
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from core.database import Base

class Shift(Base):
    __tablename__ = "shifts"

    id: Mapped[int] = mapped_column(primary_key=True)

    # calendar day only, the time of day comes from the shift type
    date: Mapped[dt.date] = mapped_column(Date(), nullable=False)

    # plain ids, no FK constraint: deleting a member or shift type leaves shifts untouched
    # and the week view resolves the dangling id to a placeholder
    team_member_id: Mapped[int | None] = mapped_column(Integer, index=True, nullable=True)  # null = unassigned
    shift_type_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)

    notes: Mapped[str | None] = mapped_column(Text(), nullable=True)
    needs_coverage: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (
        Index("ix_shifts_date", "date"),
        {"sqlite_autoincrement": True},
    )
