from __future__ import annotations
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String
from core.database import Base


class TeamMemberStatus(str, Enum):
    active = "active"
    pto_soon = "pto_soon"
    pto = "pto"
    unavailable = "unavailable"
    inactive = "inactive"
    on_leave = "on-leave"


class TeamMember(Base):
    __tablename__ = "team_members"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # plain string column, the closed set is enforced by the schemas
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default=TeamMemberStatus.active.value,
        server_default=TeamMemberStatus.active.value,
    )

    # optional link to login user, a plain id like the shift references
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    __table_args__ = {"sqlite_autoincrement": True}
