from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String
from core.database import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    # stored as given, there is no login flow yet
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = {"sqlite_autoincrement": True}
