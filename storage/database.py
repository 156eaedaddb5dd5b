"""
Relational storage on SQLAlchemy. Each call runs in its own session and
hands back pydantic read models, never live ORM rows.
"""
from __future__ import annotations
import datetime as dt
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database import Base, create_db_engine, create_session_factory
from core.logging import get_logger
from shift import service as shift_service
from shift.schemas import ShiftCreate, ShiftSchema, ShiftUpdate
from shifttype import service as shift_type_service
from shifttype.schemas import ShiftTypeCreate, ShiftTypeSchema, ShiftTypeUpdate
from teammember import service as team_member_service
from teammember.schemas import TeamMemberCreate, TeamMemberSchema, TeamMemberUpdate
from user import service as user_service
from user.schemas import UserCreate, UserSchema, UserUpdate

from .base import ConflictError, Storage

logger = get_logger(__name__)


class DatabaseStorage(Storage):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._sessions = create_session_factory(engine)

    @classmethod
    def from_url(cls, url: str, *, create_tables: bool = True) -> "DatabaseStorage":
        engine = create_db_engine(url)
        if create_tables:
            Base.metadata.create_all(engine)
        return cls(engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._sessions()
        try:
            yield db
        except IntegrityError as exc:
            db.rollback()
            logger.info("Integrity error: %s", exc.orig)
            raise ConflictError(f"conflicts with existing data ({exc.orig})") from exc
        finally:
            db.close()

    def close(self) -> None:
        self._engine.dispose()

    # ── Users ──

    def list_users(self) -> List[UserSchema]:
        with self._session() as db:
            return [UserSchema.model_validate(u) for u in user_service.get_users(db)]

    def get_user(self, user_id: int) -> Optional[UserSchema]:
        with self._session() as db:
            row = user_service.get_user(db, user_id)
            return UserSchema.model_validate(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[UserSchema]:
        with self._session() as db:
            row = user_service.get_user_by_username(db, username)
            return UserSchema.model_validate(row) if row else None

    def create_user(self, payload: UserCreate) -> UserSchema:
        with self._session() as db:
            row = user_service.create_user(db, payload)
            logger.info("User created: id=%d", row.id)
            return UserSchema.model_validate(row)

    def update_user(self, user_id: int, patch: UserUpdate) -> Optional[UserSchema]:
        with self._session() as db:
            row = user_service.update_user(db, user_id, patch)
            return UserSchema.model_validate(row) if row else None

    def delete_user(self, user_id: int) -> bool:
        with self._session() as db:
            return user_service.delete_user(db, user_id)

    # ── Team members ──

    def list_team_members(self) -> List[TeamMemberSchema]:
        with self._session() as db:
            return [TeamMemberSchema.model_validate(m) for m in team_member_service.get_team_members(db)]

    def get_team_member(self, member_id: int) -> Optional[TeamMemberSchema]:
        with self._session() as db:
            row = team_member_service.get_team_member(db, member_id)
            return TeamMemberSchema.model_validate(row) if row else None

    def create_team_member(self, payload: TeamMemberCreate) -> TeamMemberSchema:
        with self._session() as db:
            row = team_member_service.create_team_member(db, payload)
            logger.info("Team member created: id=%d", row.id)
            return TeamMemberSchema.model_validate(row)

    def update_team_member(self, member_id: int, patch: TeamMemberUpdate) -> Optional[TeamMemberSchema]:
        with self._session() as db:
            row = team_member_service.update_team_member(db, member_id, patch)
            return TeamMemberSchema.model_validate(row) if row else None

    def delete_team_member(self, member_id: int) -> bool:
        with self._session() as db:
            return team_member_service.delete_team_member(db, member_id)

    # ── Shift types ──

    def list_shift_types(self) -> List[ShiftTypeSchema]:
        with self._session() as db:
            return [ShiftTypeSchema.model_validate(t) for t in shift_type_service.get_shift_types(db)]

    def get_shift_type(self, shift_type_id: int) -> Optional[ShiftTypeSchema]:
        with self._session() as db:
            row = shift_type_service.get_shift_type(db, shift_type_id)
            return ShiftTypeSchema.model_validate(row) if row else None

    def create_shift_type(self, payload: ShiftTypeCreate) -> ShiftTypeSchema:
        with self._session() as db:
            row = shift_type_service.create_shift_type(db, payload)
            logger.info("Shift type created: id=%d name=%s", row.id, row.name)
            return ShiftTypeSchema.model_validate(row)

    def update_shift_type(self, shift_type_id: int, patch: ShiftTypeUpdate) -> Optional[ShiftTypeSchema]:
        with self._session() as db:
            row = shift_type_service.update_shift_type(db, shift_type_id, patch)
            return ShiftTypeSchema.model_validate(row) if row else None

    def delete_shift_type(self, shift_type_id: int) -> bool:
        with self._session() as db:
            return shift_type_service.delete_shift_type(db, shift_type_id)

    # ── Shifts ──

    def list_shifts(
        self, start: Optional[dt.date] = None, end: Optional[dt.date] = None
    ) -> List[ShiftSchema]:
        with self._session() as db:
            return [ShiftSchema.model_validate(s) for s in shift_service.get_shifts(db, start=start, end=end)]

    def get_shift(self, shift_id: int) -> Optional[ShiftSchema]:
        with self._session() as db:
            row = shift_service.get_shift(db, shift_id)
            return ShiftSchema.model_validate(row) if row else None

    def create_shift(self, payload: ShiftCreate) -> ShiftSchema:
        with self._session() as db:
            row = shift_service.create_shift(db, payload)
            logger.info("Shift created: id=%d date=%s", row.id, row.date)
            return ShiftSchema.model_validate(row)

    def update_shift(self, shift_id: int, patch: ShiftUpdate) -> Optional[ShiftSchema]:
        with self._session() as db:
            row = shift_service.update_shift(db, shift_id, patch)
            return ShiftSchema.model_validate(row) if row else None

    def delete_shift(self, shift_id: int) -> bool:
        with self._session() as db:
            return shift_service.delete_shift(db, shift_id)
