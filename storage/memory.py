"""
In-process storage: one dict per entity kind plus a counter per kind.
Ids start at 1 and are never handed out twice, deleted or not.
"""
from __future__ import annotations
import datetime as dt
import itertools
import threading
from typing import List, Optional, TypeVar

from pydantic import BaseModel

from core.logging import get_logger
from shift.schemas import ShiftCreate, ShiftSchema, ShiftUpdate
from shifttype.schemas import ShiftTypeCreate, ShiftTypeSchema, ShiftTypeUpdate
from teammember.schemas import TeamMemberCreate, TeamMemberSchema, TeamMemberUpdate
from user.schemas import UserCreate, UserSchema, UserUpdate

from .base import ConflictError, Storage

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class _Table:
    """Keyed container for one entity kind."""

    def __init__(self) -> None:
        self._rows: dict[int, BaseModel] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def all(self) -> list:
        return [row.model_copy() for row in self._rows.values()]

    def get(self, row_id: int):
        row = self._rows.get(row_id)
        return row.model_copy() if row is not None else None

    def put(self, row: M) -> M:
        self._rows[row.id] = row
        return row.model_copy()

    def pop(self, row_id: int) -> bool:
        return self._rows.pop(row_id, None) is not None

    def values(self):
        return self._rows.values()


class MemStorage(Storage):

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users = _Table()
        self._team_members = _Table()
        self._shift_types = _Table()
        self._shifts = _Table()

    @staticmethod
    def _merge(row: M, changes: dict) -> M:
        # validate so the merged row still satisfies the read model
        return type(row).model_validate({**row.model_dump(), **changes})

    # ── Users ──

    def list_users(self) -> List[UserSchema]:
        with self._lock:
            return self._users.all()

    def get_user(self, user_id: int) -> Optional[UserSchema]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[UserSchema]:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user.model_copy()
            return None

    def _check_username(self, username: str, user_id: int | None = None) -> None:
        if any(u.username == username and u.id != user_id for u in self._users.values()):
            raise ConflictError(f"username '{username}' is already taken")

    def create_user(self, payload: UserCreate) -> UserSchema:
        with self._lock:
            self._check_username(payload.username)
            user = UserSchema(id=self._users.next_id(), **payload.model_dump())
            logger.info("User created: id=%d", user.id)
            return self._users.put(user)

    def update_user(self, user_id: int, patch: UserUpdate) -> Optional[UserSchema]:
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                return None
            changes = patch.changes()
            if "username" in changes:
                self._check_username(changes["username"], user_id)
            return self._users.put(self._merge(existing, changes))

    def delete_user(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id)

    # ── Team members ──

    def list_team_members(self) -> List[TeamMemberSchema]:
        with self._lock:
            return self._team_members.all()

    def get_team_member(self, member_id: int) -> Optional[TeamMemberSchema]:
        with self._lock:
            return self._team_members.get(member_id)

    def _check_email(self, email: str, member_id: int | None = None) -> None:
        if any(m.email == email and m.id != member_id for m in self._team_members.values()):
            raise ConflictError(f"a team member with email '{email}' already exists")

    def create_team_member(self, payload: TeamMemberCreate) -> TeamMemberSchema:
        with self._lock:
            self._check_email(payload.email)
            member = TeamMemberSchema(id=self._team_members.next_id(), **payload.model_dump())
            logger.info("Team member created: id=%d", member.id)
            return self._team_members.put(member)

    def update_team_member(self, member_id: int, patch: TeamMemberUpdate) -> Optional[TeamMemberSchema]:
        with self._lock:
            existing = self._team_members.get(member_id)
            if existing is None:
                return None
            changes = patch.changes()
            if "email" in changes:
                self._check_email(changes["email"], member_id)
            return self._team_members.put(self._merge(existing, changes))

    def delete_team_member(self, member_id: int) -> bool:
        with self._lock:
            return self._team_members.pop(member_id)

    # ── Shift types ──

    def list_shift_types(self) -> List[ShiftTypeSchema]:
        with self._lock:
            return self._shift_types.all()

    def get_shift_type(self, shift_type_id: int) -> Optional[ShiftTypeSchema]:
        with self._lock:
            return self._shift_types.get(shift_type_id)

    def create_shift_type(self, payload: ShiftTypeCreate) -> ShiftTypeSchema:
        with self._lock:
            shift_type = ShiftTypeSchema(id=self._shift_types.next_id(), **payload.model_dump())
            logger.info("Shift type created: id=%d name=%s", shift_type.id, shift_type.name)
            return self._shift_types.put(shift_type)

    def update_shift_type(self, shift_type_id: int, patch: ShiftTypeUpdate) -> Optional[ShiftTypeSchema]:
        with self._lock:
            existing = self._shift_types.get(shift_type_id)
            if existing is None:
                return None
            return self._shift_types.put(self._merge(existing, patch.changes()))

    def delete_shift_type(self, shift_type_id: int) -> bool:
        with self._lock:
            return self._shift_types.pop(shift_type_id)

    # ── Shifts ──

    def list_shifts(
        self, start: Optional[dt.date] = None, end: Optional[dt.date] = None
    ) -> List[ShiftSchema]:
        with self._lock:
            rows = [
                s for s in self._shifts.all()
                if (start is None or s.date >= start) and (end is None or s.date <= end)
            ]
        return sorted(rows, key=lambda s: (s.date, s.id))

    def get_shift(self, shift_id: int) -> Optional[ShiftSchema]:
        with self._lock:
            return self._shifts.get(shift_id)

    def create_shift(self, payload: ShiftCreate) -> ShiftSchema:
        with self._lock:
            shift = ShiftSchema(
                id=self._shifts.next_id(),
                created_at=dt.datetime.now(dt.timezone.utc),
                **payload.model_dump(),
            )
            logger.info("Shift created: id=%d date=%s", shift.id, shift.date)
            return self._shifts.put(shift)

    def update_shift(self, shift_id: int, patch: ShiftUpdate) -> Optional[ShiftSchema]:
        with self._lock:
            existing = self._shifts.get(shift_id)
            if existing is None:
                return None
            return self._shifts.put(self._merge(existing, patch.changes()))

    def delete_shift(self, shift_id: int) -> bool:
        with self._lock:
            return self._shifts.pop(shift_id)
