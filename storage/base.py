"""
Storage contract shared by the in-memory and relational backends.

Reads return pydantic read models (``TeamMemberSchema`` etc.) so callers never
see which backend produced them. A missing id is signalled with ``None`` from
``get_*``/``update_*`` and ``False`` from ``delete_*``.
"""
from __future__ import annotations
import datetime as dt
from abc import ABC, abstractmethod
from typing import List, Optional

from schedule import service as schedule_service
from schedule.schemas import WeekSchedule
from shift.schemas import ShiftCreate, ShiftSchema, ShiftUpdate, ShiftWithDetails
from shifttype.schemas import ShiftTypeCreate, ShiftTypeSchema, ShiftTypeUpdate
from teammember.models import TeamMemberStatus
from teammember.schemas import TeamMemberCreate, TeamMemberSchema, TeamMemberUpdate
from user.schemas import UserCreate, UserSchema, UserUpdate

PLACEHOLDER_ID = -1


class ConflictError(Exception):
    """A write collided with a unique constraint."""


def unassigned_team_member() -> TeamMemberSchema:
    return TeamMemberSchema(
        id=PLACEHOLDER_ID,
        name="Unassigned",
        position="N/A",
        email="unassigned@example.com",
        status=TeamMemberStatus.unavailable,
    )


def unknown_shift_type() -> ShiftTypeSchema:
    return ShiftTypeSchema(
        id=PLACEHOLDER_ID,
        name="Unknown Shift",
        start_time=dt.time(0, 0),
        end_time=dt.time(0, 0),
        color="#cccccc",
    )


class Storage(ABC):

    # ── Users ──

    @abstractmethod
    def list_users(self) -> List[UserSchema]: ...

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserSchema]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserSchema]: ...

    @abstractmethod
    def create_user(self, payload: UserCreate) -> UserSchema: ...

    @abstractmethod
    def update_user(self, user_id: int, patch: UserUpdate) -> Optional[UserSchema]: ...

    @abstractmethod
    def delete_user(self, user_id: int) -> bool: ...

    # ── Team members ──

    @abstractmethod
    def list_team_members(self) -> List[TeamMemberSchema]: ...

    @abstractmethod
    def get_team_member(self, member_id: int) -> Optional[TeamMemberSchema]: ...

    @abstractmethod
    def create_team_member(self, payload: TeamMemberCreate) -> TeamMemberSchema: ...

    @abstractmethod
    def update_team_member(self, member_id: int, patch: TeamMemberUpdate) -> Optional[TeamMemberSchema]: ...

    @abstractmethod
    def delete_team_member(self, member_id: int) -> bool: ...

    # ── Shift types ──

    @abstractmethod
    def list_shift_types(self) -> List[ShiftTypeSchema]: ...

    @abstractmethod
    def get_shift_type(self, shift_type_id: int) -> Optional[ShiftTypeSchema]: ...

    @abstractmethod
    def create_shift_type(self, payload: ShiftTypeCreate) -> ShiftTypeSchema: ...

    @abstractmethod
    def update_shift_type(self, shift_type_id: int, patch: ShiftTypeUpdate) -> Optional[ShiftTypeSchema]: ...

    @abstractmethod
    def delete_shift_type(self, shift_type_id: int) -> bool: ...

    # ── Shifts ──

    @abstractmethod
    def list_shifts(
        self, start: Optional[dt.date] = None, end: Optional[dt.date] = None
    ) -> List[ShiftSchema]:
        """Shifts ordered by date then id, optionally clipped to an inclusive date range."""

    @abstractmethod
    def get_shift(self, shift_id: int) -> Optional[ShiftSchema]: ...

    @abstractmethod
    def create_shift(self, payload: ShiftCreate) -> ShiftSchema: ...

    @abstractmethod
    def update_shift(self, shift_id: int, patch: ShiftUpdate) -> Optional[ShiftSchema]: ...

    @abstractmethod
    def delete_shift(self, shift_id: int) -> bool: ...

    # ── Lifecycle ──

    def close(self) -> None:
        """Release backend resources; nothing to do by default."""

    # ── Week view ──

    def get_shifts_by_date_range(
        self, start: dt.date | dt.datetime, end: dt.date | dt.datetime
    ) -> List[ShiftWithDetails]:
        """
        Shifts dated within ``[start, end]`` (times ignored), each joined to its
        team member and shift type. A null or dangling reference is replaced by
        a placeholder with id ``PLACEHOLDER_ID`` so the result is always total.
        """
        start_day = start.date() if isinstance(start, dt.datetime) else start
        end_day = end.date() if isinstance(end, dt.datetime) else end

        members: dict[int, Optional[TeamMemberSchema]] = {}
        shift_types: dict[int, Optional[ShiftTypeSchema]] = {}
        result = []
        for shift in self.list_shifts(start=start_day, end=end_day):
            member = None
            if shift.team_member_id is not None:
                if shift.team_member_id not in members:
                    members[shift.team_member_id] = self.get_team_member(shift.team_member_id)
                member = members[shift.team_member_id]

            shift_type = None
            if shift.shift_type_id is not None:
                if shift.shift_type_id not in shift_types:
                    shift_types[shift.shift_type_id] = self.get_shift_type(shift.shift_type_id)
                shift_type = shift_types[shift.shift_type_id]

            result.append(
                ShiftWithDetails(
                    **shift.model_dump(),
                    team_member=member or unassigned_team_member(),
                    shift_type=shift_type or unknown_shift_type(),
                )
            )
        return result

    def get_week_schedule(self, reference: dt.date | dt.datetime) -> WeekSchedule:
        return schedule_service.build_week_schedule(self, reference)
