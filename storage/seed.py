"""
Demo data for a fresh store: an admin user, the three SOC shift types, five
analysts and a full week of shifts around ``today``.
"""
from __future__ import annotations
import datetime as dt
from typing import Optional

from core.logging import get_logger
from schedule.service import week_start
from shift.schemas import ShiftCreate
from shifttype.schemas import ShiftTypeCreate
from teammember.models import TeamMemberStatus
from teammember.schemas import TeamMemberCreate
from user.schemas import UserCreate

from .base import Storage

logger = get_logger(__name__)

WEDNESDAY = 3  # offset from Sunday

SHIFT_TYPES = [
    ShiftTypeCreate(name="Morning Shift", start_time=dt.time(6), end_time=dt.time(14),
                    color="#4CAF50", description="Early morning shift for the SOC team"),
    ShiftTypeCreate(name="Afternoon Shift", start_time=dt.time(14), end_time=dt.time(22),
                    color="#F59E0B", description="Afternoon coverage for the SOC team"),
    ShiftTypeCreate(name="Night Shift", start_time=dt.time(22), end_time=dt.time(6),
                    color="#6366F1", description="Overnight coverage for the SOC team"),
]

TEAM_MEMBERS = [
    ("Sarah Chen", "Security Analyst", "sarah.chen", "555-123-4567", TeamMemberStatus.active),
    ("John Maxwell", "SOC Lead", "john.maxwell", "555-234-5678", TeamMemberStatus.active),
    ("Emily Parker", "Security Engineer", "emily.parker", "555-345-6789", TeamMemberStatus.pto_soon),
    ("Michael Scott", "Threat Hunter", "michael.scott", "555-456-7890", TeamMemberStatus.active),
    ("David Kim", "Incident Responder", "david.kim", "555-567-8901", TeamMemberStatus.active),
]
EMAIL_DOMAIN = "vilcomnetworks.com"


def seed_default_data(storage: Storage, today: Optional[dt.date] = None) -> bool:
    """Populate an empty store. Returns False and does nothing if users already exist."""
    if storage.list_users():
        logger.info("Storage already contains data, skipping seed")
        return False

    storage.create_user(UserCreate(username="admin", password="admin123"))

    morning, afternoon, night = (storage.create_shift_type(t) for t in SHIFT_TYPES)
    sarah, john, emily, michael, david = (
        storage.create_team_member(
            TeamMemberCreate(
                name=name,
                position=position,
                email=f"{handle}@{EMAIL_DOMAIN}",
                phone=phone,
                avatar_url="",
                status=status,
            )
        )
        for name, position, handle, phone, status in TEAM_MEMBERS
    )

    sunday = week_start(today or dt.date.today())
    for offset in range(7):
        day = sunday + dt.timedelta(days=offset)
        even = offset % 2 == 0
        storage.create_shift(ShiftCreate(
            date=day, team_member_id=(sarah if even else john).id, shift_type_id=morning.id, notes="",
        ))
        storage.create_shift(ShiftCreate(
            date=day, team_member_id=(emily if even else david).id, shift_type_id=afternoon.id, notes="",
        ))
        if offset == WEDNESDAY:
            storage.create_shift(ShiftCreate(
                date=day, team_member_id=None, shift_type_id=night.id,
                notes="Urgent coverage needed", needs_coverage=True,
            ))
        else:
            storage.create_shift(ShiftCreate(
                date=day, team_member_id=(michael if even else david).id, shift_type_id=night.id, notes="",
            ))

    logger.info("Sample data initialized for week of %s", sunday.isoformat())
    return True
