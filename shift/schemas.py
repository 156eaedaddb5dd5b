import datetime as dt
from typing import Optional
from pydantic import ConfigDict, Field, field_validator

from core.schema_base import CamelModel, PatchModel
from teammember.schemas import TeamMemberSchema
from shifttype.schemas import ShiftTypeSchema

class ShiftSchema(CamelModel):
    id: int
    date: dt.date
    team_member_id: Optional[int] = None
    shift_type_id: int
    notes: Optional[str] = None
    needs_coverage: bool = False
    created_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def created_at_utc(cls, v: dt.datetime) -> dt.datetime:
        # sqlite hands back naive timestamps; they were written as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=dt.timezone.utc)
        return v.astimezone(dt.timezone.utc)

class ShiftWithDetails(ShiftSchema):
    team_member: TeamMemberSchema
    shift_type: ShiftTypeSchema

# PUBLIC payload, what clients send
class ShiftCreate(CamelModel):
    date: dt.date = Field(..., description="YYYY-MM-DD")
    team_member_id: Optional[int] = None
    shift_type_id: int
    notes: Optional[str] = None
    needs_coverage: bool = False

    model_config = ConfigDict(extra="forbid")

class ShiftUpdate(PatchModel):
    non_nullable = frozenset({"date", "shift_type_id", "needs_coverage"})

    date: Optional[dt.date] = None
    team_member_id: Optional[int] = None
    shift_type_id: Optional[int] = None
    notes: Optional[str] = None
    needs_coverage: Optional[bool] = None
