from typing import Optional

from pydantic import ConfigDict, EmailStr, Field

from core.schema_base import CamelModel, PatchModel
from teammember.models import TeamMemberStatus


class TeamMemberSchema(CamelModel):
    id: int
    name: str
    position: str
    email: str
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    status: TeamMemberStatus = TeamMemberStatus.active
    user_id: Optional[int] = None
    model_config = ConfigDict(from_attributes=True)

# PUBLIC payload, what clients send
class TeamMemberCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=64)
    avatar_url: Optional[str] = Field(None, max_length=1024)
    status: TeamMemberStatus = TeamMemberStatus.active
    user_id: Optional[int] = None
    model_config = ConfigDict(extra="forbid")

class TeamMemberUpdate(PatchModel):
    non_nullable = frozenset({"name", "position", "email", "status"})

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    position: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=64)
    avatar_url: Optional[str] = Field(None, max_length=1024)
    status: Optional[TeamMemberStatus] = None
    user_id: Optional[int] = None
