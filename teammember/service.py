from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select
from .models import TeamMember
from .schemas import TeamMemberCreate, TeamMemberUpdate

def get_team_members(db: Session) -> List[TeamMember]:
    statement = select(TeamMember).order_by(TeamMember.id)
    return list(db.scalars(statement))

def get_team_member(db: Session, member_id: int) -> Optional[TeamMember]:
    return db.get(TeamMember, member_id)

def create_team_member(db: Session, member: TeamMemberCreate) -> TeamMember:
    data = member.model_dump()
    data["status"] = member.status.value
    db_member = TeamMember(**data)
    db.add(db_member)
    db.commit()
    db.refresh(db_member)
    return db_member

def update_team_member(db: Session, member_id: int, patch: TeamMemberUpdate) -> Optional[TeamMember]:
    db_member = db.get(TeamMember, member_id)
    if not db_member:
        return None
    data = patch.changes()
    if "status" in data:
        data["status"] = data["status"].value
    for k, v in data.items():
        setattr(db_member, k, v)
    db.commit()
    db.refresh(db_member)
    return db_member

def delete_team_member(db: Session, member_id: int) -> bool:
    db_member = db.get(TeamMember, member_id)
    if not db_member:
        return False
    db.delete(db_member)
    db.commit()
    return True
