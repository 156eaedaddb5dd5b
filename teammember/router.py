from fastapi import APIRouter, Depends, HTTPException, Response, status

from core.deps import get_storage
from storage.base import ConflictError, Storage
from .schemas import TeamMemberSchema, TeamMemberCreate, TeamMemberUpdate

team_member_router = APIRouter(prefix="/team-members", tags=["Team Members"])

# List all team members
@team_member_router.get("", response_model=list[TeamMemberSchema])
def list_team_members(storage: Storage = Depends(get_storage)):
    return storage.list_team_members()

# Get team member by id
@team_member_router.get("/{member_id}", response_model=TeamMemberSchema)
def team_member_detail(member_id: int, storage: Storage = Depends(get_storage)):
    obj = storage.get_team_member(member_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Team member not found")
    return obj

# Create team member
@team_member_router.post("", response_model=TeamMemberSchema, status_code=status.HTTP_201_CREATED)
def team_member_post(payload: TeamMemberCreate, storage: Storage = Depends(get_storage)):
    try:
        return storage.create_team_member(payload)
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc))

# Update team member
@team_member_router.patch("/{member_id}", response_model=TeamMemberSchema)
def team_member_patch(member_id: int, payload: TeamMemberUpdate, storage: Storage = Depends(get_storage)):
    try:
        obj = storage.update_team_member(member_id, payload)
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    if not obj:
        raise HTTPException(status_code=404, detail="Team member not found")
    return obj

# Delete team member; their shifts stay and show up as unassigned
@team_member_router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def team_member_delete(member_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_team_member(member_id):
        raise HTTPException(status_code=404, detail="Team member not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
