"""Members API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from gym_admin.api.dependencies import DbSession, PathId
from gym_admin.schemas import MemberCreate, MemberResponse, MemberUpdate
from gym_admin.services import member_service

router = APIRouter(prefix="/api/MemberApi", tags=["members"])


@router.get("", response_model=List[MemberResponse])
async def get_members(
    db: DbSession,
    search: Optional[str] = Query(default=None, alias="searchString"),
) -> List[MemberResponse]:
    """Get all members with trainer id and enrolled class ids."""
    details = await member_service.list_members(db, search)
    return [d.member for d in details]


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(member_id: PathId, db: DbSession) -> MemberResponse:
    """Get member by ID."""
    detail = await member_service.get_member(db, member_id)
    return detail.member


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
async def create_member(
    member_data: MemberCreate,
    db: DbSession,
    response: Response,
) -> MemberResponse:
    """Create new member with optional trainer and class enrollments."""
    member = await member_service.create_member(db, member_data)
    response.headers["Location"] = f"{router.prefix}/{member.id}"
    return member


@router.put("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_member(
    member_id: PathId,
    member_data: MemberUpdate,
    db: DbSession,
) -> None:
    """Update member. ``class_ids`` replaces the whole enrollment set."""
    await member_service.update_member(db, member_id, member_data)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(member_id: PathId, db: DbSession) -> None:
    """Delete member and its enrollments."""
    await member_service.delete_member(db, member_id)
