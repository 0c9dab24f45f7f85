"""Gym classes API endpoints."""

from typing import List

from fastapi import APIRouter, Response, status

from gym_admin.api.dependencies import DbSession, PathId
from gym_admin.schemas import GymClassCreate, GymClassResponse, GymClassUpdate
from gym_admin.services import gym_class_service

router = APIRouter(prefix="/api/GymClassApi", tags=["classes"])


@router.get("", response_model=List[GymClassResponse])
async def get_classes(db: DbSession) -> List[GymClassResponse]:
    """Get all classes."""
    return await gym_class_service.list_classes(db)


@router.get("/{class_id}", response_model=GymClassResponse)
async def get_class(class_id: PathId, db: DbSession) -> GymClassResponse:
    """Get class by ID."""
    detail = await gym_class_service.get_class(db, class_id)
    return detail.gym_class


@router.post("", response_model=GymClassResponse, status_code=status.HTTP_201_CREATED)
async def create_class(
    class_data: GymClassCreate,
    db: DbSession,
    response: Response,
) -> GymClassResponse:
    """Create new class."""
    gym_class = await gym_class_service.create_class(db, class_data)
    response.headers["Location"] = f"{router.prefix}/{gym_class.id}"
    return gym_class


@router.put("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_class(
    class_id: PathId,
    class_data: GymClassUpdate,
    db: DbSession,
) -> None:
    await gym_class_service.update_class(db, class_id, class_data)


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class(class_id: PathId, db: DbSession) -> None:
    """Delete class and its enrollments. Members are kept."""
    await gym_class_service.delete_class(db, class_id)
