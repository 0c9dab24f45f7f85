"""Trainers API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from gym_admin.api.dependencies import DbSession, PathId
from gym_admin.schemas import TrainerCreate, TrainerResponse, TrainerUpdate
from gym_admin.services import trainer_service

router = APIRouter(prefix="/api/TrainerApi", tags=["trainers"])


@router.get("", response_model=List[TrainerResponse])
async def get_trainers(
    db: DbSession,
    search: Optional[str] = Query(default=None, alias="searchString"),
) -> List[TrainerResponse]:
    """Get all trainers."""
    return await trainer_service.list_trainers(db, search)


@router.get("/{trainer_id}", response_model=TrainerResponse)
async def get_trainer(trainer_id: PathId, db: DbSession) -> TrainerResponse:
    """Get trainer by ID."""
    detail = await trainer_service.get_trainer(db, trainer_id)
    return detail.trainer


@router.post("", response_model=TrainerResponse, status_code=status.HTTP_201_CREATED)
async def create_trainer(
    trainer_data: TrainerCreate,
    db: DbSession,
    response: Response,
) -> TrainerResponse:
    """Create new trainer."""
    trainer = await trainer_service.create_trainer(db, trainer_data)
    response.headers["Location"] = f"{router.prefix}/{trainer.id}"
    return trainer


@router.put("/{trainer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_trainer(
    trainer_id: PathId,
    trainer_data: TrainerUpdate,
    db: DbSession,
) -> None:
    """Update trainer."""
    await trainer_service.update_trainer(db, trainer_id, trainer_data)


@router.delete("/{trainer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trainer(trainer_id: PathId, db: DbSession) -> None:
    """Delete trainer. Assigned members are kept without a trainer."""
    await trainer_service.delete_trainer(db, trainer_id)
