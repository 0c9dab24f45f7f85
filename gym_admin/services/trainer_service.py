"""Trainer operations."""

import logging
from typing import Dict, List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gym_admin.core.errors import NotFoundError, ValidationError
from gym_admin.models import Member, Trainer
from gym_admin.schemas import TrainerCreate, TrainerDetail, TrainerResponse, TrainerUpdate
from gym_admin.services import member_service
from gym_admin.services.common import (
    clean_email,
    clean_phone,
    clean_required,
    search_pattern,
    write_transaction,
)

logger = logging.getLogger(__name__)


def _clean(data: TrainerCreate) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    values = {
        "name": clean_required(data.name, "name", errors),
        "email": clean_email(data.email, errors),
        "phone": clean_phone(data.phone, errors),
    }
    if errors:
        raise ValidationError(errors)
    return values


async def _load(db: AsyncSession, trainer_id: int) -> Trainer:
    trainer = await db.get(Trainer, trainer_id)
    if trainer is None:
        raise NotFoundError("Trainer", trainer_id)
    return trainer


async def list_trainers(db: AsyncSession, search: Optional[str] = None) -> List[TrainerResponse]:
    """Get trainers ordered by id, optionally filtered by a case-insensitive name substring."""
    query = select(Trainer).order_by(Trainer.id)
    pattern = search_pattern(search)
    if pattern is not None:
        query = query.where(Trainer.name.ilike(pattern, escape="\\"))
    result = await db.execute(query)
    return [TrainerResponse.model_validate(t) for t in result.scalars().all()]


async def get_trainer(db: AsyncSession, trainer_id: int) -> TrainerDetail:
    """Get trainer by ID together with the members assigned to it."""
    trainer = await _load(db, trainer_id)
    members = await member_service.list_members_by_trainer(db, trainer_id)
    return TrainerDetail(trainer=TrainerResponse.model_validate(trainer), members=members)


async def create_trainer(db: AsyncSession, data: TrainerCreate) -> TrainerResponse:
    """Create new trainer."""
    values = _clean(data)
    trainer = Trainer(**values)
    async with write_transaction(db, "create trainer"):
        db.add(trainer)
        await db.flush()
    logger.info(f"Created trainer {trainer.name} (ID: {trainer.id})")
    return TrainerResponse.model_validate(trainer)


async def update_trainer(db: AsyncSession, trainer_id: int, data: TrainerUpdate) -> TrainerResponse:
    """Replace every field of a trainer."""
    trainer = await _load(db, trainer_id)
    values = _clean(data)
    async with write_transaction(db, "update trainer"):
        for field, value in values.items():
            setattr(trainer, field, value)
    logger.info(f"Updated trainer {trainer.name} (ID: {trainer.id})")
    return TrainerResponse.model_validate(trainer)


async def delete_trainer(db: AsyncSession, trainer_id: int) -> None:
    """Delete trainer. Its members stay, with their trainer cleared."""
    trainer = await _load(db, trainer_id)
    trainer_name = trainer.name
    async with write_transaction(db, "delete trainer"):
        result = await db.execute(
            update(Member)
            .where(Member.trainer_id == trainer_id)
            .values(trainer_id=None)
        )
        await db.delete(trainer)
    logger.info(
        f"Deleted trainer {trainer_name} (ID: {trainer_id}), "
        f"unassigned {result.rowcount} member(s)"
    )


async def count_trainers(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Trainer))
    return result.scalar_one()
