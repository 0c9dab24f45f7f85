"""Gym class operations."""

import logging
from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gym_admin.core.errors import NotFoundError, ValidationError
from gym_admin.models import Enrollment, GymClass
from gym_admin.schemas import GymClassCreate, GymClassDetail, GymClassResponse, GymClassUpdate
from gym_admin.services import member_service
from gym_admin.services.common import clean_required, write_transaction

logger = logging.getLogger(__name__)


def _clean_name(data: GymClassCreate) -> str:
    errors = {}
    class_name = clean_required(data.class_name, "class_name", errors)
    if errors:
        raise ValidationError(errors)
    return class_name


async def _load(db: AsyncSession, class_id: int) -> GymClass:
    gym_class = await db.get(GymClass, class_id)
    if gym_class is None:
        raise NotFoundError("GymClass", class_id)
    return gym_class


async def list_classes(db: AsyncSession) -> List[GymClassResponse]:
    """Get all classes ordered by id."""
    result = await db.execute(select(GymClass).order_by(GymClass.id))
    return [GymClassResponse.model_validate(c) for c in result.scalars().all()]


async def get_class(db: AsyncSession, class_id: int) -> GymClassDetail:
    """Get class by ID with its enrolled members."""
    gym_class = await _load(db, class_id)
    members = await member_service.list_members_in_class(db, class_id)
    return GymClassDetail(gym_class=GymClassResponse.model_validate(gym_class), members=members)


async def create_class(db: AsyncSession, data: GymClassCreate) -> GymClassResponse:
    """Create new class."""
    gym_class = GymClass(class_name=_clean_name(data))
    async with write_transaction(db, "create class"):
        db.add(gym_class)
        await db.flush()
    logger.info(f"Created class {gym_class.class_name} (ID: {gym_class.id})")
    return GymClassResponse.model_validate(gym_class)


async def update_class(db: AsyncSession, class_id: int, data: GymClassUpdate) -> GymClassResponse:
    gym_class = await _load(db, class_id)
    class_name = _clean_name(data)
    async with write_transaction(db, "update class"):
        gym_class.class_name = class_name
    logger.info(f"Updated class {gym_class.class_name} (ID: {class_id})")
    return GymClassResponse.model_validate(gym_class)


async def delete_class(db: AsyncSession, class_id: int) -> None:
    """Delete class and its enrollment rows. Enrolled members are kept."""
    gym_class = await _load(db, class_id)
    class_name = gym_class.class_name
    async with write_transaction(db, "delete class"):
        result = await db.execute(delete(Enrollment).where(Enrollment.class_id == class_id))
        await db.delete(gym_class)
    logger.info(
        f"Deleted class {class_name} (ID: {class_id}), "
        f"removed {result.rowcount} enrollment(s)"
    )


async def count_classes(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(GymClass))
    return result.scalar_one()
