"""Seed database with sample data."""

import asyncio
import logging

from gym_admin.core.database import AsyncSessionLocal, init_db
from gym_admin.schemas import GymClassCreate, MemberCreate, TrainerCreate
from gym_admin.services import gym_class_service, member_service, trainer_service

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def seed_data():
    """Seed database with sample data."""
    await init_db()
    async with AsyncSessionLocal() as db:
        if await trainer_service.count_trainers(db):
            logger.info("Database already has trainers, skipping seed")
            return

        # Create trainers
        trainers = [
            await trainer_service.create_trainer(
                db, TrainerCreate(name="Alice Novak", email="alice@gym.local", phone="555-0101")
            ),
            await trainer_service.create_trainer(
                db, TrainerCreate(name="Marco Rossi", email="marco@gym.local", phone="555-0102")
            ),
        ]

        # Create classes
        classes = [
            await gym_class_service.create_class(db, GymClassCreate(class_name=name))
            for name in ("Yoga", "Spinning", "CrossFit", "Pilates")
        ]

        # Create members
        members = [
            MemberCreate(
                full_name="Bob Miller",
                email="bob@example.com",
                phone="555-0201",
                trainer_id=trainers[0].id,
                class_ids=[classes[0].id, classes[3].id],
            ),
            MemberCreate(
                full_name="Carla Gomez",
                email="carla@example.com",
                trainer_id=trainers[1].id,
                class_ids=[classes[1].id, classes[2].id],
            ),
            MemberCreate(full_name="Dan Walsh", class_ids=[classes[0].id]),
        ]
        for member in members:
            await member_service.create_member(db, member)

        logger.info(
            f"Seeded {len(trainers)} trainers, {len(classes)} classes, {len(members)} members"
        )


if __name__ == "__main__":
    asyncio.run(seed_data())
