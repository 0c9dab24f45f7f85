"""Gym class schemas."""

from gym_admin.schemas.common import CamelModel


class GymClassCreate(CamelModel):
    """Gym class creation model."""

    class_name: str


class GymClassUpdate(GymClassCreate):
    """Gym class update model."""


class GymClassResponse(CamelModel):
    """Gym class response model."""

    id: int
    class_name: str
