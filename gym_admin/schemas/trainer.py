"""Trainer schemas."""

from typing import Optional

from pydantic import Field

from gym_admin.schemas.common import CamelModel


class TrainerCreate(CamelModel):
    """Trainer creation model."""

    name: str
    email: Optional[str] = None
    phone: Optional[str] = Field(default=None, alias="phoneNumber")


class TrainerUpdate(TrainerCreate):
    """Trainer update model. Every field is replaced."""


class TrainerResponse(CamelModel):
    """Trainer response model."""

    id: int
    name: str
    email: str
    phone: str = Field(alias="phoneNumber")
