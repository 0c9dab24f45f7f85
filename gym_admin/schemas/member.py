"""Member schemas."""

from typing import List, Optional

from pydantic import Field

from gym_admin.schemas.common import CamelModel, EntityId


class MemberCreate(CamelModel):
    """Member creation model.

    ``class_ids`` is the complete enrollment set for the member.
    """

    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = Field(default=None, alias="phoneNumber")
    trainer_id: Optional[EntityId] = None
    class_ids: List[EntityId] = Field(default_factory=list, alias="gymClassIds")


class MemberUpdate(MemberCreate):
    """Member update model. Scalar fields and the enrollment set are replaced."""


class MemberResponse(CamelModel):
    """Flat member response model."""

    id: int
    full_name: str
    email: str
    phone: str = Field(alias="phoneNumber")
    trainer_id: Optional[int] = None
    class_ids: List[int] = Field(default_factory=list, alias="gymClassIds")
