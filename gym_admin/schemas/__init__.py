"""Request commands and flat response DTOs."""

from gym_admin.schemas.common import MAX_ID, EntityId
from gym_admin.schemas.details import GymClassDetail, MemberDetail, TrainerDetail
from gym_admin.schemas.gym_class import GymClassCreate, GymClassResponse, GymClassUpdate
from gym_admin.schemas.member import MemberCreate, MemberResponse, MemberUpdate
from gym_admin.schemas.trainer import TrainerCreate, TrainerResponse, TrainerUpdate

__all__ = [
    "MAX_ID",
    "EntityId",
    "TrainerCreate",
    "TrainerUpdate",
    "TrainerResponse",
    "TrainerDetail",
    "MemberCreate",
    "MemberUpdate",
    "MemberResponse",
    "MemberDetail",
    "GymClassCreate",
    "GymClassUpdate",
    "GymClassResponse",
    "GymClassDetail",
]
