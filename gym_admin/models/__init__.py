"""Database models for the gym administration system."""

from gym_admin.models.enrollment import Enrollment
from gym_admin.models.gym_class import GymClass
from gym_admin.models.member import Member
from gym_admin.models.trainer import Trainer

__all__ = [
    "Trainer",
    "Member",
    "GymClass",
    "Enrollment",
]
