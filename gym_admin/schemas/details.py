"""Read models that pair an entity with the rows it references.

Pages render these. The JSON API only ever returns the flat ``*Response``
models they wrap.
"""

from typing import List, Optional

from pydantic import BaseModel

from gym_admin.schemas.gym_class import GymClassResponse
from gym_admin.schemas.member import MemberResponse
from gym_admin.schemas.trainer import TrainerResponse


class TrainerDetail(BaseModel):
    trainer: TrainerResponse
    members: List[MemberResponse] = []


class MemberDetail(BaseModel):
    member: MemberResponse
    trainer: Optional[TrainerResponse] = None
    classes: List[GymClassResponse] = []


class GymClassDetail(BaseModel):
    gym_class: GymClassResponse
    members: List[MemberResponse] = []
