"""API dependencies for database access and path parameters."""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from gym_admin.core.database import get_db
from gym_admin.schemas import MAX_ID

# Dependency aliases for easier use
DbSession = Annotated[AsyncSession, Depends(get_db)]

# Ids outside this range can never name a stored row
PathId = Annotated[int, Path(ge=1, le=MAX_ID)]
