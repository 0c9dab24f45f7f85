"""Gym class model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gym_admin.core.database import Base


class GymClass(Base):
    """A class members can enroll in. No schedule or capacity attached."""

    __tablename__ = "gym_classes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    class_name: Mapped[str] = mapped_column(String(200), nullable=False)

    def __repr__(self) -> str:
        return f"<GymClass(id={self.id}, class_name='{self.class_name}')>"
