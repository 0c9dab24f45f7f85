"""Trainer model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gym_admin.core.database import Base


class Trainer(Base):
    """Trainer model for storing trainer contact information."""

    __tablename__ = "trainers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Trainer(id={self.id}, name='{self.name}')>"
