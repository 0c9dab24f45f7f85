"""Enrollment model."""

from sqlalchemy import ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from gym_admin.core.database import Base


class Enrollment(Base):
    """Join row for member-class relationships.

    The composite primary key allows one row per (member, class) pair.
    Rows go away with either side.
    """

    __tablename__ = "enrollments"
    __table_args__ = (Index("ix_enrollments_class_id", "class_id"),)

    member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id", ondelete="CASCADE"), primary_key=True
    )
    class_id: Mapped[int] = mapped_column(
        ForeignKey("gym_classes.id", ondelete="CASCADE"), primary_key=True
    )

    def __repr__(self) -> str:
        return f"<Enrollment(member_id={self.member_id}, class_id={self.class_id})>"
