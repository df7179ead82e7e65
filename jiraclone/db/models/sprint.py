# ./jiraclone/db/models/sprint.py
from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional, Set

from sqlalchemy import Date, Enum as SAEnum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IntIdMixin, TimestampMixin


class SprintStatus(str, Enum):
    PLANNING = "PLANNING"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


class Sprint(IntIdMixin, TimestampMixin, Base):
    __tablename__ = "sprints"
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    goal: Mapped[Optional[str]] = mapped_column(Text())
    start_date: Mapped[Optional[date]] = mapped_column(Date())
    end_date: Mapped[Optional[date]] = mapped_column(Date())

    # stored by name, no default: a sprint has no status until one is set
    status: Mapped[Optional[SprintStatus]] = mapped_column(
        SAEnum(
            SprintStatus,
            name="sprint_status",
            native_enum=False,
            length=16,
            validate_strings=True,
        ),
        nullable=True,
    )

    project_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("projects.id"), index=True
    )
    project: Mapped[Optional["Project"]] = relationship(back_populates="sprints")

    # read-side view of tasks.sprint_id; Task owns the link
    tasks: Mapped[Set["Task"]] = relationship(viewonly=True)

    def __repr__(self) -> str:
        status = self.status.value if self.status else None
        return f"<Sprint id={self.id} name={self.name!r} status={status}>"
