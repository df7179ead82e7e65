# ./jiraclone/db/models/task.py
from __future__ import annotations
from enum import Enum
from typing import Optional

from sqlalchemy import Enum as SAEnum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base, IntIdMixin, TimestampMixin


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Task(IntIdMixin, TimestampMixin, Base):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text())
    status: Mapped[TaskStatus] = mapped_column(
        SAEnum(TaskStatus, name="task_status", native_enum=False, length=16),
        default=TaskStatus.TODO,
        nullable=False,
    )
    priority: Mapped[TaskPriority] = mapped_column(
        SAEnum(TaskPriority, name="task_priority", native_enum=False, length=16),
        default=TaskPriority.MEDIUM,
        nullable=False,
    )

    project_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("projects.id"), index=True
    )
    # sprint membership lives here; Sprint.tasks only reads it
    sprint_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("sprints.id"), index=True
    )

    project: Mapped[Optional["Project"]] = relationship()
    sprint: Mapped[Optional["Sprint"]] = relationship()
