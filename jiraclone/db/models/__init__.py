# ./jiraclone/db/models/__init__.py

from .base import Base, IntIdMixin, TimestampMixin, utcnow
from .project import Project
from .sprint import Sprint, SprintStatus
from .task import Task, TaskStatus, TaskPriority

__all__ = [
    "Base", "IntIdMixin", "TimestampMixin", "utcnow",
    "Project", "Sprint", "SprintStatus",
    "Task", "TaskStatus", "TaskPriority",
]
