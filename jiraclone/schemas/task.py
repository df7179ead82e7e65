# jiraclone/schemas/task.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from jiraclone.db.models import TaskPriority, TaskStatus
from .common import AppBaseModel, not_blank


class TaskCreate(AppBaseModel):
    title: str = Field(..., max_length=200)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    sprint_id: Optional[int] = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        return not_blank(v, "title")


class TaskUpdate(AppBaseModel):
    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("title cannot be cleared")
        return not_blank(v, "title")


class TaskSprintIn(AppBaseModel):
    """PATCH /tasks/{id}/sprint. null moves the task back to the backlog."""

    sprint_id: Optional[int] = None


class TaskStatusIn(AppBaseModel):
    status: TaskStatus


class TaskPriorityIn(AppBaseModel):
    priority: TaskPriority


class TaskOut(AppBaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    project_id: Optional[int] = None
    sprint_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
