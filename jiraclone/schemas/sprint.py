# jiraclone/schemas/sprint.py
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from jiraclone.db.models import Sprint, SprintStatus
from .common import AppBaseModel, not_blank


class SprintCreate(AppBaseModel):
    """
    Body of POST /sprints.
    - projectId may also be given as a query parameter (query wins)
    - status is optional and has no default
    """

    name: str = Field(..., max_length=200, examples=["Sprint 12"])
    goal: Optional[str] = Field(default=None, examples=["Ship v2"])
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[SprintStatus] = None
    project_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        return not_blank(v, "name")


class SprintUpdate(AppBaseModel):
    """
    Body of PUT /sprints/{id}.
    Only the fields present in the request are applied; an explicit null clears
    an optional field.
    """

    name: Optional[str] = Field(default=None, max_length=200)
    goal: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[SprintStatus] = None
    project_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("name cannot be cleared")
        return not_blank(v, "name")


class SprintOut(AppBaseModel):
    id: int
    name: str
    goal: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[SprintStatus] = None
    project_id: Optional[int] = None
    task_ids: List[int] = []
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, sprint: Sprint) -> "SprintOut":
        # sprint.tasks is loaded on access, so call this while the session is open
        return cls(
            id=sprint.id,
            name=sprint.name,
            goal=sprint.goal,
            start_date=sprint.start_date,
            end_date=sprint.end_date,
            status=sprint.status,
            project_id=sprint.project_id,
            task_ids=sorted(t.id for t in sprint.tasks),
            created_at=sprint.created_at,
            updated_at=sprint.updated_at,
        )
