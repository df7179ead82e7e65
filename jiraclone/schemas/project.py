# jiraclone/schemas/project.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .common import AppBaseModel, not_blank


class ProjectCreate(AppBaseModel):
    name: str = Field(..., max_length=100)
    key: Optional[str] = Field(default=None, max_length=10, examples=["JC"])
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        return not_blank(v, "name")


class ProjectUpdate(AppBaseModel):
    name: Optional[str] = Field(default=None, max_length=100)
    key: Optional[str] = Field(default=None, max_length=10)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("name cannot be cleared")
        return not_blank(v, "name")


class ProjectOut(AppBaseModel):
    id: int
    name: str
    key: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
