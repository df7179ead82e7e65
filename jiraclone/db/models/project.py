# ./jiraclone/db/models/project.py

from __future__ import annotations
from typing import Optional, List

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base, IntIdMixin, TimestampMixin

class Project(IntIdMixin, TimestampMixin, Base):
    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    key: Mapped[Optional[str]] = mapped_column(String(10), unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text())

    # deletion of child rows is done explicitly in services.projects
    sprints: Mapped[List["Sprint"]] = relationship(
        back_populates="project",
        order_by="Sprint.id",
        passive_deletes="all",
    )
