# jiraclone/services/projects.py
from __future__ import annotations

from typing import List

from loguru import logger
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from jiraclone.core.errors import NotFound, ValidationFailed
from jiraclone.db.models import Project, Sprint, Task, utcnow
from .common import Payload, as_changes, commit, require_text

PROJECT_FIELDS = ("name", "key", "description")


def validate_project(project: Project) -> None:
    require_text(project.name, "Project", "name")


def get_project(db: Session, project_id: int) -> Project:
    project = db.get(Project, project_id)
    if project is None:
        raise NotFound("Project", project_id)
    return project


def list_projects(db: Session) -> List[Project]:
    return list(db.scalars(select(Project).order_by(Project.id)))


def create_project(db: Session, data: Payload) -> Project:
    project = Project(**as_changes(data, PROJECT_FIELDS))
    validate_project(project)
    project.touch()
    db.add(project)
    commit(db)
    logger.info("Project created: id={} name={!r}", project.id, project.name)
    return project


def update_project(db: Session, project_id: int, data: Payload) -> Project:
    project = get_project(db, project_id)
    changes = as_changes(data, PROJECT_FIELDS)
    for field, value in changes.items():
        setattr(project, field, value)
    try:
        validate_project(project)
    except ValidationFailed:
        db.rollback()
        raise
    project.touch()
    commit(db)
    logger.info("Project updated: id={} fields={}", project.id, sorted(changes))
    return project


def delete_project(db: Session, project_id: int) -> None:
    """A project owns its backlog: its tasks and sprints go with it."""
    project = get_project(db, project_id)
    sprint_ids = select(Sprint.id).where(Sprint.project_id == project_id)
    # tasks of other projects planned into these sprints fall back to the backlog
    db.execute(
        update(Task)
        .where(Task.sprint_id.in_(sprint_ids))
        .values(sprint_id=None, updated_at=utcnow())
        .execution_options(synchronize_session="fetch")
    )
    db.execute(delete(Task).where(Task.project_id == project_id))
    db.execute(delete(Sprint).where(Sprint.project_id == project_id))
    db.delete(project)
    commit(db)
    logger.info("Project deleted: id={}", project_id)
