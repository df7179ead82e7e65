# jiraclone/services/sprints.py
"""
Sprint data access.

Every write path goes through here so that the storage rules hold no matter
who calls (API, CLI, tests):

- ids come from the database on INSERT, never from the caller
- created_at/updated_at are stamped explicitly (``TimestampMixin.touch``)
- ``validate_sprint`` runs before anything is flushed
- ``Sprint.tasks`` is never written; membership is ``Task.sprint_id``
"""
from __future__ import annotations

from typing import Any, List, Optional

from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from jiraclone.core.errors import NotFound, ValidationFailed
from jiraclone.db.models import Project, Sprint, SprintStatus, Task, utcnow
from .common import Payload, as_changes, commit, expire_cached, require_text
from .projects import get_project

# fields a caller may set; id and the timestamps are storage-owned
SPRINT_FIELDS = ("name", "goal", "start_date", "end_date", "status", "project_id")


def coerce_status(value: Any) -> Optional[SprintStatus]:
    """Map a status value onto SprintStatus. Anything else is rejected."""
    if value is None or isinstance(value, SprintStatus):
        return value
    if isinstance(value, str):
        try:
            return SprintStatus(value)
        except ValueError:
            pass
    allowed = ", ".join(s.value for s in SprintStatus)
    raise ValidationFailed(
        f"Invalid sprint status {value!r} (expected one of: {allowed})",
        detail=[{"loc": ["status"], "msg": f"expected one of: {allowed}", "type": "enum"}],
    )


def validate_sprint(sprint: Sprint) -> None:
    """Checks run right before a sprint is persisted."""
    require_text(sprint.name, "Sprint", "name")
    sprint.status = coerce_status(sprint.status)


def get_sprint(db: Session, sprint_id: int) -> Sprint:
    sprint = db.get(Sprint, sprint_id)
    if sprint is None:
        raise NotFound("Sprint", sprint_id)
    return sprint


def list_sprints(db: Session, project_id: Optional[int] = None) -> List[Sprint]:
    stmt = select(Sprint).order_by(Sprint.id)
    if project_id is not None:
        get_project(db, project_id)
        stmt = stmt.where(Sprint.project_id == project_id)
    return list(db.scalars(stmt))


def list_sprint_tasks(db: Session, sprint_id: int) -> List[Task]:
    """All tasks whose sprint_id points at this sprint."""
    get_sprint(db, sprint_id)
    stmt = select(Task).where(Task.sprint_id == sprint_id).order_by(Task.id)
    return list(db.scalars(stmt))


def create_sprint(
    db: Session, data: Payload, *, project_id: Optional[int] = None
) -> Sprint:
    fields = as_changes(data, SPRINT_FIELDS)
    if project_id is not None:
        fields["project_id"] = project_id
    if fields.get("project_id") is not None:
        get_project(db, fields["project_id"])

    sprint = Sprint(**fields)
    validate_sprint(sprint)
    sprint.touch()
    db.add(sprint)
    commit(db)
    expire_cached(db, Project, [sprint.project_id], "sprints")
    logger.info(
        "Sprint created: id={} name={!r} project_id={}",
        sprint.id,
        sprint.name,
        sprint.project_id,
    )
    return sprint


def update_sprint(db: Session, sprint_id: int, data: Payload) -> Sprint:
    """Apply only the supplied fields. A rejected update leaves the row untouched."""
    sprint = get_sprint(db, sprint_id)
    changes = as_changes(data, SPRINT_FIELDS)
    if changes.get("project_id") is not None:
        get_project(db, changes["project_id"])
    previous_project = sprint.project_id

    for field, value in changes.items():
        setattr(sprint, field, value)
    try:
        validate_sprint(sprint)
    except ValidationFailed:
        # autoflush is off, so rolling back just reloads the stored values
        db.rollback()
        raise

    sprint.touch()
    commit(db)
    if "project_id" in changes:
        db.expire(sprint, ["project"])
        expire_cached(
            db, Project, [previous_project, sprint.project_id], "sprints"
        )
    logger.info("Sprint updated: id={} fields={}", sprint.id, sorted(changes))
    return sprint


def set_status(db: Session, sprint_id: int, status: Any) -> Sprint:
    """Any status may follow any other; there is no transition guard."""
    sprint = get_sprint(db, sprint_id)
    new_status = coerce_status(status)
    old_status = sprint.status
    sprint.status = new_status
    sprint.touch()
    commit(db)
    logger.info(
        "Sprint status: id={} {} -> {}",
        sprint.id,
        old_status.value if old_status else None,
        new_status.value if new_status else None,
    )
    return sprint


def start_sprint(db: Session, sprint_id: int) -> Sprint:
    return set_status(db, sprint_id, SprintStatus.ACTIVE)


def complete_sprint(db: Session, sprint_id: int) -> Sprint:
    return set_status(db, sprint_id, SprintStatus.COMPLETED)


def delete_sprint(db: Session, sprint_id: int) -> None:
    """Delete a sprint. Its tasks stay, moved back to the backlog."""
    sprint = get_sprint(db, sprint_id)
    project_id = sprint.project_id
    task_ids = list(db.scalars(select(Task.id).where(Task.sprint_id == sprint_id)))
    db.execute(
        update(Task)
        .where(Task.sprint_id == sprint_id)
        .values(sprint_id=None, updated_at=utcnow())
    )
    db.delete(sprint)
    commit(db)
    expire_cached(db, Task, task_ids, "sprint")
    expire_cached(db, Project, [project_id], "sprints")
    logger.info(
        "Sprint deleted: id={} (detached {} tasks)", sprint_id, len(task_ids)
    )
