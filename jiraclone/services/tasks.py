# jiraclone/services/tasks.py
from __future__ import annotations

from typing import Any, List, Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from jiraclone.core.errors import NotFound, ValidationFailed
from jiraclone.db.models import Sprint, Task, TaskPriority, TaskStatus
from .common import Payload, as_changes, commit, expire_cached, require_text
from .projects import get_project
from .sprints import get_sprint

TASK_FIELDS = ("title", "description", "status", "priority")


def validate_task(task: Task) -> None:
    require_text(task.title, "Task", "title")


def _expire_sprint_views(db: Session, *sprint_ids: Optional[int]) -> None:
    """Drop cached Sprint.tasks collections so the next read re-queries."""
    expire_cached(db, Sprint, sprint_ids, "tasks")


def get_task(db: Session, task_id: int) -> Task:
    task = db.get(Task, task_id)
    if task is None:
        raise NotFound("Task", task_id)
    return task


def list_tasks(db: Session, project_id: Optional[int] = None) -> List[Task]:
    stmt = select(Task).order_by(Task.id)
    if project_id is not None:
        get_project(db, project_id)
        stmt = stmt.where(Task.project_id == project_id)
    return list(db.scalars(stmt))


def create_task(
    db: Session,
    data: Payload,
    *,
    project_id: Optional[int] = None,
    sprint_id: Optional[int] = None,
) -> Task:
    fields = as_changes(data, TASK_FIELDS + ("sprint_id",))
    if sprint_id is not None:
        fields["sprint_id"] = sprint_id
    if project_id is not None:
        get_project(db, project_id)

    sprint_id = fields.get("sprint_id")
    if sprint_id is not None:
        sprint = get_sprint(db, sprint_id)
        # a task planned into a sprint inherits the sprint's project
        if project_id is None:
            project_id = sprint.project_id

    task = Task(project_id=project_id, **fields)
    validate_task(task)
    task.touch()
    db.add(task)
    commit(db)
    _expire_sprint_views(db, task.sprint_id)
    logger.info(
        "Task created: id={} project_id={} sprint_id={}",
        task.id,
        task.project_id,
        task.sprint_id,
    )
    return task


def update_task(db: Session, task_id: int, data: Payload) -> Task:
    task = get_task(db, task_id)
    changes = as_changes(data, TASK_FIELDS)
    for field, value in changes.items():
        setattr(task, field, value)
    try:
        validate_task(task)
    except ValidationFailed:
        db.rollback()
        raise
    task.touch()
    commit(db)
    logger.info("Task updated: id={} fields={}", task.id, sorted(changes))
    return task


def assign_task_to_sprint(
    db: Session, task_id: int, sprint_id: Optional[int]
) -> Task:
    """Point the task at a sprint, or back at the backlog with None."""
    task = get_task(db, task_id)
    if sprint_id is not None:
        get_sprint(db, sprint_id)

    previous = task.sprint_id
    task.sprint_id = sprint_id
    task.touch()
    commit(db)
    db.expire(task, ["sprint"])
    _expire_sprint_views(db, previous, sprint_id)
    logger.info("Task {} moved: sprint {} -> {}", task.id, previous, sprint_id)
    return task


def _coerce(enum_cls, value: Any, field: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    allowed = ", ".join(m.value for m in enum_cls)
    raise ValidationFailed(
        f"Invalid task {field} {value!r} (expected one of: {allowed})",
        detail=[{"loc": [field], "msg": f"expected one of: {allowed}", "type": "enum"}],
    )


def set_task_status(db: Session, task_id: int, status: Any) -> Task:
    task = get_task(db, task_id)
    new_status = _coerce(TaskStatus, status, "status")
    old_status = task.status
    task.status = new_status
    task.touch()
    commit(db)
    logger.info(
        "Task status: id={} {} -> {}", task.id, old_status.value, new_status.value
    )
    return task


def set_task_priority(db: Session, task_id: int, priority: Any) -> Task:
    task = get_task(db, task_id)
    task.priority = _coerce(TaskPriority, priority, "priority")
    task.touch()
    commit(db)
    logger.info("Task priority: id={} -> {}", task.id, task.priority.value)
    return task


def delete_task(db: Session, task_id: int) -> None:
    task = get_task(db, task_id)
    sprint_id = task.sprint_id
    db.delete(task)
    commit(db)
    _expire_sprint_views(db, sprint_id)
    logger.info("Task deleted: id={}", task_id)
