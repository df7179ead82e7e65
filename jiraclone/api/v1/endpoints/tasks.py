# jiraclone/api/v1/endpoints/tasks.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from jiraclone.db.session import get_db
from jiraclone.schemas import (
    TaskCreate,
    TaskOut,
    TaskPriorityIn,
    TaskSprintIn,
    TaskStatusIn,
    TaskUpdate,
)
from jiraclone.services import sprints as sprint_service
from jiraclone.services import tasks as task_service

router = APIRouter()


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: TaskCreate,
    project_id: Optional[int] = Query(default=None, alias="projectId"),
    sprint_id: Optional[int] = Query(default=None, alias="sprintId"),
    db: Session = Depends(get_db),
):
    return task_service.create_task(
        db, payload, project_id=project_id, sprint_id=sprint_id
    )


@router.get("/project/{project_id}", response_model=List[TaskOut])
def list_project_tasks(project_id: int, db: Session = Depends(get_db)):
    return task_service.list_tasks(db, project_id)


@router.get("/sprint/{sprint_id}", response_model=List[TaskOut])
def list_sprint_tasks(sprint_id: int, db: Session = Depends(get_db)):
    return sprint_service.list_sprint_tasks(db, sprint_id)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: int, db: Session = Depends(get_db)):
    return task_service.get_task(db, task_id)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(task_id: int, payload: TaskUpdate, db: Session = Depends(get_db)):
    return task_service.update_task(db, task_id, payload)


@router.patch("/{task_id}/sprint", response_model=TaskOut)
def move_task(task_id: int, payload: TaskSprintIn, db: Session = Depends(get_db)):
    return task_service.assign_task_to_sprint(db, task_id, payload.sprint_id)


@router.patch("/{task_id}/status", response_model=TaskOut)
def set_task_status(task_id: int, payload: TaskStatusIn, db: Session = Depends(get_db)):
    return task_service.set_task_status(db, task_id, payload.status)


@router.patch("/{task_id}/priority", response_model=TaskOut)
def set_task_priority(
    task_id: int, payload: TaskPriorityIn, db: Session = Depends(get_db)
):
    return task_service.set_task_priority(db, task_id, payload.priority)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    task_service.delete_task(db, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
