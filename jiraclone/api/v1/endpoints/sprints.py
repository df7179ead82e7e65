# jiraclone/api/v1/endpoints/sprints.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from jiraclone.db.session import get_db
from jiraclone.schemas import SprintCreate, SprintOut, SprintUpdate, TaskOut
from jiraclone.services import sprints as sprint_service

router = APIRouter()


@router.get("", response_model=List[SprintOut])
def list_sprints(
    project_id: Optional[int] = Query(default=None, alias="projectId"),
    db: Session = Depends(get_db),
):
    return [SprintOut.from_entity(s) for s in sprint_service.list_sprints(db, project_id)]


@router.get("/project/{project_id}", response_model=List[SprintOut])
def list_project_sprints(project_id: int, db: Session = Depends(get_db)):
    return [SprintOut.from_entity(s) for s in sprint_service.list_sprints(db, project_id)]


@router.get("/{sprint_id}", response_model=SprintOut)
def get_sprint(sprint_id: int, db: Session = Depends(get_db)):
    return SprintOut.from_entity(sprint_service.get_sprint(db, sprint_id))


@router.post("", response_model=SprintOut, status_code=status.HTTP_201_CREATED)
def create_sprint(
    payload: SprintCreate,
    project_id: Optional[int] = Query(default=None, alias="projectId"),
    db: Session = Depends(get_db),
):
    """
    Create a sprint.
    - projectId (query) overrides projectId in the body
    - id / createdAt / updatedAt are assigned by the server
    """
    sprint = sprint_service.create_sprint(db, payload, project_id=project_id)
    return SprintOut.from_entity(sprint)


@router.put("/{sprint_id}", response_model=SprintOut)
def update_sprint(
    sprint_id: int, payload: SprintUpdate, db: Session = Depends(get_db)
):
    return SprintOut.from_entity(sprint_service.update_sprint(db, sprint_id, payload))


@router.delete("/{sprint_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sprint(sprint_id: int, db: Session = Depends(get_db)):
    sprint_service.delete_sprint(db, sprint_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{sprint_id}/start", response_model=SprintOut)
def start_sprint(sprint_id: int, db: Session = Depends(get_db)):
    return SprintOut.from_entity(sprint_service.start_sprint(db, sprint_id))


@router.post("/{sprint_id}/complete", response_model=SprintOut)
def complete_sprint(sprint_id: int, db: Session = Depends(get_db)):
    return SprintOut.from_entity(sprint_service.complete_sprint(db, sprint_id))


@router.get("/{sprint_id}/tasks", response_model=List[TaskOut])
def list_sprint_tasks(sprint_id: int, db: Session = Depends(get_db)):
    return sprint_service.list_sprint_tasks(db, sprint_id)
