# ./jiraclone/api/v1/endpoints/health.py
from __future__ import annotations
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from jiraclone.core.config import settings
from jiraclone.db.session import get_db

router = APIRouter(prefix="/health")

class HealthOut(BaseModel):
    status: str
    env: str
    db_ok: bool | None = None

@router.get("", response_model=dict)
def health_simple():
    return {"status": "ok", "env": settings.APP_ENV}

@router.get("/extended", response_model=HealthOut)
def health_extended(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        return HealthOut(status="ok", env=settings.APP_ENV, db_ok=True)
    except SQLAlchemyError:
        return HealthOut(status="degraded", env=settings.APP_ENV, db_ok=False)
