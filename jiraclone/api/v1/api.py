# ./jiraclone/api/v1/api.py
from fastapi import APIRouter

from jiraclone.api.v1.endpoints import (
    projects,
    sprints,
    tasks,
    health,
)

api_router = APIRouter()

# ==============================================================================
# 1. Planning
# ==============================================================================
api_router.include_router(projects.router, prefix="/projects", tags=["Projects"])
api_router.include_router(sprints.router, prefix="/sprints", tags=["Sprints"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])

# ==============================================================================
# 2. System
# ==============================================================================
api_router.include_router(health.router, tags=["Health"])
