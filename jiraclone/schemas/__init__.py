# jiraclone/schemas/__init__.py

from .common import AppBaseModel
from .project import ProjectCreate, ProjectUpdate, ProjectOut
from .sprint import SprintCreate, SprintUpdate, SprintOut
from .task import TaskCreate, TaskUpdate, TaskSprintIn, TaskStatusIn, TaskPriorityIn, TaskOut

__all__ = [
    "AppBaseModel",
    "ProjectCreate", "ProjectUpdate", "ProjectOut",
    "SprintCreate", "SprintUpdate", "SprintOut",
    "TaskCreate", "TaskUpdate", "TaskSprintIn", "TaskStatusIn", "TaskPriorityIn", "TaskOut",
]
