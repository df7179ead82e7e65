# tests/test_project_task_services.py
import pytest

from jiraclone.core.errors import Conflict, NotFound, ValidationFailed
from jiraclone.db.models import Project, Sprint, Task, TaskPriority, TaskStatus
from jiraclone.services import projects as project_service
from jiraclone.services import sprints as sprint_service
from jiraclone.services import tasks as task_service


class TestProjects:
    def test_create_and_get(self, db_session):
        project = project_service.create_project(
            db_session, {"name": "Apollo", "key": "AP", "description": "moon"}
        )
        assert project.id is not None
        assert project.created_at == project.updated_at
        assert project_service.get_project(db_session, project.id) is project

    def test_blank_name_rejected(self, db_session):
        with pytest.raises(ValidationFailed):
            project_service.create_project(db_session, {"name": " "})

    def test_duplicate_key_is_a_conflict(self, db_session):
        project_service.create_project(db_session, {"name": "A", "key": "JC"})
        with pytest.raises(Conflict):
            project_service.create_project(db_session, {"name": "B", "key": "JC"})
        # session is usable again after the rollback
        assert len(project_service.list_projects(db_session)) == 1

    def test_update(self, db_session):
        project = project_service.create_project(db_session, {"name": "A"})
        created_at = project.created_at
        project_service.update_project(db_session, project.id, {"description": "d"})
        assert project.description == "d"
        assert project.created_at == created_at
        assert project.updated_at >= created_at

    def test_delete_removes_sprints_and_tasks(self, db_session):
        project = project_service.create_project(db_session, {"name": "A"})
        other = project_service.create_project(db_session, {"name": "B"})
        sprint = sprint_service.create_sprint(db_session, {"name": "s"}, project_id=project.id)
        task_service.create_task(db_session, {"title": "t"}, sprint_id=sprint.id)
        foreign = task_service.create_task(
            db_session, {"title": "f"}, project_id=other.id, sprint_id=sprint.id
        )
        project_id, sprint_id, foreign_id = project.id, sprint.id, foreign.id

        project_service.delete_project(db_session, project_id)

        assert db_session.get(Project, project_id) is None
        assert db_session.get(Sprint, sprint_id) is None
        assert [t.id for t in task_service.list_tasks(db_session)] == [foreign_id]
        assert db_session.get(Task, foreign_id).sprint_id is None

    def test_missing(self, db_session):
        with pytest.raises(NotFound):
            project_service.get_project(db_session, 1)


class TestTasks:
    def test_defaults(self, db_session):
        task = task_service.create_task(db_session, {"title": "write docs"})
        assert task.status is TaskStatus.TODO
        assert task.priority is TaskPriority.MEDIUM
        assert task.sprint_id is None

    def test_inherits_project_from_sprint(self, db_session):
        project = project_service.create_project(db_session, {"name": "A"})
        sprint = sprint_service.create_sprint(db_session, {"name": "s"}, project_id=project.id)
        task = task_service.create_task(db_session, {"title": "t", "sprint_id": sprint.id})
        assert task.project_id == project.id

    def test_unknown_sprint_rejected(self, db_session):
        with pytest.raises(NotFound):
            task_service.create_task(db_session, {"title": "t"}, sprint_id=9)

    def test_blank_title_rejected(self, db_session):
        with pytest.raises(ValidationFailed):
            task_service.create_task(db_session, {"title": ""})

    def test_update_and_move_to_backlog(self, db_session):
        sprint = sprint_service.create_sprint(db_session, {"name": "s"})
        task = task_service.create_task(db_session, {"title": "t"}, sprint_id=sprint.id)

        task_service.update_task(db_session, task.id, {"status": TaskStatus.DONE})
        task_service.assign_task_to_sprint(db_session, task.id, None)

        assert task.status is TaskStatus.DONE
        assert task.sprint_id is None
        assert sprint_service.list_sprint_tasks(db_session, sprint.id) == []

    def test_set_status_and_priority(self, db_session):
        task = task_service.create_task(db_session, {"title": "t"})
        created_at = task.created_at

        task_service.set_task_status(db_session, task.id, "IN_PROGRESS")
        task_service.set_task_priority(db_session, task.id, TaskPriority.HIGH)

        assert task.status is TaskStatus.IN_PROGRESS
        assert task.priority is TaskPriority.HIGH
        assert task.created_at == created_at
        assert task.updated_at >= created_at

    @pytest.mark.parametrize("bad", ["in_progress", "BLOCKED", None, 3])
    def test_unknown_status_rejected(self, db_session, bad):
        task = task_service.create_task(db_session, {"title": "t"})
        with pytest.raises(ValidationFailed):
            task_service.set_task_status(db_session, task.id, bad)
        assert task.status is TaskStatus.TODO

    def test_unknown_priority_rejected(self, db_session):
        task = task_service.create_task(db_session, {"title": "t"})
        with pytest.raises(ValidationFailed):
            task_service.set_task_priority(db_session, task.id, "URGENT")
        assert task.priority is TaskPriority.MEDIUM

    def test_set_status_on_missing_task(self, db_session):
        with pytest.raises(NotFound):
            task_service.set_task_status(db_session, 42, TaskStatus.DONE)

    def test_delete(self, db_session):
        task = task_service.create_task(db_session, {"title": "t"})
        task_service.delete_task(db_session, task.id)
        with pytest.raises(NotFound):
            task_service.get_task(db_session, task.id)
