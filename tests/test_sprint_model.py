# tests/test_sprint_model.py
from datetime import date, datetime

import pytest
from sqlalchemy import inspect

from jiraclone.db.models import Project, Sprint, SprintStatus, Task, utcnow


def test_empty_construction_leaves_every_field_unset():
    sprint = Sprint()

    assert sprint.id is None
    assert sprint.name is None
    assert sprint.goal is None
    assert sprint.start_date is None
    assert sprint.end_date is None
    assert sprint.status is None
    assert sprint.project is None
    assert sprint.created_at is None
    assert sprint.updated_at is None
    assert sprint.tasks == set()


def test_full_construction_sets_every_field():
    project = Project(id=3, name="Apollo")
    created = datetime(2024, 1, 1, 9, 0, 0)
    updated = datetime(2024, 1, 2, 9, 0, 0)

    sprint = Sprint(
        id=12,
        name="Sprint 12",
        goal="Ship v2",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 14),
        status=SprintStatus.ACTIVE,
        project=project,
        created_at=created,
        updated_at=updated,
    )

    assert sprint.id == 12
    assert sprint.name == "Sprint 12"
    assert sprint.goal == "Ship v2"
    assert sprint.start_date == date(2024, 1, 1)
    assert sprint.end_date == date(2024, 1, 14)
    assert sprint.status is SprintStatus.ACTIVE
    assert sprint.project is project
    assert sprint.created_at == created
    assert sprint.updated_at == updated


def test_fields_are_plain_read_write_attributes():
    sprint = Sprint(name="a")
    sprint.name = "b"
    sprint.goal = "g"
    sprint.status = SprintStatus.COMPLETED
    sprint.status = SprintStatus.PLANNING

    assert (sprint.name, sprint.goal, sprint.status) == ("b", "g", SprintStatus.PLANNING)


def test_status_enum_has_exactly_three_values():
    assert [s.value for s in SprintStatus] == ["PLANNING", "ACTIVE", "COMPLETED"]


def test_table_layout():
    table = Sprint.__table__
    assert table.name == "sprints"
    assert table.c.project_id.foreign_keys
    assert table.c.status.nullable
    assert table.c.status.default is None
    assert not table.c.name.nullable


def test_tasks_is_a_viewonly_inverse():
    rel = inspect(Sprint).relationships["tasks"]
    assert rel.viewonly
    assert rel.mapper.class_ is Task
    assert isinstance(Sprint().tasks, set)


def test_touch_stamps_created_once_and_keeps_updated_ahead():
    sprint = Sprint(name="s")
    first = sprint.touch(datetime(2024, 5, 1, 12, 0))
    assert sprint.created_at == sprint.updated_at == first

    sprint.touch(datetime(2024, 5, 2, 12, 0))
    assert sprint.created_at == datetime(2024, 5, 1, 12, 0)
    assert sprint.updated_at == datetime(2024, 5, 2, 12, 0)

    # clock going backwards never puts updated_at before created_at
    sprint.touch(datetime(2024, 4, 1, 12, 0))
    assert sprint.updated_at >= sprint.created_at


def test_utcnow_is_naive():
    assert utcnow().tzinfo is None


@pytest.mark.parametrize("status", list(SprintStatus))
def test_repr_includes_status(status):
    assert status.value in repr(Sprint(id=1, name="x", status=status))
