# tests/test_cli.py
import json

import pytest
from sqlalchemy import inspect
from typer.testing import CliRunner

from jiraclone.cli import app
from jiraclone.db import session as db_session


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def test_db(monkeypatch, engine, session_factory):
    """Point the CLI at the per-test database."""
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", session_factory)


def test_init_db(runner, engine):
    result = runner.invoke(app, ["--quiet", "init-db"])
    assert result.exit_code == 0
    assert {"projects", "sprints", "tasks"} <= set(inspect(engine).get_table_names())


def test_create_and_list_sprints(runner):
    result = runner.invoke(
        app, ["--quiet", "create-sprint", "Sprint 12", "--goal", "Ship v2", "--status", "planning"]
    )
    assert result.exit_code == 0, result.output
    created = json.loads(result.output)
    assert created["name"] == "Sprint 12"
    assert created["status"] == "PLANNING"
    assert created["createdAt"] == created["updatedAt"]

    result = runner.invoke(app, ["--quiet", "list-sprints"])
    assert result.exit_code == 0
    assert [json.loads(line)["id"] for line in result.output.splitlines()] == [created["id"]]


def test_blank_name_fails(runner):
    result = runner.invoke(app, ["--quiet", "create-sprint", "  "])
    assert result.exit_code == 1

    result = runner.invoke(app, ["--quiet", "list-sprints"])
    assert result.output.strip() == ""


def test_set_status(runner):
    created = json.loads(runner.invoke(app, ["--quiet", "create-sprint", "s"]).output)

    result = runner.invoke(app, ["--quiet", "set-status", str(created["id"]), "COMPLETED"])
    assert result.exit_code == 0
    assert json.loads(result.output)["status"] == "COMPLETED"

    result = runner.invoke(app, ["--quiet", "set-status", "999", "ACTIVE"])
    assert result.exit_code == 1
