# ./jiraclone/cli.py

from __future__ import annotations
from typing import Optional

import typer

from jiraclone.core.errors import AppError
from jiraclone.core.logger import setup_logging
from jiraclone.db import session as db_session
from jiraclone.db.models import SprintStatus
from jiraclone.schemas import SprintOut
from jiraclone.services import sprints as sprint_service

app = typer.Typer(help="Jira Clone backend utilities")


def _print_sprint(sprint) -> None:
    typer.echo(SprintOut.from_entity(sprint).model_dump_json(by_alias=True))


@app.callback()
def main(quiet: bool = typer.Option(False, "--quiet", "-q", help="No log output")):
    if not quiet:
        setup_logging()


@app.command("init-db")
def init_db():
    """Create all tables on the configured database."""
    db_session.init_db()
    typer.echo("database ready")


@app.command("create-sprint")
def create_sprint(
    name: str,
    goal: Optional[str] = typer.Option(None, help="Sprint goal"),
    project_id: Optional[int] = typer.Option(None, "--project-id"),
    status: Optional[SprintStatus] = typer.Option(None, case_sensitive=False),
):
    db = db_session.SessionLocal()
    try:
        sprint = sprint_service.create_sprint(
            db,
            {"name": name, "goal": goal, "status": status},
            project_id=project_id,
        )
        _print_sprint(sprint)
    except AppError as e:
        typer.echo(f"error: {e.message}", err=True)
        raise typer.Exit(code=1)
    finally:
        db.close()


@app.command("list-sprints")
def list_sprints(project_id: Optional[int] = typer.Option(None, "--project-id")):
    db = db_session.SessionLocal()
    try:
        for sprint in sprint_service.list_sprints(db, project_id):
            _print_sprint(sprint)
    except AppError as e:
        typer.echo(f"error: {e.message}", err=True)
        raise typer.Exit(code=1)
    finally:
        db.close()


@app.command("set-status")
def set_status(sprint_id: int, status: SprintStatus):
    db = db_session.SessionLocal()
    try:
        _print_sprint(sprint_service.set_status(db, sprint_id, status))
    except AppError as e:
        typer.echo(f"error: {e.message}", err=True)
        raise typer.Exit(code=1)
    finally:
        db.close()


if __name__ == "__main__":
    app()
