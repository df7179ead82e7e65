# ./jiraclone/db/session.py

from __future__ import annotations
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from pathlib import Path
from loguru import logger

from jiraclone.core.config import settings
from jiraclone.db.models import Base


def _ensure_sqlite_dir(url: str) -> None:
    """Create the parent folder of a sqlite:///path/to/db.sqlite file."""
    if not url.startswith("sqlite") or ":memory:" in url:
        return
    # sqlite:///./.data/jiraclone.db -> "./.data/jiraclone.db"
    path_part = url.split("///", 1)[1] if "///" in url else url.split("//", 1)[1]
    path_part = path_part.split("?", 1)[0]
    if path_part:
        Path(path_part).parent.mkdir(parents=True, exist_ok=True)


def make_engine(url: str, **kwargs) -> Engine:
    _ensure_sqlite_dir(url)
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=settings.DB_ECHO, future=True, **kwargs)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(
        bind=bind,
        autoflush=False,
        autocommit=False,
        future=True,
        expire_on_commit=False,
    )


engine = make_engine(settings.DB_URL)
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine | None = None) -> None:
    """Create missing tables. Alembic owns schema changes after that."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.debug("Tables ensured on {}", bind.url.render_as_string(hide_password=True))


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
