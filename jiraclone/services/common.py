# jiraclone/services/common.py
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Union

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jiraclone.core.errors import Conflict, ValidationFailed

Payload = Union[Mapping[str, Any], BaseModel]


def as_changes(data: Payload, allowed: Iterable[str]) -> Dict[str, Any]:
    """
    Normalize a request payload into a field -> value dict.
    Pydantic models only contribute the fields that were actually sent.
    """
    if isinstance(data, BaseModel):
        raw = data.model_dump(exclude_unset=True)
    else:
        raw = dict(data)
    allowed = set(allowed)
    return {k: v for k, v in raw.items() if k in allowed}


def require_text(value: Any, entity: str, field: str) -> None:
    if value is None or not str(value).strip():
        raise ValidationFailed(
            f"{entity} {field} must not be blank",
            detail=[{"loc": [field], "msg": "must not be blank", "type": "value_error"}],
        )


def commit(db: Session) -> None:
    """Commit, rolling the session back if the database refuses the write."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise Conflict(f"Integrity error: {e.orig}") from e
    except SQLAlchemyError:
        db.rollback()
        logger.exception("DB commit failed")
        raise


def expire_cached(
    db: Session, model: type, ids: Iterable[Any], *attrs: str
) -> None:
    """
    Expire relationship attributes on rows already in the session.
    Writes set FK columns directly, and with expire_on_commit=False the loaded
    side of the association would otherwise keep pointing at the old row.
    """
    wanted = {i for i in ids if i is not None}
    if not wanted:
        return
    for obj in list(db.identity_map.values()):
        if isinstance(obj, model) and obj.id in wanted:
            db.expire(obj, list(attrs))
