# ./jiraclone/db/models/base.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Naive UTC timestamp (SQLite drops tzinfo on read, so we never store it)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    pass


class IntIdMixin:
    # assigned by the database on INSERT; AUTOINCREMENT keeps ids from being reused
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    # no column defaults: the data-access layer stamps both fields on every write
    created_at: Mapped[datetime] = mapped_column(DateTime(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(), nullable=False)

    def touch(self, now: datetime | None = None) -> datetime:
        """Stamp the record for a write. Sets created_at only on first call."""
        now = now or utcnow()
        if self.created_at is None:
            self.created_at = now
        # never let updated_at fall behind created_at (clock skew / reconstructed rows)
        self.updated_at = max(now, self.created_at)
        return self.updated_at
