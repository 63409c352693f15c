"""Task ORM — the single persisted resource.

Invariants:
    - id is an integer primary key assigned by the database, never reused
      after deletion (AUTOINCREMENT on SQLite, sequence on PostgreSQL)
    - title is non-nullable, at most 255 characters
    - completed defaults to False
    - created_at set once at insert; updated_at refreshed on every mutation

Design Decisions:
    - Timestamps generated in Python (UTC): identical microsecond precision on
      every backend, unlike server_default=now()
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from task_api.db.base import Base

TITLE_MAX_LENGTH = 255


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """Task — title, optional description, completion flag."""
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH), nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} title={self.title!r} completed={self.completed}>"
