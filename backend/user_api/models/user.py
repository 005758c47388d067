"""User ORM — persists the durable facts of a user record.

Invariants:
    - id is an autoincrement integer primary key
    - name is non-nullable, at most 255 chars
    - dob is a calendar DATE (no time, no timezone) and the only source of age
    - updated_at moves forward on every UPDATE

Design Decisions:
    - Python-side defaults for timestamps: same behaviour on PostgreSQL and SQLite tests
"""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_api.core.domain_types import NAME_MAX_LENGTH
from user_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A person known to the API. Age is computed, never stored."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
