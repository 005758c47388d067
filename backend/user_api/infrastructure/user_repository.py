"""User Repository — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - Every mutating call commits before returning (one unit of work per call)
    - Listing is ordered by id ascending so pages are stable
    - Missing rows are reported as None / False, never as exceptions
    - SQLAlchemy failures roll back and surface as DatabaseError labelled with the
      user operation (create_user, get_user, list_users, update_user, delete_user, count_users)

Design Decisions:
    - Thin adapter over AsyncSession: SQL stays here, response shaping stays in the service
"""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.core.domain_types import UserId
from user_api.core.errors import DatabaseError
from user_api.infrastructure.database import describe_db_error
from user_api.models.user import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """User persistence backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _operation(self, name: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"DB error during {name}: {e}",
                extra={"error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(describe_db_error(e), name) from e

    async def create(self, name: str, dob: date) -> User:
        async with self._operation("create_user"):
            user = User(name=name, dob=dob)
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
            return user

    async def get(self, user_id: UserId) -> User | None:
        async with self._operation("get_user"):
            result = await self.db.execute(select(User).where(User.id == user_id))
            return result.scalar_one_or_none()

    async def list_page(self, limit: int, offset: int) -> list[User]:
        async with self._operation("list_users"):
            result = await self.db.execute(
                select(User).order_by(User.id).limit(limit).offset(offset),
            )
            return list(result.scalars().all())

    async def update(self, user_id: UserId, name: str, dob: date) -> User | None:
        user = await self.get(user_id)
        if not user:
            return None
        async with self._operation("update_user"):
            user.name = name
            user.dob = dob
            await self.db.commit()
            await self.db.refresh(user)
            return user

    async def delete(self, user_id: UserId) -> bool:
        async with self._operation("delete_user"):
            result = await self.db.execute(delete(User).where(User.id == user_id))
            await self.db.commit()
            return result.rowcount > 0

    async def count(self) -> int:
        async with self._operation("count_users"):
            result = await self.db.execute(select(func.count()).select_from(User))
            return result.scalar_one()
