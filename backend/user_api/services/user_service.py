"""User Service — CRUD orchestration and read-time age derivation.

Invariants:
    - Age is computed on every response from the stored dob; never written back
    - "today" is read once per service call, so one list response shares a reference date
    - Missing users raise UserNotFoundError (404), never return None to routes
    - Dates of birth after "today" are rejected before touching the repository

Design Decisions:
    - Clock injected as a callable: tests pin the reference date without patching datetime
    - Default clock evaluates the calendar date in AGE_TIMEZONE (see config.py)
"""

import logging
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from user_api.core.age import compute_age
from user_api.core.date_of_birth import format_date_of_birth, is_future_date_of_birth
from user_api.core.domain_types import UserId
from user_api.core.errors import UserNotFoundError, ValidationError
from user_api.core.pagination import normalize_page
from user_api.core.repository_protocols import UserLike, UserRepository
from user_api.schemas.user import UserResponse, UserWrite

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


def current_date(tz_name: str = "UTC") -> date:
    """Today's calendar date in the given IANA timezone."""
    return datetime.now(ZoneInfo(tz_name)).date()


def build_user_response(user: UserLike, today: date) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        dob=format_date_of_birth(user.dob),
        age=compute_age(user.dob, today),
    )


class UserService:
    """User CRUD with derived age."""

    def __init__(self, repo: UserRepository, today: Clock | None = None):
        self.repo = repo
        self.today = today or current_date

    def _check_not_future(self, dob: date, today: date) -> None:
        if is_future_date_of_birth(dob, today):
            raise ValidationError("date of birth cannot be in the future", "dob")

    async def create_user(self, payload: UserWrite) -> UserResponse:
        today = self.today()
        self._check_not_future(payload.dob, today)
        user = await self.repo.create(payload.name, payload.dob)
        logger.info("User created", extra={"user_id": user.id})
        return build_user_response(user, today)

    async def get_user(self, user_id: UserId) -> UserResponse:
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return build_user_response(user, self.today())

    async def list_users(
        self, page: int, page_size: int,
    ) -> tuple[list[UserResponse], int]:
        window = normalize_page(page, page_size)
        users = await self.repo.list_page(window.limit, window.offset)
        total = await self.repo.count()
        today = self.today()
        return [build_user_response(u, today) for u in users], total

    async def update_user(
        self, user_id: UserId, payload: UserWrite,
    ) -> UserResponse:
        today = self.today()
        self._check_not_future(payload.dob, today)
        user = await self.repo.update(user_id, payload.name, payload.dob)
        if not user:
            raise UserNotFoundError(user_id)
        logger.info("User updated", extra={"user_id": user.id})
        return build_user_response(user, today)

    async def delete_user(self, user_id: UserId) -> None:
        deleted = await self.repo.delete(user_id)
        if not deleted:
            raise UserNotFoundError(user_id)
        logger.info("User deleted", extra={"user_id": user_id})
