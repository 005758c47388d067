"""Route Dependencies — wiring of clock, repository, and service per request.

Invariants:
    - One UserService per request, bound to that request's AsyncSession
    - The clock is a dependency so tests can pin "today" via dependency_overrides
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_api.config import get_settings
from user_api.infrastructure.database import get_db
from user_api.infrastructure.user_repository import SqlAlchemyUserRepository
from user_api.services.user_service import Clock, UserService, current_date


def get_clock() -> Clock:
    """Clock returning today's date in the configured AGE_TIMEZONE."""
    tz_name = get_settings().age_timezone
    return lambda: current_date(tz_name)


def get_user_service(
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> UserService:
    return UserService(SqlAlchemyUserRepository(db), clock)
