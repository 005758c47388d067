"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions are never async themselves
"""

from datetime import date
from typing import Protocol

from user_api.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for user records handed back by a repository.

    Lets the service build responses without importing the ORM model.
    """
    id: int
    name: str
    dob: date


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def create(self, name: str, dob: date) -> UserLike: ...
    async def get(self, user_id: UserId) -> UserLike | None: ...
    async def list_page(self, limit: int, offset: int) -> list[UserLike]: ...
    async def update(
        self, user_id: UserId, name: str, dob: date,
    ) -> UserLike | None: ...
    async def delete(self, user_id: UserId) -> bool: ...
    async def count(self) -> int: ...
