"""User Routes — CRUD endpoints for user records.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Non-integer or out-of-range ids rejected with 400 before any DB access
    - Every user payload in a response carries an age derived at read time
    - GET /users returns a bare JSON array; the total row count goes in X-Total-Count
    - page/page_size never fail a request: bad values fall back to defaults

Design Decisions:
    - ids bounded to a 32-bit signed range, matching the INTEGER primary key
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from user_api.api.dependencies import get_user_service
from user_api.core.domain_types import UserId
from user_api.core.pagination import (
    DEFAULT_PAGE, DEFAULT_PAGE_SIZE, parse_page_param,
)
from user_api.schemas.user import UserCreate, UserResponse, UserUpdate
from user_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

MAX_USER_ID = 2_147_483_647

UserIdPath = Annotated[int, Path(ge=1, le=MAX_USER_ID)]


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    """Create a user."""
    return await service.create_user(body)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UserIdPath,
    service: UserService = Depends(get_user_service),
):
    """Get one user with their current age."""
    return await service.get_user(UserId(user_id))


@router.get("", response_model=list[UserResponse])
async def list_users(
    response: Response,
    page: str | None = Query(None),
    page_size: str | None = Query(None),
    service: UserService = Depends(get_user_service),
):
    """List users ordered by id. Unparseable or out-of-range paging values fall back to defaults."""
    users, total = await service.list_users(
        parse_page_param(page, DEFAULT_PAGE),
        parse_page_param(page_size, DEFAULT_PAGE_SIZE),
    )
    response.headers["X-Total-Count"] = str(total)
    return users


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    body: UserUpdate,
    user_id: UserIdPath,
    service: UserService = Depends(get_user_service),
):
    """Replace a user's name and date of birth."""
    return await service.update_user(UserId(user_id), body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UserIdPath,
    service: UserService = Depends(get_user_service),
):
    """Delete a user."""
    await service.delete_user(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
