"""
lists_backend.api.routers.users

User registration and admin-only user management endpoints.

Responsibilities:
- Register new users (public).
- List and remove users (requires an admin access token).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from lists_backend.api.deps import require_admin, users_service_dep
from lists_backend.documents import UserSummary
from lists_backend.schemas import UserDto
from lists_backend.services.users_service import UsersService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=HTTP_201_CREATED)
async def add_user(
    body: UserDto,
    users: UsersService = Depends(users_service_dep),
) -> str:
    return await users.add_user(body)


@router.get(
    "",
    response_model=list[UserSummary],
    dependencies=[Depends(require_admin)],
)
async def list_users(users: UsersService = Depends(users_service_dep)) -> list[UserSummary]:
    return await users.get_users()


@router.delete(
    "/{user_id}",
    status_code=HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def remove_user(
    user_id: str,
    users: UsersService = Depends(users_service_dep),
) -> Response:
    await users.remove_user(user_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
