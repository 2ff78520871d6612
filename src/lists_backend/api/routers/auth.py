"""
lists_backend.api.routers.auth

Login and token refresh endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from lists_backend.api.deps import auth_service_dep, users_service_dep
from lists_backend.auth.service import AuthService
from lists_backend.errors import BadRequestError
from lists_backend.schemas import Login, RefreshTokenRequest, TokenPairResponse
from lists_backend.services.users_service import UsersService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenPairResponse)
async def login(
    body: Login,
    users: UsersService = Depends(users_service_dep),
    auth: AuthService = Depends(auth_service_dep),
) -> TokenPairResponse:
    if not body.user_name:
        raise BadRequestError("UserName is mandatory")
    if not body.password:
        raise BadRequestError("Password is mandatory")

    user = await users.check_password(body.user_name, body.password)
    return TokenPairResponse.from_pair(auth.issue_tokens(user))


@router.post("/refreshtoken", response_model=TokenPairResponse)
async def refresh_token(
    body: RefreshTokenRequest,
    auth: AuthService = Depends(auth_service_dep),
) -> TokenPairResponse:
    if not body.refresh_token:
        raise BadRequestError("RefreshToken is mandatory")
    return TokenPairResponse.from_pair(await auth.refresh(body.refresh_token))
