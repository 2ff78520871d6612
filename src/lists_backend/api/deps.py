"""
lists_backend.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and DB sessions.
- Build request-scoped services (users, lists, auth) on top of the session.
- Convert a bearer token into typed `AccessClaims` and enforce the admin flag.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from lists_backend.auth.models import AccessClaims
from lists_backend.auth.service import AuthService
from lists_backend.db.repository import Repository
from lists_backend.db.store import DocumentCollection
from lists_backend.errors import ForbiddenError, UnauthorizedError
from lists_backend.services.lists_service import LISTS_COLLECTION, ListsService
from lists_backend.services.users_service import USERS_COLLECTION, UsersService
from lists_backend.settings import Settings

_bearer = HTTPBearer(auto_error=False)


def settings_dep(request: Request) -> Settings:
    # Set once in `create_app`; tests pass their own Settings instance there.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session; each store write commits on its own.
    async with session_factory() as session:
        yield session


def users_service_dep(
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> UsersService:
    repository = Repository(DocumentCollection(session, USERS_COLLECTION))
    return UsersService(repository=repository, bcrypt_cost=settings.bcrypt_cost)


def lists_service_dep(session: AsyncSession = Depends(db_session)) -> ListsService:
    return ListsService(repository=Repository(DocumentCollection(session, LISTS_COLLECTION)))


def auth_service_dep(
    users: UsersService = Depends(users_service_dep),
    settings: Settings = Depends(settings_dep),
) -> AuthService:
    return AuthService.from_settings(settings, users=users)


def get_claims(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    auth: AuthService = Depends(auth_service_dep),
) -> AccessClaims:
    # Authn: require a bearer token.
    if creds is None or not creds.credentials:
        raise UnauthorizedError("No authorization header")
    return auth.validate_access_token(creds.credentials)


def require_admin(claims: AccessClaims = Depends(get_claims)) -> AccessClaims:
    # Authz: claims come from the token only, so a revoked admin flag stays in
    # effect until the access token expires.
    if not claims.is_admin:
        raise ForbiddenError("Access forbidden")
    return claims
