"""
tests.conftest

Shared fixtures: test settings, a temporary sqlite document store, services
wired on top of it, and an HTTP client for the app.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from lists_backend.api.app import create_app
from lists_backend.auth.service import AuthService
from lists_backend.db.init_db import init_db
from lists_backend.db.repository import Repository
from lists_backend.db.session import create_engine, create_sessionmaker
from lists_backend.db.store import DocumentCollection
from lists_backend.services.lists_service import LISTS_COLLECTION, ListsService
from lists_backend.services.users_service import USERS_COLLECTION, UsersService
from lists_backend.settings import Settings


class FakeClock:
    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime.now(tz=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        jwt_secret="test-secret-0123456789-abcdefghijklmnop",
        bcrypt_cost=4,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'lists.db'}",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def session(settings: Settings) -> AsyncIterator[AsyncSession]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        async with create_sessionmaker(engine)() as s:
            yield s
    finally:
        await engine.dispose()


@pytest.fixture
def users_collection(session: AsyncSession) -> DocumentCollection:
    return DocumentCollection(session, USERS_COLLECTION)


@pytest.fixture
def users_service(users_collection: DocumentCollection, settings: Settings) -> UsersService:
    return UsersService(repository=Repository(users_collection), bcrypt_cost=settings.bcrypt_cost)


@pytest.fixture
def lists_service(session: AsyncSession) -> ListsService:
    return ListsService(repository=Repository(DocumentCollection(session, LISTS_COLLECTION)))


@pytest.fixture
def auth_service(settings: Settings, users_service: UsersService, clock: FakeClock) -> AuthService:
    return AuthService.from_settings(settings, users=users_service, clock=clock)


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
