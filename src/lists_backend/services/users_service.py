"""
lists_backend.services.users_service

Users domain service.

Responsibilities:
- Register users (password confirmation, duplicate user-name check, hashing).
- Check login credentials.
- Fetch, list and remove users.
"""

from __future__ import annotations

import asyncio

from lists_backend.auth.hasher import (
    MAX_PASSWORD_BYTES,
    HashingError,
    PasswordMismatchError,
    hash_password,
    verify_password,
)
from lists_backend.db.repository import Repository
from lists_backend.documents import User, UserSummary
from lists_backend.errors import BadRequestError, UnexpectedError, invalid_id_error
from lists_backend.observability.logging import get_logger
from lists_backend.schemas import UserDto

log = get_logger(__name__)

USERS_COLLECTION = "users"


class UsersService:
    def __init__(self, *, repository: Repository, bcrypt_cost: int) -> None:
        self._users = repository
        self._bcrypt_cost = bcrypt_cost

    async def add_user(self, dto: UserDto) -> str:
        if dto.new_password != dto.confirm_new_password:
            raise BadRequestError("Passwords don't match")
        if len(dto.new_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise BadRequestError(f"Password can not be longer than {MAX_PASSWORD_BYTES} bytes")

        # Read-then-write: two concurrent registrations can both pass this check.
        if await self._exists_user(dto.user_name):
            raise BadRequestError("A user with the same user name already exists")

        user = dto.to_user()
        try:
            # bcrypt is CPU-bound; keep it off the event loop.
            user.password_hash = await asyncio.to_thread(
                hash_password, dto.new_password, cost=self._bcrypt_cost
            )
        except HashingError as e:
            raise UnexpectedError("Error encrypting password", e) from e

        id = await self._users.add(user)
        log.info("user_added", user_id=id, is_admin=user.is_admin)
        return id

    async def check_password(self, user_name: str, password: str) -> User:
        found = await self._get_user_by_user_name(user_name)
        if found is None:
            raise BadRequestError("The user does not exist")

        try:
            await asyncio.to_thread(verify_password, found.password_hash, password)
        except PasswordMismatchError as e:
            raise BadRequestError("Invalid password") from e

        return found

    async def get_single_user(self, id: str) -> User:
        if not self._users.is_valid_identifier(id):
            raise invalid_id_error(id)
        return await self._users.get_one(User, {"_id": id})

    async def get_users(self) -> list[UserSummary]:
        return await self._users.get(UserSummary, {}, {"userName": 1, "isAdmin": 1})

    async def remove_user(self, id: str) -> None:
        if not self._users.is_valid_identifier(id):
            raise invalid_id_error(id)
        await self._users.remove({"_id": id})
        log.info("user_removed", user_id=id)

    async def _exists_user(self, user_name: str) -> bool:
        try:
            existing = await self._users.get(UserSummary, {"userName": user_name}, {"_id": 1})
        except UnexpectedError as e:
            raise UnexpectedError("Error checking if user name exists", e) from e
        return len(existing) > 0

    async def _get_user_by_user_name(self, user_name: str) -> User | None:
        try:
            found = await self._users.get(User, {"userName": user_name})
        except UnexpectedError as e:
            raise UnexpectedError("Error checking if user name exists", e) from e
        return found[0] if found else None
