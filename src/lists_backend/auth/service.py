"""
lists_backend.auth.service

Token lifecycle service.

Responsibilities:
- Issue an access + refresh token pair for an authenticated user.
- Validate access and refresh tokens into typed claims.
- Refresh a token pair by re-reading the live user record.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from lists_backend.auth.jwt import (
    JwtConfig,
    JwtValidationError,
    TokenSigningError,
    is_expired,
    new_signed_token,
    parse,
)
from lists_backend.auth.models import AccessClaims, RefreshClaims, TokenPair
from lists_backend.documents import User
from lists_backend.errors import UnauthorizedError, UnexpectedError
from lists_backend.observability.logging import get_logger
from lists_backend.settings import Settings

log = get_logger(__name__)

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


class UserLookup(Protocol):
    async def get_single_user(self, id: str) -> User: ...


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class AuthService:
    """
    Issues and validates bearer tokens.

    Token state machine: unauthenticated -> authenticated (access) ->
    expired (access) -> authenticated again via refresh. There is no
    revocation list; a refresh token stays usable until its own expiry.
    """

    def __init__(
        self,
        *,
        cfg: JwtConfig,
        users: UserLookup,
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._cfg = cfg
        self._users = users
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        users: UserLookup,
        clock: Callable[[], datetime] = _utcnow,
    ) -> AuthService:
        return cls(
            cfg=JwtConfig(alg=settings.jwt_alg, secret=settings.jwt_secret),
            users=users,
            access_ttl=timedelta(minutes=settings.access_token_ttl_minutes),
            refresh_ttl=timedelta(hours=settings.refresh_token_ttl_hours),
            clock=clock,
        )

    def issue_tokens(self, user: User) -> TokenPair:
        now = self._clock()
        access_claims: dict[str, Any] = {
            "sub": user.id,
            "userName": user.user_name,
            "isAdmin": user.is_admin,
            "type": ACCESS_TOKEN,
        }
        refresh_claims: dict[str, Any] = {
            "sub": user.id,
            "type": REFRESH_TOKEN,
        }
        # Both tokens are signed before anything is returned, so a failure on
        # either one never leaks a half-issued pair.
        try:
            token = new_signed_token(
                cfg=self._cfg, claims=access_claims, expires_at=now + self._access_ttl
            )
            refresh_token = new_signed_token(
                cfg=self._cfg, claims=refresh_claims, expires_at=now + self._refresh_ttl
            )
        except TokenSigningError as e:
            raise UnexpectedError("Error creating jwt token", e) from e

        log.info("tokens_issued", user_id=user.id)
        return TokenPair(token=token, refresh_token=refresh_token)

    def validate_access_token(self, token: str) -> AccessClaims:
        claims = self._validate(token, token_type=ACCESS_TOKEN, msg="Invalid token")
        return AccessClaims(
            user_id=claims["sub"],
            user_name=_str_claim(claims, "userName"),
            is_admin=claims.get("isAdmin") is True,
            expires_at=datetime.fromtimestamp(claims["exp"], tz=UTC),
        )

    def validate_refresh_token(self, token: str) -> RefreshClaims:
        claims = self._validate(token, token_type=REFRESH_TOKEN, msg="Invalid refresh token")
        return RefreshClaims(
            user_id=claims["sub"],
            expires_at=datetime.fromtimestamp(claims["exp"], tz=UTC),
        )

    async def refresh(self, refresh_token: str) -> TokenPair:
        claims = self.validate_refresh_token(refresh_token)
        # Re-read the user so name/admin claims reflect the current record and a
        # deleted user cannot mint new tokens.
        user = await self._users.get_single_user(claims.user_id)
        return self.issue_tokens(user)

    def _validate(self, token: str, *, token_type: str, msg: str) -> dict[str, Any]:
        try:
            claims = parse(cfg=self._cfg, token=token)
        except JwtValidationError as e:
            raise UnauthorizedError(msg, e) from e

        # Expired, wrong-type and malformed tokens all look the same to the caller.
        if is_expired(claims, now=self._clock()):
            raise UnauthorizedError(msg)
        if claims.get("type") != token_type:
            raise UnauthorizedError(msg)
        if not _str_claim(claims, "sub"):
            raise UnauthorizedError(msg)
        return claims


def _str_claim(claims: dict[str, Any], key: str) -> str:
    value = claims.get(key)
    return value if isinstance(value, str) else ""


# --- Module Notes -----------------------------------------------------------
# `refresh` can raise NotFoundError/BadRequestError from the user lookup; those
# pass through unchanged so clients can tell "gone" apart from "bad token".
