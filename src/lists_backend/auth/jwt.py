"""
lists_backend.auth.jwt

JWT signing and parsing helpers.

Responsibilities:
- Sign arbitrary claim maps with a shared secret and one fixed algorithm.
- Parse tokens, rejecting any other algorithm (including `none`).
- Decide expiry against a caller-supplied clock.

Note:
- `parse` checks signature/structure only; `is_expired` is the single place
  where `exp` is compared, so callers can test expiry with a simulated clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import jwt
from jwt import InvalidTokenError, PyJWTError


@dataclass(frozen=True, slots=True)
class JwtConfig:
    alg: str
    secret: str = ""

    def __repr__(self) -> str:
        return f"JwtConfig(alg={self.alg!r}, secret='***')"


class TokenSigningError(Exception):
    pass


class JwtValidationError(Exception):
    pass


def new_signed_token(*, cfg: JwtConfig, claims: dict[str, Any], expires_at: datetime) -> str:
    payload = dict(claims)
    payload["exp"] = int(expires_at.timestamp())
    try:
        return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)
    except (PyJWTError, TypeError, ValueError, NotImplementedError) as e:
        raise TokenSigningError(str(e)) from e


def parse(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        # Only the configured algorithm is accepted; a token whose header names
        # another one fails with InvalidAlgorithmError before any key is used.
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            options={"verify_exp": False},
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


def is_expired(claims: dict[str, Any], *, now: datetime) -> bool:
    exp = claims.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, int | float):
        return True
    return now.timestamp() > exp


# --- Module Notes -----------------------------------------------------------
# Claims stay an untyped dict here so access and refresh tokens share one codec;
# `auth.service` owns which keys each token type carries.
