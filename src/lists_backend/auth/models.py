"""
lists_backend.auth.models

Auth domain models.

Responsibilities:
- Typed claims returned by token validation (access and refresh).
- The token pair handed back to clients on login/refresh.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class AccessClaims:
    """
    Identity carried by a validated access token.
    """

    user_id: str
    user_name: str
    is_admin: bool
    expires_at: datetime


@dataclass(frozen=True, slots=True)
class RefreshClaims:
    # Refresh tokens carry no name/role data; those are re-read from the store.
    user_id: str
    expires_at: datetime


@dataclass(frozen=True, slots=True)
class TokenPair:
    token: str
    refresh_token: str
