"""
lists_backend.auth.hasher

One-way password hashing helpers (bcrypt).

Responsibilities:
- Hash a password with an explicit cost factor.
- Verify a candidate password, collapsing every failure into one error.
"""

from __future__ import annotations

import bcrypt

# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


class HashingError(Exception):
    pass


class PasswordMismatchError(Exception):
    def __init__(self) -> None:
        super().__init__("password mismatch")


def hash_password(password: str, *, cost: int) -> str:
    try:
        salt = bcrypt.gensalt(rounds=cost)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    except ValueError as e:
        # Raised for out-of-range rounds and, on bcrypt>=5, over-long passwords.
        raise HashingError(str(e)) from e


def verify_password(hashed_password: str, candidate: str) -> None:
    """
    Raise PasswordMismatchError unless `candidate` matches `hashed_password`.

    A malformed hash is reported exactly like a wrong password.
    """

    try:
        ok = bcrypt.checkpw(candidate.encode("utf-8"), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        ok = False
    if not ok:
        raise PasswordMismatchError()
