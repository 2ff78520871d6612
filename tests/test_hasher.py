from __future__ import annotations

import pytest

from lists_backend.auth.hasher import (
    HashingError,
    PasswordMismatchError,
    hash_password,
    verify_password,
)


@pytest.mark.parametrize("password", ["pw1", "correct horse battery staple", "ñandú-ü", ""])
def test_verify_accepts_the_hashed_password(password: str) -> None:
    hashed = hash_password(password, cost=4)

    assert hashed != password
    assert hashed.startswith("$2")
    verify_password(hashed, password)


def test_hash_is_salted() -> None:
    assert hash_password("pw1", cost=4) != hash_password("pw1", cost=4)


@pytest.mark.parametrize("candidate", ["pw2", "PW1", "pw1 ", ""])
def test_verify_rejects_other_passwords(candidate: str) -> None:
    hashed = hash_password("pw1", cost=4)

    with pytest.raises(PasswordMismatchError):
        verify_password(hashed, candidate)


@pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$short"])
def test_malformed_hash_is_reported_as_mismatch(bad_hash: str) -> None:
    with pytest.raises(PasswordMismatchError) as exc_info:
        verify_password(bad_hash, "pw1")

    assert str(exc_info.value) == "password mismatch"


@pytest.mark.parametrize("cost", [0, 3, 32])
def test_invalid_cost_factor_fails(cost: int) -> None:
    with pytest.raises(HashingError):
        hash_password("pw1", cost=cost)
