from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.auth.passwords import hash_password, verify_password
from app.auth.tokens import create_token, verify_token

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"


def test_hash_password_is_salted_and_verifiable():
    first = hash_password("hunter2")
    second = hash_password("hunter2")

    assert first != second
    assert first != "hunter2"
    assert verify_password("hunter2", first)
    assert not verify_password("hunter3", first)


def test_verify_password_rejects_malformed_digest():
    with pytest.raises(ValueError):
        verify_password("hunter2", "not-a-bcrypt-hash")


def test_token_round_trip():
    token = create_token(42, SECRET)
    assert verify_token(token, SECRET) == 42


def test_token_expires_after_24_hours():
    token = create_token(1, SECRET)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert payload["exp"] - payload["iat"] == 24 * 3600


def test_token_with_wrong_secret_is_rejected():
    token = create_token(1, SECRET)
    assert verify_token(token, SECRET + "-other") is None


def test_expired_token_is_rejected():
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {"userId": 1, "iat": past, "exp": past + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )
    assert verify_token(token, SECRET) is None


def test_malformed_token_and_missing_claim_are_rejected():
    assert verify_token("garbage", SECRET) is None
    token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")
    assert verify_token(token, SECRET) is None


def test_long_password_uses_first_72_bytes():
    password = "x" * 80
    digest = hash_password(password)

    assert verify_password(password, digest)
    assert verify_password("x" * 72, digest)
    assert not verify_password("x" * 71, digest)


def test_long_multibyte_password_is_verifiable():
    password = "ñ" * 50  # 100 bytes in utf-8
    assert verify_password(password, hash_password(password))
