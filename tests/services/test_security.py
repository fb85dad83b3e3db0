# tests/services/test_security.py
"""Tests for password hashing and token primitives."""

import uuid

import pytest
from jose import jwt

from folio.core import security
from folio.core.errors import AuthError, ServerConfigError
from folio.core.settings import settings


def test_password_hash_roundtrip() -> None:
    hashed = security.hash_password("s3cret-password")

    assert hashed.startswith("$argon2id$")
    assert security.verify_password("s3cret-password", hashed)
    assert not security.verify_password("other-password", hashed)


def test_access_token_claims() -> None:
    user_id = uuid.uuid4()

    token, expires_at = security.create_access_token(user_id, "r@example.com", ttl_seconds=60)

    claims = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    assert claims["sub"] == str(user_id)
    assert claims["email"] == "r@example.com"
    assert claims["exp"] - claims["iat"] == 60
    assert int(expires_at.timestamp()) == claims["exp"]
    assert security.decode_access_token(token) == user_id


def test_expired_token_is_rejected() -> None:
    token, _ = security.create_access_token(uuid.uuid4(), "r@example.com", ttl_seconds=-5)

    with pytest.raises(AuthError):
        security.decode_access_token(token)


def test_token_signed_with_other_secret_is_rejected() -> None:
    forged = jwt.encode({"sub": str(uuid.uuid4())}, "not-the-secret", algorithm="HS256")

    with pytest.raises(AuthError):
        security.decode_access_token(forged)


def test_missing_secret_is_a_configuration_error(monkeypatch) -> None:
    monkeypatch.setattr(settings, "secret_key", None)

    with pytest.raises(ServerConfigError) as exc_info:
        security.create_access_token(uuid.uuid4(), "r@example.com")

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Server configuration error"
