"""Password hashing and access-token primitives.

Password hashes use libsodium's argon2id through PyNaCl; access tokens are
HS256 JWTs signed with ``SECRET_KEY`` via python-jose.
"""
from __future__ import annotations

import secrets
import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import nacl.exceptions
import nacl.pwhash
from jose import JWTError, jwt

from folio.core.errors import AuthError, ServerConfigError
from folio.core.settings import settings


def hash_password(password: str) -> str:
    """Return an argon2id hash string for ``password``."""
    hashed = nacl.pwhash.argon2id.str(
        password.encode("utf-8"),
        opslimit=nacl.pwhash.argon2id.OPSLIMIT_INTERACTIVE,
        memlimit=nacl.pwhash.argon2id.MEMLIMIT_INTERACTIVE,
    )
    return hashed.decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored hash.

    Returns:
        True if the password matches; False otherwise.
    """
    try:
        return nacl.pwhash.verify(password_hash.encode("ascii"), password.encode("utf-8"))
    except nacl.exceptions.InvalidkeyError:
        return False


def _require_secret() -> str:
    if not settings.secret_key:
        raise ServerConfigError()
    return settings.secret_key


def create_access_token(
    user_id: uuid.UUID,
    email: str,
    ttl_seconds: int | None = None,
) -> tuple[str, datetime]:
    """Sign a bearer token for ``user_id``.

    Returns:
        The encoded token and its expiry as an aware UTC datetime.
    """
    secret = _require_secret()
    issued_at = datetime.now(UTC).replace(microsecond=0)
    expires_at = issued_at + timedelta(
        seconds=ttl_seconds if ttl_seconds is not None else settings.access_token_expire_seconds
    )
    claims: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
        # Two logins within the same second must still yield distinct tokens.
        "jti": secrets.token_hex(8),
    }
    token: str = jwt.encode(claims, secret, algorithm=settings.jwt_algorithm)
    return token, expires_at


def decode_access_token(token: str) -> uuid.UUID:
    """Verify a token signature and expiry and return its subject.

    Raises:
        AuthError: If the token is malformed, expired or has no valid subject.
        ServerConfigError: If no signing secret is configured.
    """
    secret = _require_secret()
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise AuthError() from err

    subject = payload.get("sub")
    if subject is None:
        raise AuthError("Invalid token payload")
    try:
        return uuid.UUID(subject)
    except ValueError as err:
        raise AuthError("Invalid token payload") from err


def generate_reset_token() -> str:
    """Return an unguessable single-use token for password resets."""
    return secrets.token_urlsafe(32)
