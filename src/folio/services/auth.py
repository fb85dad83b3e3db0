"""Account signup, login and password reset.

Bearer tokens are JWTs that are also stored in ``auth_token`` so they can be
revoked before they expire.
"""
from __future__ import annotations

import logging
from datetime import timedelta

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from folio.core.errors import AuthError, EmailInUseError, ValidationError
from folio.core.security import (
    create_access_token,
    decode_access_token,
    generate_reset_token,
    hash_password,
    verify_password,
)
from folio.core.settings import Settings, settings as default_settings
from folio.db.session import atomic
from folio.db.time import as_utc, utcnow
from folio.models import AuthToken, PasswordReset, User
from folio.services.mailer import Mailer, password_reset_message
from folio.services.users import get_by_email

logger = logging.getLogger(__name__)

FORGOT_PASSWORD_MESSAGE = "If the email exists, a reset link will be sent"


def _issue_token(db: Session, user: User) -> str:
    token, expires_at = create_access_token(user.id, user.email)
    db.add(AuthToken(token=token, user_id=user.id, expires_at=expires_at))
    return token


def signup(db: Session, email: str, password: str, name: str | None = None) -> tuple[User, str]:
    """Create an account and sign its first token.

    Raises:
        EmailInUseError: If the address is already registered.
        ServerConfigError: If no signing secret is configured.
    """
    email = email.lower()
    if get_by_email(db, email) is not None:
        raise EmailInUseError()

    user = User(email=email, password_hash=hash_password(password), name=name)
    try:
        with atomic(db):
            db.add(user)
            db.flush()
            token = _issue_token(db, user)
    except IntegrityError as err:
        raise EmailInUseError() from err
    db.refresh(user)

    logger.info("new account %s", user.id)
    return user, token


def login(db: Session, email: str, password: str) -> tuple[User, str]:
    """Verify credentials and sign a new token.

    Raises:
        AuthError: If the email is unknown or the password does not match.
    """
    user = get_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        raise AuthError("Invalid email or password")

    with atomic(db):
        token = _issue_token(db, user)
    db.refresh(user)
    return user, token


def logout(db: Session, token: str) -> None:
    """Revoke ``token`` if it is still active."""
    with atomic(db):
        db.execute(
            update(AuthToken)
            .where(AuthToken.token == token, AuthToken.revoked_at.is_(None))
            .values(revoked_at=utcnow())
        )


def resolve_bearer(db: Session, token: str) -> User:
    """Return the user a bearer token belongs to.

    The signature is checked first, then the stored row must exist and be
    neither revoked nor expired.

    Raises:
        AuthError: On any verification failure.
        ServerConfigError: If no signing secret is configured.
    """
    user_id = decode_access_token(token)
    row = db.scalar(select(AuthToken).where(AuthToken.token == token))
    if row is None or row.user_id != user_id:
        raise AuthError()
    if row.revoked_at is not None or as_utc(row.expires_at) <= utcnow():
        raise AuthError()

    user = db.get(User, user_id)
    if user is None:
        raise AuthError("User not found")
    return user


def forgot_password(
    db: Session,
    email: str,
    mailer: Mailer | None = None,
    config: Settings | None = None,
) -> None:
    """Store a reset token and email the link, if the account exists.

    Callers answer the same way whether or not the address is registered.
    """
    cfg = config or default_settings
    user = get_by_email(db, email)
    if user is None:
        logger.info("password reset requested for unknown address")
        return

    token = generate_reset_token()
    with atomic(db):
        db.add(
            PasswordReset(
                token=token,
                user_id=user.id,
                expires_at=utcnow() + timedelta(seconds=cfg.password_reset_expire_seconds),
            )
        )

    (mailer or Mailer(cfg)).send(password_reset_message(user.email, user.name, token, cfg))
    logger.info("password reset issued for user %s", user.id)


def reset_password(db: Session, token: str, password: str) -> None:
    """Set a new password using a single-use reset token.

    Raises:
        ValidationError: If the token is unknown, expired or already used.
    """
    reset = db.scalar(select(PasswordReset).where(PasswordReset.token == token))
    if reset is None or reset.used_at is not None or as_utc(reset.expires_at) <= utcnow():
        raise ValidationError("Invalid or expired reset token")

    with atomic(db):
        db.execute(
            update(User)
            .where(User.id == reset.user_id)
            .values(password_hash=hash_password(password))
        )
        reset.used_at = utcnow()

    logger.info("password reset completed for user %s", reset.user_id)


def purge_tokens(db: Session) -> tuple[int, int]:
    """Delete expired or revoked auth tokens and spent password resets.

    Returns:
        Number of auth token rows and reset rows removed.
    """
    now = utcnow()
    with atomic(db):
        tokens = db.execute(
            delete(AuthToken).where(
                or_(AuthToken.expires_at <= now, AuthToken.revoked_at.is_not(None))
            ).execution_options(synchronize_session=False)
        )
        resets = db.execute(
            delete(PasswordReset).where(
                or_(PasswordReset.expires_at <= now, PasswordReset.used_at.is_not(None))
            ).execution_options(synchronize_session=False)
        )
    return tokens.rowcount, resets.rowcount
