# tests/services/test_auth_service.py
"""Tests for signup, login, token resolution and password resets."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy import select

from folio.core.errors import AuthError, EmailInUseError, ValidationError
from folio.core.security import verify_password
from folio.db.time import utcnow
from folio.models import AuthToken, PasswordReset
from folio.services import auth


@pytest.fixture()
def account(db_session):
    user, token = auth.signup(db_session, "Reader@Example.com", "correct horse", "Reader")
    return user, token


def test_signup_stores_hash_and_token(db_session, account) -> None:
    user, token = account

    assert user.email == "reader@example.com"
    assert user.password_hash != "correct horse"
    assert verify_password("correct horse", user.password_hash)
    stored = db_session.scalar(select(AuthToken).where(AuthToken.token == token))
    assert stored is not None
    assert stored.user_id == user.id


def test_signup_rejects_duplicate_email(db_session, account) -> None:
    with pytest.raises(EmailInUseError) as exc_info:
        auth.signup(db_session, "reader@example.com", "another password")

    assert exc_info.value.status_code == 409


def test_login_issues_new_token(db_session, account) -> None:
    user, first = account

    logged_in, second = auth.login(db_session, "reader@example.com", "correct horse")

    assert logged_in.id == user.id
    assert second != first
    assert auth.resolve_bearer(db_session, second).id == user.id


@pytest.mark.parametrize(
    ("email", "password"),
    [("reader@example.com", "wrong password"), ("nobody@example.com", "correct horse")],
)
def test_login_with_bad_credentials_fails(db_session, account, email, password) -> None:
    with pytest.raises(AuthError) as exc_info:
        auth.login(db_session, email, password)

    assert exc_info.value.message == "Invalid email or password"


def test_logout_revokes_token(db_session, account) -> None:
    _, token = account

    auth.logout(db_session, token)

    with pytest.raises(AuthError):
        auth.resolve_bearer(db_session, token)


def test_expired_token_row_is_rejected(db_session, account) -> None:
    _, token = account
    row = db_session.scalar(select(AuthToken).where(AuthToken.token == token))
    row.expires_at = utcnow() - timedelta(minutes=1)
    db_session.flush()

    with pytest.raises(AuthError):
        auth.resolve_bearer(db_session, token)


def test_signed_token_without_row_is_rejected(db_session, account) -> None:
    from folio.core.security import create_access_token

    user, _ = account
    orphan, _ = create_access_token(user.id, user.email)

    with pytest.raises(AuthError):
        auth.resolve_bearer(db_session, orphan)


def test_garbage_token_is_rejected(db_session) -> None:
    with pytest.raises(AuthError):
        auth.resolve_bearer(db_session, "not-a-jwt")


def test_forgot_password_sends_link(db_session, account, test_settings) -> None:
    user, _ = account
    mailer = MagicMock()

    auth.forgot_password(db_session, user.email, mailer=mailer, config=test_settings)

    reset = db_session.scalar(select(PasswordReset).where(PasswordReset.user_id == user.id))
    assert reset is not None
    mailer.send.assert_called_once()
    message = mailer.send.call_args.args[0]
    assert message.to == [user.email]
    assert f"token={reset.token}" in message.html


def test_forgot_password_unknown_email_is_silent(db_session) -> None:
    mailer = MagicMock()

    auth.forgot_password(db_session, "ghost@example.com", mailer=mailer)

    mailer.send.assert_not_called()
    assert db_session.scalars(select(PasswordReset)).all() == []


def test_reset_password_is_single_use(db_session, account) -> None:
    user, _ = account
    mailer = MagicMock()
    auth.forgot_password(db_session, user.email, mailer=mailer)
    reset = db_session.scalar(select(PasswordReset).where(PasswordReset.user_id == user.id))

    auth.reset_password(db_session, reset.token, "brand new secret")

    db_session.refresh(user)
    assert verify_password("brand new secret", user.password_hash)
    with pytest.raises(ValidationError):
        auth.reset_password(db_session, reset.token, "yet another one")


def test_reset_password_rejects_expired_token(db_session, account) -> None:
    user, _ = account
    db_session.add(
        PasswordReset(token="stale", user_id=user.id, expires_at=utcnow() - timedelta(hours=1))
    )
    db_session.flush()

    with pytest.raises(ValidationError) as exc_info:
        auth.reset_password(db_session, "stale", "brand new secret")

    assert exc_info.value.message == "Invalid or expired reset token"


def test_purge_tokens_removes_dead_rows(db_session, account) -> None:
    user, live = account
    auth.logout(db_session, auth.login(db_session, user.email, "correct horse")[1])
    db_session.add(
        PasswordReset(token="used", user_id=user.id, expires_at=utcnow() + timedelta(hours=1), used_at=utcnow())
    )
    db_session.flush()

    removed_tokens, removed_resets = auth.purge_tokens(db_session)

    assert (removed_tokens, removed_resets) == (1, 1)
    remaining = db_session.scalars(select(AuthToken.token)).all()
    assert remaining == [live]
