# src/folio/api/v1/endpoints/auth.py
"""Authentication endpoints for the Folio API."""

from fastapi import APIRouter, status

from folio.schemas.auth import (
    AccountOut,
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
)
from folio.schemas.common import MessageResponse
from folio.services import auth as auth_service

from ..dependencies import BearerTokenDep, MailerDep, SessionDep, SettingsDep

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: SignupRequest, db: SessionDep) -> AuthResponse:
    """Register a new account and return its first token."""
    user, token = auth_service.signup(db, payload.email, payload.password, payload.name)
    return AuthResponse(user=AccountOut.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: SessionDep) -> AuthResponse:
    user, token = auth_service.login(db, payload.email, payload.password)
    return AuthResponse(user=AccountOut.model_validate(user), token=token)


@router.post("/logout", response_model=MessageResponse)
def logout(token: BearerTokenDep, db: SessionDep) -> MessageResponse:
    """Revoke the bearer token used for this request."""
    auth_service.logout(db, token)
    return MessageResponse(message="Logged out")


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    payload: ForgotPasswordRequest,
    db: SessionDep,
    mailer: MailerDep,
    config: SettingsDep,
) -> MessageResponse:
    """Email a reset link; the answer does not reveal whether the account exists."""
    auth_service.forgot_password(db, payload.email, mailer=mailer, config=config)
    return MessageResponse(message=auth_service.FORGOT_PASSWORD_MESSAGE)


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(payload: ResetPasswordRequest, db: SessionDep) -> MessageResponse:
    auth_service.reset_password(db, payload.token, payload.password)
    return MessageResponse(message="Password reset successfully")
