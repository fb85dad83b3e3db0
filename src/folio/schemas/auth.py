"""Authentication request/response schemas."""

from __future__ import annotations

import uuid

from pydantic import EmailStr, Field

from .common import CamelModel


class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    name: str | None = Field(None, min_length=1, max_length=100)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8)


class ForgotPasswordRequest(CamelModel):
    email: EmailStr


class ResetPasswordRequest(CamelModel):
    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8)


class AccountOut(CamelModel):
    id: uuid.UUID
    email: str
    name: str | None


class AuthResponse(CamelModel):
    """Account summary plus the bearer token to use on subsequent requests."""

    user: AccountOut
    token: str
