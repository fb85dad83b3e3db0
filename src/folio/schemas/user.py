"""User-related Pydantic schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import AnyHttpUrl, Field

from .common import CamelModel


class UserSnapshot(CamelModel):
    """Author display fields joined into posts and comments at read time."""

    id: uuid.UUID
    name: str | None
    username: str | None
    profile_image: str | None
    is_verified: bool


class PublicProfile(CamelModel):
    """Profile visible to anyone."""

    id: uuid.UUID
    name: str | None
    username: str | None
    bio: str | None
    profile_image: str | None
    location: str | None = None
    website: str | None = None
    reading_goal: int | None = None
    books_read_count: int | None = None
    followers_count: int
    following_count: int
    is_verified: bool
    created_at: datetime | None = None


class PrivateProfile(PublicProfile):
    """Profile of the authenticated user, including the account email."""

    email: str


class ProfileResponse(CamelModel):
    profile: PrivateProfile


class PublicProfileResponse(CamelModel):
    profile: PublicProfile


class ProfileUpdateRequest(CamelModel):
    """Partial profile update; omitted fields are left untouched."""

    username: str | None = Field(
        None,
        min_length=3,
        max_length=50,
        pattern=r"^[a-zA-Z0-9_]+$",
    )
    name: str | None = Field(None, min_length=1, max_length=100)
    bio: str | None = Field(None, max_length=500)
    location: str | None = Field(None, max_length=100)
    website: AnyHttpUrl | None = None
    reading_goal: int | None = Field(None, ge=0, le=9999)


class UserSearchResult(CamelModel):
    id: uuid.UUID
    name: str | None
    username: str | None
    bio: str | None
    profile_image: str | None
    followers_count: int
    following_count: int
    is_verified: bool


class UserSearchResponse(CamelModel):
    users: list[UserSearchResult]
    has_more: bool
