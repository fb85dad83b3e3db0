"""Follow graph schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from .common import CamelModel
from .user import UserSearchResult


class FollowRequest(CamelModel):
    user_id: uuid.UUID


class FollowEntry(CamelModel):
    """Counterpart user of a follow edge; ``created_at`` is when the edge was made."""

    id: uuid.UUID
    name: str | None
    username: str | None
    profile_image: str | None
    followers_count: int
    following_count: int
    is_verified: bool
    created_at: datetime


class FollowersResponse(CamelModel):
    followers: list[FollowEntry]
    has_more: bool


class FollowingResponse(CamelModel):
    following: list[FollowEntry]
    has_more: bool


class SuggestionsResponse(CamelModel):
    suggestions: list[UserSearchResult]
