# src/folio/api/v1/endpoints/users.py
"""User profile endpoints for the Folio API."""

from typing import Annotated

from fastapi import APIRouter, Query

from folio.core.settings import settings
from folio.schemas.common import has_more
from folio.schemas.user import (
    PrivateProfile,
    ProfileResponse,
    ProfileUpdateRequest,
    PublicProfile,
    PublicProfileResponse,
    UserSearchResponse,
    UserSearchResult,
)
from folio.services import users as user_service

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/profile", response_model=ProfileResponse)
def get_own_profile(current_user: CurrentUserDep) -> ProfileResponse:
    return ProfileResponse(profile=PrivateProfile.model_validate(current_user))


@router.put("/profile", response_model=ProfileResponse)
def update_own_profile(
    payload: ProfileUpdateRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> ProfileResponse:
    """Update the caller's profile; omitted fields are left unchanged."""
    user = user_service.update_profile(db, current_user, payload)
    return ProfileResponse(profile=PrivateProfile.model_validate(user))


@router.get("/search", response_model=UserSearchResponse)
def search_users(
    db: SessionDep,
    query: Annotated[str, Query(min_length=1, max_length=100)],
    limit: Annotated[int, Query(ge=1, le=50)] = settings.default_page_size,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> UserSearchResponse:
    """Find users by username or display name."""
    users = user_service.search_users(db, query, limit, offset)
    return UserSearchResponse(
        users=[UserSearchResult.model_validate(user) for user in users],
        has_more=has_more(len(users), limit),
    )


@router.get("/{username}", response_model=PublicProfileResponse)
def get_public_profile(username: str, db: SessionDep) -> PublicProfileResponse:
    user = user_service.get_by_username(db, username)
    return PublicProfileResponse(profile=PublicProfile.model_validate(user))
