# src/folio/api/v1/endpoints/social.py
"""Follow graph endpoints for the Folio API."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Query

from folio.core.settings import settings
from folio.schemas.common import MessageResponse
from folio.schemas.social import (
    FollowersResponse,
    FollowingResponse,
    FollowRequest,
    SuggestionsResponse,
)
from folio.services import social_graph

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/social", tags=["social"])

LimitQuery = Annotated[int, Query(ge=1, le=settings.max_page_size)]
OffsetQuery = Annotated[int, Query(ge=0)]


@router.post("/follow", response_model=MessageResponse)
def follow_user(
    payload: FollowRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Follow another user."""
    social_graph.follow(db, current_user.id, payload.user_id)
    return MessageResponse(message="Successfully followed user")


@router.delete("/follow/{user_id}", response_model=MessageResponse)
def unfollow_user(
    user_id: uuid.UUID,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> MessageResponse:
    """Stop following a user."""
    social_graph.unfollow(db, current_user.id, user_id)
    return MessageResponse(message="Successfully unfollowed user")


@router.get("/followers/{user_id}", response_model=FollowersResponse)
def list_followers(
    user_id: uuid.UUID,
    db: SessionDep,
    limit: LimitQuery = settings.default_page_size,
    offset: OffsetQuery = 0,
) -> FollowersResponse:
    """Users following ``user_id``, most recent first."""
    page = social_graph.list_followers(db, user_id, limit, offset)
    return FollowersResponse(followers=page.items, has_more=page.has_more)


@router.get("/following/{user_id}", response_model=FollowingResponse)
def list_following(
    user_id: uuid.UUID,
    db: SessionDep,
    limit: LimitQuery = settings.default_page_size,
    offset: OffsetQuery = 0,
) -> FollowingResponse:
    """Users ``user_id`` follows, most recent first."""
    page = social_graph.list_following(db, user_id, limit, offset)
    return FollowingResponse(following=page.items, has_more=page.has_more)


@router.get("/suggestions", response_model=SuggestionsResponse)
def suggestions(
    current_user: CurrentUserDep,
    db: SessionDep,
    limit: Annotated[int, Query(ge=1, le=50)] = settings.suggestions_page_size,
) -> SuggestionsResponse:
    """Popular users the caller does not follow yet."""
    users = social_graph.suggest_users(db, current_user.id, limit)
    return SuggestionsResponse(suggestions=users)
