# src/folio/api/v1/endpoints/posts.py
"""Post and engagement endpoints for the Folio API."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Query, status

from folio.core.settings import settings
from folio.schemas.common import MessageResponse
from folio.schemas.post import (
    CommentCreate,
    CommentListResponse,
    CommentOut,
    CommentResponse,
    PostCreate,
    PostOut,
    PostResponse,
)
from folio.services import engagement
from folio.services.posts import create_post

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create(
    payload: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> PostResponse:
    """Publish a new post."""
    post = create_post(db, current_user.id, payload)
    return PostResponse(post=PostOut.model_validate(post))


@router.post("/{post_id}/like", response_model=MessageResponse)
def like(post_id: uuid.UUID, current_user: CurrentUserDep, db: SessionDep) -> MessageResponse:
    engagement.like_post(db, current_user.id, post_id)
    return MessageResponse(message="Post liked")


@router.delete("/{post_id}/like", response_model=MessageResponse)
def unlike(post_id: uuid.UUID, current_user: CurrentUserDep, db: SessionDep) -> MessageResponse:
    engagement.unlike_post(db, current_user.id, post_id)
    return MessageResponse(message="Post unliked")


@router.get("/{post_id}/comments", response_model=CommentListResponse)
def list_comments(
    post_id: uuid.UUID,
    db: SessionDep,
    limit: Annotated[int, Query(ge=1, le=50)] = settings.default_page_size,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> CommentListResponse:
    """Top-level comments on a post, newest first."""
    page = engagement.list_comments(db, post_id, limit, offset)
    return CommentListResponse(comments=page.items, has_more=page.has_more)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    post_id: uuid.UUID,
    payload: CommentCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> CommentResponse:
    """Comment on a post, optionally replying to another comment."""
    comment = engagement.add_comment(
        db,
        current_user.id,
        post_id,
        payload.content,
        payload.parent_comment_id,
    )
    return CommentResponse(comment=CommentOut.model_validate(comment))
