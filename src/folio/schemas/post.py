"""Post, feed and comment schemas."""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum

from pydantic import AnyHttpUrl, Field

from folio.models.post import PostType

from .book import BookSnapshot
from .common import CamelModel
from .user import UserSnapshot


class FeedType(str, Enum):
    FOLLOWING = "following"
    DISCOVER = "discover"


class PostCreate(CamelModel):
    """Schema for creating a new post."""

    content: str = Field(..., min_length=1, max_length=2000)
    post_type: PostType
    book_id: uuid.UUID | None = None
    quote_text: str | None = Field(None, max_length=1000)
    page_number: int | None = Field(None, ge=1)
    progress_percentage: int | None = Field(None, ge=0, le=100)
    rating: int | None = Field(None, ge=1, le=5)
    image_url: AnyHttpUrl | None = None
    is_private: bool = False


class PostOut(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    content: str
    post_type: PostType
    book_id: uuid.UUID | None
    quote_text: str | None
    page_number: int | None
    progress_percentage: int | None
    rating: int | None
    image_url: str | None
    likes_count: int
    comments_count: int
    reposts_count: int
    is_private: bool
    created_at: datetime


class PostResponse(CamelModel):
    post: PostOut


class FeedPost(CamelModel):
    """A post with its author and book read fresh at query time."""

    id: uuid.UUID
    user_id: uuid.UUID
    content: str
    post_type: PostType
    book_id: uuid.UUID | None
    quote_text: str | None
    page_number: int | None
    progress_percentage: int | None
    rating: int | None
    image_url: str | None
    likes_count: int
    comments_count: int
    reposts_count: int
    created_at: datetime
    user: UserSnapshot
    book: BookSnapshot | None


class FeedResponse(CamelModel):
    posts: list[FeedPost]
    has_more: bool


class CommentCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=500)
    parent_comment_id: uuid.UUID | None = None


class CommentOut(CamelModel):
    id: uuid.UUID
    post_id: uuid.UUID
    user_id: uuid.UUID
    content: str
    parent_comment_id: uuid.UUID | None
    likes_count: int
    created_at: datetime


class CommentWithUser(CommentOut):
    user: UserSnapshot


class CommentResponse(CamelModel):
    comment: CommentOut


class CommentListResponse(CamelModel):
    comments: list[CommentWithUser]
    has_more: bool
