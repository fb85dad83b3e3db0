"""SQLAlchemy models for posts and their engagement edges."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio.db.session import Base
from folio.db.time import utcnow
from folio.models.mixins import Timestamps, UUIDPrimaryKey


class PostType(str, enum.Enum):
    """Closed set of post kinds."""

    QUOTE = "quote"
    PROGRESS = "progress"
    REVIEW = "review"
    THOUGHT = "thought"
    RECOMMENDATION = "recommendation"


_POST_TYPES_SQL = ", ".join(f"'{member.value}'" for member in PostType)


class Post(UUIDPrimaryKey, Timestamps, Base):
    """A book-related update published by a user.

    Type-specific fields are optional columns: ``quote_text``/``page_number``
    for quotes, ``progress_percentage`` for progress, ``rating`` for reviews.
    The ``*_count`` columns are maintained by the engagement service.
    """

    __tablename__ = "post"
    __table_args__ = (
        CheckConstraint(f"post_type IN ({_POST_TYPES_SQL})", name="ck_post_type"),
        CheckConstraint("rating IS NULL OR rating BETWEEN 1 AND 5", name="ck_post_rating"),
        CheckConstraint(
            "progress_percentage IS NULL OR progress_percentage BETWEEN 0 AND 100",
            name="ck_post_progress",
        ),
        Index("ix_post_visibility_created", "is_private", "created_at"),
        Index("ix_post_user_created", "user_id", "created_at"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_type: Mapped[str] = mapped_column(String(20), nullable=False)

    book_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("book.id", ondelete="SET NULL"),
        nullable=True,
    )
    quote_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    page_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    progress_percentage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)

    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comments_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reposts_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class PostLike(UUIDPrimaryKey, Base):
    """At most one like per user per post."""

    __tablename__ = "post_like"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_like_pair"),)

    post_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class PostComment(UUIDPrimaryKey, Timestamps, Base):
    """Comment on a post; replies point at their parent comment."""

    __tablename__ = "post_comment"
    __table_args__ = (Index("ix_post_comment_post_created", "post_id", "created_at"),)

    post_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Top-level comments have parent_comment_id = NULL.
    parent_comment_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("post_comment.id", ondelete="CASCADE"),
        nullable=True,
    )
    likes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    parent: Mapped[PostComment | None] = relationship(
        "PostComment",
        remote_side="PostComment.id",
        back_populates="replies",
    )
    replies: Mapped[list[PostComment]] = relationship(
        "PostComment",
        back_populates="parent",
    )
