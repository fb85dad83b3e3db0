"""Likes and comments on posts, with the post counters they maintain."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from folio.core.errors import AlreadyLikedError, NotFoundError, NotLikedError
from folio.db.session import atomic
from folio.models import Post, PostComment, PostLike, User
from folio.schemas.post import CommentWithUser
from folio.schemas.user import UserSnapshot
from folio.services.counters import adjust_counter
from folio.services.pagination import Page

logger = logging.getLogger(__name__)

__all__ = ["like_post", "unlike_post", "add_comment", "list_comments"]


def _get_post_or_404(db: Session, post_id: uuid.UUID) -> Post:
    post = db.get(Post, post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def _get_like(db: Session, user_id: uuid.UUID, post_id: uuid.UUID) -> PostLike | None:
    return db.scalar(
        select(PostLike).where(PostLike.post_id == post_id, PostLike.user_id == user_id)
    )


def like_post(db: Session, user_id: uuid.UUID, post_id: uuid.UUID) -> PostLike:
    """Record a like and increment ``likes_count`` in the same transaction.

    Liking twice is an error, not a no-op.

    Raises:
        NotFoundError: If the post does not exist.
        AlreadyLikedError: If the user already likes the post.
    """
    _get_post_or_404(db, post_id)
    if _get_like(db, user_id, post_id) is not None:
        raise AlreadyLikedError()

    like = PostLike(post_id=post_id, user_id=user_id)
    try:
        with atomic(db):
            db.add(like)
            db.flush()
            adjust_counter(db, Post, post_id, Post.likes_count, 1)
    except IntegrityError as err:
        raise AlreadyLikedError() from err

    logger.info("user %s liked post %s", user_id, post_id)
    return like


def unlike_post(db: Session, user_id: uuid.UUID, post_id: uuid.UUID) -> None:
    """Remove a like and decrement ``likes_count``, floored at zero.

    Raises:
        NotLikedError: If the user does not like the post, including when a
            concurrent request removed the like first.
    """
    if _get_like(db, user_id, post_id) is None:
        raise NotLikedError()

    with atomic(db):
        result = db.execute(
            delete(PostLike).where(PostLike.post_id == post_id, PostLike.user_id == user_id)
        )
        if result.rowcount != 1:
            raise NotLikedError()
        adjust_counter(db, Post, post_id, Post.likes_count, -1)

    logger.info("user %s unliked post %s", user_id, post_id)


def add_comment(
    db: Session,
    user_id: uuid.UUID,
    post_id: uuid.UUID,
    content: str,
    parent_comment_id: uuid.UUID | None = None,
) -> PostComment:
    """Add a comment (or a reply) and increment ``comments_count``.

    Raises:
        NotFoundError: If the post, or the given parent comment on that post,
            does not exist.
    """
    _get_post_or_404(db, post_id)

    if parent_comment_id is not None:
        parent = db.get(PostComment, parent_comment_id)
        if parent is None or parent.post_id != post_id:
            raise NotFoundError("Parent comment not found")

    comment = PostComment(
        post_id=post_id,
        user_id=user_id,
        content=content,
        parent_comment_id=parent_comment_id,
    )
    with atomic(db):
        db.add(comment)
        db.flush()
        adjust_counter(db, Post, post_id, Post.comments_count, 1)

    logger.info("user %s commented on post %s", user_id, post_id)
    return comment


def list_comments(
    db: Session, post_id: uuid.UUID, limit: int, offset: int = 0
) -> Page[CommentWithUser]:
    """Top-level comments on a post, newest first.

    Replies are stored but not returned here.
    """
    rows = db.execute(
        select(PostComment, User)
        .join(User, PostComment.user_id == User.id)
        .where(PostComment.post_id == post_id, PostComment.parent_comment_id.is_(None))
        .order_by(PostComment.created_at.desc(), PostComment.id.desc())
        .limit(limit)
        .offset(offset)
    ).all()

    comments = [
        CommentWithUser(
            id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            content=comment.content,
            parent_comment_id=comment.parent_comment_id,
            likes_count=comment.likes_count,
            created_at=comment.created_at,
            user=UserSnapshot.model_validate(author),
        )
        for comment, author in rows
    ]
    return Page.from_items(comments, limit)
