"""Relative adjustments of denormalized counter columns.

Counters are changed with ``SET col = col + n`` so concurrent writers
serialize on the row lock instead of overwriting each other's read value.
"""
from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import case, func, select, update
from sqlalchemy.orm import InstrumentedAttribute, Session

from folio.db.session import atomic
from folio.models import Follow, Post, PostComment, PostLike, User


def adjust_counter(
    db: Session,
    model: type[Any],
    row_id: uuid.UUID,
    column: InstrumentedAttribute[int],
    delta: int,
) -> None:
    """Add ``delta`` to ``column`` on one row, never going below zero."""
    if delta >= 0:
        value = column + delta
    else:
        value = case((column + delta < 0, 0), else_=column + delta)
    db.execute(
        update(model)
        .where(model.id == row_id)
        .values({column: value})
        .execution_options(synchronize_session="fetch")
    )


def reconcile_counters(db: Session) -> dict[str, int]:
    """Recompute every denormalized counter from its edge table.

    Returns:
        Number of rows rewritten per counter column.
    """
    followers = (
        select(func.count())
        .select_from(Follow)
        .where(Follow.following_id == User.id)
        .correlate(User)
        .scalar_subquery()
    )
    following = (
        select(func.count())
        .select_from(Follow)
        .where(Follow.follower_id == User.id)
        .correlate(User)
        .scalar_subquery()
    )
    likes = (
        select(func.count())
        .select_from(PostLike)
        .where(PostLike.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )
    comments = (
        select(func.count())
        .select_from(PostComment)
        .where(PostComment.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )

    plan = [
        ("users.followers_count", User, User.followers_count, followers),
        ("users.following_count", User, User.following_count, following),
        ("post.likes_count", Post, Post.likes_count, likes),
        ("post.comments_count", Post, Post.comments_count, comments),
    ]
    fixed: dict[str, int] = {}
    with atomic(db):
        for label, model, column, actual in plan:
            result = db.execute(
                update(model)
                .where(column != actual)
                .values({column: actual})
                .execution_options(synchronize_session=False)
            )
            fixed[label] = result.rowcount
    return fixed
