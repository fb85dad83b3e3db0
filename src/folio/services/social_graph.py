"""Follow graph: directed follow edges and the counters derived from them."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from folio.core.errors import (
    AlreadyFollowingError,
    NotFollowingError,
    NotFoundError,
    SelfFollowError,
)
from folio.db.session import atomic
from folio.models import Follow, User
from folio.schemas.social import FollowEntry
from folio.schemas.user import UserSearchResult
from folio.services.counters import adjust_counter
from folio.services.pagination import Page

logger = logging.getLogger(__name__)

__all__ = [
    "follow",
    "unfollow",
    "is_following",
    "list_followers",
    "list_following",
    "suggest_users",
]


def _get_edge(db: Session, follower_id: uuid.UUID, target_id: uuid.UUID) -> Follow | None:
    return db.scalar(
        select(Follow).where(
            Follow.follower_id == follower_id,
            Follow.following_id == target_id,
        )
    )


def is_following(db: Session, follower_id: uuid.UUID, target_id: uuid.UUID) -> bool:
    """Return True if ``follower_id`` currently follows ``target_id``."""
    return _get_edge(db, follower_id, target_id) is not None


def follow(db: Session, follower_id: uuid.UUID, target_id: uuid.UUID) -> Follow:
    """Create a follow edge and bump both users' counters in one transaction.

    Raises:
        SelfFollowError: If a user tries to follow themselves.
        NotFoundError: If the target user does not exist.
        AlreadyFollowingError: If the edge already exists.
    """
    if follower_id == target_id:
        raise SelfFollowError()

    if db.get(User, target_id) is None:
        raise NotFoundError("User not found")

    if _get_edge(db, follower_id, target_id) is not None:
        raise AlreadyFollowingError()

    edge = Follow(follower_id=follower_id, following_id=target_id)
    try:
        with atomic(db):
            db.add(edge)
            db.flush()
            adjust_counter(db, User, follower_id, User.following_count, 1)
            adjust_counter(db, User, target_id, User.followers_count, 1)
    except IntegrityError as err:
        # A concurrent request inserted the same pair first.
        raise AlreadyFollowingError() from err

    logger.info("user %s followed %s", follower_id, target_id)
    return edge


def unfollow(db: Session, follower_id: uuid.UUID, target_id: uuid.UUID) -> None:
    """Delete a follow edge and decrement both counters, floored at zero.

    Raises:
        NotFollowingError: If no edge exists for the pair, including when a
            concurrent request removed it first.
    """
    if _get_edge(db, follower_id, target_id) is None:
        raise NotFollowingError()

    with atomic(db):
        result = db.execute(
            delete(Follow).where(
                Follow.follower_id == follower_id,
                Follow.following_id == target_id,
            )
        )
        # Only the request that removed the row may touch the counters.
        if result.rowcount != 1:
            raise NotFollowingError()
        adjust_counter(db, User, follower_id, User.following_count, -1)
        adjust_counter(db, User, target_id, User.followers_count, -1)

    logger.info("user %s unfollowed %s", follower_id, target_id)


def _list_edges(
    db: Session,
    *,
    match_column,
    counterpart_column,
    user_id: uuid.UUID,
    limit: int,
    offset: int,
) -> Page[FollowEntry]:
    rows = db.execute(
        select(User, Follow.created_at)
        .join(Follow, counterpart_column == User.id)
        .where(match_column == user_id)
        .order_by(Follow.created_at.desc(), Follow.id.desc())
        .limit(limit)
        .offset(offset)
    ).all()

    entries = [
        FollowEntry(
            id=user.id,
            name=user.name,
            username=user.username,
            profile_image=user.profile_image,
            followers_count=user.followers_count,
            following_count=user.following_count,
            is_verified=user.is_verified,
            created_at=followed_at,
        )
        for user, followed_at in rows
    ]
    return Page.from_items(entries, limit)


def list_followers(
    db: Session, user_id: uuid.UUID, limit: int, offset: int = 0
) -> Page[FollowEntry]:
    """Users following ``user_id``, newest edge first."""
    return _list_edges(
        db,
        match_column=Follow.following_id,
        counterpart_column=Follow.follower_id,
        user_id=user_id,
        limit=limit,
        offset=offset,
    )


def list_following(
    db: Session, user_id: uuid.UUID, limit: int, offset: int = 0
) -> Page[FollowEntry]:
    """Users that ``user_id`` follows, newest edge first."""
    return _list_edges(
        db,
        match_column=Follow.follower_id,
        counterpart_column=Follow.following_id,
        user_id=user_id,
        limit=limit,
        offset=offset,
    )


def suggest_users(db: Session, requester_id: uuid.UUID, limit: int) -> list[UserSearchResult]:
    """Most-followed users the requester does not already follow.

    This is a popularity ordering, not a recommendation model.
    """
    already_followed = select(Follow.following_id).where(Follow.follower_id == requester_id)
    users = db.scalars(
        select(User)
        .where(User.id != requester_id, User.id.not_in(already_followed))
        .order_by(User.followers_count.desc(), User.created_at.asc())
        .limit(limit)
    ).all()
    return [UserSearchResult.model_validate(user) for user in users]
