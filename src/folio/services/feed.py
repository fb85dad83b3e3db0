"""Feed assembly over posts, their authors, books and the follow graph.

The feed is composed per request; nothing is cached. Author and book
snapshots come from the same query as the posts, so they always reflect the
current rows.
"""
from __future__ import annotations

import uuid

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import Session

from folio.models import Book, Follow, Post, User
from folio.schemas.book import BookSnapshot
from folio.schemas.post import FeedPost, FeedType
from folio.schemas.user import UserSnapshot
from folio.services.pagination import Page

_POST_FIELDS = tuple(name for name in FeedPost.model_fields if name not in {"user", "book"})


def _base_query() -> Select[tuple[Post, User, Book | None]]:
    return (
        select(Post, User, Book)
        .join(User, Post.user_id == User.id)
        .outerjoin(Book, Post.book_id == Book.id)
        .where(Post.is_private.is_(False))
    )


def to_feed_post(post: Post, author: User, book: Book | None) -> FeedPost:
    """Combine a post row with its author and optional book snapshot."""
    data = {name: getattr(post, name) for name in _POST_FIELDS}
    return FeedPost(
        **data,
        user=UserSnapshot.model_validate(author),
        book=BookSnapshot.model_validate(book) if book is not None else None,
    )


def assemble_feed(
    db: Session,
    viewer_id: uuid.UUID,
    mode: FeedType,
    limit: int,
    offset: int = 0,
) -> Page[FeedPost]:
    """Return one page of public posts, newest first.

    ``FeedType.FOLLOWING`` keeps the viewer's own posts and posts by users the
    viewer follows; ``FeedType.DISCOVER`` keeps every public post.
    """
    stmt = _base_query()
    if mode is FeedType.FOLLOWING:
        followed = select(Follow.following_id).where(Follow.follower_id == viewer_id)
        stmt = stmt.where(or_(Post.user_id == viewer_id, Post.user_id.in_(followed)))

    rows = db.execute(
        stmt.order_by(Post.created_at.desc(), Post.id.desc()).limit(limit).offset(offset)
    ).all()
    return Page.from_items([to_feed_post(post, author, book) for post, author, book in rows], limit)
