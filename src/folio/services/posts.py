"""Post creation."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from folio.core.errors import NotFoundError
from folio.db.session import atomic
from folio.models import Book, Post
from folio.schemas.post import PostCreate

logger = logging.getLogger(__name__)


def create_post(db: Session, user_id: uuid.UUID, data: PostCreate) -> Post:
    """Persist a new post with zeroed engagement counters.

    Raises:
        NotFoundError: If ``data.book_id`` does not reference a known book.
    """
    if data.book_id is not None and db.get(Book, data.book_id) is None:
        raise NotFoundError("Book not found")

    post = Post(
        user_id=user_id,
        content=data.content,
        post_type=data.post_type.value,
        book_id=data.book_id,
        quote_text=data.quote_text,
        page_number=data.page_number,
        progress_percentage=data.progress_percentage,
        rating=data.rating,
        image_url=str(data.image_url) if data.image_url is not None else None,
        is_private=data.is_private,
        likes_count=0,
        comments_count=0,
        reposts_count=0,
    )
    with atomic(db):
        db.add(post)
    db.refresh(post)

    logger.info("user %s created %s post %s", user_id, post.post_type, post.id)
    return post
