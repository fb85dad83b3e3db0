"""Local book catalog."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import String, cast, or_, select
from sqlalchemy.orm import Session

from folio.core.errors import NotFoundError
from folio.db.session import atomic
from folio.models import Book
from folio.schemas.book import BookCreateRequest, BookImportRequest

logger = logging.getLogger(__name__)


def get_book(db: Session, book_id: uuid.UUID) -> Book:
    book = db.get(Book, book_id)
    if book is None:
        raise NotFoundError("Book not found")
    return book


def import_book(
    db: Session, user_id: uuid.UUID, data: BookImportRequest
) -> tuple[Book, bool]:
    """Store a provider volume unless one with the same external id exists.

    An existing row is returned untouched, even if the provider metadata has
    changed since it was imported.

    Returns:
        The book and whether it was newly created.
    """
    existing = db.scalar(select(Book).where(Book.google_books_id == data.google_books_id))
    if existing is not None:
        return existing, False

    book = Book(**data.model_dump(), created_by=user_id)
    with atomic(db):
        db.add(book)
    db.refresh(book)

    logger.info("user %s imported book %s (%s)", user_id, book.id, book.google_books_id)
    return book, True


def create_custom_book(db: Session, user_id: uuid.UUID, data: BookCreateRequest) -> Book:
    """Store a manually entered book."""
    fields = data.model_dump(exclude={"cover_image"})
    cover = str(data.cover_image) if data.cover_image is not None else None
    book = Book(**fields, cover_image=cover, created_by=user_id)
    with atomic(db):
        db.add(book)
    db.refresh(book)

    logger.info("user %s created custom book %s", user_id, book.id)
    return book


def list_books(
    db: Session, search: str | None, limit: int, offset: int = 0
) -> list[Book]:
    """Catalog listing, oldest first, optionally filtered by a substring.

    The filter matches title, publisher or any author name, case-insensitively.
    """
    stmt = select(Book)
    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(
            or_(
                Book.title.ilike(pattern),
                Book.publisher.ilike(pattern),
                cast(Book.authors, String).ilike(pattern),
            )
        )
    stmt = stmt.order_by(Book.created_at.asc(), Book.id.asc()).limit(limit).offset(offset)
    return list(db.scalars(stmt))
