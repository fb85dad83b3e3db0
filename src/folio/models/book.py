"""SQLAlchemy model for the book catalog."""

from __future__ import annotations

import uuid

from sqlalchemy import JSON, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.session import Base
from folio.models.mixins import Timestamps, UUIDPrimaryKey


class Book(UUIDPrimaryKey, Timestamps, Base):
    """Book metadata, imported from Google Books or entered by hand.

    Imported rows are deduplicated on ``google_books_id``; manual rows leave it
    NULL.
    """

    __tablename__ = "book"

    google_books_id: Mapped[str | None] = mapped_column(Text, unique=True, nullable=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    # Ordered list of author names.
    authors: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    publisher: Mapped[str | None] = mapped_column(Text, nullable=True)
    published_date: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    isbn10: Mapped[str | None] = mapped_column(Text, nullable=True)
    isbn13: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    categories: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    page_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    language: Mapped[str] = mapped_column(Text, nullable=False, default="unknown")

    created_by: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
