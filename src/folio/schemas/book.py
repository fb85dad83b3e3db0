"""Book catalog schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import AnyHttpUrl, Field

from .common import CamelModel


class BookSnapshot(CamelModel):
    """Book display fields joined into feed posts."""

    id: uuid.UUID
    title: str
    authors: list[str]
    thumbnail: str | None


class BookOut(CamelModel):
    id: uuid.UUID
    google_books_id: str | None
    title: str
    authors: list[str]
    publisher: str | None
    published_date: str | None
    description: str | None
    isbn10: str | None
    isbn13: str | None
    thumbnail: str | None
    cover_image: str | None
    categories: list[str]
    page_count: int | None
    language: str
    created_by: uuid.UUID | None
    created_at: datetime


class BookSearchResult(CamelModel):
    """A normalized volume returned by the external search provider."""

    id: str
    title: str
    authors: list[str] = Field(default_factory=list)
    publisher: str | None = None
    published_date: str | None = None
    description: str | None = None
    isbn10: str | None = None
    isbn13: str | None = None
    thumbnail: str | None = None
    categories: list[str] = Field(default_factory=list)
    page_count: int | None = None
    language: str = "unknown"


class BookImportRequest(CamelModel):
    """Import a volume found through the search provider."""

    google_books_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    authors: list[str]
    publisher: str | None = None
    published_date: str | None = None
    description: str | None = None
    isbn10: str | None = None
    isbn13: str | None = None
    thumbnail: str | None = None
    categories: list[str] = Field(default_factory=list)
    page_count: int | None = None
    language: str = "unknown"


class BookCreateRequest(CamelModel):
    """Manually entered book; the cover must already be uploaded."""

    title: str = Field(..., min_length=1)
    authors: list[str] = Field(..., min_length=1)
    publisher: str | None = None
    published_date: str | None = None
    description: str | None = None
    isbn10: str | None = None
    isbn13: str | None = None
    categories: list[str] = Field(default_factory=list)
    page_count: int | None = Field(None, gt=0)
    language: str = "unknown"
    cover_image: AnyHttpUrl | None = None


class BookResponse(CamelModel):
    success: bool = True
    data: BookOut
    message: str | None = None


class BookSearchResponse(CamelModel):
    success: bool = True
    data: list[BookSearchResult]
    total: int


class BookSearchItemResponse(CamelModel):
    success: bool = True
    data: BookSearchResult


class Pagination(CamelModel):
    limit: int
    offset: int
    total: int


class BookListResponse(CamelModel):
    success: bool = True
    data: list[BookOut]
    pagination: Pagination
