# src/folio/api/v1/endpoints/books.py
"""Book search and catalog endpoints for the Folio API."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from folio.core.errors import NotFoundError
from folio.core.settings import settings
from folio.schemas.book import (
    BookCreateRequest,
    BookImportRequest,
    BookListResponse,
    BookOut,
    BookResponse,
    BookSearchItemResponse,
    BookSearchResponse,
    Pagination,
)
from folio.services import books as book_service

from ..dependencies import CurrentUserDep, GoogleBooksDep, SessionDep

router = APIRouter(prefix="/books", tags=["books"])


@router.get("/search", response_model=BookSearchResponse)
async def search_books(
    client: GoogleBooksDep,
    q: Annotated[str, Query(min_length=1)],
    max_results: Annotated[int, Query(alias="maxResults", ge=1, le=40)] = 10,
    start_index: Annotated[int, Query(alias="startIndex", ge=0)] = 0,
) -> BookSearchResponse:
    """Search the external book provider."""
    results = await client.search(q, max_results, start_index)
    return BookSearchResponse(data=results, total=len(results))


@router.get("/search/isbn/{isbn}", response_model=BookSearchItemResponse)
async def search_by_isbn(isbn: str, client: GoogleBooksDep) -> BookSearchItemResponse:
    result = await client.find_by_isbn(isbn)
    if result is None:
        raise NotFoundError("Book not found")
    return BookSearchItemResponse(data=result)


@router.get("", response_model=BookListResponse)
def list_books(
    db: SessionDep,
    search: str | None = None,
    limit: Annotated[int, Query(ge=1, le=settings.max_page_size)] = settings.default_page_size,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> BookListResponse:
    """Books already in the local catalog, oldest first."""
    books = book_service.list_books(db, search, limit, offset)
    return BookListResponse(
        data=[BookOut.model_validate(book) for book in books],
        pagination=Pagination(limit=limit, offset=offset, total=len(books)),
    )


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: uuid.UUID, db: SessionDep) -> BookResponse:
    book = book_service.get_book(db, book_id)
    return BookResponse(data=BookOut.model_validate(book))


@router.post("/from-google", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def import_from_google(
    payload: BookImportRequest,
    response: Response,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> BookResponse:
    """Add a provider volume to the catalog.

    Returns 200 with the stored row when the volume was imported before.
    """
    book, created = book_service.import_book(db, current_user.id, payload)
    if not created:
        response.status_code = status.HTTP_200_OK
        return BookResponse(
            data=BookOut.model_validate(book),
            message="Book already exists in database",
        )
    return BookResponse(data=BookOut.model_validate(book), message="Book added successfully")


@router.post("/custom", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def create_custom_book(
    payload: BookCreateRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> BookResponse:
    """Create a book by hand; ``coverImage`` must be an already uploaded URL."""
    book = book_service.create_custom_book(db, current_user.id, payload)
    return BookResponse(
        data=BookOut.model_validate(book),
        message="Custom book created successfully",
    )
