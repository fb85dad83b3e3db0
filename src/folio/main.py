# src/folio/main.py
"""Main entry point for the Folio application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from folio.api.v1 import (
    auth_router,
    books_router,
    feed_router,
    posts_router,
    social_router,
    users_router,
)
from folio.core.errors import FieldError, FolioError, UnexpectedError, ValidationError
from folio.core.logging import configure_logging
from folio.core.settings import settings
from folio.db.session import create_tables
from folio.schemas.common import ErrorResponse, FieldErrorOut

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Folio API",
    description="Social reading tracker API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(books_router)
app.include_router(social_router)
app.include_router(posts_router)
app.include_router(feed_router)


def _render(error: FolioError) -> JSONResponse:
    errors = error.errors if isinstance(error, ValidationError) else []
    body = ErrorResponse(
        detail=error.message,
        errors=[FieldErrorOut(field=item.field, message=item.message) for item in errors],
    )
    return JSONResponse(status_code=error.status_code, content=body.model_dump())


def _field_name(location: tuple[int | str, ...]) -> str:
    parts = [str(part) for part in location]
    if parts and parts[0] in {"body", "query", "path", "header"}:
        parts = parts[1:]
    return ".".join(parts) or "request"


@app.exception_handler(FolioError)
async def handle_folio_error(request: Request, exc: FolioError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _render(exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        FieldError(field=_field_name(tuple(item.get("loc", ()))), message=item.get("msg", ""))
        for item in exc.errors()
    ]
    return _render(ValidationError("Invalid request", errors))


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _render(UnexpectedError())


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    if settings.debug:
        # Local development runs without alembic.
        create_tables()
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Social reading tracker API",
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("folio.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
