# src/folio/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    books_router,
    feed_router,
    posts_router,
    social_router,
    users_router,
)

__all__ = [
    "auth_router",
    "books_router",
    "feed_router",
    "posts_router",
    "social_router",
    "users_router",
]
