# src/folio/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .books import router as books_router
from .feed import router as feed_router
from .posts import router as posts_router
from .social import router as social_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "books_router",
    "feed_router",
    "posts_router",
    "social_router",
    "users_router",
]
