# src/folio/models/__init__.py
"""SQLAlchemy models for the Folio application."""

from .book import Book
from .follow import Follow
from .post import Post, PostComment, PostLike, PostType
from .user import AuthToken, PasswordReset, User

__all__ = [
    "AuthToken", "PasswordReset", "User",
    "Book",
    "Follow",
    "Post", "PostComment", "PostLike", "PostType",
]
