# src/folio/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the wire contract of every endpoint. Field names are
snake_case in Python and camelCase in JSON.
"""

from .auth import AuthResponse, LoginRequest, SignupRequest
from .book import BookCreateRequest, BookImportRequest, BookOut, BookSearchResult
from .common import CamelModel, ErrorResponse, MessageResponse
from .post import CommentCreate, CommentOut, FeedPost, FeedType, PostCreate, PostOut
from .social import FollowEntry, FollowRequest
from .user import ProfileUpdateRequest, PublicProfile, UserSnapshot

__all__ = [
    "AuthResponse", "LoginRequest", "SignupRequest",
    "BookCreateRequest", "BookImportRequest", "BookOut", "BookSearchResult",
    "CamelModel", "ErrorResponse", "MessageResponse",
    "CommentCreate", "CommentOut", "FeedPost", "FeedType", "PostCreate", "PostOut",
    "FollowEntry", "FollowRequest",
    "ProfileUpdateRequest", "PublicProfile", "UserSnapshot",
]
