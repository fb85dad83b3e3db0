"""Domain exceptions raised by the service layer.

Each error carries the HTTP status it maps to so the API layer can render it
without knowing about individual business rules. Handlers are registered in
``folio.main``.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import status


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""

    field: str
    message: str


class FolioError(RuntimeError):
    """Base exception for all expected, user-facing failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FolioError):
    """Malformed or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(FolioError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class NotFollowingError(NotFoundError):
    default_message = "Not following this user"


class NotLikedError(NotFoundError):
    default_message = "Post not liked"


class ConflictError(FolioError):
    """The request collides with existing state."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class AlreadyFollowingError(ConflictError):
    default_message = "Already following this user"


class AlreadyLikedError(ConflictError):
    default_message = "Post already liked"


class UsernameTakenError(ConflictError):
    default_message = "Username already taken"


class EmailInUseError(ConflictError):
    default_message = "Email already in use"


class SelfFollowError(ConflictError):
    """Following oneself is a conflict by kind but reported as a bad request."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Cannot follow yourself"


class AuthError(FolioError):
    """Missing, invalid, expired or revoked credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"


class ServerConfigError(FolioError):
    """Required configuration (such as the signing secret) is missing."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server configuration error"


class UpstreamError(FolioError):
    """An external provider failed or returned an unusable response."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Upstream service error"


class UnexpectedError(FolioError):
    """Catch-all for failures that are not part of the domain contract."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
