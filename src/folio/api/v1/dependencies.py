"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from folio.core.errors import AuthError
from folio.core.settings import Settings, settings
from folio.db.session import get_db
from folio.models import User
from folio.services import auth as auth_service
from folio.services.google_books import GoogleBooksClient
from folio.services.mailer import Mailer

# Missing credentials are reported through AuthError rather than FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_settings() -> Settings:
    """Return the process-wide settings object."""
    return settings


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str:
    """Extract the raw bearer token from the Authorization header.

    Raises:
        AuthError: If the header is missing or not a bearer token.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Missing bearer token")
    return credentials.credentials


BearerTokenDep = Annotated[str, Depends(get_bearer_token)]


def get_current_user(token: BearerTokenDep, db: SessionDep) -> User:
    """Resolve the bearer token to its user row."""
    return auth_service.resolve_bearer(db, token)


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]


def get_google_books_client(config: SettingsDep) -> GoogleBooksClient:
    return GoogleBooksClient(config)


GoogleBooksDep = Annotated[GoogleBooksClient, Depends(get_google_books_client)]


def get_mailer(config: SettingsDep) -> Mailer:
    return Mailer(config)


MailerDep = Annotated[Mailer, Depends(get_mailer)]
