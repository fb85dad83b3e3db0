"""Business logic services for the Folio application."""

from .google_books import GoogleBooksClient
from .mailer import EmailMessage, Mailer
from .pagination import Page

__all__ = [
    "GoogleBooksClient",
    "EmailMessage", "Mailer",
    "Page",
]
