"""Application settings and configuration.

This module defines all configuration options for the Folio application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files. A
    single instance is created at import time and handed to the pieces that
    need it; handlers never read the environment directly.
    """

    # Application metadata
    app_name: str = Field(default="Folio", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Security and authentication. The secret is only required when a token
    # is signed or verified, see folio.core.security.
    secret_key: str | None = Field(default=None, alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_seconds: int = Field(
        default=60 * 60 * 24 * 7,
        alias="ACCESS_TOKEN_EXPIRE_SECONDS",
    )
    password_reset_expire_seconds: int = Field(
        default=60 * 60 * 24,
        alias="PASSWORD_RESET_EXPIRE_SECONDS",
    )

    # Database configuration
    database_url: str = Field(default="sqlite:///./folio.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    db_pool_timeout_seconds: float = Field(default=30.0, alias="DB_POOL_TIMEOUT_SECONDS")

    # Pagination
    default_page_size: int = Field(default=20, alias="DEFAULT_PAGE_SIZE")
    suggestions_page_size: int = Field(default=10, alias="SUGGESTIONS_PAGE_SIZE")
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE")

    # Google Books search provider
    google_books_base_url: str = Field(
        default="https://www.googleapis.com/books/v1/volumes",
        alias="GOOGLE_BOOKS_BASE_URL",
    )
    google_books_api_key: str | None = Field(default=None, alias="GOOGLE_BOOKS_API_KEY")
    google_books_timeout_seconds: float = Field(
        default=10.0,
        alias="GOOGLE_BOOKS_TIMEOUT_SECONDS",
    )

    # Transactional email (Resend)
    resend_api_key: str | None = Field(default=None, alias="RESEND_API_KEY")
    resend_base_url: str = Field(default="https://api.resend.com", alias="RESEND_BASE_URL")
    from_email: str = Field(default="noreply@example.com", alias="FROM_EMAIL")
    client_url: str = Field(default="http://localhost:5173", alias="CLIENT_URL")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url


settings = Settings()
