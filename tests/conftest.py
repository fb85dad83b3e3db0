# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import timedelta
from itertools import count
from typing import Any

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from folio.core.security import create_access_token
from folio.core.settings import Settings
from folio.db.session import Base
from folio.db.session import get_db as app_get_session
from folio.db.time import utcnow
from folio.main import app as fastapi_app
from folio.models import AuthToken, Book, Post, PostType, User

TEST_DB_URL = "sqlite://"
# Factory users skip argon2 hashing; tests that log in set a real hash.
UNUSABLE_PASSWORD_HASH = "!unusable"

_USER_COUNTER = count(1)
_BOOK_COUNTER = count(1)
_POST_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    # Service-level commits only release a savepoint on this connection.
    session = Session(
        bind=connection,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )

    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def test_settings() -> Settings:
    """Settings instance isolated from the process-wide one."""
    return Settings(SECRET_KEY="test-secret-key", DATABASE_URL=TEST_DB_URL)


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with unique emails and usernames."""

    def _make(**overrides: Any) -> User:
        n = next(_USER_COUNTER)
        fields: dict[str, Any] = {
            "email": f"reader{n}@example.com",
            "password_hash": UNUSABLE_PASSWORD_HASH,
            "name": f"Reader {n}",
            "username": f"reader{n}",
        }
        fields.update(overrides)
        user = User(**fields)
        db_session.add(user)
        db_session.flush()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture()
def make_book(db_session: Session) -> Callable[..., Book]:
    def _make(**overrides: Any) -> Book:
        n = next(_BOOK_COUNTER)
        fields: dict[str, Any] = {
            "title": f"Book {n}",
            "authors": [f"Author {n}"],
            "thumbnail": f"https://covers.example.com/{n}.jpg",
        }
        fields.update(overrides)
        book = Book(**fields)
        db_session.add(book)
        db_session.flush()
        db_session.refresh(book)
        return book

    return _make


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory for posts; each call is one minute newer than the last."""
    base = utcnow() - timedelta(days=1)

    def _make(author: User, **overrides: Any) -> Post:
        n = next(_POST_COUNTER)
        fields: dict[str, Any] = {
            "user_id": author.id,
            "content": f"Post {n}",
            "post_type": PostType.THOUGHT.value,
            "created_at": base + timedelta(minutes=n),
        }
        fields.update(overrides)
        post = Post(**fields)
        db_session.add(post)
        db_session.flush()
        db_session.refresh(post)
        return post

    return _make


@pytest.fixture()
def auth_headers(db_session: Session) -> Callable[[User], dict[str, str]]:
    """Return a helper that issues a stored bearer token for a user."""

    def _headers(user: User) -> dict[str, str]:
        token, expires_at = create_access_token(user.id, user.email)
        db_session.add(AuthToken(token=token, user_id=user.id, expires_at=expires_at))
        db_session.flush()
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def alice(make_user: Callable[..., User]) -> User:
    return make_user(name="Alice", username="alice")


@pytest.fixture()
def bob(make_user: Callable[..., User]) -> User:
    return make_user(name="Bob", username="bob")


@pytest.fixture()
def carol(make_user: Callable[..., User]) -> User:
    return make_user(name="Carol", username="carol")

