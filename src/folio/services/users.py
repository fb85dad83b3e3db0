"""User directory: profiles and search."""
from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from folio.core.errors import NotFoundError, UsernameTakenError
from folio.db.session import atomic
from folio.models import User
from folio.schemas.user import ProfileUpdateRequest

logger = logging.getLogger(__name__)


def get_by_username(db: Session, username: str) -> User:
    user = db.scalar(select(User).where(User.username == username))
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_by_email(db: Session, email: str) -> User | None:
    return db.scalar(select(User).where(User.email == email.lower()))


def update_profile(db: Session, user: User, data: ProfileUpdateRequest) -> User:
    """Apply the fields present in ``data`` to ``user``.

    Raises:
        UsernameTakenError: If another account already uses the username.
    """
    changes = data.model_dump(exclude_unset=True)
    if "website" in changes and changes["website"] is not None:
        changes["website"] = str(changes["website"])

    username = changes.get("username")
    if username is not None and username != user.username:
        owner = db.scalar(select(User.id).where(User.username == username))
        if owner is not None and owner != user.id:
            raise UsernameTakenError()

    try:
        with atomic(db):
            for field, value in changes.items():
                setattr(user, field, value)
    except IntegrityError as err:
        raise UsernameTakenError() from err
    db.refresh(user)

    logger.info("user %s updated profile fields %s", user.id, sorted(changes))
    return user


def search_users(db: Session, query: str, limit: int, offset: int = 0) -> list[User]:
    """Case-insensitive substring match on username or name, most followed first."""
    pattern = f"%{query}%"
    stmt = (
        select(User)
        .where(or_(User.username.ilike(pattern), User.name.ilike(pattern)))
        .order_by(User.followers_count.desc(), User.created_at.asc(), User.id.asc())
        .limit(limit)
        .offset(offset)
    )
    return list(db.scalars(stmt))
