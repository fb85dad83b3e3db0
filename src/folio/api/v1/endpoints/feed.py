# src/folio/api/v1/endpoints/feed.py
"""Feed endpoint for the Folio API."""

from typing import Annotated

from fastapi import APIRouter, Query

from folio.core.settings import settings
from folio.schemas.post import FeedResponse, FeedType
from folio.services.feed import assemble_feed

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("", response_model=FeedResponse)
def get_feed(
    current_user: CurrentUserDep,
    db: SessionDep,
    limit: Annotated[int, Query(ge=1, le=50)] = settings.default_page_size,
    offset: Annotated[int, Query(ge=0)] = 0,
    feed_type: Annotated[FeedType, Query(alias="type")] = FeedType.FOLLOWING,
) -> FeedResponse:
    """Public posts, newest first.

    ``type=following`` (the default) limits the feed to the caller and the
    users they follow; ``type=discover`` shows everyone.
    """
    page = assemble_feed(db, current_user.id, feed_type, limit, offset)
    return FeedResponse(posts=page.items, has_more=page.has_more)
