"""Client for the Google Books volumes API.

Only the fields the catalog stores are kept; everything else in the provider
payload is dropped during normalization.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from folio.core.errors import UpstreamError
from folio.core.settings import Settings, settings as default_settings
from folio.schemas.book import BookSearchResult

logger = logging.getLogger(__name__)


def normalize_volume(volume: Mapping[str, Any]) -> BookSearchResult:
    """Flatten one ``volumes`` item into a ``BookSearchResult``."""
    info: Mapping[str, Any] = volume.get("volumeInfo") or {}
    identifiers = {
        item.get("type"): item.get("identifier")
        for item in info.get("industryIdentifiers") or []
    }
    thumbnail = (info.get("imageLinks") or {}).get("thumbnail")
    if thumbnail:
        thumbnail = thumbnail.replace("http://", "https://", 1)

    return BookSearchResult(
        id=volume["id"],
        title=info.get("title") or "",
        authors=list(info.get("authors") or []),
        publisher=info.get("publisher"),
        published_date=info.get("publishedDate"),
        description=info.get("description"),
        isbn10=identifiers.get("ISBN_10"),
        isbn13=identifiers.get("ISBN_13"),
        thumbnail=thumbnail,
        categories=list(info.get("categories") or []),
        page_count=info.get("pageCount"),
        language=info.get("language") or "unknown",
    )


class GoogleBooksClient:
    """Async search client; one instance per request is cheap enough."""

    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or default_settings
        self._transport = transport

    async def search(
        self,
        query: str,
        max_results: int = 10,
        start_index: int = 0,
    ) -> list[BookSearchResult]:
        """Run a volumes query and return normalized results.

        Raises:
            UpstreamError: If the provider is unreachable or answers with an
                error status or an unparseable body.
        """
        params: dict[str, str | int] = {
            "q": query,
            "maxResults": max_results,
            "startIndex": start_index,
        }
        if self.config.google_books_api_key:
            params["key"] = self.config.google_books_api_key

        try:
            async with httpx.AsyncClient(
                timeout=self.config.google_books_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(self.config.google_books_base_url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as err:
            logger.warning("Google Books returned %s for %r", err.response.status_code, query)
            raise UpstreamError("Failed to search books") from err
        except (httpx.HTTPError, ValueError) as err:
            logger.warning("Google Books request failed for %r: %s", query, err)
            raise UpstreamError("Failed to search books") from err

        return [normalize_volume(item) for item in payload.get("items") or []]

    async def find_by_isbn(self, isbn: str) -> BookSearchResult | None:
        """Return the first volume matching ``isbn``, if any."""
        results = await self.search(f"isbn:{isbn}", max_results=1)
        return results[0] if results else None
