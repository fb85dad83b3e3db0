"""Offset pagination result container."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from folio.schemas.common import has_more

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of results plus the ``has_more`` hint.

    Offsets are not stable cursors: rows inserted between requests shift
    later pages.
    """

    items: list[T] = field(default_factory=list)
    has_more: bool = False

    @classmethod
    def from_items(cls, items: list[T], limit: int) -> Page[T]:
        return cls(items=items, has_more=has_more(len(items), limit))
