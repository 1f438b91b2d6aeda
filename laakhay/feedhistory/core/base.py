"""Content source abstract class.

Architecture:
    This module defines the ContentSource abstract base class: the read-only
    view over an externally stored item collection that the paging
    algorithm needs. It provides:
    - Abstract count and bounded query operations over visible items
    - Async context manager support for adapters that hold connections

Design Decisions:
    - Abstract base class: Enforces a consistent interface across adapters
    - Visibility is resolved by the adapter: the core only ever sees
      visible items and never matches status labels itself
    - Bounded queries only: offset + limit, never "fetch everything"

See Also:
    - InMemoryContentSource: Reference adapter used by tests
    - SQLiteContentSource: aiosqlite-backed adapter
    - BoundaryLocator: The main consumer of query_visible
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from ..models import Item
from .enums import Ordering

ItemFilter = Mapping[str, Any]


class ContentSource(ABC):
    """Abstract base class for item repositories.

    Architecture:
        Adapters inherit from this class and implement the two queries.
        The same filter object is passed to both so that a count and the
        boundary lookup describe the same collection.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def count_visible(self, item_filter: ItemFilter | None = None) -> int:
        """Count visible items matching the filter."""
        pass

    @abstractmethod
    async def query_visible(
        self,
        item_filter: ItemFilter | None,
        ordering: Ordering,
        offset: int,
        limit: int,
    ) -> Sequence[Item]:
        """Return at most ``limit`` visible items starting at ``offset``.

        For ``Ordering.ASC_MODIFIED`` items must be sorted by
        ``(modified_at, id)`` ascending.
        """
        pass

    async def close(self) -> None:
        """Release adapter resources. Override if needed."""
        pass

    async def __aenter__(self) -> ContentSource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
