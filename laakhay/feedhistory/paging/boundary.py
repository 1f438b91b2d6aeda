"""Boundary item lookup for archive pages."""

from __future__ import annotations

from ..core.base import ContentSource, ItemFilter
from ..core.enums import Ordering
from ..core.exceptions import BoundaryNotFound, InvalidConfiguration
from ..models import Item


def boundary_offset(page_number: int, page_size: int, visible_count: int) -> int:
    """Zero-based offset of a page's last slot in ascending-modification order.

    The newest page may be partial, so the slot is clamped to the last
    visible item.

    Raises:
        BoundaryNotFound: If the page starts past the end of the collection
    """
    start = (page_number - 1) * page_size
    if start >= visible_count:
        raise BoundaryNotFound(
            f"archive page {page_number} starts at {start} but only {visible_count} items are visible",
            page_number=page_number,
            offset=start,
            visible_count=visible_count,
        )
    return min(start + page_size, visible_count) - 1


class BoundaryLocator:
    """Finds the newest item of an archive page with a single bounded query."""

    def __init__(self, source: ContentSource) -> None:
        self._source = source

    async def locate(
        self,
        page_number: int,
        page_size: int,
        visible_count: int,
        item_filter: ItemFilter | None = None,
    ) -> Item:
        """Return the item in the last slot of ``page_number``.

        Args:
            page_number: 1-based archive page
            page_size: Items per page
            visible_count: Visible count observed earlier in the same render
            item_filter: Filter passed through to the content source

        Returns:
            The boundary item

        Raises:
            InvalidConfiguration: If page_number or page_size is not positive
            BoundaryNotFound: If no visible item occupies the slot
        """
        if page_number < 1:
            raise InvalidConfiguration(f"page_number must be >= 1, got {page_number}")
        if page_size <= 0:
            raise InvalidConfiguration(f"page_size must be positive, got {page_size}")

        offset = boundary_offset(page_number, page_size, visible_count)
        items = await self._source.query_visible(item_filter, Ordering.ASC_MODIFIED, offset, 1)
        # Items may have been removed between the count and this query.
        if not items or not items[0].visible:
            raise BoundaryNotFound(
                f"no visible item at offset {offset} for archive page {page_number}",
                page_number=page_number,
                offset=offset,
                visible_count=visible_count,
            )
        return items[0]
