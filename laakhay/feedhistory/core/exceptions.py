"""Custom exception hierarchy."""

from __future__ import annotations


class FeedHistoryError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidConfiguration(FeedHistoryError):
    """Paging configuration cannot produce well-formed pages (e.g. page_size <= 0)."""

    pass


class BoundaryNotFound(FeedHistoryError):
    """No item occupies the boundary slot of the requested archive page.

    Usually a race between the visible-item count and the boundary query, or
    an empty collection. Callers omit the prev-archive link for this render.
    """

    def __init__(
        self,
        message: str,
        page_number: int | None = None,
        offset: int | None = None,
        visible_count: int | None = None,
    ) -> None:
        super().__init__(message)
        self.page_number = page_number
        self.offset = offset
        self.visible_count = visible_count


class UnsupportedFormat(FeedHistoryError):
    """Rendering layer asked for a feed format this library cannot mark up."""

    def __init__(self, message: str, format_tag: str | None = None) -> None:
        super().__init__(message)
        self.format_tag = format_tag
