"""Structured logging for archive paging.

This module provides telemetry hooks for a feed-history render, emitting
structured logs for observability. The library never installs handlers.
"""

from __future__ import annotations

import logging

from ..core.enums import Classification

logger = logging.getLogger(__name__)


def log_page_classified(
    *,
    classification: Classification,
    total_visible_count: int,
    page_size: int,
    prev_page_number: int | None,
) -> None:
    """Log the classification chosen for a render.

    Args:
        classification: Chosen classification
        total_visible_count: Visible items counted for this render
        page_size: Configured items per page
        prev_page_number: Page to resolve into a prev-archive link, if any
    """
    logger.debug(
        "page_classified",
        extra={
            "classification": classification.value,
            "total_visible_count": total_visible_count,
            "page_size": page_size,
            "prev_page_number": prev_page_number,
        },
    )


def log_invalid_configuration(*, page_size: int, error_message: str) -> None:
    """Log a configuration error that disabled history metadata for a render."""
    logger.error(
        "invalid_configuration",
        extra={
            "page_size": page_size,
            "error_message": error_message,
        },
    )


def log_boundary_not_found(
    *,
    page_number: int,
    offset: int | None,
    visible_count: int | None,
) -> None:
    """Log a boundary lookup that came back empty.

    Args:
        page_number: Archive page whose boundary was requested
        offset: Zero-based offset queried in ascending-modification order
        visible_count: Visible count the offset was computed from
    """
    logger.warning(
        "boundary_not_found",
        extra={
            "page_number": page_number,
            "offset": offset,
            "visible_count": visible_count,
        },
    )


def log_boundary_timeout(*, page_number: int, timeout: float) -> None:
    """Log a boundary query that exceeded its time budget."""
    logger.warning(
        "boundary_query_timeout",
        extra={
            "page_number": page_number,
            "timeout": timeout,
        },
    )


def log_archive_links_built(
    *,
    classification: Classification,
    relations: list[str],
    fingerprint: str | None,
) -> None:
    """Log the links produced for a render."""
    logger.info(
        "archive_links_built",
        extra={
            "classification": classification.value,
            "relations": relations,
            "fingerprint": fingerprint,
        },
    )


def log_unsupported_format(*, format_tag: str) -> None:
    """Log a format tag the emitter skipped."""
    logger.debug("unsupported_feed_format", extra={"format_tag": format_tag})
