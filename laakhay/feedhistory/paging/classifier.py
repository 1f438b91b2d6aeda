"""Page classification for RFC5005 feed documents.

This module provides the PageClassifier, which decides whether a rendered
feed is a complete feed (RFC5005 §2), an archived page or the current
document (RFC5005 §4), and which earlier page its prev-archive link must
point at.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Classification
from ..core.exceptions import InvalidConfiguration
from ..models import QueryContext
from .telemetry import log_page_classified


@dataclass(frozen=True)
class PageDecision:
    """Classification of one render.

    Attributes:
        classification: Complete, Archived or Current
        prev_page_number: Archive page the prev-archive link targets
            (None for complete feeds, 0 when there is no predecessor)
    """

    classification: Classification
    prev_page_number: int | None = None

    @property
    def has_prev_archive(self) -> bool:
        """Only page 2 and later have a predecessor."""
        return self.prev_page_number is not None and self.prev_page_number >= 1


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items, the last possibly partial."""
    return -(-total // page_size)


class PageClassifier:
    """Classifies a feed render from its query context.

    Only ascending-by-modification requests are treated as archive pages,
    because that ordering keeps page contents stable: new items only land on
    the newest page, and edits only move an item toward the newest page.
    """

    def classify(self, context: QueryContext) -> PageDecision:
        """Classify a render.

        Args:
            context: Query context of the render

        Returns:
            The page decision

        Raises:
            InvalidConfiguration: If the page size is not positive
        """
        if context.page_size <= 0:
            raise InvalidConfiguration(f"page_size must be positive, got {context.page_size}")

        if context.total_visible_count <= context.page_size:
            decision = PageDecision(Classification.COMPLETE)
        elif context.is_archive_request:
            decision = PageDecision(
                Classification.ARCHIVED,
                prev_page_number=context.effective_page - 1,
            )
        else:
            # The newest page may still be growing; its link changes as it does.
            decision = PageDecision(
                Classification.CURRENT,
                prev_page_number=page_count(context.total_visible_count, context.page_size),
            )

        log_page_classified(
            classification=decision.classification,
            total_visible_count=context.total_visible_count,
            page_size=context.page_size,
            prev_page_number=decision.prev_page_number,
        )
        return decision
