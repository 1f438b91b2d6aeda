"""Archive link assembly."""

from __future__ import annotations

from ..core.enums import Classification, LinkRelation
from ..models import ArchiveLink
from .classifier import PageDecision
from .urls import ArchiveParams, with_query_args


class ArchiveLinkBuilder:
    """Builds the current and prev-archive links for a render.

    Links are pure functions of their inputs, so identical inputs always
    produce byte-identical URLs.
    """

    def __init__(self, params: ArchiveParams | None = None) -> None:
        self._params = params or ArchiveParams()

    @property
    def params(self) -> ArchiveParams:
        return self._params

    def prev_archive_url(self, base_url: str, page_number: int, fingerprint: str) -> str:
        """URL of archive page ``page_number`` carrying ``fingerprint``.

        Page 1 gets no page parameter: hosts commonly redirect ``page=1`` to
        the URL without it, so linking there directly saves a round trip.
        """
        p = self._params
        args = [
            (p.order, p.order_value),
            (p.orderby, p.orderby_value),
            (p.token, fingerprint),
        ]
        if page_number > 1:
            args.append((p.page, str(page_number)))
        return with_query_args(base_url, args)

    def build(
        self,
        decision: PageDecision,
        base_url: str,
        fingerprint: str | None = None,
    ) -> tuple[ArchiveLink, ...]:
        """Assemble the outbound links.

        Args:
            decision: Classifier output for this render
            base_url: Canonical feed URL without archive parameters
            fingerprint: Token of the previous page's boundary item, or None
                if the boundary could not be resolved

        Returns:
            Zero, one or two links, ``current`` first
        """
        links: list[ArchiveLink] = []
        if decision.classification == Classification.ARCHIVED:
            links.append(ArchiveLink(relation=LinkRelation.CURRENT, target_url=base_url))
        page = decision.prev_page_number
        if page is not None and page >= 1 and fingerprint is not None:
            links.append(
                ArchiveLink(
                    relation=LinkRelation.PREV_ARCHIVE,
                    target_url=self.prev_archive_url(base_url, page, fingerprint),
                )
            )
        return tuple(links)
