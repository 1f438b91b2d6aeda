"""High-level entry point for rendering RFC5005 feed metadata.

Architecture:
    FeedHistory runs one render's pass over the paging components:
    1. Parse the request URL into an archive request (ordering, page, base URL)
    2. Count visible items and build the QueryContext
    3. Classify the page (PageClassifier)
    4. Resolve the previous page's boundary item (BoundaryLocator)
    5. Derive its token (FingerprintDeriver)
    6. Assemble links (ArchiveLinkBuilder) and, on request, markup
       (NamespaceEmitter)

Design Decisions:
    - Enhance the feed if possible, never break it: configuration errors,
      missing boundaries, boundary timeouts and unknown formats degrade to
      emitting less, and are logged
    - Content-source failures on the count query propagate; they belong to
      the surrounding render
    - No state survives a render except the optional transition log

See Also:
    - PageClassifier, BoundaryLocator, ArchiveLinkBuilder: paging components
    - NamespaceEmitter: markup for RSS 2.0 and Atom
"""

from __future__ import annotations

import asyncio

from ..config import FeedHistorySettings
from ..core.base import ContentSource, ItemFilter
from ..core.enums import FeedFormat
from ..core.exceptions import BoundaryNotFound, InvalidConfiguration, UnsupportedFormat
from ..models import ArchiveMetadata, Item, QueryContext
from ..paging.boundary import BoundaryLocator
from ..paging.classifier import PageClassifier, PageDecision
from ..paging.fingerprint import (
    FingerprintDeriver,
    HashFingerprint,
    TransitionLog,
    VersionCounterFingerprint,
)
from ..paging.links import ArchiveLinkBuilder
from ..paging.telemetry import (
    log_archive_links_built,
    log_boundary_not_found,
    log_boundary_timeout,
    log_invalid_configuration,
    log_unsupported_format,
)
from ..paging.urls import parse_archive_request
from ..render.emitter import NamespaceEmitter


class FeedHistory:
    """Computes RFC5005 metadata for feed renders over one content source.

    Example:
        >>> history = FeedHistory(source, FeedHistorySettings(page_size=10))
        >>> head = await history.render_head("https://example.org/feed/", "rss2")
    """

    def __init__(
        self,
        source: ContentSource,
        settings: FeedHistorySettings | None = None,
        *,
        fingerprint: FingerprintDeriver | None = None,
        transition_log: TransitionLog | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            source: Read interface over the host's items
            settings: Settings (defaults to environment-loaded settings)
            fingerprint: Explicit token strategy, overriding settings
            transition_log: Log backing the "version" fingerprint strategy

        Raises:
            InvalidConfiguration: If the "version" strategy is selected
                without a transition log
        """
        self._settings = settings or FeedHistorySettings()
        self._source = source
        self._classifier = PageClassifier()
        self._locator = BoundaryLocator(source)
        self._links = ArchiveLinkBuilder(self._settings.archive_params())
        self._emitter = NamespaceEmitter(self._settings.default_format)
        self._fingerprint = fingerprint or self._default_fingerprint(transition_log)

    def _default_fingerprint(self, transition_log: TransitionLog | None) -> FingerprintDeriver:
        if self._settings.fingerprint_strategy == "version":
            if transition_log is None:
                raise InvalidConfiguration(
                    "fingerprint_strategy 'version' requires a transition log"
                )
            return VersionCounterFingerprint(transition_log)
        return HashFingerprint()

    @property
    def settings(self) -> FeedHistorySettings:
        return self._settings

    @property
    def fingerprint(self) -> FingerprintDeriver:
        return self._fingerprint

    @property
    def emitter(self) -> NamespaceEmitter:
        return self._emitter

    def on_status_change(self, previous: Item, current: Item) -> bool:
        """Forward a status change to the version-counter strategy, if in use.

        Args:
            previous: The item as it was before the change
            current: The item after the change
        """
        if isinstance(self._fingerprint, VersionCounterFingerprint):
            return self._fingerprint.on_status_change(previous, current)
        return False

    async def context_for(
        self,
        request_url: str,
        item_filter: ItemFilter | None = None,
    ) -> QueryContext:
        """Build the query context of a render from its request URL."""
        request = parse_archive_request(
            request_url,
            self._links.params,
            canonical_origin=self._settings.canonical_origin,
        )
        total = await self._source.count_visible(item_filter)
        return QueryContext(
            ordering=request.ordering,
            requested_page=request.requested_page,
            page_size=self._settings.page_size,
            total_visible_count=total,
            base_url=request.base_url,
        )

    async def _boundary(
        self,
        decision: PageDecision,
        context: QueryContext,
        item_filter: ItemFilter | None,
    ) -> Item | None:
        page = decision.prev_page_number
        if page is None or page < 1:
            return None

        lookup = self._locator.locate(
            page, context.page_size, context.total_visible_count, item_filter
        )
        timeout = self._settings.boundary_timeout or None
        try:
            return await asyncio.wait_for(lookup, timeout=timeout)
        except BoundaryNotFound as e:
            log_boundary_not_found(
                page_number=page, offset=e.offset, visible_count=e.visible_count
            )
        except asyncio.TimeoutError:
            log_boundary_timeout(page_number=page, timeout=timeout or 0.0)
        return None

    async def build(
        self,
        request_url: str,
        item_filter: ItemFilter | None = None,
    ) -> ArchiveMetadata:
        """Compute classification, token and links for one render.

        Args:
            request_url: Full URL of the feed request
            item_filter: Filter passed through to the content source

        Returns:
            The render's metadata; empty if history metadata is disabled
            for this render
        """
        context = await self.context_for(request_url, item_filter)
        return await self.build_for(context, item_filter)

    async def build_for(
        self,
        context: QueryContext,
        item_filter: ItemFilter | None = None,
    ) -> ArchiveMetadata:
        """Compute metadata for an explicit query context."""
        try:
            decision = self._classifier.classify(context)
        except InvalidConfiguration as e:
            log_invalid_configuration(page_size=context.page_size, error_message=str(e))
            return ArchiveMetadata.empty()

        boundary = await self._boundary(decision, context, item_filter)
        token = self._fingerprint.derive(boundary) if boundary is not None else None
        links = self._links.build(decision, context.base_url, token)

        log_archive_links_built(
            classification=decision.classification,
            relations=[link.relation.value for link in links],
            fingerprint=token,
        )
        return ArchiveMetadata(
            classification=decision.classification,
            prev_page_number=decision.prev_page_number,
            fingerprint=token,
            links=links,
        )

    def namespace_declarations(self, feed_format: FeedFormat | str) -> dict[str, str]:
        """Prefix to URI map the feed root must declare for ``render_head`` output."""
        return self._emitter.namespace_declarations(feed_format)

    async def render_head(
        self,
        request_url: str,
        feed_format: FeedFormat | str,
        item_filter: ItemFilter | None = None,
    ) -> str:
        """Markup to insert into the feed's head for this request.

        Unknown feed formats produce "" without querying the content source.
        For RSS 2.0 the feed root must also declare the prefixes returned by
        ``namespace_declarations``.
        """
        try:
            feed_format = self._emitter.resolve(feed_format)
        except UnsupportedFormat:
            log_unsupported_format(format_tag=str(feed_format))
            return ""
        metadata = await self.build(request_url, item_filter)
        return self._emitter.render(metadata, feed_format)
