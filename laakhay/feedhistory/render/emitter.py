"""RFC5005 markup for RSS 2.0 and Atom documents."""

from __future__ import annotations

from html import escape

from ..core.enums import (
    ATOM_NAMESPACE,
    HISTORY_NAMESPACE,
    Classification,
    FeedFormat,
    LinkRelation,
)
from ..core.exceptions import UnsupportedFormat
from ..models import ArchiveMetadata
from ..paging.telemetry import log_unsupported_format

_HISTORY_PREFIX = "fh"


class NamespaceEmitter:
    """Emits history markers and link elements for a feed head.

    Unknown format tags produce no output: the host may render feed types
    this emitter does not know, and those must keep rendering unchanged.
    """

    def __init__(self, default_format: FeedFormat = FeedFormat.RSS2) -> None:
        self._default_format = default_format

    def resolve(self, format_tag: FeedFormat | str) -> FeedFormat:
        """Resolve a format tag.

        Raises:
            UnsupportedFormat: If the tag is not a known format
        """
        if isinstance(format_tag, FeedFormat):
            return format_tag
        feed_format = FeedFormat.from_str(format_tag, default=self._default_format)
        if feed_format is None:
            raise UnsupportedFormat(f"Unsupported feed format: {format_tag}", format_tag=format_tag)
        return feed_format

    def namespace_declarations(self, format_tag: FeedFormat | str) -> dict[str, str]:
        """Prefixes the enclosing document must declare for ``link`` output.

        The history namespace is declared on the marker element itself.
        """
        try:
            feed_format = self.resolve(format_tag)
        except UnsupportedFormat:
            log_unsupported_format(format_tag=str(format_tag))
            return {}
        if feed_format == FeedFormat.RSS2:
            return {"atom": ATOM_NAMESPACE}
        return {}

    def marker(self, classification: Classification, format_tag: FeedFormat | str) -> str:
        """The fh:complete or fh:archive element, or "" for current feeds."""
        try:
            self.resolve(format_tag)
        except UnsupportedFormat:
            log_unsupported_format(format_tag=str(format_tag))
            return ""
        if not classification.has_marker:
            return ""
        return (
            f'\t<{_HISTORY_PREFIX}:{classification.value} '
            f'xmlns:{_HISTORY_PREFIX}="{HISTORY_NAMESPACE}"/>\n'
        )

    def link(
        self,
        format_tag: FeedFormat | str,
        relation: LinkRelation | str,
        url: str,
    ) -> str:
        """A link element with escaped attributes in the format's syntax."""
        try:
            feed_format = self.resolve(format_tag)
        except UnsupportedFormat:
            log_unsupported_format(format_tag=str(format_tag))
            return ""
        element = "atom:link" if feed_format == FeedFormat.RSS2 else "link"
        return f'\t<{element} rel="{escape(str(relation))}" href="{escape(url)}"/>\n'

    def render(self, metadata: ArchiveMetadata, format_tag: FeedFormat | str) -> str:
        """All history markup for a render, in document order.

        RSS 2.0 links use the ``atom`` prefix, which this markup does not
        declare. The enclosing document must declare every prefix returned
        by ``namespace_declarations`` for the output to be well-formed.
        """
        classification = metadata.classification
        if classification is None:
            return ""
        try:
            feed_format = self.resolve(format_tag)
        except UnsupportedFormat:
            log_unsupported_format(format_tag=str(format_tag))
            return ""
        parts = [self.marker(classification, feed_format)]
        parts.extend(
            self.link(feed_format, link.relation, link.target_url) for link in metadata.links
        )
        return "".join(parts)
