"""Core enumerations for feed history metadata.

Architecture:
    This module defines the small set of standardized values that flow
    between the paging algorithm, the link builder and the markup emitter.

Design Decisions:
    - String enums: Values double as query-string and markup tokens
    - Lookup helpers return None instead of raising, so callers decide
      whether an unknown value is an error or a no-op

Key Types:
    - Classification: Complete / Archived / Current (RFC5005 §2 and §4)
    - Ordering: Ascending-by-modification vs host default ordering
    - FeedFormat: Syndication formats the emitter knows how to mark up
    - LinkRelation: The two link relations this library produces
"""

from enum import Enum
from typing import Optional

HISTORY_NAMESPACE = "http://purl.org/syndication/history/1.0"
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


class Classification(str, Enum):
    """How a rendered feed document is presented to RFC5005 readers."""

    COMPLETE = "complete"
    ARCHIVED = "archive"
    CURRENT = "current"

    def __str__(self) -> str:
        return self.value

    @property
    def has_marker(self) -> bool:
        """Whether the document carries an fh:complete or fh:archive element."""
        return self is not Classification.CURRENT


class Ordering(str, Enum):
    """Item ordering requested for a feed page."""

    DEFAULT = "default"
    ASC_MODIFIED = "asc_modified"

    def __str__(self) -> str:
        return self.value


class FeedFormat(str, Enum):
    """Feed syntaxes with known markup for RFC5005 elements."""

    RSS2 = "rss2"
    ATOM = "atom"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, tag: str, default: Optional["FeedFormat"] = None) -> Optional["FeedFormat"]:
        """Resolve a rendering-layer format tag. Returns None if no match.

        The generic tag ``"feed"`` resolves to ``default`` (the host's
        default feed type), matching how feed routes are commonly aliased.
        """
        if tag == "feed":
            return default
        try:
            return cls(tag)
        except ValueError:
            return None


class LinkRelation(str, Enum):
    """Link relations emitted alongside the history markers."""

    CURRENT = "current"
    PREV_ARCHIVE = "prev-archive"

    def __str__(self) -> str:
        return self.value
