"""Laakhay Feed History - RFC5005 complete and archived feed metadata."""

from .api import FeedHistory
from .config import FeedHistorySettings
from .core import (
    ATOM_NAMESPACE,
    HISTORY_NAMESPACE,
    BoundaryNotFound,
    Classification,
    ContentSource,
    FeedFormat,
    FeedHistoryError,
    InvalidConfiguration,
    ItemFilter,
    LinkRelation,
    Ordering,
    UnsupportedFormat,
)
from .models import ArchiveLink, ArchiveMetadata, Item, QueryContext
from .paging import (
    ArchiveLinkBuilder,
    ArchiveParams,
    BoundaryLocator,
    FingerprintDeriver,
    HashFingerprint,
    InMemoryTransitionLog,
    PageClassifier,
    PageDecision,
    TransitionLog,
    VersionCounterFingerprint,
    canonical_feed_url,
    parse_archive_request,
)
from .render import NamespaceEmitter
from .sources import InMemoryContentSource, SQLiteContentSource

__version__ = "0.1.0"

__all__ = [
    # Core enums
    "Classification",
    "FeedFormat",
    "LinkRelation",
    "Ordering",
    "HISTORY_NAMESPACE",
    "ATOM_NAMESPACE",
    # Sources
    "ContentSource",
    "ItemFilter",
    "InMemoryContentSource",
    "SQLiteContentSource",
    # Models
    "Item",
    "QueryContext",
    "ArchiveLink",
    "ArchiveMetadata",
    # Paging
    "PageClassifier",
    "PageDecision",
    "BoundaryLocator",
    "FingerprintDeriver",
    "HashFingerprint",
    "VersionCounterFingerprint",
    "TransitionLog",
    "InMemoryTransitionLog",
    "ArchiveLinkBuilder",
    "ArchiveParams",
    "canonical_feed_url",
    "parse_archive_request",
    # Rendering
    "NamespaceEmitter",
    # High-level API
    "FeedHistory",
    "FeedHistorySettings",
    # Exceptions
    "FeedHistoryError",
    "InvalidConfiguration",
    "BoundaryNotFound",
    "UnsupportedFormat",
]
