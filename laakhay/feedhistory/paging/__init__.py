"""Archive paging for RFC5005 feed history.

Architecture:
    The paging layer consists of:
    - classifier.py: Complete / Archived / Current decision
    - boundary.py: Boundary item lookup (one bounded query)
    - fingerprint.py: Cache-busting tokens derived from boundary items
    - urls.py: Archive query-parameter contract
    - links.py: current / prev-archive link assembly
    - telemetry.py: Structured logging

Usage:
    FeedHistory runs these in order for each render; they can also be used
    individually by rendering layers with their own request plumbing.
"""

from __future__ import annotations

from .boundary import BoundaryLocator, boundary_offset
from .classifier import PageClassifier, PageDecision, page_count
from .fingerprint import (
    FingerprintDeriver,
    HashFingerprint,
    InMemoryTransitionLog,
    TransitionLog,
    VersionCounterFingerprint,
)
from .links import ArchiveLinkBuilder
from .urls import (
    ArchiveParams,
    ArchiveRequest,
    canonical_feed_url,
    parse_archive_request,
)

__all__ = [
    "PageClassifier",
    "PageDecision",
    "page_count",
    "BoundaryLocator",
    "boundary_offset",
    "FingerprintDeriver",
    "HashFingerprint",
    "VersionCounterFingerprint",
    "TransitionLog",
    "InMemoryTransitionLog",
    "ArchiveLinkBuilder",
    "ArchiveParams",
    "ArchiveRequest",
    "canonical_feed_url",
    "parse_archive_request",
]
