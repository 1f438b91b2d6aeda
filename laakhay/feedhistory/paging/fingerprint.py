"""Cache-busting tokens for archive page URLs.

Architecture:
    Archived feed pages are cached by readers as if they never expire, so
    an archive page's URL has to change whenever the page's effective
    contents change. The token embedded in the URL is derived from the
    page's boundary item (its newest item in ascending-modification order):
    - Insertions land on the newest page and leave older boundaries alone
    - Deletions shift every later boundary by one item
    - Edits move the edited item to the newest page, like delete + insert

Design Decisions:
    - HashFingerprint (default): stateless, hashes (modified_at, permalink).
      The permalink catches a different item taking the boundary slot, the
      timestamp catches the same item being re-edited.
    - VersionCounterFingerprint: hashes (id, version) where the version
      counts visibility transitions at or before the item's modification
      time. For hosts whose stores cannot expose precise timestamps.
    - blake2b truncated to 64 bits: only accidental collisions matter,
      anyone who can edit content already controls the feed

See Also:
    - BoundaryLocator: Finds the item a token is derived from
    - ArchiveLinkBuilder: Embeds the token in the prev-archive URL
"""

from __future__ import annotations

import base64
import bisect
import hashlib
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from ..models import Item

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
_DIGEST_SIZE = 8


def encode_digest(payload: str) -> str:
    """Hash a payload to a compact URL-safe token (11 characters)."""
    digest = hashlib.blake2b(payload.encode("utf-8"), digest_size=_DIGEST_SIZE).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def format_timestamp(value: datetime) -> str:
    """UTC timestamp at second precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(_TIMESTAMP_FORMAT)


class FingerprintDeriver(ABC):
    """Derives the cache-busting token for a boundary item."""

    @abstractmethod
    def derive(self, item: Item) -> str:
        """Return an opaque URL-safe token for ``item``."""
        pass


class HashFingerprint(FingerprintDeriver):
    """Stateless token from the boundary item's timestamp and permalink."""

    def derive(self, item: Item) -> str:
        return encode_digest(f"{format_timestamp(item.modified_at)}\n{item.permalink}")


class TransitionLog(ABC):
    """Record of visibility transitions, keyed by the item's modification time.

    Hosts that persist the log implement this against their own store.
    Recording must complete before the mutation that caused it is
    considered done; recording the same transition twice is harmless.
    """

    @abstractmethod
    def record(self, modified_at: datetime) -> None:
        """Record that an item modified at ``modified_at`` changed visibility."""
        pass

    @abstractmethod
    def version_at(self, modified_at: datetime) -> int:
        """Number of recorded transitions at or before ``modified_at``."""
        pass


class InMemoryTransitionLog(TransitionLog):
    """Process-local transition log."""

    def __init__(self) -> None:
        self._timestamps: list[datetime] = []

    def record(self, modified_at: datetime) -> None:
        if modified_at.tzinfo is None:
            modified_at = modified_at.replace(tzinfo=timezone.utc)
        bisect.insort(self._timestamps, modified_at)

    def version_at(self, modified_at: datetime) -> int:
        if modified_at.tzinfo is None:
            modified_at = modified_at.replace(tzinfo=timezone.utc)
        return bisect.bisect_right(self._timestamps, modified_at)

    def __len__(self) -> int:
        return len(self._timestamps)


class VersionCounterFingerprint(FingerprintDeriver):
    """Token from the boundary item's id and its transition version.

    Any visibility change of an item positioned at or before the boundary
    bumps the version, which shifts the token of every later page.
    """

    def __init__(self, log: TransitionLog) -> None:
        self._log = log

    @property
    def log(self) -> TransitionLog:
        return self._log

    def on_status_change(self, previous: Item, current: Item) -> bool:
        """Record a status change if it crossed the public boundary.

        The transition is recorded at the earlier of the two modification
        times: an unpublish affects pages from the item's old position, a
        publish from its new one, and hosts usually stamp a new time on both.

        Args:
            previous: The item before the change
            current: The item after the change

        Returns:
            True if a transition was recorded
        """
        if previous.visible == current.visible:
            return False
        self._log.record(min(previous.modified_at, current.modified_at))
        return True

    def derive(self, item: Item) -> str:
        return encode_digest(f"{item.id}\n{self._log.version_at(item.modified_at)}")
