"""High-level API."""

from .feed_history import FeedHistory

__all__ = ["FeedHistory"]
