"""Core components."""

from .base import ContentSource, ItemFilter
from .enums import (
    ATOM_NAMESPACE,
    HISTORY_NAMESPACE,
    Classification,
    FeedFormat,
    LinkRelation,
    Ordering,
)
from .exceptions import (
    BoundaryNotFound,
    FeedHistoryError,
    InvalidConfiguration,
    UnsupportedFormat,
)

__all__ = [
    "ContentSource",
    "ItemFilter",
    "Classification",
    "FeedFormat",
    "LinkRelation",
    "Ordering",
    "HISTORY_NAMESPACE",
    "ATOM_NAMESPACE",
    "FeedHistoryError",
    "InvalidConfiguration",
    "BoundaryNotFound",
    "UnsupportedFormat",
]
