"""Data models for feed history metadata.

Architecture:
    This module exports the Pydantic v2 models exchanged between the
    content source, the paging algorithm and the rendering layer. All
    models are immutable (frozen=True); a render computes them fresh and
    nothing is persisted.

Model Categories:
    - Input: Item, QueryContext
    - Output: ArchiveLink, ArchiveMetadata
"""

from .item import Item
from .links import ArchiveLink, ArchiveMetadata
from .query import QueryContext

__all__ = [
    "ArchiveLink",
    "ArchiveMetadata",
    "Item",
    "QueryContext",
]
