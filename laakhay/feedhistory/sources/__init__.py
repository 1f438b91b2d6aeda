"""Content source adapters."""

from .in_memory import InMemoryContentSource
from .sqlite import SQLiteContentSource

__all__ = ["InMemoryContentSource", "SQLiteContentSource"]
