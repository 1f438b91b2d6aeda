"""SQLite-backed content source.

Items live in a single table; visibility is resolved in SQL from a
configurable set of public status labels, so the paging core only ever
sees visible items. Boundary lookups are answered with one indexed
``ORDER BY modified_at, id LIMIT 1 OFFSET n`` query.
"""

from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator, Iterable, Sequence
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import aiosqlite

from ..core.base import ContentSource, ItemFilter
from ..core.enums import Ordering
from ..models import Item

logger = logging.getLogger(__name__)

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def to_db_timestamp(value: datetime) -> str:
    """Fixed-width UTC text, so lexical order equals chronological order."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(_TIMESTAMP_FORMAT)


def from_db_timestamp(value: str) -> datetime:
    return datetime.strptime(value, _TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


class SQLiteContentSource(ContentSource):
    """Content source over an SQLite table of items."""

    def __init__(
        self,
        path: str,
        *,
        table: str = "items",
        visible_statuses: Iterable[str] = ("publish",),
        filter_columns: Iterable[str] = ("category",),
    ) -> None:
        super().__init__("sqlite")
        if not _IDENTIFIER.match(table):
            raise ValueError(f"Invalid table name: {table!r}")
        self.path = path
        self.table = table
        self.visible_statuses = tuple(visible_statuses)
        if not self.visible_statuses:
            raise ValueError("visible_statuses must not be empty")
        self.filter_columns = frozenset(filter_columns)

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[aiosqlite.Connection]:
        conn = await aiosqlite.connect(self.path)
        try:
            await conn.execute("PRAGMA journal_mode=WAL;")
            yield conn
        finally:
            await conn.close()

    async def init_tables(self) -> None:
        """Create the items table and its ordering index."""
        async with self.connect() as conn:
            await conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {self.table} (
                    id INTEGER PRIMARY KEY,
                    permalink TEXT NOT NULL,
                    modified_at TEXT NOT NULL,
                    status TEXT NOT NULL,
                    category TEXT
                )
            """)
            await conn.execute(f"""
                CREATE INDEX IF NOT EXISTS idx_{self.table}_modified
                ON {self.table}(status, modified_at, id)
            """)
            await conn.commit()
            logger.info("Content tables initialized", extra={"table": self.table})

    async def save(self, item: Item, status: str, category: str | None = None) -> None:
        """Insert or replace an item row."""
        async with self.connect() as conn:
            await conn.execute(
                f"""
                INSERT INTO {self.table} (id, permalink, modified_at, status, category)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    permalink = excluded.permalink,
                    modified_at = excluded.modified_at,
                    status = excluded.status,
                    category = excluded.category
                """,
                (item.id, item.permalink, to_db_timestamp(item.modified_at), status, category),
            )
            await conn.commit()

    async def delete(self, item_id: int) -> None:
        async with self.connect() as conn:
            await conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (item_id,))
            await conn.commit()

    def _where(self, item_filter: ItemFilter | None) -> tuple[str, list[object]]:
        placeholders = ", ".join("?" for _ in self.visible_statuses)
        clauses = [f"status IN ({placeholders})"]
        args: list[object] = list(self.visible_statuses)
        for column, value in (item_filter or {}).items():
            if column not in self.filter_columns:
                raise ValueError(f"Unsupported filter column: {column!r}")
            clauses.append(f"{column} = ?")
            args.append(value)
        return " AND ".join(clauses), args

    async def count_visible(self, item_filter: ItemFilter | None = None) -> int:
        where, args = self._where(item_filter)
        async with self.connect() as conn:
            cursor = await conn.execute(f"SELECT COUNT(*) FROM {self.table} WHERE {where}", args)
            row = await cursor.fetchone()
        return int(row[0]) if row else 0

    async def query_visible(
        self,
        item_filter: ItemFilter | None,
        ordering: Ordering,
        offset: int,
        limit: int,
    ) -> Sequence[Item]:
        where, args = self._where(item_filter)
        if ordering == Ordering.ASC_MODIFIED:
            order_by = "modified_at ASC, id ASC"
        else:
            order_by = "id DESC"
        async with self.connect() as conn:
            cursor = await conn.execute(
                f"SELECT id, permalink, modified_at FROM {self.table} "
                f"WHERE {where} ORDER BY {order_by} LIMIT ? OFFSET ?",
                [*args, limit, offset],
            )
            rows = await cursor.fetchall()
        return [
            Item(id=row[0], permalink=row[1], modified_at=from_db_timestamp(row[2]), visible=True)
            for row in rows
        ]
