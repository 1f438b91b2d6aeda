"""In-memory content source."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import Any

from ..core.base import ContentSource, ItemFilter
from ..core.enums import Ordering
from ..models import Item


class InMemoryContentSource(ContentSource):
    """Content source over a process-local item collection.

    Filters match extra attributes stored with each item (e.g.
    ``category``), falling back to the item's own fields.
    """

    def __init__(self, items: Iterable[Item] = (), *, name: str = "memory") -> None:
        super().__init__(name)
        self._items: dict[int, Item] = {}
        self._attributes: dict[int, dict[str, Any]] = {}
        for item in items:
            self.add(item)

    @property
    def items(self) -> list[Item]:
        return list(self._items.values())

    def add(self, item: Item, **attributes: Any) -> Item:
        self._items[item.id] = item
        self._attributes[item.id] = attributes
        return item

    def get(self, item_id: int) -> Item:
        return self._items[item_id]

    def update(
        self,
        item_id: int,
        *,
        modified_at: datetime | None = None,
        visible: bool | None = None,
        permalink: str | None = None,
    ) -> Item:
        """Replace an item, stamping a new modification time like an edit would."""
        changes: dict[str, Any] = {"modified_at": modified_at or datetime.now(timezone.utc)}
        if visible is not None:
            changes["visible"] = visible
        if permalink is not None:
            changes["permalink"] = permalink
        # Re-validate so modification times stay normalized to UTC.
        item = Item.model_validate({**self._items[item_id].model_dump(), **changes})
        self._items[item_id] = item
        return item

    def remove(self, item_id: int) -> Item:
        self._attributes.pop(item_id, None)
        return self._items.pop(item_id)

    def _matches(self, item: Item, item_filter: ItemFilter | None) -> bool:
        if not item.visible:
            return False
        if not item_filter:
            return True
        attributes = self._attributes.get(item.id, {})
        for key, expected in item_filter.items():
            actual = attributes[key] if key in attributes else getattr(item, key, None)
            if actual != expected:
                return False
        return True

    def _visible(self, item_filter: ItemFilter | None) -> list[Item]:
        return [item for item in self._items.values() if self._matches(item, item_filter)]

    async def count_visible(self, item_filter: ItemFilter | None = None) -> int:
        return len(self._visible(item_filter))

    async def query_visible(
        self,
        item_filter: ItemFilter | None,
        ordering: Ordering,
        offset: int,
        limit: int,
    ) -> Sequence[Item]:
        items = self._visible(item_filter)
        if ordering == Ordering.ASC_MODIFIED:
            items.sort(key=lambda item: item.sort_key)
        else:
            # Host default: newest first by id.
            items.sort(key=lambda item: item.id, reverse=True)
        return items[offset : offset + limit]
