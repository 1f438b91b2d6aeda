"""Shared fixtures for feed history unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from laakhay.feedhistory.models import Item
from laakhay.feedhistory.sources import InMemoryContentSource

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _make_item(item_id: int, minutes: int | None = None, visible: bool = True) -> Item:
    return Item(
        id=item_id,
        permalink=f"https://example.org/?p={item_id}",
        modified_at=BASE_TIME + timedelta(minutes=item_id if minutes is None else minutes),
        visible=visible,
    )


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def make_item() -> Callable[..., Item]:
    """Item factory; modification time is ``minutes`` (default: the id) after BASE_TIME."""
    return _make_item


@pytest.fixture
def make_items() -> Callable[[int], list[Item]]:
    return lambda count: [_make_item(i) for i in range(1, count + 1)]


@pytest.fixture
def items_25() -> list[Item]:
    return [_make_item(i) for i in range(1, 26)]


@pytest.fixture
def source_25(items_25: list[Item]) -> InMemoryContentSource:
    return InMemoryContentSource(items_25)
