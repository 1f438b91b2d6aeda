"""Unit tests for SQLiteContentSource."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import aiosqlite
import pytest

from laakhay.feedhistory.core import Ordering
from laakhay.feedhistory.models import Item
from laakhay.feedhistory.sources import SQLiteContentSource
from laakhay.feedhistory.sources.sqlite import from_db_timestamp, to_db_timestamp


async def seeded_source(path: str, items: list[Item], statuses=None, categories=None):
    source = SQLiteContentSource(path, visible_statuses=("publish", "private"))
    await source.init_tables()
    for item in items:
        status = (statuses or {}).get(item.id, "publish")
        category = (categories or {}).get(item.id)
        await source.save(item, status, category)
    return source


def test_timestamp_round_trip():
    value = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone(timedelta(hours=-5)))
    text = to_db_timestamp(value)
    assert text == "2024-05-06T12:08:09.123456Z"
    assert from_db_timestamp(text) == value


def test_timestamp_text_sorts_chronologically():
    early = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    late = early + timedelta(microseconds=1)
    assert to_db_timestamp(early) < to_db_timestamp(late)


def test_rejects_bad_configuration(tmp_path):
    with pytest.raises(ValueError):
        SQLiteContentSource(str(tmp_path / "x.db"), table="items; DROP TABLE x")
    with pytest.raises(ValueError):
        SQLiteContentSource(str(tmp_path / "x.db"), visible_statuses=())


@pytest.mark.asyncio
async def test_count_uses_visible_statuses(tmp_path, make_items):
    source = await seeded_source(
        str(tmp_path / "feed.db"),
        make_items(6),
        statuses={2: "draft", 4: "private", 5: "trash"},
    )
    assert await source.count_visible() == 4


@pytest.mark.asyncio
async def test_query_ascending_with_tie_break(tmp_path, make_item):
    items = [make_item(1, minutes=50), make_item(3, minutes=5), make_item(2, minutes=5)]
    source = await seeded_source(str(tmp_path / "feed.db"), items)

    result = await source.query_visible(None, Ordering.ASC_MODIFIED, 0, 10)

    assert [item.id for item in result] == [2, 3, 1]
    assert all(item.visible for item in result)
    assert result[2].modified_at == items[0].modified_at
    assert result[2].permalink == items[0].permalink


@pytest.mark.asyncio
async def test_query_single_boundary_row(tmp_path, make_items):
    source = await seeded_source(str(tmp_path / "feed.db"), make_items(25))

    result = await source.query_visible(None, Ordering.ASC_MODIFIED, 24, 1)
    assert [item.id for item in result] == [25]
    assert await source.query_visible(None, Ordering.ASC_MODIFIED, 25, 1) == []


@pytest.mark.asyncio
async def test_filter_by_category(tmp_path, make_items):
    source = await seeded_source(
        str(tmp_path / "feed.db"),
        make_items(5),
        categories={1: "news", 3: "news", 4: "notes"},
    )

    assert await source.count_visible({"category": "news"}) == 2
    result = await source.query_visible({"category": "news"}, Ordering.DEFAULT, 0, 10)
    assert [item.id for item in result] == [3, 1]


@pytest.mark.asyncio
async def test_unknown_filter_column_rejected(tmp_path, make_items):
    source = await seeded_source(str(tmp_path / "feed.db"), make_items(2))
    with pytest.raises(ValueError, match="Unsupported filter column"):
        await source.count_visible({"permalink": "x"})


@pytest.mark.asyncio
async def test_save_updates_and_delete(tmp_path, make_item):
    source = await seeded_source(str(tmp_path / "feed.db"), [make_item(1), make_item(2)])

    edited = make_item(1, minutes=90)
    await source.save(edited, "publish")
    result = await source.query_visible(None, Ordering.ASC_MODIFIED, 1, 1)
    assert result[0].id == 1
    assert result[0].modified_at == edited.modified_at

    await source.delete(2)
    assert await source.count_visible() == 1


class FailingPragmaConnection:
    def __init__(self) -> None:
        self.closed = False

    async def execute(self, sql, *args):
        raise aiosqlite.OperationalError("database is locked")

    async def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_connection_closed_when_setup_fails(tmp_path, monkeypatch):
    conn = FailingPragmaConnection()

    async def fake_connect(path):
        return conn

    monkeypatch.setattr(aiosqlite, "connect", fake_connect)
    source = SQLiteContentSource(str(tmp_path / "feed.db"))

    with pytest.raises(aiosqlite.OperationalError):
        async with source.connect():
            pass
    assert conn.closed
