#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import datetime, timedelta, timezone

from laakhay.feedhistory import (
    FeedHistory,
    FeedHistorySettings,
    InMemoryContentSource,
    Item,
    LinkRelation,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print RFC5005 feed head markup for a toy feed")
    p.add_argument("url", nargs="?", default="https://example.org/feed/")
    p.add_argument("--items", type=int, default=25, help="Number of published items")
    p.add_argument("--page-size", type=int, default=10)
    p.add_argument("--format", default="rss2", choices=["rss2", "atom", "feed"])
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    source = InMemoryContentSource(
        Item(id=i, permalink=f"https://example.org/?p={i}", modified_at=start + timedelta(hours=i))
        for i in range(1, args.items + 1)
    )
    history = FeedHistory(source, FeedHistorySettings(page_size=args.page_size))

    # Follow prev-archive links back to the oldest page, like a reader would.
    url: str | None = args.url
    while url:
        print(f"== {url}")
        metadata = await history.build(url)
        print(history.emitter.render(metadata, args.format), end="")
        prev = metadata.link(LinkRelation.PREV_ARCHIVE)
        url = prev.target_url if prev else None


if __name__ == "__main__":
    asyncio.run(main())
