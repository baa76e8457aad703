"""Concurrent fetch stages: categories, listings and bot details.

Every fan-out goes through :func:`gather_all`: the first failing fetch fails
the whole stage, but requests already in flight are left to finish and their
results are discarded.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Mapping
from typing import TypeVar

from botcrawl.dataset import enrich
from botcrawl.models import Bot, Category, FetchConfig, Snapshot
from botcrawl.pages import DetailParser, DirectoryParser, ListingParser
from botcrawl.storage import snapshot_date

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def gather_all(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Await every item; re-raise the first failure without cancelling the rest."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []

    _, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    failed = next((t for t in tasks if t.done() and t.exception() is not None), None)
    if failed is None:
        return [t.result() for t in tasks]

    if pending:
        await asyncio.wait(pending)
    for task in tasks:
        task.exception()  # mark every failure as retrieved
    raise failed.exception()


async def fetch_categories(config: FetchConfig) -> list[Category]:
    """Discover every category on the directory index."""
    parser = DirectoryParser()
    categories = await parser.fetch(parser.index_url(config), config)
    logger.info("Found %d categories", len(categories))
    return categories


async def fetch_snapshot(category: Category, config: FetchConfig, stamp: str) -> Snapshot:
    results = await ListingParser().fetch(category.url, config)
    logger.info("Listed %d bot(s) in %s", len(results), category.name)
    return Snapshot(date=stamp, category=category, results=results)


async def fetch_listings(
    categories: list[Category],
    config: FetchConfig,
    stamp: str | None = None,
) -> list[Snapshot]:
    """Fetch all category listings concurrently."""
    stamp = stamp or snapshot_date()
    return await gather_all(fetch_snapshot(category, config, stamp) for category in categories)


async def fetch_details_for_bot(bot: Bot, url: str, config: FetchConfig) -> Bot:
    detail = await DetailParser().fetch(url, config)
    logger.info("Processed %s", bot.name)
    return enrich(bot, detail)


async def fetch_details(
    bots: Mapping[str, Bot],
    queue: Mapping[str, str],
    config: FetchConfig,
) -> list[Bot]:
    """Fetch the detail page of every queued bot concurrently.

    The queue URL is the one requested; the rest of the replacement record
    comes from the dataset entry of the same name.  Bots that already have a
    description are skipped, whatever the queue says.
    """
    targets: list[tuple[Bot, str]] = []
    for name, url in queue.items():
        bot = bots.get(name)
        if bot is None:
            logger.warning("Queued bot %r is not in the dataset", name)
            bot = Bot(name=name, url=url)
        elif bot.is_complete:
            logger.info("Skipping %s, already complete", name)
            continue
        targets.append((bot, url))

    return await gather_all(fetch_details_for_bot(bot, url, config) for bot, url in targets)
