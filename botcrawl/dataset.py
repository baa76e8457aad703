"""Dataset merger and queue builder.

The bot dataset is a plain ``dict`` mapping bot name to :class:`Bot`.  Every
function here returns a new mapping and leaves its inputs untouched, so a
stage can be re-run or discarded without affecting the data it was given.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from botcrawl.models import Bot, DetailPage, ListingEntry, QueueMode, Snapshot

logger = logging.getLogger(__name__)

BotMap = dict[str, Bot]
Queue = dict[str, str]


@dataclass(frozen=True)
class MergeResult:
    """Outcome of merging listing snapshots into the dataset."""

    bots: BotMap
    added: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.added)


def skeleton_from_listing(entry: ListingEntry) -> Bot:
    """Build the skeletal record for a bot first seen on a listing."""
    return Bot(name=entry.name, url=entry.url, tagline=entry.tagline)


def find_name_collisions(snapshots: Iterable[Snapshot]) -> dict[str, list[str]]:
    """Return names listed with more than one distinct URL."""
    seen: dict[str, list[str]] = {}
    for snapshot in snapshots:
        for entry in snapshot.results:
            urls = seen.setdefault(entry.name, [])
            if entry.url not in urls:
                urls.append(entry.url)
    return {name: urls for name, urls in seen.items() if len(urls) > 1}


def merge_snapshots(bots: Mapping[str, Bot], snapshots: Iterable[Snapshot]) -> MergeResult:
    """Add every bot not yet known by name; existing records are left alone."""
    snapshots = list(snapshots)
    for name, urls in find_name_collisions(snapshots).items():
        logger.warning("Bot name %r listed with %d URLs, keeping %s", name, len(urls), urls[0])

    merged: BotMap = dict(bots)
    added: list[str] = []
    for snapshot in snapshots:
        for entry in snapshot.results:
            if entry.name in merged:
                continue
            merged[entry.name] = skeleton_from_listing(entry)
            added.append(entry.name)

    if added:
        logger.info("Merged %d new bot(s)", len(added))
    return MergeResult(bots=merged, added=added)


def enrich(bot: Bot, detail: DetailPage) -> Bot:
    """Build the replacement record for *bot* from its detail page.

    A description, once filled, is never cleared by a page that lacks one.
    """
    return Bot(
        name=bot.name,
        url=bot.url,
        tagline=bot.tagline,
        rank=bot.rank,
        description=detail.description or bot.description,
        site=detail.site or "",
        categories=list(detail.tags),
    )


def apply_details(bots: Mapping[str, Bot], updates: Iterable[Bot]) -> BotMap:
    """Replace each updated record wholesale; fields are not merged."""
    merged: BotMap = dict(bots)
    for update in updates:
        merged[update.name] = update
    return merged


def build_queue(bots: Mapping[str, Bot], queue: Mapping[str, str]) -> Queue:
    """Return incomplete bots that are not already in *queue*."""
    return {
        name: bot.url
        for name, bot in bots.items()
        if not bot.is_complete and name not in queue
    }


def refresh_queue(
    bots: Mapping[str, Bot],
    on_disk: Mapping[str, str],
    mode: QueueMode = QueueMode.RECOMPUTE,
) -> Queue:
    """Rebuild the work queue according to *mode*."""
    if mode is QueueMode.RECOMPUTE:
        return build_queue(bots, {})

    # Authoritative: pending entries survive until their bot is complete.
    kept: Queue = {
        name: url
        for name, url in on_disk.items()
        if name not in bots or not bots[name].is_complete
    }
    dropped = len(on_disk) - len(kept)
    if dropped:
        logger.info("Dropped %d completed bot(s) from queue", dropped)
    return {**kept, **build_queue(bots, on_disk)}
