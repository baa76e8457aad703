"""CLI entry point for botcrawl."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Coroutine
from dataclasses import replace
from pathlib import Path
from typing import Any, NoReturn, TypeVar

import click
import httpx

from botcrawl.config import Config
from botcrawl.dataset import MergeResult, apply_details, merge_snapshots, refresh_queue
from botcrawl.models import Bot, QueueMode, Snapshot
from botcrawl.storage import (
    StorageError,
    load_bots,
    load_queue,
    load_snapshots,
    save_bots,
    save_queue,
    save_snapshots,
    snapshot_date,
)
from botcrawl.utils.http import FetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _fail(message: str, exc: Exception) -> NoReturn:
    logger.error("%s: %s", message, exc)
    click.echo(f"✗ {message}: {exc}", err=True)
    sys.exit(1)


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run one fetch stage; any fetch failure ends the run."""
    try:
        return asyncio.run(coro)
    except (httpx.HTTPError, FetchError) as e:
        _fail("Fetch failed", e)


def _load_bots(config: Config) -> dict[str, Bot]:
    try:
        return load_bots(config.bots_path)
    except StorageError as e:
        _fail("Cannot read bots", e)


def _load_queue(config: Config) -> dict[str, str]:
    if config.queue_mode is QueueMode.RECOMPUTE:
        return {}
    try:
        return load_queue(config.queue_path)
    except StorageError as e:
        _fail("Cannot read queue", e)


async def _collect_snapshots(config: Config, stamp: str) -> list[Snapshot]:
    from botcrawl.crawler import fetch_categories, fetch_listings

    fetch_config = config.fetch_config()
    categories = await fetch_categories(fetch_config)
    click.echo(f"  Found {len(categories)} categories")
    return await fetch_listings(categories, fetch_config, stamp)


def _update_bots(config: Config, snapshots: list[Snapshot]) -> MergeResult:
    result = merge_snapshots(_load_bots(config), snapshots)
    if result.changed:
        save_bots(config.bots_path, result.bots)
        click.echo(f"  ✓ {len(result.added)} new bot(s) → {config.bots_path}")
    else:
        click.echo("  No new bots")
    return result


def _rebuild_queue(config: Config, bots: dict[str, Bot]) -> dict[str, str]:
    queue = refresh_queue(bots, _load_queue(config), config.queue_mode)
    save_queue(config.queue_path, queue)
    click.echo(f"  ✓ {len(queue)} bot(s) queued → {config.queue_path}")
    return queue


def _update_details(config: Config, bots: dict[str, Bot], queue: dict[str, str]) -> dict[str, Bot]:
    from botcrawl.crawler import fetch_details

    if not queue:
        click.echo("  Queue is empty, nothing to fetch")
        return bots

    click.echo(f"  Fetching details for {len(queue)} bot(s)...")
    updates = _run(fetch_details(bots, queue, config.fetch_config()))
    bots = apply_details(bots, updates)
    save_bots(config.bots_path, bots)
    click.echo(f"  ✓ {len(updates)} bot(s) updated → {config.bots_path}")
    return bots


@click.group()
@click.option("--data-dir", "-d", default=None, help="Directory holding bots.json, queue.json and snapshots/")
@click.option("--base-url", default=None, help="Directory site base URL (default https://slack.com)")
@click.option("--timeout", type=float, default=None, help="HTTP timeout in seconds")
@click.option(
    "--queue-mode",
    type=click.Choice([m.value for m in QueueMode]),
    default=None,
    help="recompute: ignore queue.json when rebuilding; authoritative: keep its pending entries",
)
@click.option("--verbose", "-v", count=True, help="Log progress (-vv for debug)")
@click.pass_context
def main(
    ctx: click.Context,
    data_dir: str | None,
    base_url: str | None,
    timeout: float | None,
    queue_mode: str | None,
    verbose: int,
) -> None:
    """botcrawl — app directory bot crawler."""
    _configure_logging(verbose)
    config = Config.from_env()

    overrides: dict[str, object] = {}
    if data_dir:
        overrides["data_dir"] = data_dir
    if base_url:
        overrides["base_url"] = base_url.rstrip("/")
    if timeout is not None:
        overrides["http_timeout"] = timeout
    if queue_mode:
        overrides["queue_mode"] = QueueMode(queue_mode)
    if overrides:
        config = replace(config, **overrides)

    ctx.obj = config


@main.command()
@click.option("--details/--no-details", default=True, help="Fetch detail pages for queued bots")
@click.pass_obj
def crawl(config: Config, details: bool) -> None:
    """Run one full crawl pass."""
    click.echo(f"botcrawl — crawling {config.base_url}/apps\n")
    stamp = snapshot_date()
    snapshots = _run(_collect_snapshots(config, stamp))
    path = save_snapshots(config.snapshot_dir, snapshots, stamp)
    click.echo(f"  ✓ Snapshot → {path}")

    bots = _update_bots(config, snapshots).bots
    queue = _rebuild_queue(config, bots)
    if details:
        bots = _update_details(config, bots, queue)
        _rebuild_queue(config, bots)


@main.command()
@click.pass_obj
def snapshot(config: Config) -> None:
    """Fetch all category listings and write a dated snapshot."""
    stamp = snapshot_date()
    snapshots = _run(_collect_snapshots(config, stamp))
    path = save_snapshots(config.snapshot_dir, snapshots, stamp)
    click.echo(f"  ✓ {sum(len(s.results) for s in snapshots)} listing(s) → {path}")


@main.command()
@click.argument("snapshot_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def update(config: Config, snapshot_path: Path) -> None:
    """Merge new bots from SNAPSHOT_PATH into bots.json."""
    try:
        snapshots = load_snapshots(snapshot_path)
    except StorageError as e:
        _fail("Cannot read snapshot", e)
    _update_bots(config, snapshots)


@main.command()
@click.pass_obj
def queue(config: Config) -> None:
    """Rebuild queue.json from bots lacking a description."""
    _rebuild_queue(config, _load_bots(config))


@main.command()
@click.pass_obj
def details(config: Config) -> None:
    """Fetch detail pages for every queued bot."""
    bots = _load_bots(config)
    try:
        pending = load_queue(config.queue_path)
    except StorageError as e:
        _fail("Cannot read queue", e)
    bots = _update_details(config, bots, pending)
    _rebuild_queue(config, bots)


if __name__ == "__main__":
    main()
