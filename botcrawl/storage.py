"""JSON persistence for bots, the work queue and listing snapshots."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from botcrawl.models import Bot, Snapshot

logger = logging.getLogger(__name__)

_BOTS = TypeAdapter(dict[str, Bot])
_QUEUE = TypeAdapter(dict[str, str])
_SNAPSHOTS = TypeAdapter(list[Snapshot])


class StorageError(Exception):
    """Raised when a data file exists but does not hold valid data."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")


def snapshot_date(day: date | None = None) -> str:
    """Format *day* (default today) as ``YYYY_M_D`` without zero padding."""
    day = day or date.today()
    return f"{day.year}_{day.month}_{day.day}"


def _read(path: Path, adapter: TypeAdapter[Any], default: Any) -> Any:
    if not path.exists():
        return default
    try:
        return adapter.validate_json(path.read_bytes())
    except ValidationError as e:
        raise StorageError(path, f"{e.error_count()} validation error(s)") from e


def _write(path: Path, adapter: TypeAdapter[Any], data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(adapter.dump_json(data, exclude_none=True))
    logger.info("Wrote %s", path)
    return path


def load_bots(path: Path) -> dict[str, Bot]:
    """Read the master dataset. A missing file is an empty dataset."""
    return _read(path, _BOTS, {})


def save_bots(path: Path, bots: Mapping[str, Bot]) -> Path:
    return _write(path, _BOTS, dict(bots))


def load_queue(path: Path) -> dict[str, str]:
    return _read(path, _QUEUE, {})


def save_queue(path: Path, queue: Mapping[str, str]) -> Path:
    return _write(path, _QUEUE, dict(queue))


def load_snapshots(path: Path) -> list[Snapshot]:
    """Read a dated snapshot file written by :func:`save_snapshots`."""
    if not path.exists():
        raise StorageError(path, "snapshot file not found")
    return _read(path, _SNAPSHOTS, [])


def save_snapshots(directory: Path, snapshots: list[Snapshot], stamp: str | None = None) -> Path:
    """Write one run's snapshots to ``<directory>/<stamp>.json``."""
    stamp = stamp or (snapshots[0].date if snapshots else snapshot_date())
    return _write(directory / f"{stamp}.json", _SNAPSHOTS, snapshots)
