"""Configuration management for botcrawl."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from botcrawl.models import FetchConfig, QueueMode


@dataclass(frozen=True)
class Config:
    """Global configuration."""

    base_url: str = "https://slack.com"
    data_dir: str = "."
    http_timeout: float = 30.0
    queue_mode: QueueMode = QueueMode.RECOMPUTE

    @classmethod
    def from_env(cls) -> Config:
        return cls(
            base_url=os.getenv("BOTCRAWL_BASE_URL", cls.base_url).rstrip("/"),
            data_dir=os.getenv("BOTCRAWL_DATA_DIR", cls.data_dir),
            http_timeout=float(os.getenv("BOTCRAWL_TIMEOUT", "30")),
            queue_mode=QueueMode(os.getenv("BOTCRAWL_QUEUE_MODE", cls.queue_mode.value)),
        )

    @property
    def bots_path(self) -> Path:
        return Path(self.data_dir) / "bots.json"

    @property
    def queue_path(self) -> Path:
        return Path(self.data_dir) / "queue.json"

    @property
    def snapshot_dir(self) -> Path:
        return Path(self.data_dir) / "snapshots"

    def fetch_config(self) -> FetchConfig:
        return FetchConfig(base_url=self.base_url, timeout=self.http_timeout)
