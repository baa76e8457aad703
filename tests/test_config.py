"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from botcrawl.config import Config
from botcrawl.models import QueueMode


def test_defaults() -> None:
    config = Config.from_env()
    assert config.base_url == "https://slack.com"
    assert config.queue_mode is QueueMode.RECOMPUTE
    assert config.bots_path == Path(".") / "bots.json"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BOTCRAWL_BASE_URL", "https://example.com/")
    monkeypatch.setenv("BOTCRAWL_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BOTCRAWL_TIMEOUT", "5")
    monkeypatch.setenv("BOTCRAWL_QUEUE_MODE", "authoritative")

    config = Config.from_env()
    assert config.base_url == "https://example.com"
    assert config.queue_path == tmp_path / "queue.json"
    assert config.snapshot_dir == tmp_path / "snapshots"
    assert config.queue_mode is QueueMode.AUTHORITATIVE

    fetch_config = config.fetch_config()
    assert fetch_config.base_url == "https://example.com"
    assert fetch_config.timeout == 5.0


def test_invalid_queue_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOTCRAWL_QUEUE_MODE", "sometimes")
    with pytest.raises(ValueError):
        Config.from_env()
