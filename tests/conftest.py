"""Shared HTML pages for the directory site."""

from __future__ import annotations

import pytest

BASE_URL = "https://slack.com"

DIRECTORY_HTML = """\
<html><body>
<div class="titled_list">
  <ul>
    <li><a href="/apps/category/At01-analytics">Analytics</a></li>
    <li><a href="/apps/category/At02-office">Productivity</a></li>
    <li><a href="/apps/category/At01-analytics">Analytics</a></li>
  </ul>
</div>
<div class="titled_list"><p>No links here</p></div>
</body></html>
"""

ANALYTICS_HTML = """\
<html><body>
<ul class="media_list">
  <li><a href="/apps/A01-giphy"><span>Giphy</span><span>Animated GIFs</span></a></li>
  <li><a href="/apps/A02-polly"><span>Polly</span><span>Surveys in <b>seconds</b></span></a></li>
  <li><a href="https://apps.example.com/lone"><span>Lone</span></a></li>
</ul>
</body></html>
"""

OFFICE_HTML = """\
<html><body>
<ul class="media_list">
  <li><a href="/apps/A02-polly"><span>Polly</span><span>Surveys</span></a></li>
  <li><a href="/apps/A03-standup"><span>Standup</span><span>Daily meetings</span></a></li>
</ul>
</body></html>
"""

GIPHY_HTML = """\
<html><body>
<div class="tsf_output"><p>Search and share <strong>GIFs</strong>.</p></div>
<div class="single_install_button"><a href="https://giphy.com/slack">Install</a></div>
<a class="tag" href="/apps/category/At01-analytics"> Analytics </a>
<a class="tag" href="/apps/category/At03-fun">Fun</a>
</body></html>
"""

EMPTY_DETAIL_HTML = "<html><body><p>Coming soon</p></body></html>"

PAGES = {
    f"{BASE_URL}/apps": DIRECTORY_HTML,
    f"{BASE_URL}/apps/category/At01-analytics": ANALYTICS_HTML,
    f"{BASE_URL}/apps/category/At02-office": OFFICE_HTML,
    f"{BASE_URL}/apps/A01-giphy": GIPHY_HTML,
    f"{BASE_URL}/apps/A02-polly": GIPHY_HTML.replace("GIFs", "polls"),
    f"{BASE_URL}/apps/A03-standup": EMPTY_DETAIL_HTML,
    "https://apps.example.com/lone": GIPHY_HTML.replace("GIFs", "things"),
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove BOTCRAWL_* env vars so tests are isolated."""
    for key in (
        "BOTCRAWL_BASE_URL",
        "BOTCRAWL_DATA_DIR",
        "BOTCRAWL_TIMEOUT",
        "BOTCRAWL_QUEUE_MODE",
    ):
        monkeypatch.delenv(key, raising=False)
