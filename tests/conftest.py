"""Shared test fixtures."""

from __future__ import annotations

import pytest

from cs50videos.settings import Settings


@pytest.fixture
def settings():
    return Settings(youtube_api_key="test-key", log_dir="unused", proxy_url="", http_timeout=5.0)
