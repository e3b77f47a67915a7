"""Gate and shared settings for tests that talk to a running stock service."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from stockview import Settings, load_settings

NETWORK_FLAG = "RUN_STOCKVIEW_NETWORK_TESTS"
HERE = Path(__file__).resolve().parent


def pytest_collection_modifyitems(config, items):
    if os.environ.get(NETWORK_FLAG) == "1":
        return
    skip = pytest.mark.skip(reason=f"Requires a running stock service. Set {NETWORK_FLAG}=1")
    for item in items:
        if HERE in item.path.resolve().parents:
            item.add_marker(skip)


@pytest.fixture
def live_settings() -> Settings:
    """Settings from STOCKVIEW_* variables, with a short search debounce."""
    return load_settings(search_debounce_seconds=0.05)
