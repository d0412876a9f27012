from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'db.file_storage'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def _fresh_settings():
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _fresh_logging(monkeypatch):
    # Handlers bound to a captured stderr must not outlive the test
    import utils.logging_setup as logging_setup
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(logging_setup, "_HANDLER", None)
    yield
    handler = logging_setup._HANDLER
    if handler is not None:
        root.removeHandler(handler)
    root.setLevel(level)
