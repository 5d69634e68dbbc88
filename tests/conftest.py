"""
Pytest fixtures shared by the unit and E2E suites
"""
import importlib.util

import pytest

from storefront_e2e.config import reset_config
from storefront_e2e.data_loader import TestDataLoader


def _playwright_available() -> bool:
    return importlib.util.find_spec("playwright.sync_api") is not None


def pytest_collection_modifyitems(config, items):
    """Skip e2e tests if playwright is not installed."""
    if _playwright_available():
        return

    skip_e2e = pytest.mark.skip(reason="Playwright not installed")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture
def clean_state():
    """Drop cached config and fixture data before and after a test."""
    reset_config()
    TestDataLoader.clear_cache()
    yield
    reset_config()
    TestDataLoader.clear_cache()
