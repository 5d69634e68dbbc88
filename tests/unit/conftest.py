"""
Fixtures for page object unit tests

Page objects are exercised against a MagicMock standing in for the
Playwright Page. Each selector maps to one persistent mock locator so tests
can configure and inspect it by selector.
"""
from collections import defaultdict
from unittest.mock import MagicMock

import pytest

BASE_URL = "https://shop.test"


@pytest.fixture
def isolated_config(monkeypatch, tmp_path, clean_state):
    """Repo config with artifacts redirected to a temp dir."""
    for name in ("TEST_ENV", "E2E_HEADLESS", "E2E_SLOW_MO", "E2E_DEFAULT_TIMEOUT",
                 "E2E_FIXTURES_DIR", "E2E_CONFIG_DIR", "E2E_RECORD_VIDEO"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("E2E_ARTIFACTS_DIR", str(tmp_path / "artifacts"))
    return tmp_path / "artifacts"


@pytest.fixture
def locators():
    """Selector -> mock locator."""
    return defaultdict(MagicMock)


@pytest.fixture
def mock_page(locators, isolated_config):
    """Mock Playwright Page resolving selectors through `locators`."""
    page = MagicMock()
    page.url = f"{BASE_URL}/inventory.html"
    page.locator.side_effect = lambda selector: locators[selector]
    return page
