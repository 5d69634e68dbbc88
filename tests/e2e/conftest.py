"""
Playwright E2E Test Configuration and Fixtures

This module provides shared fixtures, configuration, and hooks for the
storefront browser tests. Browser, context and page come from
pytest-playwright; this module layers the saved login session, run
settings and page objects on top.
"""
import logging
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# Skip entire module if playwright not installed
pytest.importorskip("playwright")

from playwright.sync_api import Browser, BrowserContext, Page, expect

from storefront_e2e.config import E2EConfig, get_config
from storefront_e2e.data_loader import TestDataError, TestDataLoader, UserCredentials
from storefront_e2e.global_setup import save_auth_state
from storefront_e2e.pages import InventoryPage, PageManager

logger = logging.getLogger(__name__)

E2E_DIR = Path(__file__).resolve().parent


def _suite_for(item: pytest.Item) -> str:
    """Name of the config suite governing a test."""
    if item.get_closest_marker("fresh_session"):
        return "login"
    if E2E_DIR / "smoke" in Path(item.path).parents:
        return "smoke"
    return "authenticated"


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def e2e_config() -> E2EConfig:
    """Resolved run settings (YAML, .env and E2E_* overrides)."""
    return get_config()


@pytest.fixture(scope="session")
def base_url(pytestconfig: pytest.Config) -> str:
    """Storefront URL from --base-url, or the TEST_ENV entry in environments.json."""
    url = pytestconfig.getoption("base_url", default=None)
    if not url:
        url = TestDataLoader.get_environment().base_url
    return url.rstrip("/")


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def credentials_for() -> Callable[[str], UserCredentials]:
    """Look up credentials by user type, skipping the test when unset."""

    def _credentials(user_type: str) -> UserCredentials:
        try:
            return TestDataLoader.get_user_credentials(user_type).require()
        except TestDataError as e:
            pytest.skip(str(e))

    return _credentials


@pytest.fixture(scope="session")
def standard_user(credentials_for: Callable[[str], UserCredentials]) -> UserCredentials:
    """Standard user credentials; skips when they are not configured."""
    return credentials_for("standard")


@pytest.fixture(scope="session")
def auth_state_path(
    browser: Browser, base_url: str, standard_user: UserCredentials, e2e_config: E2EConfig
) -> Path:
    """
    Log in once per session and save the storage state.

    Every authenticated test context loads this file instead of going
    through the login form again.
    """
    return save_auth_state(browser, base_url, standard_user, e2e_config.auth_state_path)


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: Dict[str, Any], e2e_config: E2EConfig
) -> Dict[str, Any]:
    """Browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": e2e_config.headless,
        "slow_mo": e2e_config.slow_mo,
    }


@pytest.fixture
def browser_context_args(
    browser_context_args: Dict[str, Any], request: pytest.FixtureRequest, e2e_config: E2EConfig
) -> Dict[str, Any]:
    """Browser context arguments, with the saved session unless the suite opts out."""
    args = {
        **browser_context_args,
        "viewport": e2e_config.viewport,
    }

    if e2e_config.record_video:
        videos_dir = e2e_config.artifacts_dir / "videos"
        videos_dir.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(videos_dir)

    if e2e_config.suite(_suite_for(request.node)).get("authenticated", False):
        args["storage_state"] = str(request.getfixturevalue("auth_state_path"))

    return args


@pytest.fixture
def context(new_context, e2e_config: E2EConfig) -> BrowserContext:
    """Create a new browser context for each test."""
    context = new_context()
    context.set_default_timeout(e2e_config.default_timeout)
    context.set_default_navigation_timeout(e2e_config.navigation_timeout)
    return context


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def po(page: Page, base_url: str) -> PageManager:
    """Page objects bound to this test's page."""
    return PageManager(page, base_url)


@pytest.fixture
def inventory_page(po: PageManager) -> InventoryPage:
    """Inventory page, already opened with the saved session."""
    po.inventory_page.goto()
    return po.inventory_page


@pytest.fixture(autouse=True)
def log_url_on_failure(request: pytest.FixtureRequest):
    """Log where the page was when a browser test failed."""
    yield

    report = getattr(request.node, "rep_call", None)
    if report is None or not report.failed or "page" not in request.fixturenames:
        return
    page = request.getfixturevalue("page")
    logger.warning(f"{request.node.nodeid} failed at URL: {page.url}")


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def pytest_configure(config):
    """Apply the configured assertion timeout to Playwright's expect."""
    expect.set_options(timeout=get_config().expect_timeout)


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location and suite."""
    e2e_config = get_config()

    for item in items:
        path = Path(item.path)
        if E2E_DIR not in path.parents:
            continue

        item.add_marker(pytest.mark.e2e)
        if E2E_DIR / "smoke" in path.parents:
            item.add_marker(pytest.mark.smoke)
        if E2E_DIR / "regression" in path.parents:
            item.add_marker(pytest.mark.regression)

        # Add slow marker to performance tests
        if "performance" in item.nodeid.lower():
            item.add_marker(pytest.mark.slow)

        if not item.get_closest_marker("timeout"):
            test_timeout = e2e_config.suite(_suite_for(item)).get("test_timeout")
            if test_timeout:
                item.add_marker(pytest.mark.timeout(test_timeout / 1000))
