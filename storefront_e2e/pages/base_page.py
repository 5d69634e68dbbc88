"""
Base Page Object

Provides common functionality for all page objects.
"""
import logging
import re
import time
from pathlib import Path
from typing import Any, Optional, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from ..config import get_config
from ..data_loader import TestDataLoader

logger = logging.getLogger(__name__)

Target = Union[str, Locator]


class PageLoadError(RuntimeError):
    """An expected element did not appear within the bounded wait."""

    def __init__(self, message: str, url: str = "", screenshot: Optional[str] = None):
        super().__init__(message)
        self.url = url
        self.screenshot = screenshot


class BasePage:
    """Base class for all page objects."""

    def __init__(self, page: Page, base_url: Optional[str] = None):
        self.page = page
        self.config = get_config()
        if base_url is None:
            self.environment = TestDataLoader.get_environment()
            base_url = self.environment.base_url
        else:
            self.environment = None
        self.base_url = base_url.rstrip("/")

    # =========================================================================
    # Navigation
    # =========================================================================

    def build_url(self, path: str = "") -> str:
        """Join base URL and path with exactly one slash; absolute URLs pass through."""
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    def goto(self, path: str = "") -> None:
        """Navigate to a path relative to base URL."""
        self.page.goto(self.build_url(path))
        self.wait_for_load_state()

    def reload(self) -> None:
        """Reload the current page."""
        self.page.reload()

    def go_back(self) -> None:
        """Go back in browser history."""
        self.page.go_back()

    def current_url(self) -> str:
        """Get current page URL."""
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    def wait_for_url(self, url_pattern: str, timeout: Optional[int] = None) -> None:
        """Wait for URL to match pattern."""
        self.page.wait_for_url(url_pattern, timeout=timeout)

    # =========================================================================
    # Element Interaction
    # =========================================================================

    def _resolve(self, target: Target) -> Locator:
        return self.page.locator(target) if isinstance(target, str) else target

    def click(self, target: Target, timeout: Optional[int] = None) -> None:
        """Click an element."""
        self._resolve(target).click(timeout=timeout)

    def fill(self, target: Target, value: str) -> None:
        """Fill an input field."""
        self._resolve(target).fill(value)

    def clear(self, target: Target) -> None:
        """Clear an input field."""
        self.fill(target, "")

    def hover(self, target: Target) -> None:
        self._resolve(target).hover()

    def scroll_into_view(self, target: Target) -> None:
        self._resolve(target).scroll_into_view_if_needed()

    # =========================================================================
    # Element State
    # =========================================================================

    def is_visible(self, target: Target) -> bool:
        """Check if element is visible."""
        return self._resolve(target).is_visible()

    def is_enabled(self, target: Target) -> bool:
        """Check if element is enabled."""
        return self._resolve(target).is_enabled()

    def is_checked(self, target: Target) -> bool:
        """Check if checkbox is checked."""
        return self._resolve(target).is_checked()

    def get_text(self, target: Target) -> str:
        """Get element text content."""
        return self._resolve(target).text_content() or ""

    def get_value(self, target: Target) -> str:
        """Get input value."""
        return self._resolve(target).input_value()

    def get_attribute(self, target: Target, attribute: str) -> Optional[str]:
        """Get element attribute."""
        return self._resolve(target).get_attribute(attribute)

    def count(self, target: Target) -> int:
        """Count matching elements."""
        return self._resolve(target).count()

    def element_exists(self, target: Target) -> bool:
        return self.count(target) > 0

    # =========================================================================
    # Locators
    # =========================================================================

    def locator(self, selector: str) -> Locator:
        """Get a locator for the selector."""
        return self.page.locator(selector)

    def get_by_test_id(self, test_id: str) -> Locator:
        """Get element by data-test attribute."""
        return self.page.locator(f'[data-test="{test_id}"]')

    # =========================================================================
    # Waiting
    # =========================================================================

    def wait_for_element(
        self, target: Target, timeout: int = 30000, state: str = "visible"
    ) -> None:
        """Wait for element to reach state."""
        self._resolve(target).wait_for(state=state, timeout=timeout)

    def wait_for_element_hidden(self, target: Target, timeout: int = 30000) -> None:
        self.wait_for_element(target, timeout=timeout, state="hidden")

    def wait_for_load_state(self, state: str = "load") -> None:
        """Wait for page load state."""
        self.page.wait_for_load_state(state)

    def wait_for_network_idle(self, timeout: int = 30000) -> None:
        """Wait for network to be idle."""
        self.page.wait_for_load_state("networkidle", timeout=timeout)

    def wait(self, milliseconds: int) -> None:
        """Wait for specified time (use sparingly)."""
        self.page.wait_for_timeout(milliseconds)

    def wait_for_container(
        self,
        target: Target,
        page_name: str,
        screenshot_name: str,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for a page's container element after navigation.

        On timeout, saves a screenshot, logs the current URL and raises
        PageLoadError so the failing test carries the context.
        """
        self.wait_for_load_state()
        timeout = timeout or self.config.container_timeout
        try:
            self.wait_for_element(target, timeout=timeout)
        except PlaywrightError as e:
            logger.warning(f"{page_name} not loaded, taking screenshot for debugging")
            screenshot = self.screenshot(screenshot_name)
            url = self.current_url()
            logger.info(f"Current URL: {url}")
            raise PageLoadError(
                f"{page_name} not loaded properly. URL: {url}", url=url, screenshot=screenshot
            ) from e

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_visible(self, target: Target) -> None:
        """Assert element is visible."""
        expect(self._resolve(target)).to_be_visible()

    def expect_hidden(self, target: Target) -> None:
        """Assert element is hidden."""
        expect(self._resolve(target)).to_be_hidden()

    def expect_text(self, target: Target, text: str) -> None:
        """Assert element contains text."""
        expect(self._resolve(target)).to_contain_text(text)

    def expect_url_contains(self, text: str) -> None:
        """Assert URL contains text."""
        expect(self.page).to_have_url(re.compile(f".*{re.escape(text)}"))

    def expect_title(self, title: str) -> None:
        """Assert page title."""
        expect(self.page).to_have_title(title)

    # =========================================================================
    # Screenshots and Debugging
    # =========================================================================

    def screenshot(self, name: str, full_page: bool = True) -> str:
        """Save a timestamped screenshot under the artifacts dir and return its path."""
        screenshot_dir = Path(self.config.screenshot_dir)
        screenshot_dir.mkdir(parents=True, exist_ok=True)
        path = screenshot_dir / f"{name}-{int(time.time() * 1000)}.png"
        try:
            self.page.screenshot(path=str(path), full_page=full_page)
        except PlaywrightError as e:
            logger.warning(f"Screenshot '{name}' failed: {e}")
            return ""
        logger.info(f"Screenshot saved: {path}")
        return str(path)

    def handle_error(self, error: Exception, context: str) -> None:
        """Log, capture a screenshot and re-raise."""
        logger.error(f"Error in {context}: {error}")
        self.screenshot(f"error-{context}")
        raise error

    # =========================================================================
    # Common UI Elements
    # =========================================================================

    HEADER_TITLE = ".app_logo"
    MENU_BUTTON = "#react-burger-menu-btn"
    CART_ICON = ".shopping_cart_link"
    CART_BADGE = ".shopping_cart_badge"

    @property
    def header_title(self) -> Locator:
        return self.locator(self.HEADER_TITLE)

    @property
    def menu_button(self) -> Locator:
        return self.locator(self.MENU_BUTTON)

    @property
    def cart_icon(self) -> Locator:
        return self.locator(self.CART_ICON)

    @property
    def cart_badge(self) -> Locator:
        return self.locator(self.CART_BADGE)

    def get_cart_badge_count(self) -> int:
        """Number shown on the cart badge, 0 when the badge is absent."""
        if not self.cart_badge.is_visible():
            return 0
        text = self.cart_badge.text_content() or ""
        try:
            return int(text.strip())
        except ValueError:
            return 0

    def assert_cart_badge_count(self, expected_count: int) -> None:
        """Assert badge count; 0 means the badge is hidden."""
        if expected_count == 0:
            expect(self.cart_badge).to_be_hidden()
            return
        expect(self.cart_badge).to_be_visible()
        actual = self.get_cart_badge_count()
        assert actual == expected_count, f"Expected cart count {expected_count}, but got {actual}"

    # =========================================================================
    # Environment
    # =========================================================================

    def current_environment(self) -> str:
        return self.config.test_env

    def environment_setting(self, key: str) -> Any:
        if self.environment is None:
            return None
        return getattr(self.environment, key, None)
