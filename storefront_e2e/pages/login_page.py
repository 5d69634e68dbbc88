"""
Login Page Object

Encapsulates login page interactions.
"""
import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from ..data_loader import TestDataLoader
from .base_page import BasePage, PageLoadError

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """Page object for the login page."""

    # Selectors
    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_CONTAINER = '[data-test="error"]'
    ERROR_BUTTON = '[data-test="error"] .error-button'

    INVENTORY_URL = "**/inventory.html"

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def username_input(self) -> Locator:
        return self.locator(self.USERNAME_INPUT)

    @property
    def password_input(self) -> Locator:
        return self.locator(self.PASSWORD_INPUT)

    @property
    def login_button(self) -> Locator:
        return self.locator(self.LOGIN_BUTTON)

    @property
    def error_container(self) -> Locator:
        return self.locator(self.ERROR_CONTAINER)

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "/") -> None:
        """Navigate to login page and wait for the login button."""
        super().goto(path)
        try:
            self.login_button.wait_for(state="visible", timeout=self.config.container_timeout)
        except PlaywrightError as e:
            logger.warning("Login button not visible, taking screenshot for debugging")
            screenshot = self.screenshot("login-button-not-visible")
            url = self.current_url()
            title = self.title()
            logger.info(f"Current URL: {url}")
            logger.info(f"Page Title: {title}")
            raise PageLoadError(
                f"Login button not visible on page. URL: {url}, Title: {title}",
                url=url,
                screenshot=screenshot,
            ) from e

    def wait_for_page_load(self) -> None:
        self.wait_for_load_state()
        self.wait_for_element(self.login_button, timeout=self.config.container_timeout)

    def refresh_page(self) -> None:
        self.page.reload()
        self.wait_for_page_load()

    def go_back_to_login(self) -> None:
        """Use the browser back button and verify the login form is showing."""
        self.page.go_back()
        self.wait_for_network_idle()

        url = self.current_url()
        if "/inventory" in url:
            raise AssertionError(f"Expected to be on login page, but current URL is: {url}")

        try:
            self.login_button.wait_for(state="visible", timeout=10000)
        except PlaywrightError:
            logger.warning("Login button not visible after going back, taking screenshot")
            self.screenshot("back-button-login-issue")
            raise

    # =========================================================================
    # Login Actions
    # =========================================================================

    def login(
        self, username: Optional[str], password: Optional[str], wait_for_redirect: bool = True
    ) -> None:
        """Complete login flow, optionally waiting for the inventory redirect."""
        try:
            self.username_input.fill(username or "")
            self.password_input.fill(password or "")
            self.login_button.click()

            if wait_for_redirect:
                self.wait_for_url(self.INVENTORY_URL)
        except PlaywrightError as e:
            self.handle_error(e, "login")

    def login_with_user_type(self, user_type: str, wait_for_redirect: bool = True) -> None:
        """Login with credentials looked up from users.json."""
        credentials = TestDataLoader.get_user_credentials(user_type)
        self.login(credentials.username, credentials.password, wait_for_redirect)

    def login_as_standard_user(self, wait_for_redirect: bool = True) -> None:
        self.login_with_user_type("standard", wait_for_redirect)

    def clear_fields(self) -> None:
        self.username_input.clear()
        self.password_input.clear()

    def fill_username(self, username: str) -> None:
        self.fill(self.username_input, username)

    def fill_password(self, password: str) -> None:
        self.fill(self.password_input, password)

    def click_login_button(self) -> None:
        self.click(self.login_button)

    # =========================================================================
    # Errors
    # =========================================================================

    def get_error_text(self) -> str:
        self.wait_for_element(self.error_container, timeout=5000)
        return self.get_text(self.error_container)

    def is_error_visible(self) -> bool:
        return self.is_visible(self.error_container)

    def close_error_message(self) -> None:
        if self.is_error_visible():
            self.click(self.ERROR_BUTTON)

    def wait_for_error_message(self, timeout: int = 5000) -> None:
        self.wait_for_element(self.error_container, timeout=timeout)

    # =========================================================================
    # State
    # =========================================================================

    def is_login_button_enabled(self) -> bool:
        return self.is_enabled(self.login_button)

    def get_username_value(self) -> str:
        return self.get_value(self.username_input)

    def get_password_value(self) -> str:
        return self.get_value(self.password_input)

    def is_username_empty(self) -> bool:
        return self.get_username_value() == ""

    def is_password_empty(self) -> bool:
        return self.get_password_value() == ""

    def are_fields_empty(self) -> bool:
        return self.is_username_empty() and self.is_password_empty()

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_login_form_visible(self) -> None:
        """Assert login form is visible."""
        self.expect_visible(self.username_input)
        self.expect_visible(self.password_input)
        self.expect_visible(self.login_button)

    def assert_error_message(self, expected_text: str) -> None:
        """Assert the error banner contains text."""
        error_text = self.get_error_text()
        assert expected_text in error_text, (
            f'Expected error message to contain "{expected_text}", but got "{error_text}"'
        )

    def assert_successful_login(self) -> None:
        self.wait_for_url(self.INVENTORY_URL)
        self.expect_url_contains("inventory")

    def assert_login_failed(self) -> None:
        """Assert the error banner shows and we did not leave the login page."""
        self.wait_for_error_message()
        assert "/inventory" not in self.current_url(), (
            f"Expected to stay on login page, but current URL is: {self.current_url()}"
        )

    def assert_login_button_enabled(self) -> None:
        assert self.is_login_button_enabled(), "Login button should be enabled"

    def assert_login_button_disabled(self) -> None:
        assert not self.is_login_button_enabled(), "Login button should be disabled"

    def assert_on_login_page(self) -> None:
        expect(self.login_button).to_be_visible()
