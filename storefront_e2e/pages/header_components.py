"""
Header Components

Burger menu, cart icon and social links shared by every authenticated page.
"""
import logging
import re
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from .base_page import BasePage

logger = logging.getLogger(__name__)


class HeaderComponents(BasePage):
    """Header and side menu interactions."""

    # Selectors
    MENU_ITEMS = ".bm-menu"
    CLOSE_MENU_BTN = "#react-burger-cross-btn"
    ALL_ITEMS_LINK = "#inventory_sidebar_link"
    ABOUT_LINK = "#about_sidebar_link"
    LOGOUT_LINK = "#logout_sidebar_link"
    RESET_APP_LINK = "#reset_sidebar_link"

    TWITTER_LINK = '[data-test="social-twitter"]'
    FACEBOOK_LINK = '[data-test="social-facebook"]'
    LINKEDIN_LINK = '[data-test="social-linkedin"]'

    # Menu animation delays (ms)
    MENU_SETTLE_DELAY = 300
    LINK_SETTLE_DELAY = 200
    ABOUT_ANIMATION_DELAY = 800
    EXTERNAL_NAVIGATION_DELAY = 2000
    MENU_WAIT_TIMEOUT = 5000

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def close_menu_button(self) -> Locator:
        return self.locator(self.CLOSE_MENU_BTN)

    @property
    def all_items_link(self) -> Locator:
        return self.locator(self.ALL_ITEMS_LINK)

    @property
    def about_link(self) -> Locator:
        return self.locator(self.ABOUT_LINK)

    @property
    def logout_link(self) -> Locator:
        return self.locator(self.LOGOUT_LINK)

    @property
    def reset_app_link(self) -> Locator:
        return self.locator(self.RESET_APP_LINK)

    # =========================================================================
    # Menu
    # =========================================================================

    def is_menu_open(self) -> bool:
        """The close button only renders visibly while the menu is open."""
        try:
            return self.close_menu_button.is_visible()
        except PlaywrightError:
            return False

    def open_menu(self) -> None:
        if self.is_menu_open():
            return

        self.click(self.menu_button)
        self.close_menu_button.wait_for(state="visible", timeout=self.MENU_WAIT_TIMEOUT)
        self.wait(self.MENU_SETTLE_DELAY)

    def close_menu(self) -> None:
        # The close button can be hidden by CSS, so click it through the DOM
        self.close_menu_button.wait_for(state="attached", timeout=self.MENU_WAIT_TIMEOUT)
        self.close_menu_button.evaluate("node => node.click()")
        self.wait(self.MENU_SETTLE_DELAY)

    def _click_menu_link(self, link: Locator, timeout: Optional[int] = None) -> None:
        if not self.is_menu_open():
            self.open_menu()
        link.wait_for(state="attached", timeout=timeout)
        self.wait(self.LINK_SETTLE_DELAY)
        link.evaluate("node => node.click()")

    def go_to_all_items(self) -> None:
        self._click_menu_link(self.all_items_link)
        self.wait_for_load_state()

    def go_to_about(self) -> None:
        """Follow the About link; it leaves the storefront for an external site."""
        if not self.is_menu_open():
            self.open_menu()
        self.wait(self.ABOUT_ANIMATION_DELAY)
        self._click_menu_link(self.about_link, timeout=self.MENU_WAIT_TIMEOUT)
        self.wait(self.EXTERNAL_NAVIGATION_DELAY)

    def logout(self) -> None:
        self._click_menu_link(self.logout_link)
        self.wait_for_url("**/")
        logger.info("Logged out via side menu")

    def reset_app(self) -> None:
        self._click_menu_link(self.reset_app_link)
        self.wait_for_load_state()

    # =========================================================================
    # Cart
    # =========================================================================

    def go_to_cart(self) -> None:
        self.click(self.cart_icon)
        self.wait_for_url("**/cart.html")

    def is_cart_badge_visible(self) -> bool:
        return self.is_visible(self.cart_badge)

    # =========================================================================
    # Social links
    # =========================================================================

    def go_to_twitter(self) -> None:
        self.click(self.TWITTER_LINK)
        self.wait_for_load_state()

    def go_to_facebook(self) -> None:
        self.click(self.FACEBOOK_LINK)
        self.wait_for_load_state()

    def go_to_linkedin(self) -> None:
        self.click(self.LINKEDIN_LINK)
        self.wait_for_load_state()

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_header_elements_visible(self) -> None:
        expect(self.header_title).to_be_visible()
        expect(self.menu_button).to_be_visible()
        expect(self.cart_icon).to_be_visible()

    def assert_menu_is_open(self) -> None:
        expect(self.close_menu_button).to_be_attached()
        expect(self.all_items_link).to_be_attached()

    def assert_menu_is_closed(self) -> None:
        expect(self.menu_button).to_be_visible()
        expect(self.menu_button).to_be_enabled()

    def assert_logout_successful(self) -> None:
        expect(self.page).to_have_url(re.compile(r".*/$"))
