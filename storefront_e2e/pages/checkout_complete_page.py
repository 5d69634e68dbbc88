"""
Checkout Complete Page Object
"""
from typing import Optional

from playwright.sync_api import Locator, Page, expect

from .base_page import BasePage


class CheckoutCompletePage(BasePage):
    """Page object for the order confirmation screen."""

    PATH = "/checkout-complete.html"

    # Selectors
    COMPLETE_CONTAINER = ".checkout_complete_container"
    COMPLETE_HEADER = ".complete-header"
    COMPLETE_TEXT = ".complete-text"
    PONY_EXPRESS_IMAGE = ".pony_express"
    BACK_HOME_BTN = '[data-test="back-to-products"]'

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def complete_container(self) -> Locator:
        return self.locator(self.COMPLETE_CONTAINER)

    @property
    def complete_header(self) -> Locator:
        return self.locator(self.COMPLETE_HEADER)

    @property
    def complete_text(self) -> Locator:
        return self.locator(self.COMPLETE_TEXT)

    @property
    def back_home_button(self) -> Locator:
        return self.locator(self.BACK_HOME_BTN)

    def goto(self, path: str = PATH) -> None:
        super().goto(path)
        self.wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.wait_for_container(
            self.complete_container, "Checkout complete page", "checkout-complete-not-found"
        )

    def back_to_products(self) -> None:
        self.click(self.back_home_button)
        self.wait_for_load_state()

    def get_complete_header(self) -> str:
        return self.get_text(self.complete_header)

    def get_complete_text(self) -> str:
        return self.get_text(self.complete_text)

    def is_cart_badge_visible(self) -> bool:
        return self.is_visible(self.cart_badge)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_page_loaded(self) -> None:
        expect(self.complete_container).to_be_visible()
        self.expect_url_contains("checkout-complete")

    def assert_success_message(self, expected_text: str) -> None:
        expect(self.complete_header).to_have_text(expected_text)

    def assert_complete_text_displayed(self) -> None:
        expect(self.complete_text).to_be_visible()
        assert self.get_complete_text().strip(), "Completion text should not be empty"

    def assert_pony_express_image_visible(self) -> None:
        expect(self.locator(self.PONY_EXPRESS_IMAGE)).to_be_visible()

    def assert_back_button_visible(self) -> None:
        expect(self.back_home_button).to_be_visible()

    def assert_cart_is_empty(self) -> None:
        expect(self.cart_badge).to_be_hidden()

    def assert_all_completion_elements_displayed(self) -> None:
        expect(self.complete_header).to_be_visible()
        self.assert_complete_text_displayed()
        self.assert_pony_express_image_visible()

    def assert_all_elements_visible(self) -> None:
        self.assert_page_loaded()
        self.assert_all_completion_elements_displayed()
        self.assert_back_button_visible()
