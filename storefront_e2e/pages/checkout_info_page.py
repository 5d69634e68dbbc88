"""
Checkout Information Page Object

Step one of checkout: customer name and postal code.
"""
from typing import Optional

from playwright.sync_api import Locator, Page, expect

from ..data_loader import CheckoutInfo
from .base_page import BasePage


class CheckoutInfoPage(BasePage):
    """Page object for checkout step one."""

    PATH = "/checkout-step-one.html"

    # Selectors
    FIRST_NAME_INPUT = '[data-test="firstName"]'
    LAST_NAME_INPUT = '[data-test="lastName"]'
    POSTAL_CODE_INPUT = '[data-test="postalCode"]'
    CONTINUE_BTN = '[data-test="continue"]'
    CANCEL_BTN = '[data-test="cancel"]'
    ERROR_MESSAGE = '[data-test="error"]'

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def first_name_input(self) -> Locator:
        return self.locator(self.FIRST_NAME_INPUT)

    @property
    def last_name_input(self) -> Locator:
        return self.locator(self.LAST_NAME_INPUT)

    @property
    def postal_code_input(self) -> Locator:
        return self.locator(self.POSTAL_CODE_INPUT)

    @property
    def continue_button(self) -> Locator:
        return self.locator(self.CONTINUE_BTN)

    @property
    def cancel_button(self) -> Locator:
        return self.locator(self.CANCEL_BTN)

    @property
    def error_message(self) -> Locator:
        return self.locator(self.ERROR_MESSAGE)

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = PATH) -> None:
        super().goto(path)
        self.wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.wait_for_container(
            self.first_name_input, "Checkout info page", "checkout-info-not-found"
        )

    def continue_to_overview(self) -> None:
        self.click(self.continue_button)
        self.wait_for_load_state()

    def cancel(self) -> None:
        self.click(self.cancel_button)
        self.wait_for_load_state()

    # =========================================================================
    # Form
    # =========================================================================

    def fill_checkout_form(self, first_name: str, last_name: str, postal_code: str) -> None:
        self.fill_first_name(first_name)
        self.fill_last_name(last_name)
        self.fill_postal_code(postal_code)

    def fill_from(self, info: CheckoutInfo) -> None:
        self.fill_checkout_form(info.first_name, info.last_name, info.postal_code)

    def fill_first_name(self, first_name: str) -> None:
        self.fill(self.first_name_input, first_name)

    def fill_last_name(self, last_name: str) -> None:
        self.fill(self.last_name_input, last_name)

    def fill_postal_code(self, postal_code: str) -> None:
        self.fill(self.postal_code_input, postal_code)

    def clear_all_fields(self) -> None:
        self.clear(self.first_name_input)
        self.clear(self.last_name_input)
        self.clear(self.postal_code_input)

    # =========================================================================
    # Getters
    # =========================================================================

    def get_first_name_value(self) -> str:
        return self.get_value(self.first_name_input)

    def get_last_name_value(self) -> str:
        return self.get_value(self.last_name_input)

    def get_postal_code_value(self) -> str:
        return self.get_value(self.postal_code_input)

    def get_error_message(self) -> str:
        return self.get_text(self.error_message)

    def has_error_message(self) -> bool:
        return self.is_visible(self.error_message)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_page_loaded(self) -> None:
        expect(self.first_name_input).to_be_visible()
        expect(self.last_name_input).to_be_visible()
        expect(self.postal_code_input).to_be_visible()

    def assert_on_step_one(self) -> None:
        self.expect_url_contains("checkout-step-one")

    def assert_error_message(self, expected_text: str) -> None:
        expect(self.error_message).to_be_visible()
        actual = self.get_error_message()
        assert expected_text in actual, (
            f'Expected error message to contain "{expected_text}", but got "{actual}"'
        )

    def assert_form_fields_empty(self) -> None:
        expect(self.first_name_input).to_have_value("")
        expect(self.last_name_input).to_have_value("")
        expect(self.postal_code_input).to_have_value("")

    def assert_form_fields_filled(self, first_name: str, last_name: str, postal_code: str) -> None:
        expect(self.first_name_input).to_have_value(first_name)
        expect(self.last_name_input).to_have_value(last_name)
        expect(self.postal_code_input).to_have_value(postal_code)

    def assert_continue_button_visible(self) -> None:
        expect(self.continue_button).to_be_visible()

    def assert_cancel_button_visible(self) -> None:
        expect(self.cancel_button).to_be_visible()

    def assert_all_elements_visible(self) -> None:
        self.assert_page_loaded()
        self.assert_continue_button_visible()
        self.assert_cancel_button_visible()
