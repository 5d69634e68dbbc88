"""
Checkout Overview Page Object

Step two of checkout: line items, payment and shipping info, and the price
summary.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from playwright.sync_api import Locator, Page, expect

from ..checks import parse_amount, parse_price, parse_quantity, total_matches
from .base_page import BasePage

logger = logging.getLogger(__name__)


@dataclass
class PriceSummary:
    """Parsed amounts from the summary block."""

    subtotal: float
    tax: float
    total: float


class CheckoutOverviewPage(BasePage):
    """Page object for checkout step two."""

    PATH = "/checkout-step-two.html"

    # Selectors
    SUMMARY_CONTAINER = ".checkout_summary_container"
    CART_ITEM = ".cart_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"
    ITEM_QUANTITY = ".cart_quantity"
    PAYMENT_INFO = '[data-test="payment-info-value"]'
    SHIPPING_INFO = '[data-test="shipping-info-value"]'
    SUBTOTAL_LABEL = ".summary_subtotal_label"
    TAX_LABEL = ".summary_tax_label"
    TOTAL_LABEL = ".summary_total_label"
    FINISH_BTN = '[data-test="finish"]'
    CANCEL_BTN = '[data-test="cancel"]'

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def summary_container(self) -> Locator:
        return self.locator(self.SUMMARY_CONTAINER)

    @property
    def cart_items(self) -> Locator:
        return self.locator(self.CART_ITEM)

    @property
    def finish_button(self) -> Locator:
        return self.locator(self.FINISH_BTN)

    @property
    def cancel_button(self) -> Locator:
        return self.locator(self.CANCEL_BTN)

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = PATH) -> None:
        super().goto(path)
        self.wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.wait_for_container(
            self.summary_container, "Checkout overview page", "checkout-overview-not-found"
        )

    def cancel(self) -> None:
        self.click(self.cancel_button)
        self.wait_for_load_state()

    def finish(self) -> None:
        self.click(self.finish_button)
        self.wait_for_load_state()

    # =========================================================================
    # Getters
    # =========================================================================

    def get_cart_item_by_name(self, product_name: str) -> Locator:
        return self.cart_items.filter(has_text=product_name)

    def get_product_price(self, product_name: str) -> str:
        return self.get_text(self.get_cart_item_by_name(product_name).locator(self.ITEM_PRICE))

    def get_product_quantity(self, product_name: str) -> str:
        return self.get_text(self.get_cart_item_by_name(product_name).locator(self.ITEM_QUANTITY))

    def get_all_product_names(self) -> List[str]:
        return self.locator(self.ITEM_NAME).all_text_contents()

    def get_subtotal(self) -> str:
        return self.get_text(self.SUBTOTAL_LABEL)

    def get_tax(self) -> str:
        return self.get_text(self.TAX_LABEL)

    def get_total(self) -> str:
        return self.get_text(self.TOTAL_LABEL)

    def get_payment_info(self) -> str:
        return self.get_text(self.PAYMENT_INFO)

    def get_shipping_info(self) -> str:
        return self.get_text(self.SHIPPING_INFO)

    def get_cart_item_count(self) -> int:
        return self.cart_items.count()

    def get_price_summary(self) -> PriceSummary:
        return PriceSummary(
            subtotal=parse_amount(self.get_subtotal()),
            tax=parse_amount(self.get_tax()),
            total=parse_amount(self.get_total()),
        )

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_page_loaded(self) -> None:
        expect(self.summary_container).to_be_visible()
        self.expect_url_contains("checkout-step-two")

    def assert_cart_item_present(self, product_name: str) -> None:
        expect(self.get_cart_item_by_name(product_name)).to_be_visible()

    def assert_cart_item_count(self, expected_count: int) -> None:
        actual = self.get_cart_item_count()
        assert actual == expected_count, f"Expected {expected_count} items, got {actual}"

    def assert_payment_shipping_info_displayed(self) -> None:
        expect(self.locator(self.PAYMENT_INFO)).to_be_visible()
        expect(self.locator(self.SHIPPING_INFO)).to_be_visible()

    def assert_price_breakdown_displayed(self) -> None:
        expect(self.locator(self.SUBTOTAL_LABEL)).to_be_visible()
        expect(self.locator(self.TAX_LABEL)).to_be_visible()
        expect(self.locator(self.TOTAL_LABEL)).to_be_visible()

    def assert_product_price(self, product_name: str, expected_price: str) -> None:
        actual = self.get_product_price(product_name)
        assert actual == expected_price, (
            f"Expected {product_name} at {expected_price}, got {actual}"
        )

    def assert_product_quantity(self, product_name: str, expected_quantity: str) -> None:
        actual = self.get_product_quantity(product_name)
        assert actual == str(expected_quantity), (
            f"Expected quantity {expected_quantity} for {product_name}, got {actual}"
        )

    def assert_total_calculation_correct(self) -> None:
        """Total must equal subtotal + tax to two decimal places."""
        summary = self.get_price_summary()
        logger.info(
            f"Price summary: subtotal={summary.subtotal} tax={summary.tax} total={summary.total}"
        )
        assert total_matches(summary.subtotal, summary.tax, summary.total), (
            f"Total {summary.total:.2f} != subtotal {summary.subtotal:.2f} + tax {summary.tax:.2f}"
        )

    def assert_subtotal_matches_items(self) -> None:
        """Subtotal must equal the sum of line price times quantity."""
        expected = 0.0
        for item in self.cart_items.all():
            price = parse_price(item.locator(self.ITEM_PRICE).text_content() or "")
            quantity = parse_quantity(item.locator(self.ITEM_QUANTITY).text_content())
            expected += price * quantity
        subtotal = parse_amount(self.get_subtotal())
        assert total_matches(expected, 0.0, subtotal), (
            f"Subtotal {subtotal:.2f} does not match line items sum {expected:.2f}"
        )

    def assert_all_elements_visible(self) -> None:
        expect(self.summary_container).to_be_visible()
        self.assert_payment_shipping_info_displayed()
        self.assert_price_breakdown_displayed()
        expect(self.finish_button).to_be_visible()
        expect(self.cancel_button).to_be_visible()
