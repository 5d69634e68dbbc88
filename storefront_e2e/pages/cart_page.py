"""
Cart Page Object

Encapsulates cart line items and the checkout entry point.
"""
from dataclasses import dataclass
from typing import List, Optional

from playwright.sync_api import Locator, Page, expect

from ..checks import parse_quantity
from .base_page import BasePage


@dataclass
class CartLineItem:
    """One cart row as rendered by the storefront."""

    name: str
    price: str
    quantity: int


class CartPage(BasePage):
    """Page object for the shopping cart."""

    PATH = "/cart.html"

    # Selectors
    CART_CONTAINER = ".cart_contents_container"
    CART_ITEM = ".cart_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_DESCRIPTION = ".inventory_item_desc"
    ITEM_PRICE = ".inventory_item_price"
    ITEM_QUANTITY = ".cart_quantity"
    REMOVE_BTN = '[data-test*="remove"]'
    CONTINUE_SHOPPING_BTN = '[data-test="continue-shopping"]'
    CHECKOUT_BTN = '[data-test="checkout"]'

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def cart_container(self) -> Locator:
        return self.locator(self.CART_CONTAINER)

    @property
    def cart_items(self) -> Locator:
        return self.locator(self.CART_ITEM)

    @property
    def remove_buttons(self) -> Locator:
        return self.locator(self.REMOVE_BTN)

    @property
    def continue_shopping_button(self) -> Locator:
        return self.locator(self.CONTINUE_SHOPPING_BTN)

    @property
    def checkout_button(self) -> Locator:
        return self.locator(self.CHECKOUT_BTN)

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = PATH) -> None:
        super().goto(path)
        self.wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.wait_for_container(self.cart_container, "Cart page", "cart-container-not-found")

    def continue_shopping(self) -> None:
        self.click(self.continue_shopping_button)
        self.wait_for_load_state()

    def go_to_checkout(self) -> None:
        self.click(self.checkout_button)
        self.wait_for_load_state()

    # =========================================================================
    # Cart Actions
    # =========================================================================

    def remove_product_from_cart(self, product_name: str) -> None:
        self.get_cart_item_by_name(product_name).locator(self.REMOVE_BTN).click()

    def remove_all_products(self) -> None:
        """Remove line items one at a time, re-counting after each click."""
        remaining = self.remove_buttons.count()
        while remaining > 0:
            self.remove_buttons.first.click()
            self.wait(100)
            remaining = self.remove_buttons.count()

    # =========================================================================
    # Getters
    # =========================================================================

    def get_cart_item_by_name(self, product_name: str) -> Locator:
        return self.cart_items.filter(has_text=product_name)

    def get_all_product_names(self) -> List[str]:
        return self.locator(self.ITEM_NAME).all_text_contents()

    def get_product_price(self, product_name: str) -> str:
        return self.get_text(self.get_cart_item_by_name(product_name).locator(self.ITEM_PRICE))

    def get_product_quantity(self, product_name: str) -> str:
        return self.get_text(self.get_cart_item_by_name(product_name).locator(self.ITEM_QUANTITY))

    def get_product_description(self, product_name: str) -> str:
        return self.get_text(
            self.get_cart_item_by_name(product_name).locator(self.ITEM_DESCRIPTION)
        )

    def get_cart_item_count(self) -> int:
        """Number of line items (not units)."""
        return self.cart_items.count()

    def get_total_cart_item_count(self) -> int:
        """Sum of per-line quantities; unparsable quantities count as 0."""
        total = 0
        for item in self.cart_items.all():
            total += parse_quantity(item.locator(self.ITEM_QUANTITY).text_content())
        return total

    def get_line_items(self) -> List[CartLineItem]:
        items = []
        for item in self.cart_items.all():
            items.append(
                CartLineItem(
                    name=(item.locator(self.ITEM_NAME).text_content() or "").strip(),
                    price=(item.locator(self.ITEM_PRICE).text_content() or "").strip(),
                    quantity=parse_quantity(item.locator(self.ITEM_QUANTITY).text_content()),
                )
            )
        return items

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def is_product_in_cart(self, product_name: str) -> bool:
        return self.get_cart_item_by_name(product_name).count() > 0

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_cart_page_loaded(self) -> None:
        expect(self.cart_container).to_be_visible()

    def assert_cart_item_count(self, expected_count: int) -> None:
        actual = self.get_cart_item_count()
        assert actual == expected_count, f"Expected {expected_count} cart items, got {actual}"

    def assert_product_in_cart(self, product_name: str) -> None:
        expect(self.get_cart_item_by_name(product_name)).to_be_visible()

    def assert_product_not_in_cart(self, product_name: str) -> None:
        expect(self.get_cart_item_by_name(product_name)).to_be_hidden()

    def assert_cart_is_empty(self) -> None:
        self.assert_cart_item_count(0)

    def assert_cart_has_products(self) -> None:
        assert self.get_cart_item_count() > 0, "Expected cart to contain products"

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

    def assert_continue_shopping_button_visible(self) -> None:
        expect(self.continue_shopping_button).to_be_visible()

    def assert_checkout_button_visible(self) -> None:
        expect(self.checkout_button).to_be_visible()

    def assert_all_cart_elements_visible(self) -> None:
        expect(self.cart_container).to_be_visible()
        expect(self.continue_shopping_button).to_be_visible()
        expect(self.checkout_button).to_be_visible()
