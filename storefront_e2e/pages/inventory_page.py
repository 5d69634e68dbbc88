"""
Inventory Page Object

Encapsulates product listing, sorting and add-to-cart interactions.
"""
import logging
from typing import Iterable, List, Optional

from playwright.sync_api import Locator, Page, expect

from ..checks import assert_sorted, sort_option_for
from ..data_loader import Product
from .base_page import BasePage, PageLoadError

logger = logging.getLogger(__name__)


class InventoryPage(BasePage):
    """Page object for the product inventory."""

    PATH = "/inventory.html"

    # Selectors
    INVENTORY_CONTAINER = ".inventory_container"
    INVENTORY_ITEM = ".inventory_item"
    ITEM_NAME = ".inventory_item_name"
    ITEM_DESCRIPTION = ".inventory_item_desc"
    ITEM_PRICE = ".inventory_item_price"
    ADD_TO_CART_BTN = '[data-test*="add-to-cart"]'
    REMOVE_BTN = '[data-test*="remove"]'
    SORT_DROPDOWN = '[data-test="product-sort-container"]'

    # Menu
    MENU_ITEMS = ".bm-menu"
    CLOSE_MENU_BTN = "#react-burger-cross-btn"
    LOGOUT_LINK = "#logout_sidebar_link"
    RESET_APP_LINK = "#reset_sidebar_link"
    ABOUT_LINK = "#about_sidebar_link"

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def inventory_container(self) -> Locator:
        return self.locator(self.INVENTORY_CONTAINER)

    @property
    def inventory_items(self) -> Locator:
        return self.locator(self.INVENTORY_ITEM)

    @property
    def sort_dropdown(self) -> Locator:
        return self.locator(self.SORT_DROPDOWN)

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = PATH) -> None:
        """Navigate to the inventory; fails fast when bounced to the login page."""
        super().goto(path)

        url = self.current_url()
        if "/inventory" not in url:
            logger.warning("Authentication failed - redirected to login page")
            screenshot = self.screenshot("inventory-auth-failed")
            raise PageLoadError(
                f"Authentication failed. Expected inventory page, but got: {url}",
                url=url,
                screenshot=screenshot,
            )

        self.wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.wait_for_container(
            self.inventory_container, "Inventory page", "inventory-container-not-found"
        )

    def go_to_cart(self) -> None:
        self.click(self.cart_icon)
        self.wait_for_url("**/cart.html")

    def open_product_details(self, product_name: str) -> None:
        """Open the details page by clicking the product name link."""
        self.get_product_item_by_name(product_name).locator(self.ITEM_NAME).click()

    # =========================================================================
    # Products
    # =========================================================================

    def get_product_item_by_name(self, product_name: str) -> Locator:
        return self.inventory_items.filter(has_text=product_name)

    def add_product_to_cart(self, product_name: str) -> None:
        self.get_product_item_by_name(product_name).locator(self.ADD_TO_CART_BTN).click()

    def remove_product_from_cart(self, product_name: str) -> None:
        self.get_product_item_by_name(product_name).locator(self.REMOVE_BTN).click()

    def add_multiple_products_to_cart(self, product_names: Iterable[str]) -> None:
        for product_name in product_names:
            self.add_product_to_cart(product_name)

    def get_product_price(self, product_name: str) -> str:
        return self.get_text(self.get_product_item_by_name(product_name).locator(self.ITEM_PRICE))

    def get_product_description(self, product_name: str) -> str:
        return self.get_text(
            self.get_product_item_by_name(product_name).locator(self.ITEM_DESCRIPTION)
        )

    def get_all_product_names(self) -> List[str]:
        return self.locator(self.ITEM_NAME).all_text_contents()

    def get_all_product_prices(self) -> List[str]:
        return self.locator(self.ITEM_PRICE).all_text_contents()

    def get_products(self) -> List[Product]:
        """Read every listed product in display order."""
        products = []
        items = self.inventory_items
        for i in range(items.count()):
            item = items.nth(i)
            products.append(
                Product(
                    name=self._child_text(item, self.ITEM_NAME),
                    price=self._child_text(item, self.ITEM_PRICE),
                    description=self._child_text(item, self.ITEM_DESCRIPTION),
                )
            )
        return products

    def _child_text(self, parent: Locator, selector: str) -> str:
        elem = parent.locator(selector)
        return (elem.text_content() or "").strip() if elem.count() > 0 else ""

    def get_total_product_count(self) -> int:
        return self.inventory_items.count()

    def is_product_exists(self, product_name: str) -> bool:
        return self.get_product_item_by_name(product_name).is_visible()

    # =========================================================================
    # Sorting
    # =========================================================================

    def sort_products(self, sort_option: str) -> None:
        """Select a sort option by value (az, za, lohi, hilo)."""
        self.sort_dropdown.select_option(sort_option)
        self.wait_for_load_state()

    def sort_by(self, sort_type: str, order: str) -> None:
        self.sort_products(sort_option_for(sort_type, order))

    def get_current_sort_option(self) -> str:
        return self.sort_dropdown.input_value()

    # =========================================================================
    # Cart badge
    # =========================================================================

    def get_cart_item_count(self) -> int:
        return self.get_cart_badge_count()

    def is_cart_badge_visible(self) -> bool:
        return self.is_visible(self.cart_badge)

    # =========================================================================
    # Header menu
    # =========================================================================

    def open_menu(self) -> None:
        self.click(self.menu_button)
        self.wait_for_element(self.MENU_ITEMS, timeout=5000)

    def close_menu(self) -> None:
        close_button = self.locator(self.CLOSE_MENU_BTN)
        if close_button.is_visible():
            close_button.click()

    def logout(self) -> None:
        self.open_menu()
        self.click(self.LOGOUT_LINK)
        self.wait_for_url(f"{self.base_url}/")

    def reset_app(self) -> None:
        self.open_menu()
        self.click(self.RESET_APP_LINK)
        self.wait_for_load_state()

    def go_to_about(self) -> None:
        self.open_menu()
        self.click(self.ABOUT_LINK)
        self.wait_for_load_state()

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_inventory_page_loaded(self) -> None:
        self.expect_url_contains("inventory")
        self.expect_visible(self.inventory_container)

    def assert_product_added_to_cart(self, product_name: str) -> None:
        item = self.get_product_item_by_name(product_name)
        expect(item.locator(self.REMOVE_BTN)).to_be_visible()

    def assert_product_removed_from_cart(self, product_name: str) -> None:
        item = self.get_product_item_by_name(product_name)
        expect(item.locator(self.ADD_TO_CART_BTN)).to_be_visible()

    def assert_products_sorted(self, sort_type: str, order: str) -> None:
        """Assert the listing is ordered by name or price, asc or desc."""
        if sort_type == "name":
            items = self.get_all_product_names()
        else:
            items = self.get_all_product_prices()
        assert_sorted(items, sort_type, order)

    def assert_all_products_displayed(self, expected_count: int = 6) -> None:
        self.expect_visible(self.inventory_container)
        actual = self.get_total_product_count()
        assert actual == expected_count, f"Expected {expected_count} products, but found {actual}"
