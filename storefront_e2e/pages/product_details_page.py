"""
Product Details Page Object
"""
from typing import Optional

from playwright.sync_api import Locator, Page, expect

from ..data_loader import Product
from .base_page import BasePage


class ProductDetailsPage(BasePage):
    """Page object for a single product's details view."""

    # Selectors
    PRODUCT_CONTAINER = ".inventory_details_container"
    PRODUCT_NAME = ".inventory_details_name"
    PRODUCT_DESCRIPTION = ".inventory_details_desc"
    PRODUCT_PRICE = ".inventory_details_price"
    PRODUCT_IMAGE = ".inventory_details_img"
    ADD_TO_CART_BTN = '[data-test*="add-to-cart"]'
    REMOVE_BTN = '[data-test*="remove"]'
    BACK_BTN = '[data-test="back-to-products"]'

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def product_container(self) -> Locator:
        return self.locator(self.PRODUCT_CONTAINER)

    @property
    def add_to_cart_button(self) -> Locator:
        return self.locator(self.ADD_TO_CART_BTN)

    @property
    def remove_button(self) -> Locator:
        return self.locator(self.REMOVE_BTN)

    @property
    def back_button(self) -> Locator:
        return self.locator(self.BACK_BTN)

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, product_id: int) -> None:
        super().goto(f"/inventory-item.html?id={product_id}")
        self.wait_for_page_load()

    def goto_by_name(self, product_name: str) -> None:
        """Open details by clicking the product name on the inventory page."""
        item = self.locator(".inventory_item").filter(has_text=product_name)
        item.locator(".inventory_item_name").click()
        self.wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.wait_for_container(
            self.product_container, "Product details page", "product-details-not-found"
        )

    def go_back_to_inventory(self) -> None:
        self.click(self.back_button)
        self.wait_for_load_state()

    def go_to_cart(self) -> None:
        self.click(self.cart_icon)
        self.wait_for_load_state()

    # =========================================================================
    # Actions
    # =========================================================================

    def add_to_cart(self) -> None:
        self.click(self.add_to_cart_button)

    def remove_from_cart(self) -> None:
        self.click(self.remove_button)

    # =========================================================================
    # Getters
    # =========================================================================

    def get_product_name(self) -> str:
        return self.get_text(self.PRODUCT_NAME)

    def get_product_description(self) -> str:
        return self.get_text(self.PRODUCT_DESCRIPTION)

    def get_product_price(self) -> str:
        return self.get_text(self.PRODUCT_PRICE)

    def get_product_image(self) -> Optional[str]:
        return self.get_attribute(self.PRODUCT_IMAGE, "src")

    def get_product(self) -> Product:
        return Product(
            name=self.get_product_name().strip(),
            price=self.get_product_price().strip(),
            description=self.get_product_description().strip(),
        )

    def get_cart_item_count(self) -> int:
        return self.get_cart_badge_count()

    def is_product_in_cart(self) -> bool:
        return self.is_visible(self.remove_button)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_page_loaded(self) -> None:
        expect(self.product_container).to_be_visible()
        expect(self.locator(self.PRODUCT_NAME)).to_be_visible()
        expect(self.locator(self.PRODUCT_IMAGE)).to_be_visible()

    def assert_product_name(self, expected_name: str) -> None:
        actual = self.get_product_name()
        assert actual == expected_name, f"Expected product '{expected_name}', got '{actual}'"

    def assert_product_price(self, expected_price: str) -> None:
        actual = self.get_product_price()
        assert actual == expected_price, f"Expected price {expected_price}, got {actual}"

    def assert_matches_product(self, product: Product) -> None:
        """Compare the details view against a product read from the inventory list."""
        details = self.get_product()
        assert details.name == product.name, f"Name mismatch: {details.name} != {product.name}"
        assert details.price == product.price, f"Price mismatch: {details.price} != {product.price}"
        if product.description:
            assert details.description == product.description, (
                f"Description mismatch for {product.name}"
            )

    def assert_product_added_to_cart(self) -> None:
        expect(self.remove_button).to_be_visible()
        expect(self.add_to_cart_button).to_be_hidden()

    def assert_product_removed_from_cart(self) -> None:
        expect(self.remove_button).to_be_hidden()
        expect(self.add_to_cart_button).to_be_visible()

    def assert_product_description_exists(self) -> None:
        description = self.get_product_description()
        assert description.strip(), "Product description should not be empty"

    def assert_product_image_visible(self) -> None:
        expect(self.locator(self.PRODUCT_IMAGE)).to_be_visible()

    def assert_back_button_visible(self) -> None:
        expect(self.back_button).to_be_visible()

    def assert_all_product_details_displayed(self) -> None:
        self.assert_page_loaded()
        self.assert_product_image_visible()
        self.assert_product_description_exists()
        self.assert_back_button_visible()
