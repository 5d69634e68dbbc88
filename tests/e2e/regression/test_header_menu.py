"""
Header Menu Regression Tests

Side menu, cart icon and social links in the shared header.
"""
import time

import pytest
from playwright.sync_api import expect

pytestmark = pytest.mark.menu

BACKPACK = "Sauce Labs Backpack"
BIKE_LIGHT = "Sauce Labs Bike Light"


@pytest.fixture
def header(po, inventory_page):
    """Header components on the inventory page."""
    return po.header_components


class TestMenuInteraction:
    """Opening and closing the side menu."""

    def test_open_menu(self, header):
        """Test the menu opens."""
        header.open_menu()

        header.assert_menu_is_open()
        assert header.is_menu_open()

    def test_close_menu(self, header):
        """Test the menu closes."""
        header.open_menu()
        header.close_menu()

        header.assert_menu_is_closed()

    def test_open_when_already_open(self, header):
        """Test a second open is a no-op."""
        header.open_menu()
        header.open_menu()

        header.assert_menu_is_open()

    def test_all_menu_items(self, header):
        """Test every menu link is present."""
        header.open_menu()

        for link in (header.all_items_link, header.about_link, header.logout_link,
                     header.reset_app_link):
            expect(link).to_be_attached()

    def test_rapid_open_close(self, header):
        """Test repeated open and close cycles."""
        for _ in range(5):
            header.open_menu()
            header.assert_menu_is_open()
            header.close_menu()
            header.assert_menu_is_closed()


class TestMenuNavigation:
    """Menu links."""

    def test_all_items(self, po, header):
        """Test All Items returns from the cart to the inventory."""
        po.inventory_page.add_product_to_cart(BACKPACK)
        po.inventory_page.go_to_cart()

        header.go_to_all_items()

        po.inventory_page.assert_inventory_page_loaded()

    def test_about(self, header):
        """Test About leaves the storefront."""
        header.go_to_about()

        assert "saucelabs.com" in header.current_url()

    def test_logout(self, po, header):
        """Test logout shows the login form."""
        header.logout()

        header.assert_logout_successful()
        po.login_page.assert_on_login_page()

    def test_logout_with_items_in_cart(self, po, header):
        """Test logout works with a non-empty cart."""
        po.inventory_page.add_product_to_cart(BACKPACK)

        header.logout()

        po.login_page.assert_on_login_page()

    def test_reset_app_state(self, po, header):
        """Test reset empties the cart."""
        po.inventory_page.add_multiple_products_to_cart([BACKPACK, BIKE_LIGHT])

        header.reset_app()

        header.assert_cart_badge_count(0)


class TestHeaderCart:
    """Cart icon and badge."""

    def test_go_to_cart(self, po, header):
        """Test the cart icon opens the cart."""
        header.go_to_cart()

        po.cart_page.assert_cart_page_loaded()

    def test_cart_badge_count(self, po, header):
        """Test the badge counts added products."""
        po.inventory_page.add_multiple_products_to_cart([BACKPACK, BIKE_LIGHT])

        header.assert_cart_badge_count(2)
        assert header.get_cart_badge_count() == 2

    def test_badge_hidden_when_empty(self, header):
        """Test no badge is shown for an empty cart."""
        assert not header.is_cart_badge_visible()
        assert header.get_cart_badge_count() == 0

    def test_cart_state_after_menu_operations(self, po, header):
        """Test opening and closing the menu keeps the cart."""
        po.inventory_page.add_product_to_cart(BACKPACK)
        header.open_menu()
        header.close_menu()

        header.assert_cart_badge_count(1)


class TestHeaderUI:
    """Header elements."""

    def test_header_elements(self, header):
        """Test title, menu button and cart icon."""
        header.assert_header_elements_visible()

    def test_menu_button_state(self, header):
        """Test the menu button is clickable."""
        header.assert_menu_is_closed()

    def test_social_links(self, po, header):
        """Test every social link points at its network."""
        po.common_elements.assert_social_links_visible()
        urls = po.common_elements.get_social_link_urls()

        assert "twitter.com" in urls["twitter"] or "x.com" in urls["twitter"]
        assert "facebook.com" in urls["facebook"]
        assert "linkedin.com" in urls["linkedin"]


class TestMenuPerformance:
    """Menu timings."""

    def test_open_menu_quickly(self, header):
        """Test the menu opens within a second."""
        start = time.perf_counter()
        header.open_menu()
        elapsed_ms = (time.perf_counter() - start) * 1000

        assert elapsed_ms < 1000, f"Opening the menu took {elapsed_ms:.0f}ms"
