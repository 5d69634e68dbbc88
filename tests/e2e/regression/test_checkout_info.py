"""
Checkout Information Regression Tests

Form filling and validation on checkout step one.
"""
import pytest

from storefront_e2e.data_loader import TestDataLoader

pytestmark = pytest.mark.checkout

BACKPACK = "Sauce Labs Backpack"


@pytest.fixture
def info_page(po, inventory_page):
    """Checkout step one with one product in the cart."""
    inventory_page.add_product_to_cart(BACKPACK)
    inventory_page.go_to_cart()
    po.cart_page.go_to_checkout()
    po.checkout_info_page.wait_for_page_load()
    return po.checkout_info_page


class TestCheckoutInfoPositive:
    """Valid input moves on to the overview."""

    def test_page_displayed(self, info_page):
        """Test the form and its buttons render."""
        info_page.assert_on_step_one()
        info_page.assert_all_elements_visible()

    def test_fill_all_fields(self, info_page):
        """Test filled values are kept in the fields."""
        data = TestDataLoader.get_checkout_data()
        info_page.fill_from(data)

        info_page.assert_form_fields_filled(data.first_name, data.last_name, data.postal_code)

    def test_continue_with_valid_data(self, po, info_page):
        """Test valid input reaches the overview."""
        info_page.fill_from(TestDataLoader.get_checkout_data())
        info_page.continue_to_overview()

        po.checkout_overview_page.assert_page_loaded()

    def test_cancel_returns_to_cart(self, po, info_page):
        """Test cancel returns to the cart."""
        info_page.cancel()

        po.cart_page.expect_url_contains("cart")
        po.cart_page.assert_product_in_cart(BACKPACK)

    @pytest.mark.parametrize(
        "payload",
        ["specialCharacters", "withSpaces", "numericPostalCode", "alphanumericPostalCode"],
    )
    def test_fields_round_trip(self, info_page, payload):
        """Test values read back exactly as they were filled."""
        data = TestDataLoader.get_checkout_data(payload)
        info_page.fill_from(data)

        assert info_page.get_first_name_value() == data.first_name
        assert info_page.get_last_name_value() == data.last_name
        assert info_page.get_postal_code_value() == data.postal_code

    def test_long_text_round_trip(self, info_page):
        """Test 100 character values round-trip."""
        long_text = "A" * 100
        info_page.fill_checkout_form(long_text, long_text, long_text)

        info_page.assert_form_fields_filled(long_text, long_text, long_text)

    @pytest.mark.parametrize(
        "payload", ["withSpaces", "numericPostalCode", "alphanumericPostalCode"]
    )
    def test_edge_payloads_continue(self, po, info_page, payload):
        """Test unusual but valid input is accepted."""
        info_page.fill_from(TestDataLoader.get_checkout_data(payload))
        info_page.continue_to_overview()

        po.checkout_overview_page.assert_page_loaded()


class TestCheckoutInfoValidation:
    """Missing fields are reported in order."""

    def test_first_name_missing(self, info_page):
        """Test only postal code filled reports the first name."""
        info_page.fill_postal_code("12345")
        info_page.continue_to_overview()

        info_page.assert_error_message(TestDataLoader.get_checkout_error_message("firstName"))
        info_page.assert_on_step_one()

    def test_last_name_missing(self, info_page):
        """Test missing last name is reported."""
        info_page.fill_first_name("John")
        info_page.fill_postal_code("12345")
        info_page.continue_to_overview()

        info_page.assert_error_message(TestDataLoader.get_checkout_error_message("lastName"))

    def test_postal_code_missing(self, info_page):
        """Test missing postal code is reported."""
        info_page.fill_first_name("John")
        info_page.fill_last_name("Doe")
        info_page.continue_to_overview()

        info_page.assert_error_message(TestDataLoader.get_checkout_error_message("postalCode"))

    def test_all_fields_empty(self, info_page):
        """Test an empty form reports the first name and stays put."""
        info_page.continue_to_overview()

        assert info_page.has_error_message()
        info_page.assert_error_message(TestDataLoader.get_checkout_error_message("firstName"))
        info_page.assert_on_step_one()


class TestCheckoutInfoForm:
    """Field editing."""

    def test_fill_fields_individually(self, info_page):
        """Test each field fills independently."""
        info_page.fill_first_name("John")
        assert info_page.get_first_name_value() == "John"
        assert info_page.get_last_name_value() == ""

        info_page.fill_last_name("Doe")
        info_page.fill_postal_code("12345")
        info_page.assert_form_fields_filled("John", "Doe", "12345")

    def test_clear_fields(self, info_page):
        """Test clearing empties every field."""
        info_page.fill_from(TestDataLoader.get_checkout_data())

        info_page.clear_all_fields()

        info_page.assert_form_fields_empty()

    def test_update_fields_multiple_times(self, info_page):
        """Test the last fill wins."""
        info_page.fill_checkout_form("John", "Doe", "12345")
        info_page.fill_checkout_form("Jane", "Roe", "54321")

        info_page.assert_form_fields_filled("Jane", "Roe", "54321")


class TestCheckoutInfoUI:
    """Header on the checkout page."""

    def test_header_elements(self, po, info_page):
        """Test header and cart badge on step one."""
        po.header_components.assert_header_elements_visible()
        po.header_components.assert_cart_badge_count(1)

    def test_page_heading(self, po, info_page):
        """Test the step one heading text."""
        po.common_elements.assert_page_heading(TestDataLoader.get_page_heading("checkout"))
