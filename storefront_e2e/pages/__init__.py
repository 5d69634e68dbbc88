"""
Page Object Models for the storefront E2E suite

This package provides page objects that encapsulate UI interactions
and provide a clean API for test code.
"""

from .base_page import BasePage, PageLoadError
from .cart_page import CartLineItem, CartPage
from .checkout_complete_page import CheckoutCompletePage
from .checkout_info_page import CheckoutInfoPage
from .checkout_overview_page import CheckoutOverviewPage, PriceSummary
from .common_elements import CommonElements
from .header_components import HeaderComponents
from .inventory_page import InventoryPage
from .login_page import LoginPage
from .manager import PageManager
from .product_details_page import ProductDetailsPage

__all__ = [
    "BasePage",
    "PageLoadError",
    "LoginPage",
    "InventoryPage",
    "ProductDetailsPage",
    "CartPage",
    "CartLineItem",
    "CheckoutInfoPage",
    "CheckoutOverviewPage",
    "PriceSummary",
    "CheckoutCompletePage",
    "HeaderComponents",
    "CommonElements",
    "PageManager",
]
