"""
Page Manager

Single entry point to every page object bound to one browser page.
"""
from functools import cached_property
from typing import Optional

from playwright.sync_api import Page

from ..data_loader import TestDataLoader
from .base_page import BasePage
from .cart_page import CartPage
from .checkout_complete_page import CheckoutCompletePage
from .checkout_info_page import CheckoutInfoPage
from .checkout_overview_page import CheckoutOverviewPage
from .common_elements import CommonElements
from .header_components import HeaderComponents
from .inventory_page import InventoryPage
from .login_page import LoginPage
from .product_details_page import ProductDetailsPage


class PageManager:
    """
    Provides access to all pages and components for one Page.

    Each page object is created on first access and reused afterwards.
    """

    def __init__(self, page: Page, base_url: Optional[str] = None):
        self.page = page
        if base_url is None:
            base_url = TestDataLoader.get_environment().base_url
        self.base_url = base_url

    @cached_property
    def base_page(self) -> BasePage:
        return BasePage(self.page, self.base_url)

    @cached_property
    def login_page(self) -> LoginPage:
        return LoginPage(self.page, self.base_url)

    @cached_property
    def inventory_page(self) -> InventoryPage:
        return InventoryPage(self.page, self.base_url)

    @cached_property
    def product_details_page(self) -> ProductDetailsPage:
        return ProductDetailsPage(self.page, self.base_url)

    @cached_property
    def cart_page(self) -> CartPage:
        return CartPage(self.page, self.base_url)

    @cached_property
    def checkout_info_page(self) -> CheckoutInfoPage:
        return CheckoutInfoPage(self.page, self.base_url)

    @cached_property
    def checkout_overview_page(self) -> CheckoutOverviewPage:
        return CheckoutOverviewPage(self.page, self.base_url)

    @cached_property
    def checkout_complete_page(self) -> CheckoutCompletePage:
        return CheckoutCompletePage(self.page, self.base_url)

    # Components
    @cached_property
    def header_components(self) -> HeaderComponents:
        return HeaderComponents(self.page, self.base_url)

    @cached_property
    def common_elements(self) -> CommonElements:
        return CommonElements(self.page, self.base_url)
