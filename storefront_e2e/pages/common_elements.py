"""
Common Elements

Footer and page heading present on every authenticated screen.
"""
from typing import Dict, Optional

from playwright.sync_api import Locator, Page, expect

from .base_page import BasePage


class CommonElements(BasePage):
    """Shared chrome outside the header."""

    PAGE_HEADING = ".title"
    FOOTER = ".footer"
    FOOTER_COPY = ".footer_copy"

    SOCIAL_LINKS = {
        "twitter": '[data-test="social-twitter"]',
        "facebook": '[data-test="social-facebook"]',
        "linkedin": '[data-test="social-linkedin"]',
    }

    def __init__(self, page: Page, base_url: Optional[str] = None):
        super().__init__(page, base_url)

    @property
    def page_heading(self) -> Locator:
        return self.locator(self.PAGE_HEADING)

    @property
    def footer(self) -> Locator:
        return self.locator(self.FOOTER)

    def get_page_heading(self) -> str:
        return self.get_text(self.page_heading).strip()

    def get_footer_text(self) -> str:
        return self.get_text(self.FOOTER_COPY).strip()

    def get_social_link_urls(self) -> Dict[str, Optional[str]]:
        """Map of social network name to its link target."""
        return {
            name: self.get_attribute(selector, "href")
            for name, selector in self.SOCIAL_LINKS.items()
        }

    def assert_footer_visible(self) -> None:
        expect(self.footer).to_be_visible()
        expect(self.locator(self.FOOTER_COPY)).to_be_visible()

    def assert_page_heading(self, expected_text: str) -> None:
        expect(self.page_heading).to_have_text(expected_text)

    def assert_social_links_visible(self) -> None:
        for selector in self.SOCIAL_LINKS.values():
            expect(self.locator(selector)).to_be_visible()
