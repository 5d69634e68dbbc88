"""
Global Setup

Logs in once per test session and saves the browser storage state so
authenticated tests can skip the login form.
"""
import logging
from pathlib import Path
from typing import Union

from playwright.sync_api import Browser

from .data_loader import UserCredentials
from .pages.login_page import LoginPage

logger = logging.getLogger(__name__)


def save_auth_state(
    browser: Browser,
    base_url: str,
    credentials: UserCredentials,
    path: Union[str, Path],
) -> Path:
    """
    Log in through the login form and write the storage state to path.

    Credentials must be complete; the caller decides whether missing
    credentials skip or fail the run.
    """
    credentials.require()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Creating auth state for '{credentials.user_type}' user at {path}")
    context = browser.new_context()
    try:
        page = context.new_page()
        login_page = LoginPage(page, base_url)
        login_page.goto()
        login_page.login(credentials.username, credentials.password)
        context.storage_state(path=str(path))
    finally:
        context.close()

    logger.info("Auth state saved")
    return path
