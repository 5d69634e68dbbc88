"""
Test Data Loader

Reads the JSON fixtures under fixtures/data and resolves user credentials
from environment variables named in users.json.
"""
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import get_config

logger = logging.getLogger(__name__)


class TestDataError(Exception):
    """Raised when fixture data is missing or incomplete."""

    __test__ = False


@dataclass
class UserCredentials:
    """Login credentials for one user type."""

    user_type: str
    username: Optional[str]
    password: Optional[str]
    username_var: str = ""
    password_var: str = ""

    def require(self) -> "UserCredentials":
        """Return self, or raise if either value is missing from the environment."""
        pairs = ((self.username_var, self.username), (self.password_var, self.password))
        missing = [var for var, value in pairs if not value]
        if missing:
            raise TestDataError(
                f"Credentials for user type '{self.user_type}' are not set. "
                f"Define {', '.join(missing)} in the environment or .env"
            )
        return self

    def __repr__(self) -> str:
        return f"UserCredentials(user_type={self.user_type!r}, username={self.username!r})"


@dataclass
class Environment:
    """Deployment target."""

    name: str
    base_url: str


@dataclass
class Product:
    """Product reference compared between list and detail views."""

    name: str
    price: str
    description: str = ""
    slug: str = ""
    product_id: Optional[int] = None


@dataclass
class CheckoutInfo:
    """Checkout step one form input."""

    first_name: str
    last_name: str
    postal_code: str


class TestDataLoader:
    """Class-level access to the JSON fixtures."""

    __test__ = False

    _cache: Dict[str, Any] = {}

    @classmethod
    def fixtures_dir(cls) -> Path:
        return get_config().fixtures_dir

    @classmethod
    def _load(cls, filename: str) -> Dict[str, Any]:
        path = cls.fixtures_dir() / filename
        key = str(path)
        if key not in cls._cache:
            if not path.exists():
                raise TestDataError(f"Fixture file not found: {path}")
            with open(path, encoding="utf-8") as f:
                cls._cache[key] = json.load(f)
        return cls._cache[key]

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()

    # =========================================================================
    # Users
    # =========================================================================

    @classmethod
    def load_users(cls) -> Dict[str, Any]:
        return cls._load("users.json")

    @classmethod
    def get_user_credentials(cls, user_type: str = "standard") -> UserCredentials:
        """
        Resolve credentials for a user type.

        users.json holds environment variable names, not the secrets
        themselves. Unset variables come back as None so negative-path tests
        can still submit the form; call ``require()`` when values are needed.
        """
        user = cls.load_users().get("users", {}).get(user_type)
        if not user:
            raise TestDataError(f"User type '{user_type}' not found")

        username_var = user.get("username", "")
        password_var = user.get("password", "")
        return UserCredentials(
            user_type=user_type,
            username=os.environ.get(username_var) if username_var else None,
            password=os.environ.get(password_var) if password_var else None,
            username_var=username_var,
            password_var=password_var,
        )

    # =========================================================================
    # Environments
    # =========================================================================

    @classmethod
    def load_environments(cls) -> Dict[str, Any]:
        return cls._load("environments.json")

    @classmethod
    def get_environment(cls, env_name: Optional[str] = None) -> Environment:
        env_name = env_name or get_config().test_env
        env = cls.load_environments().get("environments", {}).get(env_name)
        if not env:
            raise TestDataError(f"Environment '{env_name}' not found")
        return Environment(name=env.get("name", env_name), base_url=env["baseUrl"])

    # =========================================================================
    # Products
    # =========================================================================

    @classmethod
    def load_products(cls) -> List[Product]:
        return [
            Product(
                name=item["name"],
                price=item["price"],
                description=item.get("description", ""),
                slug=item.get("slug", ""),
                product_id=item.get("id"),
            )
            for item in cls._load("products.json").get("products", [])
        ]

    @classmethod
    def get_product(cls, name: str) -> Product:
        for product in cls.load_products():
            if product.name == name:
                return product
        raise TestDataError(f"Product '{name}' not found in products.json")

    # =========================================================================
    # Test data
    # =========================================================================

    @classmethod
    def load_test_data(cls) -> Dict[str, Any]:
        return cls._load("testData.json")

    @classmethod
    def _validation(cls, section: str) -> Dict[str, str]:
        return cls.load_test_data()["testData"]["validation"][section]

    @classmethod
    def get_error_message(cls, scenario: str) -> str:
        """Login error message for a scenario (locked, invalid, emptyUsername...)."""
        return cls._validation("loginErrorMessages")[scenario]

    @classmethod
    def get_all_login_error_messages(cls) -> Dict[str, str]:
        return dict(cls._validation("loginErrorMessages"))

    @classmethod
    def get_checkout_error_message(cls, field: str) -> str:
        return cls._validation("checkoutErrorMessages")[field]

    @classmethod
    def get_page_title(cls, page_name: str) -> str:
        return cls._validation("pageTitles")[page_name]

    @classmethod
    def get_page_heading(cls, page_name: str) -> str:
        return cls._validation("pageHeadings")[page_name]

    @classmethod
    def get_success_message(cls, action: str) -> str:
        return cls._validation("successMessages")[action]

    @classmethod
    def get_checkout_data(cls, name: str = "validCheckout") -> CheckoutInfo:
        data = cls.load_test_data()["testData"]["checkout"].get(name)
        if data is None:
            raise TestDataError(f"Checkout payload '{name}' not found")
        return CheckoutInfo(
            first_name=data["firstName"],
            last_name=data["lastName"],
            postal_code=data["postalCode"],
        )

    @classmethod
    def get_sort_option(cls, key: str) -> str:
        return cls.load_test_data()["testData"]["sortOptions"][key]
