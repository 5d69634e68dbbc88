"""
E2E Configuration

Run settings for the storefront suite. Values are loaded from
``config/e2e.yaml`` with ``config/local.yaml`` merged on top (optional,
gitignored), then overridden by environment variables:

    TEST_ENV              Environment name from fixtures/data/environments.json
    E2E_HEADLESS          true/false
    E2E_SLOW_MO           Milliseconds between browser actions
    E2E_DEFAULT_TIMEOUT   Default action timeout (ms)
    E2E_ARTIFACTS_DIR     Screenshots and auth state location
    E2E_FIXTURES_DIR      JSON fixtures location
    E2E_CONFIG_DIR        Directory holding e2e.yaml
    E2E_RECORD_VIDEO      true/false

A ``.env`` file at the project root is loaded first, so credentials and
overrides can live there during local runs.

Usage:
    from storefront_e2e.config import get_config

    config = get_config()
    config.default_timeout
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or is invalid."""

    pass


def _merge_config(base: Dict, override: Dict) -> Dict:
    """Deep merge override config into base config."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """Load and merge the YAML run settings."""

    BASE_FILE = "e2e.yaml"
    LOCAL_FILE = "local.yaml"

    def __init__(self, config_dir: Optional[str] = None):
        config_dir = config_dir or os.environ.get("E2E_CONFIG_DIR")
        self.config_dir = Path(config_dir) if config_dir else PROJECT_ROOT / "config"
        self._cache: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load settings with local overrides.

        Loading order:
        1. config/e2e.yaml
        2. config/local.yaml (overrides, gitignored)
        """
        if self._cache is not None:
            return self._cache

        base_path = self.config_dir / self.BASE_FILE
        if not base_path.exists():
            raise ConfigError(f"Base config not found: {base_path}")

        config = self._read(base_path)

        local_path = self.config_dir / self.LOCAL_FILE
        if local_path.exists():
            logger.info(f"Applying local config overrides from {local_path}")
            config = _merge_config(config, self._read(local_path))

        self._cache = config
        return config

    def _read(self, path: Path) -> Dict[str, Any]:
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        return data


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return int(default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name}: '{raw}' is not a valid integer")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return bool(default)
    return raw.lower() in ("true", "1", "yes", "on")


def _resolve_path(value: str) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


class E2EConfig:
    """Resolved E2E run settings."""

    def __init__(self, settings: Dict[str, Any]):
        browser = settings.get("browser", {})
        timeouts = settings.get("timeouts", {})
        artifacts = settings.get("artifacts", {})

        # Environment selection
        self.test_env = os.environ.get("TEST_ENV") or settings.get("environment", "staging")

        # Browser settings
        self.headless = _env_bool("E2E_HEADLESS", browser.get("headless", True))
        self.slow_mo = _env_int("E2E_SLOW_MO", browser.get("slow_mo", 0))
        self.viewport = dict(browser.get("viewport", {"width": 1280, "height": 720}))
        self.record_video = _env_bool("E2E_RECORD_VIDEO", False)

        # Timeouts (milliseconds)
        self.default_timeout = _env_int("E2E_DEFAULT_TIMEOUT", timeouts.get("default", 30000))
        self.navigation_timeout = int(timeouts.get("navigation", 60000))
        self.expect_timeout = int(timeouts.get("expect", 10000))
        self.container_timeout = int(timeouts.get("container", 15000))

        # Files
        self.artifacts_dir = _resolve_path(
            os.environ.get("E2E_ARTIFACTS_DIR") or artifacts.get("dir", "tests/e2e/artifacts")
        )
        self.screenshot_dir = self.artifacts_dir / "screenshots"
        self.auth_state_path = self.artifacts_dir / artifacts.get(
            "auth_state_file", "auth-standard.json"
        )
        self.fixtures_dir = _resolve_path(
            os.environ.get("E2E_FIXTURES_DIR") or settings.get("fixtures_dir", "fixtures/data")
        )

        self.suites: Dict[str, Dict[str, Any]] = settings.get("suites", {})

        timeouts = ("default_timeout", "navigation_timeout", "expect_timeout", "container_timeout")
        for name in timeouts:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")

    def suite(self, name: str) -> Dict[str, Any]:
        """Settings for one suite (login, authenticated, smoke)."""
        if name not in self.suites:
            raise ConfigError(f"Unknown suite '{name}'. Known suites: {sorted(self.suites)}")
        return self.suites[name]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "test_env": self.test_env,
            "headless": self.headless,
            "slow_mo": self.slow_mo,
            "default_timeout": self.default_timeout,
            "navigation_timeout": self.navigation_timeout,
            "artifacts_dir": str(self.artifacts_dir),
            "fixtures_dir": str(self.fixtures_dir),
        }

    @classmethod
    def load(cls, config_dir: Optional[str] = None) -> "E2EConfig":
        return cls(ConfigLoader(config_dir).load())


_config: Optional[E2EConfig] = None


def get_config() -> E2EConfig:
    """Return the process-wide config, loading .env and YAML on first use."""
    global _config
    if _config is None:
        load_dotenv(PROJECT_ROOT / ".env", override=False)
        _config = E2EConfig.load()
        logger.debug(f"E2E config: {_config.to_dict()}")
    return _config


def reset_config() -> None:
    """Forget the cached config (used by tests that change the environment)."""
    global _config
    _config = None
