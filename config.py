"""
UI suite configuration module.

Defines the symbolic application routes, the browser profile read from
``ui_config.yml`` and the immutable ``Settings`` object handed to fixtures.
Profiles are selected by name (``dev`` by default) the same way the
environment selects which block of the YAML document applies.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import yaml

from shared.env_utils import ConfigurationError, get_base_url, validate_required_env_vars

logger = logging.getLogger(__name__)

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

UI_CONFIG_PATH = BASE_DIR / "ui_config.yml"
DEFAULT_PROFILE = "dev"
DEFAULT_EXPECT_TIMEOUT = 10_000

CI_WORKERS = 2
LOCAL_WORKERS = 4


class Endpoint(str, Enum):
    """Application routes, relative to ``BASE_URL``."""

    LOGIN_PAGE = "/auth/login"
    REGISTRATION_PAGE = "/auth/sign-up"
    FORGOT_PASSWORD = "/auth/forgot-password"
    DASHBOARD = "/dashboard"


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int

    def as_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class UIConfig:
    """Browser profile: viewport plus default timeouts in milliseconds."""

    viewport: Viewport
    action_timeout: int
    navigation_timeout: int
    expect_timeout: int = DEFAULT_EXPECT_TIMEOUT


@dataclass(frozen=True)
class Settings:
    """Everything a UI session needs, resolved once per process."""

    base_url: str
    ui: UIConfig


def _profile_from_document(document: Mapping, profile: str, path: Path) -> UIConfig:
    try:
        block = document[profile]
        viewport = block["viewport"]
        return UIConfig(
            viewport=Viewport(width=int(viewport["width"]), height=int(viewport["height"])),
            action_timeout=int(block["actionTimeout"]),
            navigation_timeout=int(block["navigationTimeout"]),
            expect_timeout=int(block.get("expectTimeout", DEFAULT_EXPECT_TIMEOUT)),
        )
    except KeyError as exc:
        raise ConfigurationError(
            f"UI config {path} has no usable '{profile}' profile (missing {exc})"
        ) from exc
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"UI config {path} has no usable '{profile}' profile (invalid value: {exc})"
        ) from exc


def load_ui_config(profile: str | None = None, path: Path = UI_CONFIG_PATH) -> UIConfig:
    """
    Load a browser profile from the YAML config file.

    Args:
        profile: Profile name. If None, uses the UI_PROFILE environment
                 variable, falling back to ``dev``.
        path: YAML file to read.

    Returns:
        The parsed UIConfig.

    Raises:
        ConfigurationError: If the profile or one of its properties is missing.
    """
    if profile is None:
        profile = os.environ.get("UI_PROFILE", DEFAULT_PROFILE)

    with path.open("r", encoding="utf-8") as handle:
        document = yaml.safe_load(handle) or {}

    ui_config = _profile_from_document(document, profile, path)
    logger.info(f"Loaded UI profile '{profile}' from {path}")
    return ui_config


def load_settings(profile: str | None = None, path: Path = UI_CONFIG_PATH) -> Settings:
    """
    Validate the environment and build the run's Settings.

    Raises:
        ConfigurationError: If a required environment variable is missing.
    """
    validate_required_env_vars()
    return Settings(base_url=get_base_url(), ui=load_ui_config(profile, path))


def worker_count(environ: Mapping[str, str] | None = None) -> int:
    """Number of parallel browser workers: fewer on CI runners."""
    env = os.environ if environ is None else environ
    return CI_WORKERS if env.get("CI") else LOCAL_WORKERS
