"""
Environment validation and secrets access for the UI suite.

Every UI run depends on a handful of environment variables (base URL and
the stored test user's credentials). This module checks for them up front
so a misconfigured run fails with the full list of missing keys instead
of dying halfway through a browser session.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

BASE_URL = "BASE_URL"
TEST_USER_EMAIL = "TEST_USER_EMAIL"
TEST_USER_PASSWORD = "TEST_USER_PASSWORD"

REQUIRED_ENV_VARS = (BASE_URL, TEST_USER_EMAIL, TEST_USER_PASSWORD)
USER_SECRET_VARS = (TEST_USER_EMAIL, TEST_USER_PASSWORD)


class ConfigurationError(Exception):
    """
    Raised when required configuration is missing.

    Attributes:
        missing: Every missing key, in the order it was checked.
    """

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = list(missing or [])


class Role(str, Enum):
    """Role tag attached to stored credentials."""

    USER = "User"


@dataclass(frozen=True)
class Credentials:
    """Login credentials read from the environment."""

    username: str
    password: str
    role: Role = Role.USER


def find_missing(keys: Iterable[str], environ: Mapping[str, str] | None = None) -> list[str]:
    """
    Return the keys that are unset or empty.

    Args:
        keys: Environment variable names to check.
        environ: Mapping to check against. Defaults to ``os.environ``.

    Returns:
        Missing keys in the order they were given.
    """
    env = os.environ if environ is None else environ
    return [key for key in keys if not env.get(key)]


def _format_missing(title: str, missing: list[str], hint: str) -> str:
    lines = "\n".join(f"   - {key}" for key in missing)
    return f"\n {title}:\n\n{lines}\n\n {hint}\n"


def validate_required(
    keys: Iterable[str],
    title: str = "Missing required environment variables",
    hint: str = "Add them to your .env file.",
) -> None:
    """
    Fail if any of ``keys`` is absent from the environment.

    Raises:
        ConfigurationError: Listing every missing key, not just the first.
    """
    missing = find_missing(keys)
    if missing:
        raise ConfigurationError(_format_missing(title, missing, hint), missing)


def validate_required_env_vars() -> None:
    """Check everything a UI run needs before any browser starts."""
    validate_required(REQUIRED_ENV_VARS)


def validate_user_secrets() -> None:
    """Check only the stored user's credentials."""
    validate_required(
        USER_SECRET_VARS,
        title="Missing required user credentials",
        hint="Add them to your .env file for UI testing.",
    )


def get_env(name: str) -> str:
    """
    Read a single required environment variable.

    Raises:
        ConfigurationError: If the variable is unset or empty.
    """
    value = os.environ.get(name)
    if not value:
        raise ConfigurationError(
            f"Environment variable {name} is required but not set", [name]
        )
    return value


def get_base_url() -> str:
    return get_env(BASE_URL)


class Secrets:
    """
    Read-only access to credentials held in the environment.

    Values are read on every call, so changes to the environment are
    always reflected.
    """

    @staticmethod
    def user() -> Credentials:
        """Credentials of the pre-provisioned test user."""
        return Credentials(
            username=get_env(TEST_USER_EMAIL),
            password=get_env(TEST_USER_PASSWORD),
            role=Role.USER,
        )
