"""Turbot credential resolution.

Each credential field is resolved independently, highest precedence first:

1. explicit values (provider configuration)
2. environment variables (``TURBOT_ACCESS_KEY_ID`` and friends)
3. the selected profile of the shared credentials file

The credentials file is only read when the first two sources leave a field
unset. It is INI formatted::

    [default]
    turbot_access_key_id = ...
    turbot_secret_access_key = ...
    turbot_workspace = https://acme.cloud.turbot.com
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass, field, fields, replace
from logging import getLogger
from pathlib import Path
from typing import Final

from .env import read_env_vars
from .errors import ConfigurationError, MissingConfigurationError

log = getLogger(__name__)

DEFAULT_PROFILE: Final[str] = "default"
DEFAULT_CREDENTIALS_PATH: Final[Path] = Path("~/.config/turbot/credentials")

ENV_PROFILE: Final[str] = "TURBOT_PROFILE"
ENV_CREDENTIALS_PATH: Final[str] = "TURBOT_SHARED_CREDENTIALS_PATH"

# credential field -> key used in the credentials file; the environment variable
# is the upper-cased key
CREDENTIAL_KEYS: Final[dict[str, str]] = {
    "access_key": "turbot_access_key_id",
    "secret_key": "turbot_secret_access_key",
    "workspace": "turbot_workspace",
}


@dataclass(frozen=True, slots=True)
class ClientCredentials:
    access_key: str = ""
    secret_key: str = field(default="", repr=False)
    workspace: str = ""

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def missing_fields(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self) if not getattr(self, f.name))

    def merged_over(self, fallback: ClientCredentials) -> ClientCredentials:
        """Return a copy whose blank fields are taken from ``fallback``."""

        updates = {
            name: getattr(fallback, name)
            for name in self.missing_fields()
            if getattr(fallback, name)
        }
        return replace(self, **updates)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Everything needed to resolve the credentials for a client."""

    credentials: ClientCredentials = field(default_factory=ClientCredentials)
    profile: str = ""
    credentials_path: str = ""

    def resolve(self) -> ClientCredentials:
        return resolve_credentials(
            self.credentials,
            profile=self.profile,
            credentials_path=self.credentials_path,
        )


def credentials_from_environment() -> ClientCredentials:
    env_names = {name: key.upper() for name, key in CREDENTIAL_KEYS.items()}
    values = read_env_vars(tuple(env_names.values()))
    return ClientCredentials(
        **{name: values[env_name] for name, env_name in env_names.items() if env_name in values}
    )


def default_credentials_path() -> Path:
    env_path = os.getenv(ENV_CREDENTIALS_PATH)
    path = Path(env_path) if env_path and env_path.strip() else DEFAULT_CREDENTIALS_PATH
    return path.expanduser()


def load_profile(profile: str, path: Path) -> ClientCredentials:
    """Read one profile section from a credentials file.

    Keys absent from the section come back blank; the caller decides whether
    they were needed.
    """

    if not path.is_file():
        raise MissingConfigurationError(
            f"Credentials file {path} not found (required for profile '{profile}')"
        )

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as exc:
        raise ConfigurationError(f"Unable to parse credentials file {path}: {exc}") from exc

    if not parser.has_section(profile):
        raise MissingConfigurationError(f"Profile '{profile}' not found in credentials file {path}")

    section = parser[profile]
    return ClientCredentials(
        **{name: section.get(key, "").strip() for name, key in CREDENTIAL_KEYS.items()}
    )


def resolve_credentials(
    explicit: ClientCredentials | None = None,
    *,
    profile: str | None = None,
    credentials_path: str | Path | None = None,
) -> ClientCredentials:
    """Resolve credentials from explicit values, the environment and a profile."""

    explicit = explicit or ClientCredentials()
    if explicit.is_complete():
        return explicit

    resolved = explicit.merged_over(credentials_from_environment())
    if resolved.is_complete():
        return resolved

    profile_name = profile or os.getenv(ENV_PROFILE) or DEFAULT_PROFILE
    path = (
        Path(credentials_path).expanduser() if credentials_path else default_credentials_path()
    )
    log.debug("Loading Turbot credentials profile '%s' from %s", profile_name, path)
    resolved = resolved.merged_over(load_profile(profile_name, path))

    missing = resolved.missing_fields()
    if missing:
        missing_keys = ", ".join(CREDENTIAL_KEYS[name] for name in missing)
        raise MissingConfigurationError(
            f"Profile '{profile_name}' in credentials file {path} is missing: {missing_keys}"
        )
    return resolved


__all__ = [
    "CREDENTIAL_KEYS",
    "DEFAULT_PROFILE",
    "ClientConfig",
    "ClientCredentials",
    "credentials_from_environment",
    "default_credentials_path",
    "load_profile",
    "resolve_credentials",
]
