"""Application configuration helpers."""

from __future__ import annotations

from .credentials import (
    DEFAULT_PROFILE,
    ClientConfig,
    ClientCredentials,
    load_profile,
    resolve_credentials,
)
from .endpoint import build_api_url
from .env import read_env_vars, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .provider import ProviderConfig, get_turbot_resilience

__all__ = [
    "DEFAULT_PROFILE",
    "ClientConfig",
    "ClientCredentials",
    "ConfigurationError",
    "MissingConfigurationError",
    "ProviderConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "build_api_url",
    "get_turbot_resilience",
    "load_profile",
    "read_env_vars",
    "require_env_var",
    "require_env_vars",
    "resolve_credentials",
]
