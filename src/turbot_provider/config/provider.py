"""Provider-level configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Final

from .credentials import ClientConfig, ClientCredentials
from .errors import ConfigurationError
from .http_resilience import ResilienceConfig

TURBOT_TIMEOUT_SECONDS: Final[float] = 30.0
ENV_TIMEOUT_SECONDS: Final[str] = "TURBOT_TIMEOUT_SECONDS"


def get_turbot_resilience() -> ResilienceConfig:
    raw_timeout = os.getenv(ENV_TIMEOUT_SECONDS)
    timeout = TURBOT_TIMEOUT_SECONDS
    if raw_timeout and raw_timeout.strip():
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"{ENV_TIMEOUT_SECONDS} must be a number, got {raw_timeout!r}"
            ) from exc
        if timeout <= 0:
            raise ConfigurationError(f"{ENV_TIMEOUT_SECONDS} must be positive")
    return ResilienceConfig(name="turbot", timeout_seconds=timeout)


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Provider block as supplied by the host; every field is optional."""

    access_key: str = ""
    secret_key: str = field(default="", repr=False)
    workspace: str = ""
    profile: str = ""
    credentials_file: str = ""
    resilience: ResilienceConfig = field(default_factory=get_turbot_resilience)

    def client_config(self) -> ClientConfig:
        return ClientConfig(
            credentials=ClientCredentials(
                access_key=self.access_key,
                secret_key=self.secret_key,
                workspace=self.workspace,
            ),
            profile=self.profile,
            credentials_path=self.credentials_file,
        )
