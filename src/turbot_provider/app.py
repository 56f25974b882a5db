"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from turbot_provider.adapters.turbot import TurbotClient
from turbot_provider.config import ConfigurationError
from turbot_provider.domain.errors import TurbotError

if TYPE_CHECKING:
    from turbot_provider.adapters.turbot import ClientFactory
    from turbot_provider.config import ProviderConfig
    from turbot_provider.domain.model import PolicyValue

log = getLogger(__name__)


def configure_provider(
    config: ProviderConfig,
    *,
    client_factory: ClientFactory | None = None,
) -> TurbotClient:
    """Build a validated client from the provider block.

    Any failure is reported as a ``ConfigurationError`` whose message says
    which stage failed, with the underlying error chained.
    """

    try:
        client = TurbotClient.create(
            config.client_config(),
            resilience=config.resilience,
            client_factory=client_factory,
        )
    except (ConfigurationError, TurbotError) as exc:
        raise ConfigurationError(f"failed to create client: {exc}") from exc

    log.info("client initialized, now validating")
    try:
        client.validate()
    except TurbotError as exc:
        raise ConfigurationError(f"failed to validate client: {exc}") from exc
    return client


def list_resource_akas(client: TurbotClient, resource_aka: str) -> list[str]:
    akas = client.get_resource_akas(resource_aka)
    log.info("Resource %s has %s akas", resource_aka, len(akas))
    return akas


def read_effective_policy_value(
    client: TurbotClient,
    *,
    policy_type: str,
    resource_aka: str,
) -> PolicyValue:
    value = client.read_policy_value(policy_type, resource_aka)
    log.info(
        "Policy %s on %s: state=%s, precedence=%s",
        policy_type,
        resource_aka,
        value.state,
        value.precedence,
    )
    return value


__all__ = ["configure_provider", "list_resource_akas", "read_effective_policy_value"]
