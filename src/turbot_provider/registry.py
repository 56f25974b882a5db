"""Resource kinds served by the provider and the reconcilers behind them."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from turbot_provider.adapters.pgp import encrypt_value
from turbot_provider.domain.reconciliation import GrantReconciler, PolicySettingReconciler

if TYPE_CHECKING:
    from turbot_provider.adapters.turbot import TurbotClient
    from turbot_provider.domain.ports import ResourceReconciler, ValueEncryptor


class ResourceKind(StrEnum):
    POLICY_SETTING = "turbot_policy_setting"
    GRANT = "turbot_grant"


ReconcilerBuilder = Callable[["TurbotClient", "ValueEncryptor"], "ResourceReconciler"]


def _policy_setting(client: TurbotClient, encryptor: ValueEncryptor) -> ResourceReconciler:
    return PolicySettingReconciler(client, encryptor=encryptor)


def _grant(client: TurbotClient, _encryptor: ValueEncryptor) -> ResourceReconciler:
    return GrantReconciler(client)


RECONCILERS: Final[dict[ResourceKind, ReconcilerBuilder]] = {
    ResourceKind.POLICY_SETTING: _policy_setting,
    ResourceKind.GRANT: _grant,
}


def build_reconciler(
    kind: ResourceKind | str,
    client: TurbotClient,
    *,
    encryptor: ValueEncryptor = encrypt_value,
) -> ResourceReconciler:
    """Return the reconciler for ``kind`` bound to ``client``.

    Raises ``ValueError`` for resource type names the provider does not serve.
    """

    try:
        resource_kind = ResourceKind(kind)
    except ValueError as exc:
        raise ValueError(f"Unsupported resource type: {kind}") from exc
    return RECONCILERS[resource_kind](client, encryptor)


__all__ = ["RECONCILERS", "ResourceKind", "build_reconciler"]
