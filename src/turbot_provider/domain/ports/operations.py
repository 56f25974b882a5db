"""Ports for the Turbot operations the reconcilers depend on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from turbot_provider.domain.model import Grant, GrantMetadata, PolicySetting


@runtime_checkable
class PolicySettingOperations(Protocol):
    def create_policy_setting(
        self,
        policy_type: str,
        resource_aka: str,
        payload: Mapping[str, str],
    ) -> PolicySetting: ...

    def read_policy_setting(self, setting_id: str) -> PolicySetting: ...

    def update_policy_setting(self, setting_id: str, payload: Mapping[str, str]) -> None: ...

    def delete_policy_setting(self, setting_id: str) -> None: ...

    def policy_setting_exists(self, setting_id: str) -> bool: ...

    def find_policy_setting(self, policy_type: str, resource_aka: str) -> PolicySetting | None: ...


@runtime_checkable
class GrantOperations(Protocol):
    def create_grant(
        self,
        profile_id: str,
        resource_aka: str,
        data: Mapping[str, str],
    ) -> GrantMetadata: ...

    def read_grant(self, grant_id: str) -> Grant: ...

    def delete_grant(self, grant_id: str) -> None: ...

    def grant_exists(self, grant_id: str) -> bool: ...

    def get_resource_akas(self, resource_aka: str) -> list[str]: ...


__all__ = ["GrantOperations", "PolicySettingOperations"]
