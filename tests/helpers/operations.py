"""In-memory stand-in for the Turbot operations used by the reconcilers."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

import yaml

from turbot_provider.domain.errors import NotFoundError
from turbot_provider.domain.model import (
    Grant,
    GrantMetadata,
    PolicyMetadata,
    PolicySetting,
)
from turbot_provider.domain.ports import EncryptedValue
from turbot_provider.domain.values import DynamicValue

if TYPE_CHECKING:
    from collections.abc import Mapping


def fake_encryptor(public_key: str, plaintext: str) -> EncryptedValue:
    return EncryptedValue(fingerprint=f"FP:{public_key}", ciphertext=f"enc({plaintext})")


def _setting_value(payload: Mapping[str, str]) -> tuple[DynamicValue, str]:
    if "valueSource" in payload:
        source = payload["valueSource"]
        return DynamicValue(yaml.safe_load(source)), source
    return DynamicValue(payload.get("value")), payload.get("value", "")


@dataclass
class FakeTurbotOperations:
    """Satisfies both operations ports.

    Exceptions queued in ``write_errors`` are raised, in order, by the next
    policy setting create/update calls.
    """

    settings: dict[str, PolicySetting] = field(default_factory=dict)
    setting_targets: dict[str, tuple[str, str]] = field(default_factory=dict)
    grants: dict[str, Grant] = field(default_factory=dict)
    resource_akas: dict[str, list[str]] = field(default_factory=dict)
    write_errors: list[Exception] = field(default_factory=list)
    calls: list[tuple[str, dict[str, str]]] = field(default_factory=list)
    _ids: itertools.count[int] = field(default_factory=lambda: itertools.count(200))

    def _next_id(self) -> str:
        return str(next(self._ids))

    def _raise_queued(self) -> None:
        if self.write_errors:
            raise self.write_errors.pop(0)

    # policy settings

    def add_setting(self, policy_type: str, resource_aka: str, setting: PolicySetting) -> None:
        self.settings[setting.turbot.id] = setting
        self.setting_targets[setting.turbot.id] = (policy_type, resource_aka)

    def create_policy_setting(
        self,
        policy_type: str,
        resource_aka: str,
        payload: Mapping[str, str],
    ) -> PolicySetting:
        self.calls.append(("create_policy_setting", dict(payload)))
        self._raise_queued()
        value, value_source = _setting_value(payload)
        setting = PolicySetting(
            turbot=PolicyMetadata(id=self._next_id(), resource_id=resource_aka),
            value=value,
            value_source=value_source,
            precedence=payload.get("precedence", ""),
            note=payload.get("note", ""),
        )
        self.add_setting(policy_type, resource_aka, setting)
        return setting

    def read_policy_setting(self, setting_id: str) -> PolicySetting:
        try:
            return self.settings[setting_id]
        except KeyError:
            raise NotFoundError(f"Policy setting {setting_id} not found") from None

    def update_policy_setting(self, setting_id: str, payload: Mapping[str, str]) -> None:
        self.calls.append(("update_policy_setting", dict(payload)))
        self._raise_queued()
        value, value_source = _setting_value(payload)
        current = self.read_policy_setting(setting_id)
        self.settings[setting_id] = replace(current, value=value, value_source=value_source)

    def delete_policy_setting(self, setting_id: str) -> None:
        self.read_policy_setting(setting_id)
        del self.settings[setting_id]

    def policy_setting_exists(self, setting_id: str) -> bool:
        return setting_id in self.settings

    def find_policy_setting(self, policy_type: str, resource_aka: str) -> PolicySetting | None:
        for setting_id, target in self.setting_targets.items():
            if target == (policy_type, resource_aka) and setting_id in self.settings:
                return self.settings[setting_id]
        return None

    # grants

    def create_grant(
        self,
        profile_id: str,
        resource_aka: str,
        data: Mapping[str, str],
    ) -> GrantMetadata:
        self.calls.append(("create_grant", dict(data)))
        resource_id = self.get_resource_akas(resource_aka)[0]
        metadata = GrantMetadata(id=self._next_id(), profile_id=profile_id, resource_id=resource_id)
        self.grants[metadata.id] = Grant(
            turbot=metadata,
            permission_type_id=f"type:{data.get('permissionTypeAka', '')}",
            permission_level_id=f"level:{data.get('permissionLevelAka', '')}",
        )
        return metadata

    def read_grant(self, grant_id: str) -> Grant:
        try:
            return self.grants[grant_id]
        except KeyError:
            raise NotFoundError(f"Grant {grant_id} not found") from None

    def delete_grant(self, grant_id: str) -> None:
        self.read_grant(grant_id)
        del self.grants[grant_id]

    def grant_exists(self, grant_id: str) -> bool:
        return grant_id in self.grants

    def get_resource_akas(self, resource_aka: str) -> list[str]:
        for akas in self.resource_akas.values():
            if resource_aka in akas:
                return list(akas)
        raise NotFoundError(f"Resource {resource_aka} not found")
