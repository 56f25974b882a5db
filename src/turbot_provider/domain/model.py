"""Domain entities returned by Turbot operations."""

from __future__ import annotations

from dataclasses import dataclass, field

from .values import NULL, DynamicValue


@dataclass(frozen=True, slots=True)
class ResourceMetadata:
    """The ``turbot`` block every Turbot resource carries."""

    id: str
    parent_id: str | None = None
    akas: tuple[str, ...] = ()
    title: str | None = None
    tags: dict[str, str] = field(default_factory=dict)
    custom: DynamicValue = NULL
    metadata: DynamicValue = NULL
    path: str | None = None
    state: str | None = None
    resource_type_id: str | None = None
    resource_group_ids: tuple[str, ...] = ()
    version_id: str | None = None
    actor_identity_id: str | None = None
    actor_persona_id: str | None = None
    actor_role_id: str | None = None
    create_timestamp: str | None = None
    update_timestamp: str | None = None
    delete_timestamp: str | None = None


@dataclass(frozen=True, slots=True)
class PolicyMetadata:
    id: str
    parent_id: str | None = None
    resource_id: str | None = None
    akas: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PolicySetting:
    turbot: PolicyMetadata
    value: DynamicValue = NULL
    value_source: str = ""
    default: bool = False
    precedence: str = ""
    template: str = ""
    template_input: str = ""
    input: str = ""
    note: str = ""
    valid_from_timestamp: str = ""
    valid_to_timestamp: str = ""


@dataclass(frozen=True, slots=True)
class PolicyValue:
    """Effective value of a policy type on a resource, with the winning setting."""

    turbot: PolicyMetadata
    value: DynamicValue = NULL
    precedence: str = ""
    state: str = ""
    reason: str = ""
    details: str = ""
    setting: PolicySetting | None = None


@dataclass(frozen=True, slots=True)
class GrantMetadata:
    id: str
    profile_id: str | None = None
    resource_id: str | None = None


@dataclass(frozen=True, slots=True)
class Grant:
    turbot: GrantMetadata
    permission_type_id: str = ""
    permission_level_id: str = ""


@dataclass(frozen=True, slots=True)
class Resource:
    turbot: ResourceMetadata
    data: DynamicValue = NULL


__all__ = [
    "Grant",
    "GrantMetadata",
    "PolicyMetadata",
    "PolicySetting",
    "PolicyValue",
    "Resource",
    "ResourceMetadata",
]
