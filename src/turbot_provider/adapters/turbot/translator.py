"""Translate Turbot payload models into domain entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from turbot_provider.domain.model import (
    Grant,
    GrantMetadata,
    PolicyMetadata,
    PolicySetting,
    PolicyValue,
    Resource,
    ResourceMetadata,
)
from turbot_provider.domain.values import DynamicValue

if TYPE_CHECKING:
    from .schema import (
        GrantMetadataPayload,
        GrantPayload,
        PolicyMetadataPayload,
        PolicySettingPayload,
        PolicyValuePayload,
        ResourceMetadataPayload,
        ResourcePayload,
    )


def parse_resource_metadata(payload: ResourceMetadataPayload) -> ResourceMetadata:
    return ResourceMetadata(
        id=payload.id,
        parent_id=payload.parent_id,
        akas=tuple(payload.akas),
        title=payload.title,
        tags={str(key): str(value) for key, value in payload.tags.items()},
        custom=DynamicValue(payload.custom),
        metadata=DynamicValue(payload.metadata),
        path=payload.path,
        state=payload.state,
        resource_type_id=payload.resource_type_id,
        resource_group_ids=tuple(payload.resource_group_ids),
        version_id=payload.version_id,
        actor_identity_id=payload.actor_identity_id,
        actor_persona_id=payload.actor_persona_id,
        actor_role_id=payload.actor_role_id,
        create_timestamp=payload.create_timestamp,
        update_timestamp=payload.update_timestamp,
        delete_timestamp=payload.delete_timestamp,
    )


def parse_policy_metadata(payload: PolicyMetadataPayload) -> PolicyMetadata:
    return PolicyMetadata(
        id=payload.id,
        parent_id=payload.parent_id,
        resource_id=payload.resource_id,
        akas=tuple(payload.akas),
    )


def parse_policy_setting(payload: PolicySettingPayload) -> PolicySetting:
    return PolicySetting(
        turbot=parse_policy_metadata(payload.turbot),
        value=DynamicValue(payload.value),
        value_source=payload.value_source or "",
        default=bool(payload.default),
        precedence=payload.precedence or "",
        template=payload.template or "",
        template_input=payload.template_input or "",
        input=payload.input or "",
        note=payload.note or "",
        valid_from_timestamp=payload.valid_from_timestamp or "",
        valid_to_timestamp=payload.valid_to_timestamp or "",
    )


def parse_policy_value(payload: PolicyValuePayload) -> PolicyValue:
    return PolicyValue(
        turbot=parse_policy_metadata(payload.turbot),
        value=DynamicValue(payload.value),
        precedence=payload.precedence or "",
        state=payload.state or "",
        reason=payload.reason or "",
        details=payload.details or "",
        setting=parse_policy_setting(payload.setting) if payload.setting else None,
    )


def parse_grant_metadata(payload: GrantMetadataPayload) -> GrantMetadata:
    return GrantMetadata(
        id=payload.id,
        profile_id=payload.profile_id,
        resource_id=payload.resource_id,
    )


def parse_grant(payload: GrantPayload) -> Grant:
    return Grant(
        turbot=parse_grant_metadata(payload.turbot),
        permission_type_id=payload.permission_type_id or "",
        permission_level_id=payload.permission_level_id or "",
    )


def parse_resource(payload: ResourcePayload) -> Resource:
    return Resource(
        turbot=parse_resource_metadata(payload.turbot),
        data=DynamicValue(payload.data),
    )
