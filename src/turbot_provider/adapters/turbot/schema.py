"""Pydantic models describing the Turbot GraphQL payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _none_to_empty_list(value: object) -> object:
    return [] if value is None else value


def _none_to_empty_dict(value: object) -> object:
    return {} if value is None else value


class TurbotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)


class GraphQLErrorPayload(TurbotBaseModel):
    message: str = ""


class GraphQLEnvelope(TurbotBaseModel):
    """Top level ``{"data": ..., "errors": [...]}`` body of every response."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorPayload] = Field(default_factory=list)

    _normalize_errors = field_validator("errors", mode="before")(_none_to_empty_list)

    @property
    def first_error(self) -> str | None:
        if not self.errors:
            return None
        return self.errors[0].message or "Turbot API returned an error without a message"


# --- metadata blocks ---


class ResourceMetadataPayload(TurbotBaseModel):
    id: str
    parent_id: str | None = None
    akas: list[str] = Field(default_factory=list)
    title: str | None = None
    tags: dict[str, Any] = Field(default_factory=dict)
    custom: Any = None
    metadata: Any = None
    path: str | None = None
    state: str | None = None
    resource_type_id: str | None = None
    resource_group_ids: list[str] = Field(default_factory=list)
    version_id: str | None = None
    actor_identity_id: str | None = None
    actor_persona_id: str | None = None
    actor_role_id: str | None = None
    create_timestamp: str | None = None
    update_timestamp: str | None = None
    delete_timestamp: str | None = None

    _normalize_lists = field_validator("akas", "resource_group_ids", mode="before")(
        _none_to_empty_list
    )
    _normalize_tags = field_validator("tags", mode="before")(_none_to_empty_dict)


class PolicyMetadataPayload(TurbotBaseModel):
    id: str
    parent_id: str | None = None
    resource_id: str | None = None
    akas: list[str] = Field(default_factory=list)

    _normalize_akas = field_validator("akas", mode="before")(_none_to_empty_list)


class GrantMetadataPayload(TurbotBaseModel):
    id: str
    profile_id: str | None = None
    resource_id: str | None = None


class IdPayload(TurbotBaseModel):
    id: str


class MutationResultPayload(TurbotBaseModel):
    turbot: IdPayload


# --- policies ---


class PolicySettingPayload(TurbotBaseModel):
    value: Any = None
    value_source: str | None = None
    default: bool | None = None
    precedence: str | None = None
    template: str | None = None
    template_input: str | None = None
    input: str | None = None
    note: str | None = None
    valid_from_timestamp: str | None = None
    valid_to_timestamp: str | None = None
    turbot: PolicyMetadataPayload


class PolicySettingResponse(TurbotBaseModel):
    policy_setting: PolicySettingPayload | None = None


class PolicySettingMutationResponse(TurbotBaseModel):
    policy_setting: MutationResultPayload | None = None


class PolicySettingList(TurbotBaseModel):
    items: list[PolicySettingPayload] = Field(default_factory=list)

    _normalize_items = field_validator("items", mode="before")(_none_to_empty_list)


class FindPolicySettingsResponse(TurbotBaseModel):
    policy_settings: PolicySettingList = Field(default_factory=PolicySettingList)

    @field_validator("policy_settings", mode="before")
    @classmethod
    def _default_list(cls, value: object) -> object:
        return {} if value is None else value


class PolicyValuePayload(TurbotBaseModel):
    value: Any = None
    precedence: str | None = None
    state: str | None = None
    reason: str | None = None
    details: str | None = None
    setting: PolicySettingPayload | None = None
    turbot: PolicyMetadataPayload


class PolicyValueResponse(TurbotBaseModel):
    policy_value: PolicyValuePayload | None = None


# --- grants ---


class CreatedGrantPayload(TurbotBaseModel):
    turbot: GrantMetadataPayload


class CreateGrantResponse(TurbotBaseModel):
    grants: CreatedGrantPayload | None = None


class GrantPayload(TurbotBaseModel):
    permission_type_id: str | None = None
    permission_level_id: str | None = None
    turbot: GrantMetadataPayload


class ReadGrantResponse(TurbotBaseModel):
    grant: GrantPayload | None = None


class GrantMutationResponse(TurbotBaseModel):
    grant: MutationResultPayload | None = None


# --- resources ---


class ResourcePayload(TurbotBaseModel):
    data: Any = None
    turbot: ResourceMetadataPayload


class ResourceResponse(TurbotBaseModel):
    resource: ResourcePayload | None = None


class ResourceAkasMetadata(TurbotBaseModel):
    id: str | None = None
    akas: list[str] = Field(default_factory=list)

    _normalize_akas = field_validator("akas", mode="before")(_none_to_empty_list)


class ResourceAkasPayload(TurbotBaseModel):
    turbot: ResourceAkasMetadata


class ResourceAkasResponse(TurbotBaseModel):
    resource: ResourceAkasPayload | None = None


# --- validation ---

EXPECTED_QUERY_TYPE = "Query"


class QueryTypePayload(TurbotBaseModel):
    name: str | None = None


class SchemaPayload(TurbotBaseModel):
    query_type: QueryTypePayload | None = None


class ValidationResponse(TurbotBaseModel):
    graphql_schema: SchemaPayload | None = Field(default=None, alias="schema")

    def is_valid(self) -> bool:
        if self.graphql_schema is None or self.graphql_schema.query_type is None:
            return False
        return self.graphql_schema.query_type.name == EXPECTED_QUERY_TYPE
