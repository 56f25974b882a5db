"""Reconciliation of ``turbot_policy_setting`` resources.

A Turbot policy setting has two representations of its payload:

- ``value``: the typed value, whose type depends on the policy schema
- ``valueSource``: the YAML source of that value

The configured value is a plain string, so we cannot tell up front which form
the policy type expects. Writes therefore follow a two-state protocol: submit the
string as ``value``; if the API rejects it with a validation error, submit the
same string once more as ``valueSource``. When the second form is used, the
state keeps the raw string as ``value_source``, the YAML-decoded scalar as
``value``, and sets ``value_source_used`` so diffs compare against the source.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final

import yaml

from turbot_provider.domain.errors import (
    DuplicateResourceError,
    NotFoundError,
    TurbotAPIError,
    is_failed_validation,
)
from turbot_provider.domain.values import DynamicValue

if TYPE_CHECKING:
    from collections.abc import Mapping

    from turbot_provider.domain.model import PolicySetting
    from turbot_provider.domain.ports import (
        DiffSuppressor,
        PolicySettingOperations,
        ValueEncryptor,
    )
    from turbot_provider.domain.state import ResourceState

log = getLogger(__name__)

DEFAULT_PRECEDENCE: Final[str] = "required"

# state attribute -> policy setting input field, besides value/valueSource
PAYLOAD_FIELDS: Final[dict[str, str]] = {
    "precedence": "precedence",
    "template": "template",
    "template_input": "templateInput",
    "note": "note",
    "valid_from_timestamp": "validFromTimestamp",
    "valid_to_timestamp": "validToTimestamp",
}


class WriteAttempt(StrEnum):
    """Which input field carries the configured value on a write."""

    VALUE = "value"
    VALUE_SOURCE = "valueSource"


def next_attempt(attempt: WriteAttempt, error: BaseException) -> WriteAttempt | None:
    """Return the attempt that follows a failed write, or None when writing stops."""

    if attempt is WriteAttempt.VALUE and is_failed_validation(error):
        return WriteAttempt.VALUE_SOURCE
    return None


def build_payload(state: ResourceState, attempt: WriteAttempt) -> dict[str, str]:
    payload = {attempt.value: state.get_str("value")}
    for attribute, input_field in PAYLOAD_FIELDS.items():
        payload[input_field] = state.get_str(attribute)
    if not payload["precedence"]:
        payload["precedence"] = DEFAULT_PRECEDENCE
    return {key: value for key, value in payload.items() if value}


def value_text_from_source(value_source: str) -> str:
    """Decode a YAML value source into the text stored as ``value``."""

    try:
        decoded = yaml.safe_load(value_source)
    except yaml.YAMLError:
        log.warning("Accepted value source is not valid YAML; storing it verbatim")
        return value_source
    try:
        return DynamicValue(decoded).to_text()
    except TypeError:
        log.warning(
            "Accepted value source decodes to an unsupported %s; storing it verbatim",
            type(decoded).__name__,
        )
        return value_source


def suppress_if_encrypted_or_value_source_matches(
    state: ResourceState,
    old: str,
    new: str,
) -> bool:
    """Diff suppressor for ``value``.

    Encrypted values cannot be compared, so any change is suppressed when a PGP
    key is configured. Otherwise the new value is compared with the old one, or
    with the stored value source when that was the form the API accepted.
    """

    if state.is_set("pgp_key"):
        return True
    if not old:
        return False
    if state.get_bool("value_source_used"):
        old = state.get_str("value_source")
    return new == old


class PolicySettingReconciler:
    force_new: frozenset[str] = frozenset({"policy_type", "resource", "pgp_key"})

    def __init__(self, client: PolicySettingOperations, *, encryptor: ValueEncryptor) -> None:
        self._client = client
        self._encryptor = encryptor

    @property
    def diff_suppressors(self) -> Mapping[str, DiffSuppressor]:
        return {"value": suppress_if_encrypted_or_value_source_matches}

    def exists(self, state: ResourceState) -> bool:
        if not state.id:
            return False
        return self._client.policy_setting_exists(state.id)

    def create(self, state: ResourceState) -> None:
        policy_type = state.get_str("policy_type")
        resource_aka = state.get_str("resource")

        pgp_key = state.get_str("pgp_key")
        if pgp_key:
            # an unusable key must fail before anything is written remotely
            self._encryptor(pgp_key, "")

        existing = self._client.find_policy_setting(policy_type, resource_aka)
        # a setting without a value is not counted as a duplicate
        if existing is not None and not existing.value.is_null:
            raise DuplicateResourceError(
                f"A policy setting for policy type: '{policy_type}', resource: "
                f"'{resource_aka}' already exists ( id: {existing.turbot.id} ). To manage "
                "the existing setting, import it using its id"
            )

        attempt, setting = self._write(
            state,
            lambda payload: self._client.create_policy_setting(policy_type, resource_aka, payload),
        )
        state.set_id(setting.turbot.id)
        if attempt is WriteAttempt.VALUE_SOURCE:
            self._store_value_source(state)
        else:
            self._store_value(state, setting.value.to_text(), setting.value_source)
            state.set("value_source_used", False)
        log.info("Created policy setting %s (%s on %s)", setting.turbot.id, policy_type, resource_aka)

    def read(self, state: ResourceState) -> None:
        setting_id = self._require_id(state)
        try:
            setting = self._client.read_policy_setting(setting_id)
        except NotFoundError:
            log.warning("Policy setting %s no longer exists; clearing its id", setting_id)
            state.clear_id()
            return

        self._apply_setting(state, setting)

    def update(self, state: ResourceState) -> None:
        setting_id = self._require_id(state)
        attempt, _ = self._write(
            state,
            lambda payload: self._client.update_policy_setting(setting_id, payload),
        )
        if attempt is WriteAttempt.VALUE_SOURCE:
            self._store_value_source(state)
        else:
            value = state.get_str("value")
            self._store_value(state, value, value)
            state.set("value_source_used", False)

    def delete(self, state: ResourceState) -> None:
        self._client.delete_policy_setting(self._require_id(state))
        state.clear_id()

    def import_state(self, state: ResourceState) -> list[ResourceState]:
        self.read(state)
        return [state]

    def _write[T](
        self,
        state: ResourceState,
        write: Callable[[dict[str, str]], T],
    ) -> tuple[WriteAttempt, T]:
        attempt = WriteAttempt.VALUE
        while True:
            payload = build_payload(state, attempt)
            try:
                return attempt, write(payload)
            except TurbotAPIError as exc:
                following = next_attempt(attempt, exc)
                if following is None:
                    # a cleared id makes the next run recreate the setting
                    state.clear_id()
                    raise
                log.info("Policy value rejected as %s, retrying as %s", attempt, following)
                attempt = following

    def _apply_setting(self, state: ResourceState, setting: PolicySetting) -> None:
        self._store_value(state, setting.value.to_text(), setting.value_source)
        state.update(
            {
                "precedence": setting.precedence,
                "template": setting.template,
                "template_input": setting.template_input,
                "note": setting.note,
                "valid_from_timestamp": setting.valid_from_timestamp,
                "valid_to_timestamp": setting.valid_to_timestamp,
            }
        )

    def _store_value_source(self, state: ResourceState) -> None:
        value_source = state.get_str("value")
        self._store_value(state, value_text_from_source(value_source), value_source)
        state.set("value_source_used", True)

    def _store_value(self, state: ResourceState, value: str, value_source: str) -> None:
        pgp_key = state.get_str("pgp_key")
        if not pgp_key:
            state.update({"value": value, "value_source": value_source})
            return

        encrypted_value = self._encryptor(pgp_key, value)
        encrypted_source = self._encryptor(pgp_key, value_source)
        state.update(
            {
                "value": encrypted_value.ciphertext,
                "value_key_fingerprint": encrypted_value.fingerprint,
                "value_source": encrypted_source.ciphertext,
                "value_source_key_fingerprint": encrypted_source.fingerprint,
            }
        )

    @staticmethod
    def _require_id(state: ResourceState) -> str:
        if not state.id:
            raise ValueError("Policy setting state has no id")
        return state.id


__all__ = [
    "DEFAULT_PRECEDENCE",
    "PolicySettingReconciler",
    "WriteAttempt",
    "build_payload",
    "next_attempt",
    "suppress_if_encrypted_or_value_source_matches",
    "value_text_from_source",
]
