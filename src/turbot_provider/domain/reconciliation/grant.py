"""Reconciliation of ``turbot_grant`` resources.

Configuration names the granted resource by aka, while Turbot returns its id.
Create and Read therefore store every aka of the resource in the computed
``resource_akas`` attribute, and diffs on ``resource`` are suppressed when the
configured aka is one of them.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from turbot_provider.domain.errors import ImmutableResourceError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from turbot_provider.domain.ports import DiffSuppressor, GrantOperations
    from turbot_provider.domain.state import ResourceState

log = getLogger(__name__)

# state attribute -> grant input field
GRANT_FIELDS: Final[dict[str, str]] = {
    "permission_type": "permissionTypeAka",
    "permission_level": "permissionLevelAka",
}


def aka_in_resource_akas(aka: str, resource_akas: Iterable[str]) -> bool:
    return any(candidate == aka for candidate in resource_akas)


def suppress_if_resource_aka_matches(state: ResourceState, old: str, new: str) -> bool:  # noqa: ARG001
    resource_akas = state.get("resource_akas")
    if not isinstance(resource_akas, list | tuple) or not resource_akas:
        return False
    return aka_in_resource_akas(new, (str(aka) for aka in resource_akas))


class GrantReconciler:
    force_new: frozenset[str] = frozenset(
        {"resource", "resource_akas", "permission_type", "permission_level", "profile_id"}
    )

    def __init__(self, client: GrantOperations) -> None:
        self._client = client

    @property
    def diff_suppressors(self) -> Mapping[str, DiffSuppressor]:
        return {"resource": suppress_if_resource_aka_matches}

    def exists(self, state: ResourceState) -> bool:
        if not state.id:
            return False
        return self._client.grant_exists(state.id)

    def create(self, state: ResourceState) -> None:
        resource_aka = state.get_str("resource")
        profile_id = state.get_str("profile_id")
        data = {
            input_field: state.get_str(attribute)
            for attribute, input_field in GRANT_FIELDS.items()
            if state.is_set(attribute)
        }

        metadata = self._client.create_grant(profile_id, resource_aka, data)
        state.set("resource_akas", self._client.get_resource_akas(resource_aka))
        state.set_id(metadata.id)
        log.info("Created grant %s for profile %s on %s", metadata.id, profile_id, resource_aka)

    def read(self, state: ResourceState) -> None:
        grant_id = self._require_id(state)
        try:
            grant = self._client.read_grant(grant_id)
        except NotFoundError:
            log.warning("Grant %s no longer exists; clearing its id", grant_id)
            state.clear_id()
            return

        resource_id = grant.turbot.resource_id or ""
        resource_akas = self._client.get_resource_akas(resource_id) if resource_id else []
        state.update(
            {
                "permission_level_id": grant.permission_level_id,
                "permission_type_id": grant.permission_type_id,
                "profile_id": grant.turbot.profile_id or "",
                "resource": resource_id,
                "resource_akas": resource_akas,
            }
        )

    def update(self, state: ResourceState) -> None:
        raise ImmutableResourceError(
            f"Grant {state.id} cannot be updated in place; changes require replacement"
        )

    def delete(self, state: ResourceState) -> None:
        self._client.delete_grant(self._require_id(state))
        state.clear_id()

    def import_state(self, state: ResourceState) -> list[ResourceState]:
        self.read(state)
        return [state]

    @staticmethod
    def _require_id(state: ResourceState) -> str:
        if not state.id:
            raise ValueError("Grant state has no id")
        return state.id


__all__ = [
    "GRANT_FIELDS",
    "GrantReconciler",
    "aka_in_resource_akas",
    "suppress_if_resource_aka_matches",
]
