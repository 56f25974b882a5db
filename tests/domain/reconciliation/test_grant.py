from __future__ import annotations

import pytest

from tests.helpers.operations import FakeTurbotOperations
from turbot_provider.domain.errors import ImmutableResourceError
from turbot_provider.domain.model import Grant, GrantMetadata
from turbot_provider.domain.reconciliation import (
    GrantReconciler,
    aka_in_resource_akas,
    suppress_if_resource_aka_matches,
)
from turbot_provider.domain.state import ResourceState

RESOURCE_ID = "162167737977233"
RESOURCE_AKAS = [RESOURCE_ID, "tmod:@turbot/turbot#/", "arn:aws:::acme"]
PROFILE_ID = "178806665371159"


@pytest.fixture
def operations() -> FakeTurbotOperations:
    return FakeTurbotOperations(resource_akas={RESOURCE_ID: list(RESOURCE_AKAS)})


@pytest.fixture
def reconciler(operations: FakeTurbotOperations) -> GrantReconciler:
    return GrantReconciler(operations)


def _state(resource: str = "tmod:@turbot/turbot#/") -> ResourceState:
    return ResourceState(
        attributes={
            "resource": resource,
            "profile_id": PROFILE_ID,
            "permission_type": "aws",
            "permission_level": "metadata",
        }
    )


def test_create_stores_identity_and_resource_akas(
    reconciler: GrantReconciler, operations: FakeTurbotOperations
) -> None:
    state = _state()

    reconciler.create(state)

    assert state.id is not None
    assert operations.calls == [
        ("create_grant", {"permissionTypeAka": "aws", "permissionLevelAka": "metadata"})
    ]
    assert state.get("resource_akas") == RESOURCE_AKAS


def test_read_refreshes_computed_attributes(
    reconciler: GrantReconciler, operations: FakeTurbotOperations
) -> None:
    state = _state()
    reconciler.create(state)

    refreshed = ResourceState(id=state.id)
    reconciler.read(refreshed)

    assert refreshed.get("resource") == RESOURCE_ID
    assert refreshed.get("profile_id") == PROFILE_ID
    assert refreshed.get("permission_type_id") == "type:aws"
    assert refreshed.get("permission_level_id") == "level:metadata"
    assert refreshed.get("resource_akas") == RESOURCE_AKAS


def test_read_without_resource_id_stores_no_akas(
    reconciler: GrantReconciler, operations: FakeTurbotOperations
) -> None:
    operations.grants["305"] = Grant(turbot=GrantMetadata(id="305", profile_id=PROFILE_ID))
    state = ResourceState(id="305")

    reconciler.read(state)

    assert state.get("resource") == ""
    assert state.get("resource_akas") == []


def test_read_clears_identity_when_grant_is_gone(reconciler: GrantReconciler) -> None:
    state = ResourceState(id="999")

    reconciler.read(state)

    assert state.id is None


def test_update_is_refused(reconciler: GrantReconciler) -> None:
    state = _state()
    state.set_id("201")

    with pytest.raises(ImmutableResourceError):
        reconciler.update(state)


def test_delete_clears_identity(
    reconciler: GrantReconciler, operations: FakeTurbotOperations
) -> None:
    state = _state()
    reconciler.create(state)

    reconciler.delete(state)

    assert state.id is None
    assert operations.grants == {}
    assert not reconciler.exists(state)


def test_every_field_forces_replacement(reconciler: GrantReconciler) -> None:
    assert {"resource", "profile_id", "permission_type", "permission_level"} <= (
        reconciler.force_new
    )
    assert set(reconciler.diff_suppressors) == {"resource"}


def test_resource_diff_suppressed_iff_aka_is_known() -> None:
    state = _state()
    state.set("resource_akas", RESOURCE_AKAS)

    assert suppress_if_resource_aka_matches(state, RESOURCE_ID, "arn:aws:::acme")
    assert suppress_if_resource_aka_matches(state, RESOURCE_ID, RESOURCE_ID)
    assert not suppress_if_resource_aka_matches(state, RESOURCE_ID, "arn:aws:::other")


def test_resource_diff_not_suppressed_without_stored_akas() -> None:
    state = _state()

    assert not suppress_if_resource_aka_matches(state, RESOURCE_ID, RESOURCE_ID)

    state.set("resource_akas", RESOURCE_ID)
    assert not suppress_if_resource_aka_matches(state, RESOURCE_ID, RESOURCE_ID[:3])


def test_aka_membership_is_exact() -> None:
    assert aka_in_resource_akas("arn:aws:::acme", RESOURCE_AKAS)
    assert not aka_in_resource_akas("arn:aws:::ac", RESOURCE_AKAS)
