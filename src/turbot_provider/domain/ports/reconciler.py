"""Capability interface shared by every resource reconciler."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from turbot_provider.domain.state import ResourceState

DiffSuppressor = Callable[["ResourceState", str, str], bool]
"""``(state, old, new) -> bool``: True when a detected change should be ignored."""


@runtime_checkable
class ResourceReconciler(Protocol):
    force_new: frozenset[str]
    diff_suppressors: Mapping[str, DiffSuppressor]

    def create(self, state: ResourceState) -> None: ...

    def read(self, state: ResourceState) -> None: ...

    def update(self, state: ResourceState) -> None: ...

    def delete(self, state: ResourceState) -> None: ...

    def exists(self, state: ResourceState) -> bool: ...

    def import_state(self, state: ResourceState) -> list[ResourceState]: ...


__all__ = ["DiffSuppressor", "ResourceReconciler"]
