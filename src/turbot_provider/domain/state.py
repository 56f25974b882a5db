"""Host-facing state of a single managed resource instance."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ResourceState:
    """Identity plus attributes of one resource, as exchanged with the host.

    ``attributes`` holds both the user's configuration and the computed values
    written back by reconcilers. A cleared ``id`` tells the host the remote
    object is gone (or was never created) and must be recreated.
    """

    id: str | None = None
    attributes: dict[str, object] = field(default_factory=dict)

    @property
    def exists(self) -> bool:
        return bool(self.id)

    def set_id(self, resource_id: str) -> None:
        self.id = resource_id

    def clear_id(self) -> None:
        self.id = None

    def get(self, key: str, default: object = None) -> object:
        return self.attributes.get(key, default)

    def get_str(self, key: str) -> str:
        value = self.attributes.get(key)
        return "" if value is None else str(value)

    def get_bool(self, key: str) -> bool:
        return bool(self.attributes.get(key, False))

    def is_set(self, key: str) -> bool:
        """Whether ``key`` holds a non-empty value (``0``/``""``/``[]`` count as unset)."""

        return bool(self.attributes.get(key))

    def set(self, key: str, value: object) -> None:
        self.attributes[key] = value

    def update(self, values: dict[str, object]) -> None:
        self.attributes.update(values)


__all__ = ["ResourceState"]
