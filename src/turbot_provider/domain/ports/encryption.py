"""Port for one-way encryption of values written to resource state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class EncryptedValue:
    fingerprint: str
    ciphertext: str


@runtime_checkable
class ValueEncryptor(Protocol):
    """Encrypt ``plaintext`` for the holder of ``public_key``."""

    def __call__(self, public_key: str, plaintext: str) -> EncryptedValue: ...


__all__ = ["EncryptedValue", "ValueEncryptor"]
