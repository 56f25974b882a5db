"""Domain ports."""

from __future__ import annotations

from .encryption import EncryptedValue, ValueEncryptor
from .operations import GrantOperations, PolicySettingOperations
from .reconciler import DiffSuppressor, ResourceReconciler

__all__ = [
    "DiffSuppressor",
    "EncryptedValue",
    "GrantOperations",
    "PolicySettingOperations",
    "ResourceReconciler",
    "ValueEncryptor",
]
