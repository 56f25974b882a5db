"""Provider domain: entities, errors, resource state and reconcilers."""

from __future__ import annotations

from .errors import (
    AUTH_FAILED_MESSAGE,
    AuthFailureError,
    DuplicateResourceError,
    EncryptionError,
    ErrorCategory,
    FailedValidationError,
    ImmutableResourceError,
    NetworkFailureError,
    NotFoundError,
    TurbotAPIError,
    TurbotError,
    UnknownAPIError,
    classify_message,
    is_auth_failure,
    is_failed_validation,
    is_not_found,
)
from .state import ResourceState
from .values import DynamicValue, TypeMismatchError, ValueKind

__all__ = [
    "AUTH_FAILED_MESSAGE",
    "AuthFailureError",
    "DuplicateResourceError",
    "DynamicValue",
    "EncryptionError",
    "ErrorCategory",
    "FailedValidationError",
    "ImmutableResourceError",
    "NetworkFailureError",
    "NotFoundError",
    "ResourceState",
    "TurbotAPIError",
    "TurbotError",
    "TypeMismatchError",
    "UnknownAPIError",
    "ValueKind",
    "classify_message",
    "is_auth_failure",
    "is_failed_validation",
    "is_not_found",
]
