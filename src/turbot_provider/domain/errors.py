"""Error taxonomy and classification of Turbot API failures.

Classification is a pure function of the raw message returned by the API (or
the transport). The rules live in ``ERROR_PATTERNS`` and are matched
case-insensitively, first category wins.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

AUTH_FAILED_MESSAGE: Final[str] = (
    "authorisation failed. Verify workspace, access_key and secret_access_key "
    "have been set correctly"
)


class ErrorCategory(StrEnum):
    NOT_FOUND = "not_found"
    FAILED_VALIDATION = "failed_validation"
    AUTH_FAILURE = "auth_failure"
    NETWORK_FAILURE = "network_failure"
    UNKNOWN = "unknown"


# Order matters: a message matching several categories takes the first.
ERROR_PATTERNS: Final[tuple[tuple[ErrorCategory, tuple[str, ...]], ...]] = (
    (
        ErrorCategory.AUTH_FAILURE,
        ("unauthorized", "unauthorised", "forbidden", "not authenticated", "authentication failed"),
    ),
    (ErrorCategory.NOT_FOUND, ("not found", "does not exist")),
    (
        ErrorCategory.FAILED_VALIDATION,
        ("data validation failed", "failed validation", "validation error"),
    ),
    (
        ErrorCategory.NETWORK_FAILURE,
        ("no such host", "connection refused", "name or service not known", "timed out"),
    ),
)


def classify_message(message: str) -> ErrorCategory:
    lowered = message.lower()
    for category, patterns in ERROR_PATTERNS:
        if any(pattern in lowered for pattern in patterns):
            return category
    return ErrorCategory.UNKNOWN


class TurbotError(RuntimeError):
    """Base class for every error raised by the provider."""


class TurbotAPIError(TurbotError):
    """Raised when the Turbot API (or the transport to it) reports a failure."""

    category: ErrorCategory = ErrorCategory.UNKNOWN


class NotFoundError(TurbotAPIError):
    category = ErrorCategory.NOT_FOUND


class FailedValidationError(TurbotAPIError):
    category = ErrorCategory.FAILED_VALIDATION


class NetworkFailureError(TurbotAPIError):
    category = ErrorCategory.NETWORK_FAILURE


class UnknownAPIError(TurbotAPIError):
    category = ErrorCategory.UNKNOWN


class AuthFailureError(TurbotAPIError):
    """Credentials or workspace are wrong; ``detail`` keeps the raw API text."""

    category = ErrorCategory.AUTH_FAILURE

    def __init__(self, message: str = AUTH_FAILED_MESSAGE, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


class DuplicateResourceError(TurbotError):
    """Raised instead of creating a second copy of an existing remote object."""


class ImmutableResourceError(TurbotError):
    """Raised when an in-place update is requested for a replace-only resource."""


class EncryptionError(TurbotError):
    """Raised when a state value cannot be encrypted with the supplied key."""


_ERROR_TYPES: Final[dict[ErrorCategory, type[TurbotAPIError]]] = {
    ErrorCategory.NOT_FOUND: NotFoundError,
    ErrorCategory.FAILED_VALIDATION: FailedValidationError,
    ErrorCategory.NETWORK_FAILURE: NetworkFailureError,
    ErrorCategory.UNKNOWN: UnknownAPIError,
}


def error_from_message(message: str) -> TurbotAPIError:
    """Build the exception matching the category of ``message``."""

    category = classify_message(message)
    if category is ErrorCategory.AUTH_FAILURE:
        return AuthFailureError(detail=message)
    return _ERROR_TYPES[category](message)


def _category_of(error: BaseException | str) -> ErrorCategory:
    if isinstance(error, TurbotAPIError):
        return error.category
    return classify_message(str(error))


def is_not_found(error: BaseException | str) -> bool:
    return _category_of(error) is ErrorCategory.NOT_FOUND


def is_failed_validation(error: BaseException | str) -> bool:
    return _category_of(error) is ErrorCategory.FAILED_VALIDATION


def is_auth_failure(error: BaseException | str) -> bool:
    return _category_of(error) is ErrorCategory.AUTH_FAILURE


__all__ = [
    "AUTH_FAILED_MESSAGE",
    "ERROR_PATTERNS",
    "AuthFailureError",
    "DuplicateResourceError",
    "EncryptionError",
    "ErrorCategory",
    "FailedValidationError",
    "ImmutableResourceError",
    "NetworkFailureError",
    "NotFoundError",
    "TurbotAPIError",
    "TurbotError",
    "UnknownAPIError",
    "classify_message",
    "error_from_message",
    "is_auth_failure",
    "is_failed_validation",
    "is_not_found",
]
