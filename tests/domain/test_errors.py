from __future__ import annotations

import pytest

from turbot_provider.domain.errors import (
    AUTH_FAILED_MESSAGE,
    AuthFailureError,
    ErrorCategory,
    FailedValidationError,
    NetworkFailureError,
    NotFoundError,
    UnknownAPIError,
    classify_message,
    error_from_message,
    is_auth_failure,
    is_failed_validation,
    is_not_found,
)


@pytest.mark.parametrize(
    ("message", "category"),
    [
        ("Not Found: policy setting 181381985123456", ErrorCategory.NOT_FOUND),
        ("Resource does not exist", ErrorCategory.NOT_FOUND),
        ("Data validation failed: value must be a string", ErrorCategory.FAILED_VALIDATION),
        ("Input failed validation", ErrorCategory.FAILED_VALIDATION),
        ("Unauthorized", ErrorCategory.AUTH_FAILURE),
        ("403 Forbidden", ErrorCategory.AUTH_FAILURE),
        ("dial tcp: lookup acme.turbot.io: no such host", ErrorCategory.NETWORK_FAILURE),
        ("[Errno -2] Name or service not known", ErrorCategory.NETWORK_FAILURE),
        ("Internal server error", ErrorCategory.UNKNOWN),
        ("", ErrorCategory.UNKNOWN),
    ],
)
def test_classify_message(message: str, category: ErrorCategory) -> None:
    assert classify_message(message) is category


def test_classification_ignores_digits_in_identifiers() -> None:
    assert classify_message("policy 401403404 rejected") is ErrorCategory.UNKNOWN


def test_first_matching_category_wins() -> None:
    assert classify_message("Unauthorized: resource not found") is ErrorCategory.AUTH_FAILURE


@pytest.mark.parametrize(
    ("message", "error_type"),
    [
        ("Not found", NotFoundError),
        ("Data validation failed", FailedValidationError),
        ("connection refused", NetworkFailureError),
        ("something else", UnknownAPIError),
    ],
)
def test_error_from_message_keeps_api_text(message: str, error_type: type[Exception]) -> None:
    error = error_from_message(message)

    assert type(error) is error_type
    assert str(error) == message


def test_auth_errors_carry_fixed_message_and_detail() -> None:
    error = error_from_message("Not authenticated: bad signature")

    assert isinstance(error, AuthFailureError)
    assert str(error) == AUTH_FAILED_MESSAGE
    assert error.detail == "Not authenticated: bad signature"


def test_predicates_accept_errors_and_messages() -> None:
    assert is_not_found(NotFoundError("gone"))
    assert is_not_found("Item not found")
    assert is_failed_validation(FailedValidationError("anything"))
    assert is_failed_validation("Data validation failed")
    assert is_auth_failure(AuthFailureError())
    assert is_auth_failure(RuntimeError("Unauthorised"))
    assert not is_not_found(UnknownAPIError("not found"))
    assert not is_failed_validation("Not found")
