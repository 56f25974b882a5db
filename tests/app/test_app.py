from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.graphql import StubGraphQL, make_client_factory
from turbot_provider.app import configure_provider
from turbot_provider.config import ConfigurationError, ProviderConfig
from turbot_provider.domain.errors import AUTH_FAILED_MESSAGE, AuthFailureError

if TYPE_CHECKING:
    from pathlib import Path


def test_configure_provider_returns_validated_client(credentials_file: Path) -> None:
    stub = StubGraphQL({"Validate": {"data": {"schema": {"queryType": {"name": "Query"}}}}})

    client = configure_provider(
        ProviderConfig(workspace="other.turbot.io/api/v5", credentials_file=str(credentials_file)),
        client_factory=make_client_factory(stub),
    )

    assert client.url == "https://other.turbot.io/api/v5/graphql"
    assert [request.operation for request in stub.requests] == ["Validate"]


def test_configure_provider_reports_missing_credentials(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as exc:
        configure_provider(ProviderConfig(credentials_file=str(tmp_path / "missing")))

    assert str(exc.value).startswith("failed to create client: ")


def test_configure_provider_reports_validation_failure(credentials_file: Path) -> None:
    stub = StubGraphQL({"Validate": {"data": None, "errors": [{"message": "Unauthorized"}]}})

    with pytest.raises(ConfigurationError) as exc:
        configure_provider(
            ProviderConfig(credentials_file=str(credentials_file)),
            client_factory=make_client_factory(stub),
        )

    assert str(exc.value) == f"failed to validate client: {AUTH_FAILED_MESSAGE}"
    assert isinstance(exc.value.__cause__, AuthFailureError)
