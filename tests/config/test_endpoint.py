from __future__ import annotations

import pytest

from turbot_provider.config import ConfigurationError, build_api_url


@pytest.mark.parametrize(
    ("workspace", "expected"),
    [
        ("acme.turbot.io", "https://acme.turbot.io/api/latest/graphql"),
        ("acme.turbot.io/", "https://acme.turbot.io/api/latest/graphql"),
        ("acme.turbot.io/api/v5", "https://acme.turbot.io/api/v5/graphql"),
        ("acme.turbot.io/api/v5/", "https://acme.turbot.io/api/v5/graphql"),
        ("https://acme.turbot.io/api/latest/", "https://acme.turbot.io/api/latest/graphql"),
        ("https://acme.turbot.io/api/latest/graphql", "https://acme.turbot.io/api/latest/graphql"),
        ("  https://acme.turbot.io  ", "https://acme.turbot.io/api/latest/graphql"),
        ("http://localhost:8080", "http://localhost:8080/api/latest/graphql"),
    ],
)
def test_build_api_url(workspace: str, expected: str) -> None:
    assert build_api_url(workspace) == expected


def test_build_api_url_is_idempotent() -> None:
    url = build_api_url("acme.turbot.io/api/v5/")

    assert build_api_url(url) == url


def test_build_api_url_keeps_invalid_looking_hosts_for_the_transport() -> None:
    url = build_api_url("https://bananaman-turbot.putney.turbot.io_invalid")

    assert url == "https://bananaman-turbot.putney.turbot.io_invalid/api/latest/graphql"


@pytest.mark.parametrize("workspace", ["", "   "])
def test_build_api_url_rejects_blank_workspace(workspace: str) -> None:
    with pytest.raises(ConfigurationError):
        build_api_url(workspace)
