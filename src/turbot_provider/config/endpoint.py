"""Workspace URL normalisation."""

from __future__ import annotations

from typing import Final

import httpx

from .errors import ConfigurationError

DEFAULT_API_PATH: Final[str] = "/api/latest"
GRAPHQL_SEGMENT: Final[str] = "graphql"


def build_api_url(workspace: str) -> str:
    """Return the canonical GraphQL endpoint for a workspace host or URL.

    ``acme.turbot.io``, ``acme.turbot.io/`` and ``https://acme.turbot.io/api/latest/``
    all resolve to ``https://acme.turbot.io/api/latest/graphql``; an explicit API
    version such as ``/api/v5`` is kept. Canonical URLs are returned unchanged.
    """

    value = workspace.strip()
    if not value:
        raise ConfigurationError("Workspace must not be empty")
    if "://" not in value:
        value = f"https://{value}"

    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid workspace URL {workspace!r}: {exc}") from exc
    if not url.host:
        raise ConfigurationError(f"Invalid workspace URL {workspace!r}: missing host")

    path = url.path
    if path.endswith("/"):
        path = path[:-1]
    if not path:
        path = DEFAULT_API_PATH
    if path.rsplit("/", 1)[-1] != GRAPHQL_SEGMENT:
        path = f"{path}/{GRAPHQL_SEGMENT}"

    return str(url.copy_with(path=path))
