"""Public interface for the Turbot GraphQL adapter."""

from __future__ import annotations

from .client import TurbotClient
from .schema import GraphQLEnvelope, ValidationResponse
from .transport import ClientFactory, GraphQLTransport

__all__ = [
    "ClientFactory",
    "GraphQLEnvelope",
    "GraphQLTransport",
    "TurbotClient",
    "ValidationResponse",
]
