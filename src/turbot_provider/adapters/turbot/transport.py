"""Authenticated GraphQL transport for the Turbot API."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ValidationError

from turbot_provider.adapters.http_resilience import ResilientClient
from turbot_provider.config.http_resilience import ResilienceConfig
from turbot_provider.domain.errors import (
    AuthFailureError,
    NetworkFailureError,
    UnknownAPIError,
    error_from_message,
)

from .schema import GraphQLEnvelope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from turbot_provider.config.credentials import ClientCredentials

log = getLogger(__name__)

ClientFactory = Callable[[ResilienceConfig], ResilientClient]

_AUTH_STATUS_CODES = frozenset({401, 403})
_OPERATION_NAME = re.compile(r"^\s*(?:query|mutation)\s+(\w+)")


def _operation_name(query: str) -> str:
    match = _OPERATION_NAME.match(query)
    return match.group(1) if match else "anonymous"


def _status_text(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


class GraphQLTransport:
    """Posts GraphQL documents to one workspace and decodes typed responses.

    Each call opens its own short-lived HTTP client, so one transport may be
    shared by concurrent operations. Errors reported by the API are raised as
    classified ``TurbotAPIError`` subclasses carrying the API's own message.
    """

    def __init__(
        self,
        *,
        url: str,
        credentials: ClientCredentials,
        resilience: ResilienceConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._url = url
        self._auth = (credentials.access_key, credentials.secret_key)
        self._resilience = resilience
        self._client_factory = client_factory or ResilientClient

    @property
    def url(self) -> str:
        return self._url

    def execute[M: BaseModel](
        self,
        query: str,
        variables: Mapping[str, object],
        response_model: type[M],
    ) -> M:
        return asyncio.run(self.execute_async(query, variables, response_model))

    async def execute_async[M: BaseModel](
        self,
        query: str,
        variables: Mapping[str, object],
        response_model: type[M],
    ) -> M:
        async with self._client_factory(self._resilience) as client:
            return await self._perform_request(
                client=client,
                query=query,
                variables=variables,
                response_model=response_model,
            )

    async def _perform_request[M: BaseModel](
        self,
        *,
        client: ResilientClient,
        query: str,
        variables: Mapping[str, object],
        response_model: type[M],
    ) -> M:
        operation = _operation_name(query)
        log.debug("Turbot GraphQL %s -> %s", operation, self._url)
        try:
            response = await client.post(
                self._url,
                json={"query": query, "variables": dict(variables)},
                auth=self._auth,
            )
        except httpx.TransportError as exc:
            raise NetworkFailureError(f"POST {self._url}: {exc}") from exc

        if response.status_code in _AUTH_STATUS_CODES:
            raise AuthFailureError(detail=_status_text(response))

        envelope = self._decode_envelope(response)
        if envelope.first_error is not None:
            log.error(f"Turbot API error in {operation}: {envelope.first_error}")
            raise error_from_message(envelope.first_error)
        if response.is_error:
            raise error_from_message(_status_text(response))

        try:
            return response_model.model_validate(envelope.data or {})
        except ValidationError as exc:
            raise UnknownAPIError(
                f"Unexpected Turbot response payload for {response_model.__name__}: {exc}"
            ) from exc

    @staticmethod
    def _decode_envelope(response: httpx.Response) -> GraphQLEnvelope:
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict):
            if response.is_error:
                raise error_from_message(_status_text(response))
            raise UnknownAPIError("Unexpected Turbot response payload")

        try:
            return GraphQLEnvelope.model_validate(payload)
        except ValidationError as exc:
            raise UnknownAPIError(f"Unexpected Turbot response envelope: {exc}") from exc


__all__ = ["ClientFactory", "GraphQLTransport"]
