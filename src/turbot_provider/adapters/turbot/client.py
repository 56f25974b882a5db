"""Typed Turbot operations built on the GraphQL transport."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from turbot_provider.config.endpoint import build_api_url
from turbot_provider.config.provider import get_turbot_resilience
from turbot_provider.domain.errors import (
    AuthFailureError,
    NetworkFailureError,
    NotFoundError,
    TurbotAPIError,
)
from . import queries
from .schema import (
    CreateGrantResponse,
    FindPolicySettingsResponse,
    GrantMutationResponse,
    PolicySettingMutationResponse,
    PolicySettingResponse,
    PolicyValueResponse,
    ReadGrantResponse,
    ResourceAkasResponse,
    ResourceResponse,
    ValidationResponse,
)
from .transport import ClientFactory, GraphQLTransport
from .translator import (
    parse_grant,
    parse_grant_metadata,
    parse_policy_setting,
    parse_policy_value,
    parse_resource,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from turbot_provider.config.credentials import ClientConfig, ClientCredentials
    from turbot_provider.config.http_resilience import ResilienceConfig
    from turbot_provider.domain.model import (
        Grant,
        GrantMetadata,
        PolicySetting,
        PolicyValue,
        Resource,
    )
    from turbot_provider.domain.ports import GrantOperations, PolicySettingOperations

log = getLogger(__name__)


def _require[T](entity: T | None, description: str) -> T:
    if entity is None:
        raise NotFoundError(f"{description} not found")
    return entity


class TurbotClient:
    """Low-level client for one Turbot workspace.

    Immutable after construction; the resolved credentials and endpoint are
    fixed for the lifetime of the client.
    """

    def __init__(self, *, credentials: ClientCredentials, transport: GraphQLTransport) -> None:
        self._credentials = credentials
        self._transport = transport

    @classmethod
    def create(
        cls,
        config: ClientConfig,
        *,
        resilience: ResilienceConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> TurbotClient:
        credentials = config.resolve()
        url = build_api_url(credentials.workspace)
        transport = GraphQLTransport(
            url=url,
            credentials=credentials,
            resilience=resilience or get_turbot_resilience(),
            client_factory=client_factory,
        )
        log.info("Turbot API client created for %s", url)
        return cls(credentials=credentials, transport=transport)

    @property
    def credentials(self) -> ClientCredentials:
        return self._credentials

    @property
    def url(self) -> str:
        return self._transport.url

    def validate(self) -> None:
        """Check that the workspace answers and accepts the credentials.

        Network failures are raised unchanged; every other failure becomes an
        ``AuthFailureError`` with the standard message.
        """

        try:
            response = self._transport.execute(queries.VALIDATE, {}, ValidationResponse)
        except (NetworkFailureError, AuthFailureError):
            raise
        except TurbotAPIError as exc:
            raise AuthFailureError(detail=str(exc)) from exc

        if not response.is_valid():
            raise AuthFailureError(detail="unexpected introspection response")
        log.info("Turbot API client validated for %s", self.url)

    # --- policy settings ---

    def create_policy_setting(
        self,
        policy_type: str,
        resource_aka: str,
        payload: Mapping[str, str],
    ) -> PolicySetting:
        variables = {"input": {"type": policy_type, "resource": resource_aka, **payload}}
        response = self._transport.execute(
            queries.CREATE_POLICY_SETTING, variables, PolicySettingResponse
        )
        return parse_policy_setting(_require(response.policy_setting, "Created policy setting"))

    def read_policy_setting(self, setting_id: str) -> PolicySetting:
        response = self._transport.execute(
            queries.READ_POLICY_SETTING, {"id": setting_id}, PolicySettingResponse
        )
        return parse_policy_setting(
            _require(response.policy_setting, f"Policy setting {setting_id}")
        )

    def update_policy_setting(self, setting_id: str, payload: Mapping[str, str]) -> None:
        variables = {"input": {"id": setting_id, **payload}}
        self._transport.execute(
            queries.UPDATE_POLICY_SETTING, variables, PolicySettingMutationResponse
        )

    def delete_policy_setting(self, setting_id: str) -> None:
        self._transport.execute(
            queries.DELETE_POLICY_SETTING,
            {"input": {"id": setting_id}},
            PolicySettingMutationResponse,
        )

    def policy_setting_exists(self, setting_id: str) -> bool:
        return self._exists(self.read_policy_setting, setting_id)

    def find_policy_setting(self, policy_type: str, resource_aka: str) -> PolicySetting | None:
        """Return the setting of ``policy_type`` made directly on the resource, if any."""

        search = f"policyTypeId:'{policy_type}' resourceId:'{resource_aka}' level:self"
        response = self._transport.execute(
            queries.FIND_POLICY_SETTINGS, {"filter": [search]}, FindPolicySettingsResponse
        )
        items = response.policy_settings.items
        if not items:
            return None
        return parse_policy_setting(items[0])

    # --- policy values ---

    def read_policy_value(self, policy_type: str, resource_aka: str) -> PolicyValue:
        variables = {"policyTypeUri": policy_type, "resourceAka": resource_aka}
        response = self._transport.execute(queries.READ_POLICY_VALUE, variables, PolicyValueResponse)
        return parse_policy_value(
            _require(response.policy_value, f"Policy value {policy_type} on {resource_aka}")
        )

    # --- grants ---

    def create_grant(
        self,
        profile_id: str,
        resource_aka: str,
        data: Mapping[str, str],
    ) -> GrantMetadata:
        variables = {"input": {"resource": resource_aka, "identity": profile_id, **data}}
        response = self._transport.execute(queries.CREATE_GRANT, variables, CreateGrantResponse)
        return parse_grant_metadata(_require(response.grants, "Created grant").turbot)

    def read_grant(self, grant_id: str) -> Grant:
        response = self._transport.execute(queries.READ_GRANT, {"id": grant_id}, ReadGrantResponse)
        return parse_grant(_require(response.grant, f"Grant {grant_id}"))

    def delete_grant(self, grant_id: str) -> None:
        self._transport.execute(
            queries.DELETE_GRANT, {"input": {"id": grant_id}}, GrantMutationResponse
        )

    def grant_exists(self, grant_id: str) -> bool:
        return self._exists(self.read_grant, grant_id)

    # --- resources ---

    def read_resource(self, resource_aka: str) -> Resource:
        response = self._transport.execute(
            queries.READ_RESOURCE, {"id": resource_aka}, ResourceResponse
        )
        return parse_resource(_require(response.resource, f"Resource {resource_aka}"))

    def get_resource_akas(self, resource_aka: str) -> list[str]:
        response = self._transport.execute(
            queries.READ_RESOURCE_AKAS, {"id": resource_aka}, ResourceAkasResponse
        )
        return list(_require(response.resource, f"Resource {resource_aka}").turbot.akas)

    def resource_exists(self, resource_aka: str) -> bool:
        return self._exists(self.get_resource_akas, resource_aka)

    @staticmethod
    def _exists(read: Callable[[str], object], identifier: str) -> bool:
        try:
            read(identifier)
        except NotFoundError:
            return False
        return True


if TYPE_CHECKING:
    _policy_setting_check: PolicySettingOperations = TurbotClient.create(ClientConfig())
    _grant_check: GrantOperations = TurbotClient.create(ClientConfig())

__all__ = ["TurbotClient"]
