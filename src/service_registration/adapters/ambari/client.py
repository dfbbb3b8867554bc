"""HTTP client for the Ambari REST API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from service_registration.adapters.http_resilience import ResilientClient
from service_registration.domain.errors import TopologyFetchError

from .schema import (
    ClustersResponse,
    HostComponentsResponse,
    HostsResponse,
    RootHostComponentsResponse,
)

if TYPE_CHECKING:
    from service_registration.config.ambari import AmbariConfig

log = getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

CLUSTERS_PATH = "/clusters"
HOSTS_PATH = "/hosts?fields=Hosts/ip"
HOST_COMPONENTS_PATH = (
    "/clusters/{cluster}/hosts"
    "?fields=host_components/HostRoles/state/*,host_components/HostRoles/maintenance_state"
)
ROOT_COMPONENTS_PATH = (
    "/services/?fields=components/hostComponents/RootServiceHostComponents/service_name,"
    "components/hostComponents/RootServiceHostComponents/component_state"
)


class AmbariAPIError(TopologyFetchError):
    """Raised when Ambari cannot be reached or returns an unexpected response."""


class AmbariClient:
    """Low-level client for the Ambari endpoints used during discovery.

    Every request carries the ``X-Requested-By`` header and basic auth.
    """

    def __init__(self, *, config: AmbariConfig, client: ResilientClient | None = None) -> None:
        self._config = config
        self._client = client or ResilientClient(config.resilience(), auth=config.auth)

    async def __aenter__(self) -> AmbariClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_clusters(self) -> ClustersResponse:
        return await self._perform_request(CLUSTERS_PATH, ClustersResponse)

    async def fetch_hosts(self) -> HostsResponse:
        return await self._perform_request(HOSTS_PATH, HostsResponse)

    async def fetch_host_components(self, cluster_name: str) -> HostComponentsResponse:
        path = HOST_COMPONENTS_PATH.format(cluster=cluster_name)
        return await self._perform_request(path, HostComponentsResponse)

    async def fetch_root_components(self) -> RootHostComponentsResponse:
        return await self._perform_request(ROOT_COMPONENTS_PATH, RootHostComponentsResponse)

    async def _perform_request(self, path: str, model: type[M]) -> M:
        try:
            response = await self._client.get(path)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise AmbariAPIError(f"Ambari request {path} failed: {exc}") from exc

        log.debug("Ambari response for %s: %s", path, response.text)
        try:
            payload = response.json()
        except ValueError as exc:
            raise AmbariAPIError(f"Ambari returned invalid JSON for {path}") from exc
        if not isinstance(payload, dict):
            raise AmbariAPIError(f"Unexpected Ambari response payload for {path}")
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise AmbariAPIError(f"Unexpected Ambari response payload for {path}") from exc
