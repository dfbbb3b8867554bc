"""HTTP client for the Consul catalog and agent APIs."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from service_registration.adapters.http_resilience import ResilientClient
from service_registration.domain.errors import RegistryFetchError

from .schema import CatalogService, CatalogServiceEntry, CatalogServices, ServiceRegistration

if TYPE_CHECKING:
    from service_registration.config.consul import ConsulConfig

log = getLogger(__name__)


class ConsulAPIError(RegistryFetchError):
    """Raised when a Consul call fails or returns an unexpected response."""


class ConsulClient:
    """Catalog reads go to the configured catalog URL.

    Agent writes go to the agent running on the service's own node.
    """

    def __init__(self, *, config: ConsulConfig, client: ResilientClient | None = None) -> None:
        self._config = config
        self._client = client or ResilientClient(config.resilience)

    async def __aenter__(self) -> ConsulClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_service_names(self) -> list[str]:
        payload = await self._get_json(f"{self._config.catalog_url}/v1/catalog/services")
        try:
            return CatalogServices.model_validate(payload).names
        except ValidationError as exc:
            raise ConsulAPIError("Unexpected Consul catalog services payload") from exc

    async def fetch_service(self, service_name: str) -> list[CatalogServiceEntry]:
        url = f"{self._config.catalog_url}/v1/catalog/service/{quote(service_name, safe='')}"
        payload = await self._get_json(url)
        try:
            return CatalogService.model_validate(payload).root
        except ValidationError as exc:
            raise ConsulAPIError(f"Unexpected Consul payload for service {service_name}") from exc

    async def register(self, registration: ServiceRegistration) -> None:
        """Upsert ``registration`` on the agent at its own address."""

        log.info("Registering service: %s", registration.payload())
        await self._put(
            registration.address, "/v1/agent/service/register", json=registration.payload()
        )

    async def deregister(self, service_id: str, address: str) -> None:
        log.info("Deregistering service: %s at %s", service_id, address)
        await self._put(address, f"/v1/agent/service/deregister/{quote(service_id, safe='')}")

    async def _get_json(self, url: str) -> object:
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ConsulAPIError(f"Consul request {url} failed: {exc}") from exc
        log.debug("Consul response for %s: %s", url, response.text)
        try:
            return response.json()
        except ValueError as exc:
            raise ConsulAPIError(f"Consul returned invalid JSON for {url}") from exc

    async def _put(self, address: str, path: str, *, json: object = None) -> None:
        target = f"{path} on agent {address}"
        try:
            response = await self._client.put(self._config.agent_url(address, path), json=json)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ConsulAPIError(f"Consul request {target} failed: {exc}") from exc
        body = response.text.strip()
        if response.is_error or body:
            raise ConsulAPIError(
                f"Invalid request {target} (HTTP {response.status_code}): {body or '<empty>'}"
            )
