"""Registry snapshots read from the Consul catalog."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from service_registration.adapters.concurrency import gather_bounded
from service_registration.config.sync import DEFAULT_REGISTRY_CONCURRENCY

if TYPE_CHECKING:
    from service_registration.domain.model import RegistryEntry

    from .client import ConsulClient
    from .schema import CatalogServiceEntry

log = getLogger(__name__)


@dataclass(slots=True)
class ConsulRegistrySource:
    """Lists service names, then fetches every service's entries concurrently.

    A failure for any single service fails the whole read; a partial view
    would make missing entries look new.
    """

    client: ConsulClient
    concurrency: int = DEFAULT_REGISTRY_CONCURRENCY

    async def read_registry(self) -> list[RegistryEntry]:
        names = await self.client.list_service_names()
        log.debug("Already registered Consul services: %s", names)

        async def fetch(name: str) -> list[CatalogServiceEntry]:
            log.debug("Get service registrations for: %s", name)
            return await self.client.fetch_service(name)

        per_service = await gather_bounded(names, fetch, limit=self.concurrency)
        return [entry.to_registry_entry() for entries in per_service for entry in entries]
