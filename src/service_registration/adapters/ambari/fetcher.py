"""Topology snapshots built from Ambari."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from service_registration.domain.errors import ClusterNotFoundError
from service_registration.domain.model import TopologySnapshot

from .translator import translate_host_components, translate_hosts, translate_root_components

if TYPE_CHECKING:
    from .client import AmbariClient

log = getLogger(__name__)


@dataclass(slots=True)
class AmbariTopologySource:
    """Discovers root and cluster-scoped components on every pass."""

    client: AmbariClient

    async def resolve_cluster_name(self) -> str:
        response = await self.client.fetch_clusters()
        cluster_name = response.first_cluster_name
        if cluster_name is None:
            raise ClusterNotFoundError("Cluster not found, yet")
        return cluster_name

    async def build_snapshot(self, *, cluster_name: str | None) -> TopologySnapshot:
        inventory = translate_hosts(await self.client.fetch_hosts())
        if not inventory.addresses:
            log.info("There are no hosts yet")

        components = translate_root_components(
            await self.client.fetch_root_components(), inventory
        )
        log.debug("Generated root host components: %s", components)

        if cluster_name:
            cluster_components = translate_host_components(
                await self.client.fetch_host_components(cluster_name), inventory
            )
            log.debug("Generated host components: %s", cluster_components)
            components.extend(cluster_components)

        return TopologySnapshot(
            components=tuple(components),
            inventory=inventory,
            cluster_name=cluster_name,
        )
