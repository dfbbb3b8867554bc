"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from service_registration.adapters.ambari import AmbariClient, AmbariTopologySource
from service_registration.adapters.consul import (
    ConsulClient,
    ConsulRegistrySource,
    ConsulRegistryWriter,
)
from service_registration.config import get_consul_config, get_sync_config
from service_registration.domain.reconciliation import (
    ReconciliationContext,
    ReconciliationEngine,
    run_forever,
)

if TYPE_CHECKING:
    from service_registration.config import AmbariConfig, ConsulConfig, SyncConfig

log = getLogger(__name__)


def build_engine(
    *,
    ambari_client: AmbariClient,
    consul_client: ConsulClient,
    sync: SyncConfig,
) -> ReconciliationEngine:
    return ReconciliationEngine(
        topology=AmbariTopologySource(client=ambari_client),
        registry=ConsulRegistrySource(client=consul_client, concurrency=sync.registry_concurrency),
        writer=ConsulRegistryWriter(client=consul_client, concurrency=sync.registry_concurrency),
    )


async def run_service_registration_async(
    *,
    ambari: AmbariConfig,
    consul: ConsulConfig | None = None,
    sync: SyncConfig | None = None,
    max_passes: int | None = None,
) -> ReconciliationContext:
    effective_consul = consul or get_consul_config()
    effective_sync = sync or get_sync_config()
    log.info(
        "Starting service registration: ambari=%s, consul=%s, poll_interval=%ss, concurrency=%s",
        ambari.base_url,
        effective_consul.catalog_url,
        effective_sync.poll_interval,
        effective_sync.registry_concurrency,
    )

    async with (
        AmbariClient(config=ambari) as ambari_client,
        ConsulClient(config=effective_consul) as consul_client,
    ):
        engine = build_engine(
            ambari_client=ambari_client,
            consul_client=consul_client,
            sync=effective_sync,
        )
        return await run_forever(
            engine,
            poll_interval=effective_sync.poll_interval,
            max_passes=max_passes,
        )


def run_service_registration(
    *,
    ambari: AmbariConfig,
    consul: ConsulConfig | None = None,
    sync: SyncConfig | None = None,
    max_passes: int | None = None,
) -> ReconciliationContext:
    """Reconcile Consul against Ambari until interrupted (or ``max_passes`` passes)."""

    return asyncio.run(
        run_service_registration_async(
            ambari=ambari,
            consul=consul,
            sync=sync,
            max_passes=max_passes,
        )
    )
