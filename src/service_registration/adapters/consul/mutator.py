"""Apply registrations and deregistrations to Consul agents."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from service_registration.adapters.concurrency import gather_bounded
from service_registration.config.sync import DEFAULT_REGISTRY_CONCURRENCY
from service_registration.domain.reconciliation.plan import MutationKind, MutationOutcome

from .client import ConsulAPIError
from .schema import ServiceRegistration

if TYPE_CHECKING:
    from collections.abc import Sequence

    from service_registration.domain.model import Component, RegistryEntry

    from .client import ConsulClient

log = getLogger(__name__)


@dataclass(slots=True)
class ConsulRegistryWriter:
    """Best-effort, joined fan-out of agent calls.

    Each call reports its own outcome; a failure never stops its siblings and is
    not retried until the next pass recomputes the plan.
    """

    client: ConsulClient
    concurrency: int = DEFAULT_REGISTRY_CONCURRENCY

    async def register(self, components: Sequence[Component]) -> list[MutationOutcome]:
        return await gather_bounded(components, self._register_one, limit=self.concurrency)

    async def deregister(self, entries: Sequence[RegistryEntry]) -> list[MutationOutcome]:
        return await gather_bounded(entries, self._deregister_one, limit=self.concurrency)

    async def _register_one(self, component: Component) -> MutationOutcome:
        entry = component.to_registry_entry()
        if not entry.address:
            return MutationOutcome(
                kind=MutationKind.REGISTER,
                service_id=entry.id,
                address=entry.address,
                ok=False,
                error=f"no IP address known for host {component.host_name}",
            )
        try:
            await self.client.register(ServiceRegistration.from_entry(entry))
        except ConsulAPIError as exc:
            return MutationOutcome(
                kind=MutationKind.REGISTER,
                service_id=entry.id,
                address=entry.address,
                ok=False,
                error=str(exc),
            )
        return MutationOutcome(
            kind=MutationKind.REGISTER, service_id=entry.id, address=entry.address, ok=True
        )

    async def _deregister_one(self, entry: RegistryEntry) -> MutationOutcome:
        try:
            await self.client.deregister(entry.id, entry.address)
        except ConsulAPIError as exc:
            return MutationOutcome(
                kind=MutationKind.DEREGISTER,
                service_id=entry.id,
                address=entry.address,
                ok=False,
                error=str(exc),
            )
        return MutationOutcome(
            kind=MutationKind.DEREGISTER, service_id=entry.id, address=entry.address, ok=True
        )
