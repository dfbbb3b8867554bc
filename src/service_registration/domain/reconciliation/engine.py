"""Single reconciliation pass: snapshot, diff, mutate.

The engine composes ports but does not prescribe concrete adapters. State that
outlives a pass is limited to :class:`ReconciliationContext`, which the loop
driver carries from one pass to the next.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING

from service_registration.domain.errors import ReconciliationError

from .diff import compute_plan
from .plan import ApplyResult, MutationKind, MutationOutcome, ReconciliationPlan

if TYPE_CHECKING:
    from collections.abc import Sequence

    from service_registration.domain.model import Component, RegistryEntry, TopologySnapshot
    from service_registration.domain.ports import RegistrySource, RegistryWriter, TopologySource

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconciliationContext:
    """Values carried across passes. The cluster name is resolved at most once."""

    cluster_name: str | None = None

    def with_cluster(self, cluster_name: str) -> ReconciliationContext:
        return replace(self, cluster_name=cluster_name)


@dataclass(frozen=True, slots=True)
class PassResult:
    snapshot: TopologySnapshot
    registered_entries: int
    plan: ReconciliationPlan
    applied: ApplyResult


@dataclass(slots=True)
class ReconciliationEngine:
    """Run one pass from topology discovery to registry mutation."""

    topology: TopologySource
    registry: RegistrySource
    writer: RegistryWriter

    async def resolve_context(self, context: ReconciliationContext) -> ReconciliationContext:
        """Resolve the cluster name if it is not cached yet. Failure is not fatal."""

        if context.cluster_name:
            return context
        try:
            cluster_name = await self.topology.resolve_cluster_name()
        except ReconciliationError as exc:
            log.info("Cluster name cannot be determined: %s", exc)
            return context
        log.info("Found cluster: %s", cluster_name)
        return context.with_cluster(cluster_name)

    async def run_pass(self, context: ReconciliationContext) -> PassResult:
        """Run all stages for one pass.

        Snapshot errors propagate and abort the pass before any mutation.
        Mutation failures are reported in the returned outcomes; a writer batch
        that raises marks each of its items failed and the other batch still runs.
        """

        snapshot = await self.topology.build_snapshot(cluster_name=context.cluster_name)
        entries = await self.registry.read_registry()
        plan = compute_plan(snapshot.components, entries)

        applied = ApplyResult()
        if plan.to_deregister:
            applied.extend(await self._deregister(plan.to_deregister))
        if plan.to_register:
            applied.extend(await self._register(plan.to_register))

        for failure in applied.failures:
            log.warning(
                "Failed to %s service %s at %s: %s",
                failure.kind,
                failure.service_id,
                failure.address or "<no address>",
                failure.error,
            )
        return PassResult(
            snapshot=snapshot,
            registered_entries=len(entries),
            plan=plan,
            applied=applied,
        )

    async def _deregister(self, entries: Sequence[RegistryEntry]) -> list[MutationOutcome]:
        try:
            return await self.writer.deregister(entries)
        except Exception as exc:
            log.exception("Deregistration batch failed")
            return [
                _failed(MutationKind.DEREGISTER, entry.id, entry.address, exc) for entry in entries
            ]

    async def _register(self, components: Sequence[Component]) -> list[MutationOutcome]:
        try:
            return await self.writer.register(components)
        except Exception as exc:
            log.exception("Registration batch failed")
            return [
                _failed(
                    MutationKind.REGISTER,
                    component.registration_id,
                    component.ip_address,
                    exc,
                )
                for component in components
            ]


def _failed(kind: MutationKind, service_id: str, address: str, exc: Exception) -> MutationOutcome:
    return MutationOutcome(
        kind=kind, service_id=service_id, address=address, ok=False, error=str(exc)
    )
