"""Ports for reading and mutating the service registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from service_registration.domain.model import Component, RegistryEntry
    from service_registration.domain.reconciliation.plan import MutationOutcome


@runtime_checkable
class RegistrySource(Protocol):
    """Reads every registered service entry."""

    async def read_registry(self) -> list[RegistryEntry]:
        """Return the full registry view, or raise if any part of it is unavailable."""
        ...


@runtime_checkable
class RegistryWriter(Protocol):
    """Applies registrations and deregistrations.

    ``register`` must upsert by registration id: registering an id that already
    exists replaces its tags and address. State transitions converge only
    because of this.
    """

    async def register(self, components: Sequence[Component]) -> list[MutationOutcome]: ...

    async def deregister(self, entries: Sequence[RegistryEntry]) -> list[MutationOutcome]: ...


__all__ = ["RegistrySource", "RegistryWriter"]
