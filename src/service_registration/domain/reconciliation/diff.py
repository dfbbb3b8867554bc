"""Diff between discovered components and registered entries.

Registration and deregistration are decided independently:

- a component needs registering unless an entry with the same service name,
  address and state tag exists; a state change therefore re-registers under
  the same id and relies on the registry replacing the old tags
- an owned entry is stale when no component shares its service name and
  address; state is ignored here

Components in the ``unknown`` state carry no information and are skipped by
the registration side. They still keep their entries alive.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .plan import ReconciliationPlan

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from service_registration.domain.model import Component, RegistryEntry, ServiceKey

log = getLogger(__name__)


def deduplicate_components(components: Iterable[Component]) -> list[Component]:
    """Keep one component per ``(service_name, ip_address)``; the last one seen wins."""

    by_key: dict[ServiceKey, Component] = {}
    for component in components:
        previous = by_key.get(component.key)
        if previous is not None and previous != component:
            log.debug(
                "Duplicate component %s at %r, keeping state %s over %s",
                component.service_name,
                component.ip_address,
                component.state,
                previous.state,
            )
        by_key[component.key] = component
    return list(by_key.values())


def components_to_register(
    components: Sequence[Component],
    entries: Sequence[RegistryEntry],
) -> list[Component]:
    """Return components without a registry entry matching name, address and state."""

    registered = {(entry.service_name, entry.address, entry.state_tag) for entry in entries}
    pending: list[Component] = []
    for component in components:
        if component.is_unknown:
            log.debug("%s's state is unknown, update skipped", component.service_name)
            continue
        if (component.service_name, component.ip_address, component.state_tag) in registered:
            log.debug(
                "Service '%s' is already registered for host: %s and in state: %s",
                component.service_name,
                component.ip_address,
                component.state_tag,
            )
            continue
        pending.append(component)
    return pending


def entries_to_deregister(
    components: Sequence[Component],
    entries: Sequence[RegistryEntry],
) -> list[RegistryEntry]:
    """Return owned entries whose service name and address no component claims."""

    active = {component.key for component in components}
    return [entry for entry in entries if entry.is_owned and entry.key not in active]


def compute_plan(
    components: Iterable[Component],
    entries: Sequence[RegistryEntry],
) -> ReconciliationPlan:
    unique = deduplicate_components(components)
    return ReconciliationPlan(
        to_register=tuple(components_to_register(unique, entries)),
        to_deregister=tuple(entries_to_deregister(unique, entries)),
    )
