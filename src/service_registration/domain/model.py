"""Domain types shared by the topology and registry sides of reconciliation.

Components come from the cluster manager, registry entries come from the
service registry. Both sides are matched on ``(service_name, address)``; the
host name of a component is only used to derive its registration id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

OWNERSHIP_TAG: Final[str] = "ambari"
SERVICE_PORT: Final[int] = 1080

UNKNOWN_STATE: Final[str] = "unknown"
MAINTENANCE_STATE: Final[str] = "maintenance"
MAINTENANCE_FLAGS: Final[frozenset[str]] = frozenset({"ON", "IMPLIED_FROM_SERVICE"})

ServiceKey: TypeAlias = tuple[str, str]


def normalize_service_name(component_type: str) -> str:
    """Return the registry service name for a component type.

    >>> normalize_service_name("HISTORY_SERVER")
    'history-server'
    """

    return component_type.lower().replace("_", "-")


def short_host_name(host_name: str) -> str:
    head, _sep, _rest = host_name.partition(".")
    return head


def registration_id(component_type: str, host_name: str) -> str:
    """Registration id of a component: ``<service-name>.<short-host>``."""

    short_host = short_host_name(host_name).replace("_", "-")
    return f"{normalize_service_name(component_type)}.{short_host}"


def effective_state(state: str, maintenance: str | None) -> str:
    """Apply the maintenance override to a reported lifecycle state."""

    if maintenance is not None and maintenance.upper() in MAINTENANCE_FLAGS:
        return MAINTENANCE_STATE
    return state


@dataclass(frozen=True, slots=True, kw_only=True)
class Component:
    """One running instance of a named component on one host."""

    component_type: str
    host_name: str
    ip_address: str = ""
    state: str

    @property
    def service_name(self) -> str:
        return normalize_service_name(self.component_type)

    @property
    def state_tag(self) -> str:
        return self.state.lower()

    @property
    def is_unknown(self) -> bool:
        return self.state_tag == UNKNOWN_STATE

    @property
    def key(self) -> ServiceKey:
        return (self.service_name, self.ip_address)

    @property
    def registration_id(self) -> str:
        return registration_id(self.component_type, self.host_name)

    def to_registry_entry(self) -> RegistryEntry:
        return RegistryEntry(
            id=self.registration_id,
            service_name=self.service_name,
            address=self.ip_address,
            tags=(self.state_tag, OWNERSHIP_TAG),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class RegistryEntry:
    """A service instance as seen in the registry catalog."""

    id: str
    service_name: str
    address: str
    tags: tuple[str, ...] = ()
    port: int = SERVICE_PORT

    @property
    def key(self) -> ServiceKey:
        return (self.service_name, self.address)

    @property
    def state_tag(self) -> str | None:
        return self.tags[0] if self.tags else None

    @property
    def is_owned(self) -> bool:
        return OWNERSHIP_TAG in self.tags


@dataclass(frozen=True, slots=True)
class HostInventory:
    """Host name to IP address mapping, rebuilt every pass."""

    addresses: Mapping[str, str] = field(default_factory=dict[str, str])

    def address_of(self, host_name: str) -> str:
        return self.addresses.get(host_name, "")

    def __len__(self) -> int:
        return len(self.addresses)


@dataclass(frozen=True, slots=True)
class TopologySnapshot:
    """Components discovered in one pass together with the inventory used."""

    components: tuple[Component, ...] = ()
    inventory: HostInventory = field(default_factory=HostInventory)
    cluster_name: str | None = None
