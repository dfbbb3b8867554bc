"""Translate Ambari payloads into domain components."""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_registration.domain.model import Component, HostInventory, effective_state

if TYPE_CHECKING:
    from .schema import HostComponentsResponse, HostsResponse, RootHostComponentsResponse


def translate_hosts(response: HostsResponse) -> HostInventory:
    return HostInventory({item.host.host_name: item.host.ip for item in response.items})


def translate_host_components(
    response: HostComponentsResponse,
    inventory: HostInventory,
) -> list[Component]:
    """Cluster-scoped components, with the maintenance flag overriding the state."""

    components: list[Component] = []
    for item in response.items:
        host_name = item.host.host_name
        address = inventory.address_of(host_name)
        for host_component in item.host_components:
            role = host_component.host_role
            components.append(
                Component(
                    component_type=role.component_name,
                    host_name=host_name,
                    ip_address=address,
                    state=effective_state(role.state, role.maintenance_state),
                )
            )
    return components


def translate_root_components(
    response: RootHostComponentsResponse,
    inventory: HostInventory,
) -> list[Component]:
    components: list[Component] = []
    for service in response.items:
        for component in service.components:
            for host_component in component.host_components:
                root = host_component.root_component
                components.append(
                    Component(
                        component_type=root.component_name,
                        host_name=root.host_name,
                        ip_address=inventory.address_of(root.host_name),
                        state=root.component_state,
                    )
                )
    return components
