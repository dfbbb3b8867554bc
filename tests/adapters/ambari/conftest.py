"""Shared fixtures for Ambari adapter tests."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import httpx
import pytest

from service_registration.adapters.ambari import AmbariClient
from service_registration.adapters.http_resilience import ResilientClient
from service_registration.config.ambari import AmbariConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.support.http import Handler, JsonPayload


@pytest.fixture
def ambari_config() -> AmbariConfig:
    return AmbariConfig(server="ambari.local", username="admin", password="secret")


@pytest.fixture
def make_ambari_client(ambari_config: AmbariConfig) -> Callable[[Handler], AmbariClient]:
    def factory(handler: Handler) -> AmbariClient:
        resilience = replace(ambari_config.resilience(), retry=None, ratelimit=None)
        client = ResilientClient(
            resilience,
            auth=ambari_config.auth,
            transport=httpx.MockTransport(handler),
        )
        return AmbariClient(config=ambari_config, client=client)

    return factory


@pytest.fixture
def hosts_payload() -> JsonPayload:
    return {
        "items": [
            {"Hosts": {"host_name": "master1.dom", "ip": "10.0.0.1"}},
            {"Hosts": {"host_name": "worker1.dom", "ip": "10.0.0.2"}},
        ]
    }


@pytest.fixture
def root_components_payload() -> JsonPayload:
    return {
        "items": [
            {
                "components": [
                    {
                        "hostComponents": [
                            {
                                "RootServiceHostComponents": {
                                    "component_name": "AMBARI_SERVER",
                                    "component_state": "STARTED",
                                    "host_name": "master1.dom",
                                    "service_name": "AMBARI",
                                }
                            }
                        ]
                    },
                    {
                        "hostComponents": [
                            {
                                "RootServiceHostComponents": {
                                    "component_name": "AMBARI_AGENT",
                                    "component_state": "STARTED",
                                    "host_name": "worker1.dom",
                                }
                            },
                            {
                                "RootServiceHostComponents": {
                                    "component_name": "AMBARI_AGENT",
                                    "component_state": "STARTED",
                                    "host_name": "ghost.dom",
                                }
                            },
                        ]
                    },
                ]
            }
        ]
    }


@pytest.fixture
def host_components_payload() -> JsonPayload:
    return {
        "items": [
            {
                "Hosts": {"cluster_name": "c1", "host_name": "master1.dom"},
                "host_components": [
                    {
                        "HostRoles": {
                            "cluster_name": "c1",
                            "component_name": "NAMENODE",
                            "host_name": "master1.dom",
                            "state": "STARTED",
                            "maintenance_state": "OFF",
                        }
                    },
                    {
                        "HostRoles": {
                            "component_name": "HISTORYSERVER",
                            "host_name": "master1.dom",
                            "state": "STARTED",
                            "maintenance_state": "ON",
                        }
                    },
                ],
            },
            {
                "Hosts": {"host_name": "worker1.dom"},
                "host_components": [
                    {
                        "HostRoles": {
                            "component_name": "DATANODE",
                            "host_name": "worker1.dom",
                            "state": "INSTALLED",
                            "maintenance_state": "IMPLIED_FROM_SERVICE",
                        }
                    },
                    {
                        "HostRoles": {
                            "component_name": "NODEMANAGER",
                            "host_name": "worker1.dom",
                            "state": "UNKNOWN",
                        }
                    },
                ],
            },
        ]
    }


@pytest.fixture
def clusters_payload() -> JsonPayload:
    return {"items": [{"Clusters": {"cluster_name": "c1", "version": "HDP-3.1"}}]}
