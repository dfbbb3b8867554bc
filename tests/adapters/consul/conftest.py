"""Shared fixtures for Consul adapter tests."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import httpx
import pytest

from service_registration.adapters.consul import ConsulClient
from service_registration.adapters.http_resilience import ResilientClient
from service_registration.config.consul import ConsulConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.support.http import Handler


@pytest.fixture
def consul_config() -> ConsulConfig:
    return ConsulConfig(catalog_url="http://consul.local:8500", agent_port=8500)


@pytest.fixture
def make_consul_client(consul_config: ConsulConfig) -> Callable[[Handler], ConsulClient]:
    def factory(handler: Handler) -> ConsulClient:
        resilience = replace(consul_config.resilience, retry=None)
        client = ResilientClient(resilience, transport=httpx.MockTransport(handler))
        return ConsulClient(config=consul_config, client=client)

    return factory


@pytest.fixture
def catalog_routes() -> dict[tuple[str, str], httpx.Response]:
    return {
        ("GET", "/v1/catalog/services"): httpx.Response(
            200, json={"consul": [], "namenode": ["started", "ambari"], "datanode": None}
        ),
        ("GET", "/v1/catalog/service/consul"): httpx.Response(
            200,
            json=[
                {
                    "Node": "master1",
                    "ServiceID": "consul",
                    "ServiceName": "consul",
                    "Address": "10.0.0.1",
                    "ServiceTags": None,
                    "ServicePort": 8300,
                }
            ],
        ),
        ("GET", "/v1/catalog/service/namenode"): httpx.Response(
            200,
            json=[
                {
                    "ServiceID": "namenode.master1",
                    "ServiceName": "namenode",
                    "Address": "10.0.0.1",
                    "ServiceTags": ["started", "ambari"],
                    "ServicePort": 1080,
                }
            ],
        ),
        ("GET", "/v1/catalog/service/datanode"): httpx.Response(
            200,
            json=[
                {
                    "ServiceID": "datanode.worker1",
                    "ServiceName": "datanode",
                    "Address": "10.0.0.2",
                    "ServiceTags": ["installed", "ambari"],
                    "ServicePort": 1080,
                },
                {
                    "ServiceID": "datanode.worker2",
                    "ServiceName": "datanode",
                    "Address": "10.0.0.3",
                    "ServiceTags": ["started", "ambari"],
                    "ServicePort": 1080,
                },
            ],
        ),
    }
