from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from service_registration.adapters.consul import ConsulAPIError, ConsulRegistrySource
from service_registration.domain.model import RegistryEntry
from service_registration.domain.ports import RegistrySource
from tests.support.http import RecordingHandler

if TYPE_CHECKING:
    from collections.abc import Callable

    from service_registration.adapters.consul import ConsulClient
    from tests.support.http import Handler


def test_reader_satisfies_registry_port(
    make_consul_client: Callable[[Handler], ConsulClient],
) -> None:
    source = ConsulRegistrySource(make_consul_client(RecordingHandler({})))

    assert isinstance(source, RegistrySource)


def test_read_registry_flattens_every_service(
    make_consul_client: Callable[[Handler], ConsulClient],
    catalog_routes: dict[tuple[str, str], httpx.Response],
) -> None:
    handler = RecordingHandler(dict(catalog_routes))
    source = ConsulRegistrySource(make_consul_client(handler), concurrency=2)

    entries = asyncio.run(source.read_registry())

    assert entries == [
        RegistryEntry(id="consul", service_name="consul", address="10.0.0.1", tags=(), port=8300),
        RegistryEntry(
            id="datanode.worker1",
            service_name="datanode",
            address="10.0.0.2",
            tags=("installed", "ambari"),
        ),
        RegistryEntry(
            id="datanode.worker2",
            service_name="datanode",
            address="10.0.0.3",
            tags=("started", "ambari"),
        ),
        RegistryEntry(
            id="namenode.master1",
            service_name="namenode",
            address="10.0.0.1",
            tags=("started", "ambari"),
        ),
    ]
    assert len(handler.paths("GET")) == 4


def test_single_service_failure_fails_the_whole_read(
    make_consul_client: Callable[[Handler], ConsulClient],
    catalog_routes: dict[tuple[str, str], httpx.Response],
) -> None:
    routes = dict(catalog_routes)
    routes[("GET", "/v1/catalog/service/datanode")] = httpx.Response(500, text="boom")
    handler = RecordingHandler(routes)
    source = ConsulRegistrySource(make_consul_client(handler))

    with pytest.raises(ConsulAPIError, match="datanode"):
        asyncio.run(source.read_registry())

    assert sorted(handler.paths("GET")) == [
        "/v1/catalog/service/consul",
        "/v1/catalog/service/datanode",
        "/v1/catalog/service/namenode",
        "/v1/catalog/services",
    ]


def test_empty_catalog_reads_no_services(
    make_consul_client: Callable[[Handler], ConsulClient],
) -> None:
    handler = RecordingHandler({("GET", "/v1/catalog/services"): httpx.Response(200, json={})})

    assert asyncio.run(ConsulRegistrySource(make_consul_client(handler)).read_registry()) == []
    assert handler.paths() == ["/v1/catalog/services"]
