"""Consul configuration values."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from .env import env_int, env_str
from .http_resilience import DEFAULT_TIMEOUT_SECONDS, ResilienceConfig

DEFAULT_CONSUL_CATALOG_URL = "http://localhost:8500"
DEFAULT_CONSUL_AGENT_PORT = 8500


@dataclass(frozen=True, slots=True)
class ConsulConfig:
    """Where to read the catalog and how to reach each node's local agent."""

    catalog_url: str = DEFAULT_CONSUL_CATALOG_URL
    agent_port: int = DEFAULT_CONSUL_AGENT_PORT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def agent_url(self, address: str, path: str = "") -> httpx.URL:
        """URL of the agent on the node at ``address``; IPv6 hosts are bracketed."""

        return httpx.URL(scheme="http", host=address, port=self.agent_port, path=path)

    @property
    def resilience(self) -> ResilienceConfig:
        # No base_url: agent calls target a different node per request.
        return ResilienceConfig(name="consul", timeout_seconds=self.timeout_seconds)


def get_consul_config() -> ConsulConfig:
    return ConsulConfig(
        catalog_url=env_str("CONSUL_CATALOG_URL", DEFAULT_CONSUL_CATALOG_URL).rstrip("/"),
        agent_port=env_int("CONSUL_AGENT_PORT", DEFAULT_CONSUL_AGENT_PORT),
    )
