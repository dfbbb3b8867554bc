"""Ambari configuration values."""

from __future__ import annotations

import time
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from .bootstrap import REQUEST_SLEEP_SECONDS, read_credentials, read_server
from .env import env_path
from .http_resilience import DEFAULT_TIMEOUT_SECONDS, RateLimit, ResilienceConfig

if TYPE_CHECKING:
    from .bootstrap import Sleeper

log = getLogger(__name__)

ENV_AMBARI_CREDENTIALS_PATH = "AMBARI_CREDENTIALS_PATH"
ENV_AMBARI_SERVER_PATH = "AMBARI_SERVER_PATH"
DEFAULT_AMBARI_CREDENTIALS_PATH = "/srv/pillar/ambari/credentials.sls"
DEFAULT_AMBARI_SERVER_PATH = "/srv/pillar/ambari/server.sls"

AMBARI_PORT = 8080
AMBARI_API_PREFIX = "/api/v1"
AMBARI_REQUESTED_BY = "ambari"


@dataclass(frozen=True, slots=True)
class AmbariConfig:
    """Holds the Ambari server address and credentials."""

    server: str
    username: str
    password: str
    port: int = AMBARI_PORT

    @property
    def base_url(self) -> str:
        return f"http://{self.server}:{self.port}{AMBARI_API_PREFIX}"

    @property
    def auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.username, self.password)

    def resilience(self, *, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> ResilienceConfig:
        return ResilienceConfig(
            name="ambari",
            base_url=self.base_url,
            timeout_seconds=timeout_seconds,
            ratelimit=RateLimit(max_calls=20, per_seconds=1.0),
            default_headers={"X-Requested-By": AMBARI_REQUESTED_BY},
        )


def get_ambari_config(
    *,
    sleep: Sleeper = time.sleep,
    interval: float = REQUEST_SLEEP_SECONDS,
) -> AmbariConfig:
    """Block until both bootstrap files are usable and build the Ambari config."""

    credentials_path = env_path(ENV_AMBARI_CREDENTIALS_PATH, DEFAULT_AMBARI_CREDENTIALS_PATH)
    log.info("Ambari credentials path: %s", credentials_path)
    username, password = read_credentials(credentials_path, sleep=sleep, interval=interval)

    server_path = env_path(ENV_AMBARI_SERVER_PATH, DEFAULT_AMBARI_SERVER_PATH)
    log.info("Ambari server path: %s", server_path)
    server = read_server(server_path, sleep=sleep, interval=interval)

    return AmbariConfig(server=server, username=username, password=password)
