from __future__ import annotations

import pytest

_CONFIG_ENV_VARS = (
    "AMBARI_CREDENTIALS_PATH",
    "AMBARI_SERVER_PATH",
    "CONSUL_CATALOG_URL",
    "CONSUL_AGENT_PORT",
    "REGISTRY_CONCURRENCY",
    "SERVICE_CHECK_POLL_INTERVAL",
    "SERVICE_REGISTRATION_LOG_FILE",
    "SERVICE_REGISTRATION_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell and ``.env`` settings out of every test."""

    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
