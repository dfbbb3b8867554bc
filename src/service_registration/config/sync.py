"""Polling cadence and fan-out defaults for the reconciliation loop."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from logging import getLogger

from .env import env_int

log = getLogger(__name__)

ENV_SERVICE_CHECK_POLL_INTERVAL = "SERVICE_CHECK_POLL_INTERVAL"
ENV_REGISTRY_CONCURRENCY = "REGISTRY_CONCURRENCY"
DEFAULT_POLL_INTERVAL_SECONDS = 10.0
DEFAULT_REGISTRY_CONCURRENCY = 16

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # noqa: RUF001
    "μs": 1e-6,  # noqa: RUF001
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|s|m|h)"  # noqa: RUF001
_DURATION_RE = re.compile(rf"^[+-]?(?:{_NUMBER}{_UNIT})+$")
_COMPONENT_RE = re.compile(rf"({_NUMBER})({_UNIT})")


def parse_duration(value: str) -> float:
    """Parse a Go-style duration such as ``1m30s`` or ``250ms`` into seconds.

    ``"0"`` is accepted on its own. Raises ``ValueError`` for anything else that
    does not match the format.
    """

    text = value.strip()
    if text in {"0", "+0", "-0"}:
        return 0.0
    if not _DURATION_RE.match(text):
        raise ValueError(f"Invalid duration: {value!r}")
    sign = -1.0 if text.startswith("-") else 1.0
    total = sum(
        float(number) * _UNIT_SECONDS[unit] for number, unit in _COMPONENT_RE.findall(text)
    )
    return sign * total


def poll_interval_from_env(default: float = DEFAULT_POLL_INTERVAL_SECONDS) -> float:
    raw = os.getenv(ENV_SERVICE_CHECK_POLL_INTERVAL)
    if raw is None or not raw.strip():
        return default
    try:
        interval = parse_duration(raw)
    except ValueError:
        log.debug("Ignoring invalid %s=%r", ENV_SERVICE_CHECK_POLL_INTERVAL, raw)
        return default
    if interval <= 0:
        log.debug("Ignoring non-positive %s=%r", ENV_SERVICE_CHECK_POLL_INTERVAL, raw)
        return default
    return interval


@dataclass(frozen=True, slots=True)
class SyncConfig:
    poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS
    registry_concurrency: int = DEFAULT_REGISTRY_CONCURRENCY


def get_sync_config() -> SyncConfig:
    return SyncConfig(
        poll_interval=poll_interval_from_env(),
        registry_concurrency=env_int(ENV_REGISTRY_CONCURRENCY, DEFAULT_REGISTRY_CONCURRENCY),
    )
