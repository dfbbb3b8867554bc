"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from logging import getLogger
from pathlib import Path

from .errors import ConfigurationError

log = getLogger(__name__)


def env_str(name: str, default: str) -> str:
    """Return the environment variable ``name``, or ``default`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def env_path(name: str, default: str) -> Path:
    return Path(env_str(name, default)).expanduser()


def env_int(name: str, default: int, *, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")
    return value
