"""Application configuration helpers."""

from __future__ import annotations

from .ambari import AmbariConfig, get_ambari_config
from .bootstrap import read_credentials, read_server, wait_for_file
from .consul import ConsulConfig, get_consul_config
from .errors import ConfigurationError, MalformedConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .sync import SyncConfig, get_sync_config, parse_duration

__all__ = [
    "AmbariConfig",
    "ConfigurationError",
    "ConsulConfig",
    "MalformedConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SyncConfig",
    "configure_logging",
    "get_ambari_config",
    "get_consul_config",
    "get_sync_config",
    "parse_duration",
    "read_credentials",
    "read_server",
    "wait_for_file",
]
