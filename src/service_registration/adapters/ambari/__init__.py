"""Public interface for the Ambari adapter."""

from __future__ import annotations

from .client import AmbariAPIError, AmbariClient
from .fetcher import AmbariTopologySource
from .translator import translate_host_components, translate_hosts, translate_root_components

__all__ = [
    "AmbariAPIError",
    "AmbariClient",
    "AmbariTopologySource",
    "translate_host_components",
    "translate_hosts",
    "translate_root_components",
]
