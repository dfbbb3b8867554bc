"""Domain port definitions for adapters."""

from __future__ import annotations

from .registry import RegistrySource, RegistryWriter
from .topology import TopologySource

__all__ = [
    "RegistrySource",
    "RegistryWriter",
    "TopologySource",
]
