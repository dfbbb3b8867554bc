"""Public interface for the Consul adapter."""

from __future__ import annotations

from .client import ConsulAPIError, ConsulClient
from .mutator import ConsulRegistryWriter
from .reader import ConsulRegistrySource
from .schema import CatalogServiceEntry, ServiceRegistration

__all__ = [
    "CatalogServiceEntry",
    "ConsulAPIError",
    "ConsulClient",
    "ConsulRegistrySource",
    "ConsulRegistryWriter",
    "ServiceRegistration",
]
