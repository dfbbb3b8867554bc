"""Errors raised while building the snapshots a pass depends on."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for failures that abort a single reconciliation pass."""


class TopologyFetchError(ReconciliationError):
    """Raised when the cluster manager cannot be reached or decoded."""


class ClusterNotFoundError(TopologyFetchError):
    """Raised when the cluster manager does not report a cluster yet."""


class RegistryFetchError(ReconciliationError):
    """Raised when any part of the registry view cannot be read."""
