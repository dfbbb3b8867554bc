"""Ports for reading the cluster manager's topology."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from service_registration.domain.model import TopologySnapshot


@runtime_checkable
class TopologySource(Protocol):
    """Discovers running components and resolves the cluster identity."""

    async def resolve_cluster_name(self) -> str:
        """Return the cluster name or raise if it cannot be determined yet."""
        ...

    async def build_snapshot(self, *, cluster_name: str | None) -> TopologySnapshot:
        """Return root components plus cluster components when ``cluster_name`` is set.

        Any failure must raise; a partially built snapshot is never returned.
        """
        ...


__all__ = ["TopologySource"]
