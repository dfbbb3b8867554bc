"""Plan and outcome types shared by the diff, mutation and loop stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from service_registration.domain.model import Component, RegistryEntry


@dataclass(frozen=True, slots=True)
class ReconciliationPlan:
    """Registrations and deregistrations computed for one pass."""

    to_register: tuple[Component, ...] = ()
    to_deregister: tuple[RegistryEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.to_register and not self.to_deregister


class MutationKind(StrEnum):
    REGISTER = "register"
    DEREGISTER = "deregister"


@dataclass(frozen=True, slots=True, kw_only=True)
class MutationOutcome:
    """Result of a single register or deregister call."""

    kind: MutationKind
    service_id: str
    address: str
    ok: bool
    error: str | None = None


@dataclass(slots=True)
class ApplyResult:
    """Outcomes of applying a plan, in no particular order."""

    outcomes: list[MutationOutcome] = field(default_factory=list["MutationOutcome"])

    def extend(self, outcomes: Iterable[MutationOutcome]) -> None:
        self.outcomes.extend(outcomes)

    def _count(self, kind: MutationKind, *, ok: bool) -> int:
        return sum(1 for outcome in self.outcomes if outcome.kind is kind and outcome.ok is ok)

    @property
    def registered(self) -> int:
        return self._count(MutationKind.REGISTER, ok=True)

    @property
    def deregistered(self) -> int:
        return self._count(MutationKind.DEREGISTER, ok=True)

    @property
    def failures(self) -> list[MutationOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]
