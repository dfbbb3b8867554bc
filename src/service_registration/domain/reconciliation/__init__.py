"""Reconciliation core: converge the registry onto the discovered topology.

Flow of a pass:
1) resolve the cluster name once and carry it in the context
2) build the topology snapshot
3) read the full registry view
4) diff both into a plan
5) apply deregistrations and registrations with bounded fan-out
"""

from __future__ import annotations

from .diff import (
    components_to_register,
    compute_plan,
    deduplicate_components,
    entries_to_deregister,
)
from .engine import PassResult, ReconciliationContext, ReconciliationEngine
from .loop import run_forever, run_pass_safely
from .plan import ApplyResult, MutationKind, MutationOutcome, ReconciliationPlan

__all__ = [
    "ApplyResult",
    "MutationKind",
    "MutationOutcome",
    "PassResult",
    "ReconciliationContext",
    "ReconciliationEngine",
    "ReconciliationPlan",
    "components_to_register",
    "compute_plan",
    "deduplicate_components",
    "entries_to_deregister",
    "run_forever",
    "run_pass_safely",
]
