"""Polling loop that repeats reconciliation passes forever."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import TYPE_CHECKING

from service_registration.domain.errors import ReconciliationError

from .engine import ReconciliationContext

if TYPE_CHECKING:
    from .engine import PassResult, ReconciliationEngine

log = getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


async def run_pass_safely(
    engine: ReconciliationEngine,
    context: ReconciliationContext,
) -> tuple[ReconciliationContext, PassResult | None]:
    """Run one pass, logging instead of raising when it has to be aborted."""

    try:
        context = await engine.resolve_context(context)
    except Exception:
        # The pass still runs; only cluster-scoped components are skipped.
        log.exception("Unexpected error while resolving the cluster name")
    try:
        result = await engine.run_pass(context)
    except ReconciliationError as exc:
        log.warning("Reconciliation pass aborted: %s", exc)
        return context, None
    except Exception:
        log.exception("Unexpected error during reconciliation pass")
        return context, None

    log.info(
        "Reconciliation pass finished: components=%s, registered=%s, "
        "to_register=%s, to_deregister=%s, failures=%s",
        len(result.snapshot.components),
        result.registered_entries,
        len(result.plan.to_register),
        len(result.plan.to_deregister),
        len(result.applied.failures),
    )
    return context, result


async def run_forever(
    engine: ReconciliationEngine,
    *,
    poll_interval: float,
    context: ReconciliationContext | None = None,
    max_passes: int | None = None,
    sleep: Sleeper = asyncio.sleep,
) -> ReconciliationContext:
    """Reconcile, sleep ``poll_interval`` seconds, repeat.

    ``max_passes`` bounds the loop; ``None`` runs until cancelled. Returns the
    context carried out of the last pass.
    """

    current = context or ReconciliationContext()
    passes = 0
    while max_passes is None or passes < max_passes:
        current, _result = await run_pass_safely(engine, current)
        passes += 1
        if max_passes is not None and passes >= max_passes:
            break
        log.info("Wait %.0f seconds for the next service check", poll_interval)
        await sleep(poll_interval)
    return current
