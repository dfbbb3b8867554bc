"""Bounded fan-out for I/O-bound adapter calls."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

T = TypeVar("T")
R = TypeVar("R")


async def gather_bounded(
    items: Iterable[T],
    worker: Callable[[T], Awaitable[R]],
    *,
    limit: int,
) -> list[R]:
    """Run ``worker`` for every item with at most ``limit`` calls in flight.

    Every call runs to completion. Results keep the order of ``items``; if any
    call raised, the first such exception (in item order) is re-raised after
    the others have finished.
    """

    if limit < 1:
        raise ValueError(f"Concurrency limit must be positive, got {limit}")
    semaphore = asyncio.Semaphore(limit)

    async def run(item: T) -> R:
        async with semaphore:
            return await worker(item)

    results = await asyncio.gather(*(run(item) for item in items), return_exceptions=True)
    collected: list[R] = []
    for result in results:
        if isinstance(result, BaseException):
            raise result
        collected.append(result)
    return collected
