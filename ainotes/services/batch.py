"""Per-item result types and a bounded fan-out helper for batch workflows.

A batch never aborts on the first failure: each item's work is turned into
either an ``ItemSuccess`` or an ``ItemFailure`` and the caller folds the
results, in input order, into an outcome object.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class ItemSuccess(Generic[R]):
    value: R


@dataclass(frozen=True, slots=True)
class ItemFailure:
    label: str
    message: str


ItemResult = ItemSuccess[R] | ItemFailure


@dataclass
class BatchOutcome:
    """Result of a tag backfill run."""

    total_notes: int = 0
    processed_count: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass
class SeedOutcome:
    """Result of a seed run."""

    created_count: int = 0
    created_note_ids: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


async def run_isolated(
    items: Sequence[T],
    work: Callable[[T], Awaitable[R]],
    label: Callable[[T], str],
    *,
    concurrency: int = 1,
) -> list[ItemResult]:
    """Run *work* for every item, converting exceptions into ``ItemFailure``.

    At most *concurrency* calls are in flight at once. Results are returned
    in the same order as *items*. ``asyncio.CancelledError`` is not caught.
    """
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def _one(item: T) -> ItemResult:
        async with semaphore:
            try:
                return ItemSuccess(await work(item))
            except Exception as exc:
                return ItemFailure(label=label(item), message=str(exc))

    return list(await asyncio.gather(*(_one(item) for item in items)))
