"""
Purpose: Prepare many orders at once and report partial failures.
What it does:
Fans out one process_order() per order id, waits until every one of them
has settled and splits the outcomes into successful and failed lists. One
order failing never cancels its siblings.
"""

from __future__ import annotations

import asyncio
import logging
import math
import random
from typing import List, Optional, Sequence

from simulation.clock import Clock, ScaledClock
from simulation.errors import DeliveryError
from store.memory import DeliveryStore

from .models import BatchResult, FailedOrder, PreparedOrder
from .processing import process_order

logger = logging.getLogger(__name__)


async def _prepare_by_order_id(
    store: DeliveryStore,
    order_id: int,
    clock: Clock,
    rng: random.Random,
) -> PreparedOrder:
    # unknown order ids fail inside the task so gather() sees them as a settled failure
    order = store.get_order(order_id)
    return await process_order(store, order.restaurant_id, order_id, clock=clock, rng=rng)


async def process_multiple_orders(
    store: DeliveryStore,
    order_ids: Sequence[int],
    *,
    clock: Optional[Clock] = None,
    rng: Optional[random.Random] = None,
) -> BatchResult:
    """
    Returns a BatchResult whose lists follow the order of `order_ids`.
    total_processing_time is elapsed clock time in whole seconds.
    """
    clock = clock or ScaledClock()
    rng = rng or random.Random()

    if not order_ids:
        return BatchResult()

    started = clock.monotonic()

    results = await asyncio.gather(
        *(_prepare_by_order_id(store, order_id, clock, rng) for order_id in order_ids),
        return_exceptions=True,
    )

    elapsed = clock.monotonic() - started

    successful: List[PreparedOrder] = []
    failed: List[FailedOrder] = []
    for order_id, result in zip(order_ids, results):
        if isinstance(result, DeliveryError):
            failed.append(
                FailedOrder(
                    order_id=order_id,
                    error=str(result),
                    restaurant=store.restaurant_name_for_order(order_id),
                )
            )
        elif isinstance(result, BaseException):
            # anything outside the simulation taxonomy is a bug, not an outcome
            raise result
        else:
            successful.append(result)

    logger.info(
        "Batch of %d orders settled: %d ready, %d failed in %.1fs",
        len(order_ids), len(successful), len(failed), elapsed,
    )
    return BatchResult(
        successful=successful,
        failed=failed,
        # halves round up: 2.5s reports as 3
        total_processing_time=int(math.floor(elapsed + 0.5)),
    )


def summarize_failures(result: BatchResult) -> List[str]:
    return [f"{f.order_id} ({f.restaurant}): {f.error}" for f in result.failed]
