"""
Purpose: Order status ticker.
What it does:
Walks an order through received → preparing → ready → out for delivery →
delivered on a fixed interval, reporting each stage to a callback. It is
purely illustrative and never touches store state.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Callable, List, Optional

from simulation.clock import Clock, ScaledClock

from .models import ORDER_STAGES, StatusUpdate

logger = logging.getLogger(__name__)

DEFAULT_STATUS_INTERVAL_SECONDS = 2.0


async def iter_order_status(
    order_id: int,
    *,
    clock: Optional[Clock] = None,
    interval_seconds: float = DEFAULT_STATUS_INTERVAL_SECONDS,
) -> AsyncIterator[StatusUpdate]:
    clock = clock or ScaledClock()
    total = len(ORDER_STAGES)

    for index, stage in enumerate(ORDER_STAGES):
        if index > 0:
            await clock.sleep(interval_seconds)

        yield StatusUpdate(
            order_id=order_id,
            stage=stage,
            stage_number=index + 1,
            total_stages=total,
            timestamp=clock.now(),
        )


async def track_order_status(
    order_id: int,
    callback: Callable[[StatusUpdate], None],
    *,
    clock: Optional[Clock] = None,
    interval_seconds: float = DEFAULT_STATUS_INTERVAL_SECONDS,
) -> List[StatusUpdate]:
    """
    Calls `callback` once per stage, first one immediately, and returns the
    full list of updates once the order is delivered.
    """
    updates: List[StatusUpdate] = []
    async for update in iter_order_status(order_id, clock=clock, interval_seconds=interval_seconds):
        logger.debug("Order %s: %s (%d/%d)", order_id, update.stage.value, update.stage_number, update.total_stages)
        callback(update)
        updates.append(update)
    return updates
