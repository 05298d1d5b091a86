"""
Purpose: Driver assignment (the "who takes this order" step).
What it does:
Picks the available driver with the shortest delivery time, takes it out of
the pool and returns an Assignment stamped with the clock's current time.
"""

from __future__ import annotations

import logging
from typing import Optional

from drivers.selection import pick_fastest_driver
from simulation.clock import Clock, ScaledClock
from simulation.errors import NoDriversAvailableError
from store.memory import DeliveryStore

from .models import Assignment
from .state_machines.driver_state import mark_on_delivery

logger = logging.getLogger(__name__)


class DriverAssigner:
    """
    Assigns drivers from one store.

    Selection and the status flip run under the store's assignment lock, so
    every assigner and every assign_driver() call on that store is serialised.
    """

    def __init__(self, store: DeliveryStore, clock: Optional[Clock] = None):
        self.store = store
        self.clock = clock or ScaledClock()

    async def assign(self, order_id: int) -> Assignment:
        async with self.store.assignment_lock:
            driver = pick_fastest_driver(self.store.drivers())
            if driver is None:
                logger.warning("Order %s: no drivers available", order_id)
                raise NoDriversAvailableError()

            mark_on_delivery(driver)

        assignment = Assignment(
            order_id=order_id,
            driver_id=driver.id,
            driver_name=driver.name,
            estimated_delivery_time=driver.delivery_time_seconds,
            assigned_at=self.clock.now(),
        )
        logger.info(
            "Order %s: assigned to %s (ETA %ss)", order_id, driver.name, driver.delivery_time_seconds,
            extra={"order_id": order_id, "driver_id": driver.id},
        )
        return assignment


async def assign_driver(
    store: DeliveryStore,
    order_id: int,
    *,
    clock: Optional[Clock] = None,
) -> Assignment:
    """
    One-off assignment. Shares the store's lock with every DriverAssigner,
    so concurrent callers never pick the same driver.
    """
    return await DriverAssigner(store, clock=clock).assign(order_id)
