"""
Purpose: Delivery completion.
What it does:
Simulates the drive to the customer for an assigned driver, then either
confirms the handover or fails it with a small probability. The driver is
released back to the pool in both cases.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from drivers.models import DriverStatus
from simulation.clock import Clock, ScaledClock
from simulation.errors import DeliveryFailedError
from store.memory import DeliveryStore

from .models import DeliveryConfirmation
from .state_machines.driver_state import DriverStateError, release_driver

logger = logging.getLogger(__name__)

DEFAULT_DELIVERY_FAILURE_RATE = 0.05


async def complete_delivery(
    store: DeliveryStore,
    order_id: int,
    driver_id: int,
    *,
    clock: Optional[Clock] = None,
    rng: Optional[random.Random] = None,
    failure_rate: float = DEFAULT_DELIVERY_FAILURE_RATE,
) -> DeliveryConfirmation:
    """
    Raises DriverNotFoundError for an unknown driver, DriverStateError if the
    driver is not out on a delivery and DeliveryFailedError when the draw
    lands under `failure_rate`.
    """
    clock = clock or ScaledClock()
    rng = rng or random.Random()

    driver = store.get_driver(driver_id)
    if driver.status != DriverStatus.ON_DELIVERY:
        raise DriverStateError(f"Driver {driver.id} has no delivery in progress. Current: {driver.status.value}")

    await clock.sleep(driver.delivery_time_seconds)

    # released before the outcome is decided so a failed handover cannot leak the driver
    release_driver(driver)

    if rng.random() < failure_rate:
        logger.info(
            "Order %s: delivery by %s failed", order_id, driver.name,
            extra={"order_id": order_id, "driver_id": driver.id},
        )
        raise DeliveryFailedError(order_id)

    logger.info(
        "Order %s: delivered by %s", order_id, driver.name,
        extra={"order_id": order_id, "driver_id": driver.id},
    )
    return DeliveryConfirmation(
        order_id=order_id,
        driver_id=driver.id,
        driver_name=driver.name,
        delivered_at=clock.now(),
    )
