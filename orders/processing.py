"""
Purpose: Simulated restaurant-side order preparation.
What it does:
Looks up the restaurant, waits its preparation time on the injected clock,
then lets the injected random source decide success or failure against the
restaurant's success rate.

Rule: Takes state (store), time (clock) and randomness (rng) as arguments.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from simulation.clock import Clock, ScaledClock
from simulation.errors import PreparationFailedError
from store.memory import DeliveryStore

from .models import PreparedOrder, READY_STATUS

logger = logging.getLogger(__name__)


async def process_order(
    store: DeliveryStore,
    restaurant_id: int,
    order_id: int,
    *,
    clock: Optional[Clock] = None,
    rng: Optional[random.Random] = None,
) -> PreparedOrder:
    """
    Raises RestaurantNotFoundError straight away for an unknown restaurant,
    PreparationFailedError when the draw exceeds the success rate.
    """
    clock = clock or ScaledClock()
    rng = rng or random.Random()

    restaurant = store.get_restaurant(restaurant_id)

    logger.debug(
        "Order %s: preparing at %s (%ss)", order_id, restaurant.name, restaurant.preparation_time_seconds
    )
    await clock.sleep(restaurant.preparation_time_seconds)

    draw = rng.random()
    if draw > restaurant.success_rate:
        logger.info(
            "Order %s: preparation failed at %s (draw %.3f)", order_id, restaurant.name, draw,
            extra={"order_id": order_id, "restaurant": restaurant.name},
        )
        raise PreparationFailedError(order_id, restaurant.name)

    logger.info(
        "Order %s: ready at %s", order_id, restaurant.name,
        extra={"order_id": order_id, "restaurant": restaurant.name},
    )
    return PreparedOrder(
        order_id=order_id,
        status=READY_STATUS,
        preparation_time=restaurant.preparation_time_seconds,
        restaurant=restaurant.name,
    )
