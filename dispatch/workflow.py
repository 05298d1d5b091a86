"""
Purpose: Orchestrator / end-to-end pipeline (the "glue").
What it does:
Bundles one store, clock, random source and policy, and runs an order
through preparation → driver assignment → delivery, reporting each stage
change to an optional status callback.
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Callable, List, Optional, Sequence

from orders.batch import process_multiple_orders
from orders.models import ORDER_STAGES, BatchResult, OrderStage, PreparedOrder, StatusUpdate
from orders.processing import process_order
from orders.tracking import track_order_status
from simulation.clock import Clock
from simulation.errors import DeliveryError
from simulation.policy import SimulationPolicy, default_policy
from store.memory import DeliveryStore

from .assigner import DriverAssigner
from .delivery import complete_delivery
from .models import Assignment, DeliveryConfirmation, DeliveryOutcome
from .state_machines.order_state import next_stage, stage_number

logger = logging.getLogger(__name__)

StatusCallback = Callable[[StatusUpdate], None]


class DeliverySimulation:
    """
    One simulation run. Every operation shares the same store, so drivers
    taken by one order are visible to the next.
    """

    def __init__(
        self,
        store: DeliveryStore,
        policy: Optional[SimulationPolicy] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ):
        self.policy = policy or default_policy()
        self.policy.validate()
        self.store = store
        self.clock = clock or self.policy.make_clock()
        self.rng = rng or self.policy.make_random()
        self.assigner = DriverAssigner(store, clock=self.clock)

    # --- Single steps ---

    async def process_order(self, restaurant_id: int, order_id: int) -> PreparedOrder:
        return await process_order(self.store, restaurant_id, order_id, clock=self.clock, rng=self.rng)

    async def assign_driver(self, order_id: int) -> Assignment:
        return await self.assigner.assign(order_id)

    async def process_multiple_orders(self, order_ids: Sequence[int]) -> BatchResult:
        return await process_multiple_orders(self.store, order_ids, clock=self.clock, rng=self.rng)

    async def track_order_status(self, order_id: int, callback: StatusCallback) -> List[StatusUpdate]:
        return await track_order_status(
            order_id,
            callback,
            clock=self.clock,
            interval_seconds=self.policy.status_interval_seconds,
        )

    async def complete_delivery(self, order_id: int, driver_id: int) -> DeliveryConfirmation:
        return await complete_delivery(
            self.store,
            order_id,
            driver_id,
            clock=self.clock,
            rng=self.rng,
            failure_rate=self.policy.delivery_failure_rate,
        )

    # --- Full pipeline ---

    def _report(self, order_id: int, stage: OrderStage, on_status: Optional[StatusCallback]) -> None:
        if on_status is None:
            return
        on_status(
            StatusUpdate(
                order_id=order_id,
                stage=stage,
                stage_number=stage_number(stage),
                total_stages=len(ORDER_STAGES),
                timestamp=self.clock.now(),
            )
        )

    async def run_order(self, order_id: int, on_status: Optional[StatusCallback] = None) -> DeliveryOutcome:
        """
        Runs one order end to end. A DeliveryError at any step stops the
        pipeline for this order and is recorded on the outcome.
        """
        outcome = DeliveryOutcome(order_id=order_id)
        stage = OrderStage.RECEIVED
        self._report(order_id, stage, on_status)

        try:
            order = self.store.get_order(order_id)

            stage = next_stage(stage)  # preparing
            self._report(order_id, stage, on_status)
            outcome.prepared = await self.process_order(order.restaurant_id, order_id)

            stage = next_stage(stage)  # ready
            self._report(order_id, stage, on_status)
            outcome.assignment = await self.assign_driver(order_id)

            stage = next_stage(stage)  # out for delivery
            self._report(order_id, stage, on_status)
            outcome.confirmation = await self.complete_delivery(order_id, outcome.assignment.driver_id)

            stage = next_stage(stage)  # delivered
            self._report(order_id, stage, on_status)
        except DeliveryError as e:
            logger.warning("Order %s stopped at '%s': %s", order_id, stage.value, e)
            outcome.error = str(e)

        return outcome

    async def run_orders(self, order_ids: Sequence[int], on_status: Optional[StatusCallback] = None) -> List[DeliveryOutcome]:
        """
        Runs several orders concurrently. Outcomes follow the input order.
        """
        return list(await asyncio.gather(*(self.run_order(order_id, on_status) for order_id in order_ids)))
