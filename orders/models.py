"""
Purpose: Domain models for the Orders capability.
What it does:
- Defines core data structures:
- Order (id, restaurant_id, items, total_amount)
- PreparedOrder (what a restaurant hands back once food is ready)
- FailedOrder / BatchResult (outcome of a concurrent batch)
- StatusUpdate (one tick of the order tracker)

Defines enums/constants:
- OrderStage = received | preparing | ready | out for delivery | delivered

Rule: No timers, no randomness. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Sequence, Tuple


class OrderStage(str, Enum):
    RECEIVED = "received"
    PREPARING = "preparing"
    READY = "ready"
    OUT_FOR_DELIVERY = "out for delivery"
    DELIVERED = "delivered"


ORDER_STAGES: Tuple[OrderStage, ...] = tuple(OrderStage)

READY_STATUS = OrderStage.READY.value


@dataclass(frozen=True)
class Order:
    """
    Reference data for a single customer order.
    """
    id: int
    restaurant_id: int
    items: Tuple[str, ...] = ()
    total_amount: float = 0.0

    @classmethod
    def new(cls, order_id: int, restaurant_id: int, items: Sequence[str] = (), total_amount: float = 0.0) -> Order:
        if total_amount < 0:
            raise ValueError("total_amount must be >= 0")
        return cls(id=order_id, restaurant_id=restaurant_id, items=tuple(items), total_amount=total_amount)


@dataclass(frozen=True)
class PreparedOrder:
    """
    Success payload of order preparation.
    """
    order_id: int
    status: str
    preparation_time: float
    restaurant: str


@dataclass(frozen=True)
class FailedOrder:
    order_id: int
    error: str
    restaurant: str


@dataclass
class BatchResult:
    """
    Output of a concurrent batch: every order lands in exactly one list.
    """
    successful: List[PreparedOrder] = field(default_factory=list)
    failed: List[FailedOrder] = field(default_factory=list)
    total_processing_time: int = 0


@dataclass(frozen=True)
class StatusUpdate:
    order_id: int
    stage: OrderStage
    stage_number: int
    total_stages: int
    timestamp: datetime
