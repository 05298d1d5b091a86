"""
Records produced by the dispatch layer. None of them are persisted.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from orders.models import PreparedOrder


@dataclass(frozen=True)
class Assignment:
    """
    Binds one order to one driver.
    """
    order_id: int
    driver_id: int
    driver_name: str
    estimated_delivery_time: float
    assigned_at: datetime


@dataclass(frozen=True)
class DeliveryConfirmation:
    order_id: int
    driver_id: int
    driver_name: str
    delivered_at: datetime


@dataclass
class DeliveryOutcome:
    """
    End-to-end result of one order. `error` is set when any step failed;
    the fields before the failing step stay populated.
    """
    order_id: int
    prepared: Optional[PreparedOrder] = None
    assignment: Optional[Assignment] = None
    confirmation: Optional[DeliveryConfirmation] = None
    error: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.confirmation is not None
