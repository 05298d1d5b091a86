"""
Purpose: Core data models for the drivers domain.
What it does:
Defines a delivery Driver and the states it moves through. A driver is the
only shared mutable resource in the simulation: assignment takes it out of
the pool, delivery completion puts it back.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DriverStatus(str, Enum):
    """
    Standardizes the state a driver can be in.
    """
    AVAILABLE = "available"
    ON_DELIVERY = "on_delivery"
    OFFLINE = "offline"


@dataclass
class Driver:
    """
    A driver in the pool. Status is mutated in place by the dispatch state
    machine; everything else is fixed for the run.
    """
    id: int
    name: str
    status: DriverStatus
    delivery_time_seconds: float

    @property
    def is_available(self) -> bool:
        return self.status == DriverStatus.AVAILABLE

    @classmethod
    def new(
        cls,
        driver_id: int,
        name: str,
        delivery_time_seconds: float,
        status: str | DriverStatus = DriverStatus.AVAILABLE,
    ) -> Driver:
        if isinstance(status, str):
            status = DriverStatus(status)

        if delivery_time_seconds < 0:
            raise ValueError("delivery_time_seconds must be >= 0")

        return cls(
            id=driver_id,
            name=name,
            status=status,
            delivery_time_seconds=delivery_time_seconds,
        )
