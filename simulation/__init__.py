"""
Purpose: Shared simulation plumbing.
What it does:
Exposes the clock abstractions, the tunable policy and the error taxonomy
that every domain package (restaurants, drivers, orders, dispatch) builds on.

Rule: No delivery logic here.
"""
from .clock import Clock, ScaledClock, VirtualClock
from .errors import (
    DeliveryError,
    NotFoundError,
    RestaurantNotFoundError,
    DriverNotFoundError,
    OrderNotFoundError,
    SimulatedFailure,
    PreparationFailedError,
    DeliveryFailedError,
    NoDriversAvailableError,
)
from .policy import SimulationPolicy, default_policy, instant_policy

__all__ = [
    "Clock",
    "ScaledClock",
    "VirtualClock",
    "DeliveryError",
    "NotFoundError",
    "RestaurantNotFoundError",
    "DriverNotFoundError",
    "OrderNotFoundError",
    "SimulatedFailure",
    "PreparationFailedError",
    "DeliveryFailedError",
    "NoDriversAvailableError",
    "SimulationPolicy",
    "default_policy",
    "instant_policy",
]
