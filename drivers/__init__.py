from .models import Driver, DriverStatus
from .selection import filter_available_drivers, pick_fastest_driver, rank_available_drivers

__all__ = [
    "Driver",
    "DriverStatus",
    "filter_available_drivers",
    "pick_fastest_driver",
    "rank_available_drivers",
]
