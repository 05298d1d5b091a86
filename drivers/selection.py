"""
Purpose: Business rules for choosing the best driver.
What it does:
Accepts a pool of drivers, filters out the ones that cannot take a job,
and picks the one with the shortest delivery time.
"""

from typing import Iterable, List, Optional

from .models import Driver


def filter_available_drivers(drivers: Iterable[Driver]) -> List[Driver]:
    """
    Returns only drivers who are currently free, preserving pool order.
    """
    available = []

    for driver in drivers:
        if not driver.is_available:
            continue

        available.append(driver)

    return available


def pick_fastest_driver(drivers: Iterable[Driver]) -> Optional[Driver]:
    """
    Minimum delivery time among available drivers.
    Ties go to whoever appears first in the pool.
    """
    best: Optional[Driver] = None

    for driver in filter_available_drivers(drivers):
        # strict < keeps the first-encountered driver on ties
        if best is None or driver.delivery_time_seconds < best.delivery_time_seconds:
            best = driver

    return best


def rank_available_drivers(drivers: Iterable[Driver]) -> List[Driver]:
    """
    All available drivers, fastest first. sorted() is stable so ties keep pool order.
    """
    return sorted(filter_available_drivers(drivers), key=lambda d: d.delivery_time_seconds)
