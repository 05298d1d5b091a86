"""
Purpose: In-memory state for one simulation run.
What it does:
- Owns the restaurants, drivers and orders of a run, keyed by id.
- Is passed explicitly into every operation instead of living in module
  globals, so each test builds its own store.

Provides operations:
   - add_restaurant / add_driver / add_order (idempotent)
   - get_restaurant / get_driver / get_order (raise *NotFoundError)
   - restaurant_name_for_order (falls back to "Unknown")

Rule: Store owns lookups, never timing or randomness.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from drivers.models import Driver
from orders.models import Order
from restaurants.models import Restaurant
from simulation.errors import DriverNotFoundError, OrderNotFoundError, RestaurantNotFoundError

UNKNOWN_RESTAURANT = "Unknown"


@dataclass
class StoreStats:
    restaurant_count: int
    driver_count: int
    available_driver_count: int
    order_count: int


@dataclass
class DeliveryStore:
    """
    Dict-backed store. Insertion order is kept, which is what makes
    "first encountered" tie-breaking in driver selection deterministic.
    """
    _restaurants: Dict[int, Restaurant] = field(default_factory=dict)
    _drivers: Dict[int, Driver] = field(default_factory=dict)
    _orders: Dict[int, Order] = field(default_factory=dict)

    # guards driver selection + status flip for every assigner on this store
    _assignment_lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)

    @classmethod
    def from_records(
        cls,
        restaurants: Iterable[Restaurant] = (),
        drivers: Iterable[Driver] = (),
        orders: Iterable[Order] = (),
    ) -> DeliveryStore:
        store = cls()
        for restaurant in restaurants:
            store.add_restaurant(restaurant)
        for driver in drivers:
            store.add_driver(driver)
        for order in orders:
            store.add_order(order)
        return store

    @property
    def assignment_lock(self) -> asyncio.Lock:
        return self._assignment_lock

    # --- Public API ---

    def add_restaurant(self, restaurant: Restaurant) -> None:
        # idempotency: first insert wins
        self._restaurants.setdefault(restaurant.id, restaurant)

    def add_driver(self, driver: Driver) -> None:
        self._drivers.setdefault(driver.id, driver)

    def add_order(self, order: Order) -> None:
        self._orders.setdefault(order.id, order)

    def get_restaurant(self, restaurant_id: int) -> Restaurant:
        restaurant = self._restaurants.get(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(restaurant_id)
        return restaurant

    def get_driver(self, driver_id: int) -> Driver:
        driver = self._drivers.get(driver_id)
        if driver is None:
            raise DriverNotFoundError(driver_id)
        return driver

    def get_order(self, order_id: int) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def find_restaurant(self, restaurant_id: int) -> Optional[Restaurant]:
        return self._restaurants.get(restaurant_id)

    def find_order(self, order_id: int) -> Optional[Order]:
        return self._orders.get(order_id)

    def restaurants(self) -> List[Restaurant]:
        return list(self._restaurants.values())

    def drivers(self) -> List[Driver]:
        return list(self._drivers.values())

    def orders(self) -> List[Order]:
        return list(self._orders.values())

    def restaurant_name_for_order(self, order_id: int) -> str:
        order = self._orders.get(order_id)
        if order is None:
            return UNKNOWN_RESTAURANT
        restaurant = self._restaurants.get(order.restaurant_id)
        return restaurant.name if restaurant else UNKNOWN_RESTAURANT

    def stats(self) -> StoreStats:
        return StoreStats(
            restaurant_count=len(self._restaurants),
            driver_count=len(self._drivers),
            available_driver_count=sum(1 for d in self._drivers.values() if d.is_available),
            order_count=len(self._orders),
        )
