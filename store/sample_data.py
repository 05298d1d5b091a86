"""
Built-in sample data: four restaurants, four drivers (one busy), three orders.
"""

from drivers.models import Driver, DriverStatus
from orders.models import Order
from restaurants.models import Restaurant

from .memory import DeliveryStore


def sample_restaurants():
    return [
        Restaurant.new(1, "Pizza Palace", preparation_time_seconds=15, success_rate=0.9),
        Restaurant.new(2, "Burger Barn", preparation_time_seconds=10, success_rate=0.8),
        Restaurant.new(3, "Sushi Spot", preparation_time_seconds=20, success_rate=0.95),
        Restaurant.new(4, "Taco Town", preparation_time_seconds=8, success_rate=0.85),
    ]


def sample_drivers():
    # fresh instances every call, drivers are mutated during a run
    return [
        Driver.new(1, "Alex", delivery_time_seconds=12),
        Driver.new(2, "Sam", delivery_time_seconds=15, status=DriverStatus.ON_DELIVERY),
        Driver.new(3, "Jordan", delivery_time_seconds=10),
        Driver.new(4, "Casey", delivery_time_seconds=18),
    ]


def sample_orders():
    return [
        Order.new(101, 1, ["Pizza Margherita", "Coke"], 15.99),
        Order.new(102, 2, ["Cheeseburger", "Fries"], 12.5),
        Order.new(103, 3, ["Salmon Roll", "Miso Soup"], 18.75),
    ]


def sample_store() -> DeliveryStore:
    return DeliveryStore.from_records(
        restaurants=sample_restaurants(),
        drivers=sample_drivers(),
        orders=sample_orders(),
    )
