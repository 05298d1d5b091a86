"""
Error taxonomy for the delivery simulation.

Three families, all terminal for the single operation that raised them:
- not found: a referenced restaurant, driver or order does not exist
- simulated failure: the random draw decided the step failed
- no resource: nothing is available to serve the request
"""


class DeliveryError(Exception):
    """Base class for every error raised by the simulation."""
    pass


class NotFoundError(DeliveryError, LookupError):
    """A referenced entity is missing from the store."""

    entity = "Entity"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} not found")


class RestaurantNotFoundError(NotFoundError):
    entity = "Restaurant"


class DriverNotFoundError(NotFoundError):
    entity = "Driver"


class OrderNotFoundError(NotFoundError):
    entity = "Order"


class SimulatedFailure(DeliveryError):
    """The random source decided this step fails."""
    pass


class PreparationFailedError(SimulatedFailure):
    def __init__(self, order_id, restaurant_name: str):
        self.order_id = order_id
        self.restaurant_name = restaurant_name
        super().__init__(f"Order {order_id} failed during preparation at {restaurant_name}")


class DeliveryFailedError(SimulatedFailure):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Delivery failed for order {order_id}")


class NoDriversAvailableError(DeliveryError):
    """Every driver in the pool is busy or offline."""

    def __init__(self, message: str = "No drivers available"):
        super().__init__(message)
