from drivers.models import Driver, DriverStatus
from simulation.errors import DeliveryError


class DriverStateError(DeliveryError):
    """Raised when an invalid driver transition is attempted."""
    pass


def mark_on_delivery(driver: Driver) -> Driver:
    """
    Called when a driver is bound to an order.
    Only a free driver can be taken; this is what keeps a driver on at most
    one outstanding order.
    """
    if driver.status != DriverStatus.AVAILABLE:
        raise DriverStateError(f"Driver {driver.id} is not available. Current: {driver.status.value}")

    driver.status = DriverStatus.ON_DELIVERY
    return driver


def release_driver(driver: Driver) -> Driver:
    """
    Called when a delivery ends, successfully or not.
    Puts the driver back into the pool.
    """
    if driver.status != DriverStatus.ON_DELIVERY:
        raise DriverStateError(f"Driver {driver.id} is not on a delivery. Current: {driver.status.value}")

    driver.status = DriverStatus.AVAILABLE
    return driver


def take_offline(driver: Driver) -> Driver:
    """
    Removes a driver from the pool regardless of current state.
    """
    driver.status = DriverStatus.OFFLINE
    return driver


def bring_online(driver: Driver) -> Driver:
    if driver.status != DriverStatus.OFFLINE:
        raise DriverStateError(f"Driver {driver.id} is already online. Current: {driver.status.value}")

    driver.status = DriverStatus.AVAILABLE
    return driver
