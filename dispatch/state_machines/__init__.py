from .driver_state import DriverStateError, mark_on_delivery, release_driver, take_offline, bring_online
from .order_state import OrderStateError, next_stage, stage_number, is_terminal

__all__ = [
    "DriverStateError",
    "mark_on_delivery",
    "release_driver",
    "take_offline",
    "bring_online",
    "OrderStateError",
    "next_stage",
    "stage_number",
    "is_terminal",
]
