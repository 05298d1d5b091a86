#Expose the high-level pipeline pieces:
#Driver assignment (fastest available driver)
#Delivery completion (releases the driver)
#DeliverySimulation orchestrator (the "one call" entry point)

from .assigner import DriverAssigner, assign_driver
from .delivery import complete_delivery
from .models import Assignment, DeliveryConfirmation, DeliveryOutcome
from .workflow import DeliverySimulation #the main class to run orders end to end

__all__ = [
    "DriverAssigner",
    "assign_driver",
    "complete_delivery",
    "Assignment",
    "DeliveryConfirmation",
    "DeliveryOutcome",
    "DeliverySimulation",
]
