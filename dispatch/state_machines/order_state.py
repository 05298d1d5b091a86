from orders.models import ORDER_STAGES, OrderStage
from simulation.errors import DeliveryError


class OrderStateError(DeliveryError):
    """Raised when an invalid stage transition is attempted."""
    pass


def stage_number(stage: OrderStage) -> int:
    """
    1-based position of `stage` in the delivery lifecycle.
    """
    return ORDER_STAGES.index(stage) + 1


def next_stage(stage: OrderStage) -> OrderStage:
    """
    received → preparing → ready → out for delivery → delivered.
    DELIVERED is terminal.
    """
    position = ORDER_STAGES.index(stage)
    if position == len(ORDER_STAGES) - 1:
        raise OrderStateError(f"Order is already {stage.value}; no further stage")
    return ORDER_STAGES[position + 1]


def is_terminal(stage: OrderStage) -> bool:
    return stage == ORDER_STAGES[-1]
